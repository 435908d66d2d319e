import pytest

from reactorecho.channel import Channel
from reactorecho.poller import Event


class RecordingLoop:
    def __init__(self):
        self.updated = []

    def update_channel(self, channel):
        self.updated.append(channel)


def test_new_channel_watches_nothing():
    ch = Channel(RecordingLoop(), 7)
    assert ch.fd == 7
    assert ch.events == Event(0)
    assert ch.revents == Event(0)
    assert ch.in_poller is False


def test_enable_reading_sets_flags_and_registers():
    loop = RecordingLoop()
    ch = Channel(loop, 3)
    ch.enable_reading()
    assert ch.events == Event.READ | Event.EDGE
    assert loop.updated == [ch]


def test_enable_reading_keeps_existing_flags():
    loop = RecordingLoop()
    ch = Channel(loop, 3)
    ch.events = Event.WRITE
    ch.enable_reading()
    ch.enable_reading()
    assert ch.events == Event.READ | Event.EDGE | Event.WRITE
    assert loop.updated == [ch, ch]


def test_handle_event_runs_callback():
    calls = []
    ch = Channel(RecordingLoop(), 3)
    ch.set_callback(lambda: calls.append("first"))
    ch.handle_event()
    ch.set_callback(lambda: calls.append("second"))
    ch.handle_event()
    assert calls == ["first", "second"]


def test_handle_event_without_callback_raises():
    ch = Channel(RecordingLoop(), 3)
    with pytest.raises(RuntimeError):
        ch.handle_event()