import socket

import pytest

from reactorecho.channel import Channel
from reactorecho.errors import NetworkError
from reactorecho.event_loop import EventLoop


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    yield a, b
    a.close()
    b.close()


@pytest.fixture
def loop():
    with EventLoop() as ev:
        yield ev


def test_run_once_dispatches_ready_channel(pair, loop):
    a, b = pair
    received = []
    ch = Channel(loop, a.fileno())
    ch.set_callback(lambda: received.append(a.recv(64)))
    ch.enable_reading()
    b.send(b"hello")
    assert loop.run_once(1.0) == 1
    assert received == [b"hello"]


def test_run_once_without_activity(pair, loop):
    a, _ = pair
    ch = Channel(loop, a.fileno())
    ch.set_callback(lambda: None)
    ch.enable_reading()
    assert loop.run_once(0) == 0


def test_loop_runs_until_stopped(pair, loop):
    a, b = pair
    received = []

    def on_read():
        received.append(a.recv(64))
        loop.stop()

    ch = Channel(loop, a.fileno())
    ch.set_callback(on_read)
    ch.enable_reading()
    b.send(b"ping")
    loop.loop()
    assert received == [b"ping"]
    # The data was consumed by the loop, so nothing is left to dispatch.
    assert loop.run_once(0) == 0
    b.send(b"pong")
    assert loop.run_once(1.0) == 1
    assert received == [b"ping", b"pong"]


def test_loop_can_run_again_after_stop(pair, loop):
    a, b = pair
    received = []

    def on_read():
        received.append(a.recv(64))
        loop.stop()

    ch = Channel(loop, a.fileno())
    ch.set_callback(on_read)
    ch.enable_reading()
    b.send(b"one")
    loop.loop()
    assert loop.run_once(0) == 0
    b.send(b"two")
    loop.loop()
    assert loop.run_once(0) == 0
    assert received == [b"one", b"two"]


def test_removed_channel_is_not_dispatched(pair, loop):
    a, b = pair
    calls = []
    ch = Channel(loop, a.fileno())
    ch.set_callback(lambda: calls.append(1))
    ch.enable_reading()
    loop.remove_channel(ch)
    b.send(b"x")
    assert loop.run_once(0) == 0
    assert calls == []


def test_remove_unregistered_channel_raises(pair, loop):
    a, _ = pair
    ch = Channel(loop, a.fileno())
    with pytest.raises(NetworkError):
        loop.remove_channel(ch)