"""Readiness polling for channels, keyed by file descriptor."""

from __future__ import annotations

import enum
import selectors

from .errors import NetworkError

MAX_EVENTS = 1000


class Event(enum.IntFlag):
    """Interest and readiness flags, using the epoll bit values."""

    READ = 0x001
    WRITE = 0x004
    EDGE = 1 << 31


def _selector_mask(events):
    mask = 0
    if events & Event.READ:
        mask |= selectors.EVENT_READ
    if events & Event.WRITE:
        mask |= selectors.EVENT_WRITE
    return mask


def _ready_events(mask):
    ready = Event(0)
    if mask & selectors.EVENT_READ:
        ready |= Event.READ
    if mask & selectors.EVENT_WRITE:
        ready |= Event.WRITE
    return ready


class Poller:
    """Watches channels and reports which of them became ready.

    Readiness is reported level-triggered; the ``EDGE`` flag is kept on the
    channel but handlers are expected to drain their descriptor anyway.
    """

    def __init__(self):
        try:
            self._selector = selectors.DefaultSelector()
        except OSError as exc:
            raise NetworkError("epoll create error") from exc

    def update_channel(self, channel):
        """Start watching ``channel``, or update the events it is watched for."""
        mask = _selector_mask(channel.events)
        if not channel.in_poller:
            try:
                self._selector.register(channel.fd, mask, channel)
            except (OSError, ValueError, KeyError) as exc:
                raise NetworkError("epoll add error") from exc
            channel.in_poller = True
        else:
            try:
                self._selector.modify(channel.fd, mask, channel)
            except (OSError, ValueError, KeyError) as exc:
                raise NetworkError("epoll modify error") from exc

    def remove_channel(self, channel):
        """Stop watching ``channel``."""
        try:
            self._selector.unregister(channel.fd)
        except (OSError, ValueError, KeyError) as exc:
            raise NetworkError("epoll delete error") from exc
        channel.in_poller = False

    def poll(self, timeout=-1):
        """Wait for readiness and return the active channels.

        ``timeout`` is in seconds; a negative value or ``None`` waits forever.
        Each returned channel has its ``revents`` set to what became ready.
        """
        if timeout is not None and timeout < 0:
            timeout = None
        try:
            ready = self._selector.select(timeout)
        except (OSError, ValueError) as exc:
            raise NetworkError("epoll wait error") from exc
        active = []
        for key, mask in ready[:MAX_EVENTS]:
            channel = key.data
            channel.revents = _ready_events(mask)
            active.append(channel)
        return active

    def close(self):
        """Release the underlying selector."""
        self._selector.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()