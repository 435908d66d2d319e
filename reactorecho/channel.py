"""A file descriptor together with the events it is watched for."""

from __future__ import annotations

from .poller import Event


class Channel:
    """Binds a descriptor to an event loop and a readiness callback."""

    def __init__(self, loop, fd):
        self.loop = loop
        self.fd = fd
        self.events = Event(0)
        self.revents = Event(0)
        self.in_poller = False
        self._callback = None

    def handle_event(self):
        """Run the callback for the events that became ready."""
        if self._callback is None:
            raise RuntimeError(f"no callback set for fd {self.fd}")
        self._callback()

    def enable_reading(self):
        """Watch for readability (edge-triggered) and register with the loop."""
        self.events |= Event.READ | Event.EDGE
        self.loop.update_channel(self)

    def set_callback(self, callback):
        """Set the function called when the channel is ready."""
        self._callback = callback

    def __repr__(self):
        return f"Channel(fd={self.fd}, events={self.events!r}, revents={self.revents!r})"