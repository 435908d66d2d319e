"""The reactor loop that dispatches ready channels to their callbacks."""

from __future__ import annotations

from .poller import Poller


class EventLoop:
    """Polls for ready channels and runs their handlers until stopped."""

    def __init__(self):
        self._poller = Poller()
        self._quit = False

    def loop(self):
        """Dispatch events until :meth:`stop` is called."""
        try:
            while not self._quit:
                self.run_once()
        finally:
            self._quit = False

    def run_once(self, timeout=-1):
        """Poll once and handle every active channel; return how many ran."""
        channels = self._poller.poll(timeout)
        for channel in channels:
            channel.handle_event()
        return len(channels)

    def update_channel(self, channel):
        """Register or update ``channel`` with the poller."""
        self._poller.update_channel(channel)

    def remove_channel(self, channel):
        """Stop watching ``channel``."""
        self._poller.remove_channel(channel)

    def stop(self):
        """Make :meth:`loop` return after the current iteration."""
        self._quit = True

    def close(self):
        """Release the poller."""
        self._poller.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()