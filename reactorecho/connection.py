"""A client connection that echoes back whatever it receives."""

from __future__ import annotations

import select

from .channel import Channel
from .errors import NetworkError

READ_BUFFER = 1024


def _printable(data):
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


class Connection:
    """Owns a client socket and echoes its data through the event loop.

    When the peer disconnects, ``delete_connection_callback`` is called with
    the socket; without one, the connection closes itself.
    """

    def __init__(self, loop, sock):
        self.loop = loop
        self.sock = sock
        self.fd = sock.fileno()
        self.delete_connection_callback = None
        self.channel = Channel(loop, self.fd)
        self.channel.set_callback(self.echo)
        self.channel.enable_reading()

    def echo(self):
        """Read everything available and write each chunk straight back."""
        while True:
            try:
                data = self.sock.recv(READ_BUFFER)
            except InterruptedError:
                print("continue reading")
                continue
            except BlockingIOError as exc:
                print(f"finish reading once, errno: {exc.errno}")
                return
            except OSError:
                data = b""
            if not data:
                print(f"EOF, client fd {self.fd} disconnected")
                self._disconnected()
                return
            print(f"message from client fd {self.fd}: {_printable(data)}")
            self._write_all(data)

    def _write_all(self, data):
        view = memoryview(data)
        while view:
            try:
                sent = self.sock.send(view)
            except InterruptedError:
                continue
            except BlockingIOError:
                select.select([], [self.fd], [])
                continue
            except OSError:
                return
            view = view[sent:]

    def _disconnected(self):
        if self.delete_connection_callback is None:
            self.close()
        else:
            self.delete_connection_callback(self.sock)

    def close(self):
        """Stop watching the socket and close it."""
        if self.channel.in_poller:
            try:
                self.loop.remove_channel(self.channel)
            except NetworkError:
                self.channel.in_poller = False
        self.sock.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()