"""A thin owning wrapper around a TCP/IPv4 socket."""

from __future__ import annotations

import socket

from .address import InetAddress
from .errors import NetworkError, fail_if


class Socket:
    """A TCP socket that is closed exactly once.

    ``sock`` may be ``None`` (a fresh socket is created), an existing
    :class:`socket.socket`, or a raw file descriptor to take ownership of.
    """

    def __init__(self, sock=None):
        if sock is None:
            try:
                sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
            except OSError as exc:
                raise NetworkError("socket create error") from exc
        elif isinstance(sock, int):
            fail_if(sock == -1, "socket create error")
            try:
                sock = socket.socket(fileno=sock)
            except OSError as exc:
                raise NetworkError("socket create error") from exc
        self._sock = sock

    def bind(self, address):
        """Bind the socket to ``address``."""
        try:
            self._sock.bind(address.to_sockaddr())
        except OSError as exc:
            raise NetworkError("socket bind error") from exc

    def listen(self):
        """Start listening with the system's maximum backlog."""
        try:
            self._sock.listen(socket.SOMAXCONN)
        except OSError as exc:
            raise NetworkError("socket listen error") from exc

    def set_nonblocking(self):
        """Switch the socket to non-blocking mode."""
        self._sock.setblocking(False)

    def accept(self):
        """Accept a pending connection and return ``(Socket, InetAddress)``."""
        try:
            client, peer = self._sock.accept()
        except OSError as exc:
            raise NetworkError("socket accept error") from exc
        return Socket(client), InetAddress.from_sockaddr(peer)

    def fileno(self):
        """Return the file descriptor, or -1 once closed."""
        return self._sock.fileno()

    def recv(self, size):
        """Read up to ``size`` bytes."""
        return self._sock.recv(size)

    def send(self, data):
        """Write ``data`` and return the number of bytes sent."""
        return self._sock.send(data)

    def close(self):
        """Close the socket; further calls do nothing."""
        self._sock.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()