"""Listening socket that hands accepted connections to a callback."""

from __future__ import annotations

import socket

from .address import InetAddress
from .channel import Channel
from .errors import NetworkError
from .sockets import Socket

DEFAULT_ADDRESS = InetAddress("127.0.0.1", 8888)


class Acceptor:
    """Listens on ``address`` and reports each new client socket.

    Every accepted client is switched to non-blocking mode and passed to
    ``new_connection_callback``.
    """

    def __init__(self, loop, address=DEFAULT_ADDRESS):
        self.loop = loop
        try:
            raw = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise NetworkError("socket create error") from exc
        self.sock = Socket(raw)
        try:
            self.sock.bind(address)
            self.sock.listen()
            self.sock.set_nonblocking()
            self.address = InetAddress.from_sockaddr(raw.getsockname())
        except BaseException:
            self.sock.close()
            raise
        self.new_connection_callback = None
        self.channel = Channel(loop, self.sock.fileno())
        self.channel.set_callback(self.accept_connection)
        self.channel.enable_reading()

    def accept_connection(self):
        """Accept one pending client and pass it to the callback."""
        client, peer = self.sock.accept()
        print(f"new client fd {client.fileno()}! IP: {peer.ip} Port: {peer.port}")
        client.set_nonblocking()
        if self.new_connection_callback is None:
            client.close()
            raise RuntimeError("no new-connection callback set")
        self.new_connection_callback(client)

    def close(self):
        """Stop listening and release the socket."""
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