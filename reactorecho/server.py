"""The echo server: an acceptor plus the connections it has created."""

from __future__ import annotations

import argparse
import sys

from .acceptor import DEFAULT_ADDRESS, Acceptor
from .address import InetAddress
from .connection import Connection
from .errors import NetworkError
from .event_loop import EventLoop
from .sockets import Socket


class Server:
    """Accepts clients on ``address`` and keeps one echo connection each."""

    def __init__(self, loop, address=DEFAULT_ADDRESS):
        self.loop = loop
        self.connections = {}
        self.acceptor = Acceptor(loop, address)
        self.acceptor.new_connection_callback = self.new_connection

    @property
    def address(self):
        """The address the server actually listens on."""
        return self.acceptor.address

    def new_connection(self, sock):
        """Start echoing on a freshly accepted socket."""
        conn = Connection(self.loop, sock)
        conn.delete_connection_callback = self.delete_connection
        self.connections[sock.fileno()] = conn

    def delete_connection(self, sock):
        """Forget and close the connection that owns ``sock``."""
        conn = self.connections.pop(sock.fileno(), None)
        if conn is not None:
            conn.close()

    def close(self):
        """Close every connection and stop listening."""
        for conn in list(self.connections.values()):
            conn.close()
        self.connections.clear()
        self.acceptor.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


def accept_one(address=DEFAULT_ADDRESS):
    """Listen on ``address``, accept a single client and return it with its address."""
    with Socket() as listener:
        listener.bind(address)
        listener.listen()
        client, peer = listener.accept()
    print(f"new client fd {client.fileno()}! IP: {peer.ip} Port: {peer.port}")
    return client, peer


def main(argv=None):
    """Run the echo server until interrupted."""
    parser = argparse.ArgumentParser(prog="reactorecho-server", description="TCP echo server.")
    parser.add_argument("--host", default=DEFAULT_ADDRESS.ip, help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_ADDRESS.port, help="port to listen on")
    args = parser.parse_args(argv)
    try:
        address = InetAddress(args.host, args.port)
    except ValueError as exc:
        parser.error(str(exc))
    with EventLoop() as loop:
        try:
            server = Server(loop, address)
        except NetworkError as exc:
            print(f"{exc}: {exc.__cause__ or ''}", file=sys.stderr)
            return 1
        try:
            loop.loop()
        except KeyboardInterrupt:
            pass
        finally:
            server.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())