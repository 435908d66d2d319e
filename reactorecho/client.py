"""Interactive client for the echo server."""

from __future__ import annotations

import argparse
import socket
import sys

from .acceptor import DEFAULT_ADDRESS
from .address import InetAddress
from .errors import NetworkError
from .sockets import Socket

BUFFER_SIZE = 1024


def connect(address=DEFAULT_ADDRESS):
    """Open a blocking TCP connection to ``address`` and return it as a :class:`Socket`."""
    try:
        raw = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        raise NetworkError("socket create error") from exc
    try:
        raw.connect(address.to_sockaddr())
    except OSError as exc:
        raw.close()
        raise NetworkError("socket connect error") from exc
    return Socket(raw)


def _frame(message):
    payload = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    return payload[: BUFFER_SIZE - 1].ljust(BUFFER_SIZE, b"\0")


def _text(data):
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _send_all(sock, data):
    view = memoryview(data)
    while view:
        try:
            sent = sock.send(view)
        except InterruptedError:
            continue
        view = view[sent:]


def _recv_frame(sock):
    """Read one fixed-size reply; fewer bytes are returned only at end of stream."""
    chunks = []
    received = 0
    while received < BUFFER_SIZE:
        try:
            chunk = sock.recv(BUFFER_SIZE - received)
        except InterruptedError:
            continue
        if not chunk:
            break
        chunks.append(chunk)
        received += len(chunk)
    return b"".join(chunks)


def echo_session(sock, messages):
    """Send each message as a zero-padded buffer and yield the server's replies.

    The session ends when ``messages`` is exhausted or the server goes away.
    """
    for message in messages:
        try:
            _send_all(sock, _frame(message))
        except OSError:
            print("socket already disconnected, can't write any more!")
            return
        try:
            data = _recv_frame(sock)
        except OSError as exc:
            sock.close()
            raise NetworkError("socket read error") from exc
        if not data:
            print("server socket disconnected!")
            return
        yield _text(data)


def _tokens(stream):
    for line in stream:
        yield from line.split()


def main(argv=None):
    """Send whitespace-separated words from standard input and print the echoes."""
    parser = argparse.ArgumentParser(prog="reactorecho-client", description="TCP echo client.")
    parser.add_argument("--host", default=DEFAULT_ADDRESS.ip, help="server address")
    parser.add_argument("--port", type=int, default=DEFAULT_ADDRESS.port, help="server port")
    args = parser.parse_args(argv)
    try:
        address = InetAddress(args.host, args.port)
    except ValueError as exc:
        parser.error(str(exc))
    try:
        with connect(address) as sock:
            for reply in echo_session(sock, _tokens(sys.stdin)):
                print(f"message from server: {reply}")
    except NetworkError as exc:
        print(f"{exc}: {exc.__cause__ or ''}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())