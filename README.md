# reactorecho

A small TCP echo server built around the reactor pattern, plus an
interactive client to talk to it.

The server listens on `127.0.0.1:8888` by default. An `EventLoop` waits on
a `Poller` (built on the standard `selectors` module) and dispatches each
ready `Channel` to its callback. An `Acceptor` takes new clients off the
listening `Socket`, switches them to non-blocking mode and hands them to the
`Server`. The server wraps each client in a `Connection`, which writes back
whatever it reads and is removed when the peer disconnects.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

Start the server:

```
reactorecho-server
```

In another terminal, start the client:

```
reactorecho-client
```

Both commands take `--host` and `--port` (defaults `127.0.0.1` and `8888`).
The server runs until interrupted with Ctrl-C.

The client reads standard input, splits it into whitespace-separated words
and sends each word to the server. For each reply it prints:

```
message from server: hello
```

The client stops at end of input or when the server closes the connection.

The server prints a line for each new client (its descriptor, IP and port),
for each message received, and for each client that disconnects.

## Using it as a library

```python
from reactorecho.address import InetAddress
from reactorecho.event_loop import EventLoop
from reactorecho.server import Server

with EventLoop() as loop:
    server = Server(loop, InetAddress("127.0.0.1", 8888))
    try:
        loop.loop()
    finally:
        server.close()
```

- `EventLoop.run_once(timeout)` polls once (timeout in seconds; negative
  waits forever) and returns how many channels were handled. It is handy for
  driving the loop step by step, for example in tests. `EventLoop.stop()`
  makes `loop()` return after the current round.
- Passing port `0` lets the system choose a port; `Server.address` gives the
  address actually bound.
- `Server.connections` maps each client's file descriptor to its
  `Connection`.
- `reactorecho.server.accept_one(address)` listens, accepts a single client
  with a blocking call and returns `(Socket, InetAddress)`.

On the client side:

```python
from reactorecho.address import InetAddress
from reactorecho.client import connect, echo_session

with connect(InetAddress("127.0.0.1", 8888)) as sock:
    for reply in echo_session(sock, ["hello", "world"]):
        print(reply)
```

`InetAddress` is a frozen dataclass holding an IPv4 address and a port; it
raises `ValueError` for an invalid address or a port outside 0–65535.

Errors from socket setup, connecting and polling are raised as
`reactorecho.errors.NetworkError`, a subclass of `OSError`.

## Limits

- IPv4 and TCP only.
- The client sends every message as a fixed 1024-byte buffer, zero-padded;
  longer messages are cut to 1023 bytes. It reads back one 1024-byte buffer
  per message and shows the text up to the first zero byte.
- The server does no framing of its own: it writes back each chunk exactly
  as received.
- Readiness is reported level-triggered by the poller; the edge flag set on
  channels is kept but does not change how events are delivered.