"""Error type raised by the networking layer and a helper to raise it."""


class NetworkError(OSError):
    """A socket or polling operation failed."""


def fail_if(condition, message):
    """Raise :class:`NetworkError` with ``message`` when ``condition`` is true."""
    if condition:
        raise NetworkError(message)