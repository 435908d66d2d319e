"""IPv4 socket addresses."""

from __future__ import annotations

import socket
from dataclasses import dataclass

_MAX_PORT = 0xFFFF


@dataclass(frozen=True)
class InetAddress:
    """An IPv4 address and TCP port; the default is the all-zero address."""

    ip: str = "0.0.0.0"
    port: int = 0

    def __post_init__(self):
        try:
            packed = socket.inet_aton(self.ip)
        except (OSError, TypeError) as exc:
            raise ValueError(f"invalid IPv4 address: {self.ip!r}") from exc
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ValueError(f"port must be an integer: {self.port!r}")
        if not 0 <= self.port <= _MAX_PORT:
            raise ValueError(f"port out of range: {self.port}")
        object.__setattr__(self, "ip", socket.inet_ntoa(packed))

    @classmethod
    def from_sockaddr(cls, sockaddr):
        """Build an address from a ``(host, port)`` pair as returned by sockets."""
        host, port = sockaddr[:2]
        return cls(host, port)

    def to_sockaddr(self):
        """Return the ``(host, port)`` pair that socket calls expect."""
        return (self.ip, self.port)

    def __str__(self):
        return f"{self.ip}:{self.port}"