"""Reactor-pattern TCP echo server, event loop and interactive client."""

__version__ = "0.1.0"