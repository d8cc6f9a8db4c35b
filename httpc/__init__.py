"""A minimal blocking HTTP server that routes requests by method and exact path."""

__version__ = "0.1.0"
__all__ = ["handler", "request", "response", "server"]