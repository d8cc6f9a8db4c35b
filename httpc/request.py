"""Parsing of the request line of incoming HTTP messages."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Method(enum.Enum):
    """HTTP methods the server can route on."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    HEAD = "HEAD"


@dataclass(frozen=True)
class Request:
    """The method and route of a parsed request.

    ``method`` is ``None`` when the request names a method the server does
    not know; ``route`` is ``None`` when the request line has no route.
    """

    method: Method | None
    route: str | None


def parse_request(data: bytes) -> Request:
    """Parse the method and route from the start of a raw HTTP message.

    Tokens are separated by spaces; runs of spaces count as one separator.
    Raises ValueError when the message holds no token at all.
    """
    tokens = [token for token in data.split(b" ") if token]
    if not tokens:
        raise ValueError("empty request")

    method_text = tokens[0].decode("latin-1")
    try:
        method: Method | None = Method(method_text)
    except ValueError:
        method = None

    route = tokens[1].decode("latin-1") if len(tokens) > 1 else None
    return Request(method=method, route=route)