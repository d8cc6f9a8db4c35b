"""Route handlers and their lookup."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from httpc.request import Method, Request
from httpc.response import Response

HandlerFunction = Callable[[Response], None]


@dataclass(frozen=True)
class Handler:
    """A function that answers one route for one method."""

    route_match: str
    method: Method
    handler_function: HandlerFunction


def find_matching_handler(request: Request, handlers: Iterable[Handler]) -> Handler | None:
    """Return the first handler whose method and route equal the request's."""
    return next(
        (
            handler
            for handler in handlers
            if handler.method == request.method and handler.route_match == request.route
        ),
        None,
    )