"""A small blocking HTTP server that dispatches on method and route."""

from __future__ import annotations

import socket
import threading

from httpc.handler import Handler, HandlerFunction, find_matching_handler
from httpc.request import Method, parse_request
from httpc.response import Response

_CHUNK_SIZE = 1024
_BACKLOG = 64
_ACCEPT_POLL_SECONDS = 0.2
_NOT_FOUND = b"HTTP/1.1 404\n\nInavlid route. "


def receive_message(sock: socket.socket) -> bytes:
    """Read from ``sock`` until a read returns less than a full chunk."""
    chunks = []
    while True:
        chunk = sock.recv(_CHUNK_SIZE)
        chunks.append(chunk)
        if len(chunk) != _CHUNK_SIZE:
            return b"".join(chunks)


class HTTPServer:
    """Routes requests to registered handlers and writes their responses."""

    def __init__(self) -> None:
        self._handlers: list[Handler] = []
        self._invalid_route_handler: HandlerFunction | None = None
        self._socket: socket.socket | None = None
        self._closed = threading.Event()
        self.address: tuple[str, int] | None = None

    def register_handler(self, route_match: str, method: Method, handler_function: HandlerFunction) -> None:
        """Answer ``method`` requests for ``route_match``; newer registrations win."""
        self._handlers.insert(0, Handler(route_match, method, handler_function))

    def register_invalid_route_handler(self, handler_function: HandlerFunction) -> None:
        """Use ``handler_function`` for requests that no handler matches."""
        self._invalid_route_handler = handler_function

    def handle_message(self, message: bytes) -> bytes:
        """Return the reply bytes for one raw request message.

        Raises ValueError when the message cannot be parsed.
        """
        request = parse_request(message)
        handler = find_matching_handler(request, self._handlers)
        if handler is not None:
            handler_function = handler.handler_function
        elif self._invalid_route_handler is not None:
            handler_function = self._invalid_route_handler
        else:
            return _NOT_FOUND

        response = Response()
        handler_function(response)
        return response.serialize()

    def serve_connection(self, conn: socket.socket) -> None:
        """Read one request from ``conn``, send the reply and close it."""
        with conn:
            message = receive_message(conn)
            try:
                reply = self.handle_message(message)
            except ValueError:
                return
            conn.sendall(reply)

    def start(self, port: int) -> None:
        """Listen on all interfaces at ``port`` and serve until closed."""
        self._closed.clear()
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
            listener.bind(("", port))
            listener.listen(_BACKLOG)
            listener.settimeout(_ACCEPT_POLL_SECONDS)
            self._socket = listener
            self.address = listener.getsockname()
            try:
                while not self._closed.is_set():
                    try:
                        conn, _ = listener.accept()
                    except socket.timeout:
                        continue
                    except OSError:
                        if self._closed.is_set():
                            break
                        raise
                    conn.settimeout(None)
                    self.serve_connection(conn)
            finally:
                self._socket = None
                self.address = None

    def close(self) -> None:
        """Stop serving and drop all registered handlers."""
        self._closed.set()
        self._handlers.clear()
        self._invalid_route_handler = None

    def __enter__(self) -> HTTPServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()