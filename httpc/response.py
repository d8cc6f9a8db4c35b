"""HTTP responses built by handlers and their wire form."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class Response:
    """A response under construction; handlers fill it in."""

    status_code: int = 200
    body: bytes | None = None
    headers: list[tuple[str, str]] = field(default_factory=list)

    def set_body(self, body: bytes) -> None:
        """Set the response body to a copy of ``body``."""
        self.body = bytes(body)

    def set_body_from_file(self, filepath: str | os.PathLike[str], content_type: str) -> None:
        """Use the contents of a file as the body and set its content type.

        Raises OSError when the file cannot be read.
        """
        with open(filepath, "rb") as file:
            content = file.read()
        self.set_body(content)
        self.set_header("content-type", content_type)

    def set_header(self, key: str, value: str) -> None:
        """Add a header; headers added later are written first."""
        self.headers.append((key, value))

    def serialize(self) -> bytes:
        """Return the response as the bytes sent to the client."""
        # Only the last three digits of the status code are written.
        parts = [f"HTTP/1.1 {self.status_code % 1000}\n".encode()]
        parts.extend(
            f"{key}: {value}\r\n".encode() for key, value in reversed(self.headers)
        )
        parts.append(b"\n")
        if self.body is not None:
            parts.append(self.body)
        return b"".join(parts)