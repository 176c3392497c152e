"""Structured HTTP responses and a parser for raw response text."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

CRLF = "\r\n"


class ResponseParseError(ValueError):
    """Raised when raw response text has no valid status line."""

    pass


@dataclass
class HTTPResponse:
    """An HTTP response as seen from the shell.

    Header names are lower-cased and map to every value received for them,
    in arrival order, so repeated headers survive.
    """

    status: int
    headers: dict[str, list[str]] = field(default_factory=dict)
    body: str = ""
    reason: str = ""

    @property
    def ok(self) -> bool:
        """True for 2xx responses."""
        return 200 <= self.status < 300

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of a header, case-insensitively."""
        values = self.headers.get(name.lower())
        return values[0] if values else default

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)


def headers_from_items(items: Iterable[tuple[str, str]]) -> dict[str, list[str]]:
    """Group (name, value) pairs by lower-cased name, keeping value order."""
    headers: dict[str, list[str]] = {}
    for name, value in items:
        headers.setdefault(name.lower(), []).append(value)
    return headers


def parse_headers(text: str) -> dict[str, list[str]]:
    """Parse a CRLF separated header block.

    Lines without a colon are skipped.
    """
    items = []
    for line in text.split(CRLF):
        name, sep, value = line.partition(":")
        if not sep or not name.strip():
            continue
        items.append((name.strip(), value.strip()))
    return headers_from_items(items)


def parse_response(raw: str) -> HTTPResponse:
    """Split raw response text into status, headers and body.

    Args:
        raw: Full response text, e.g. "HTTP/1.1 200 OK\\r\\nA: b\\r\\n\\r\\nbody".

    Returns:
        HTTPResponse. The body is empty if there is no blank line.

    Raises:
        ResponseParseError: If the status line is missing or malformed.
    """
    head, sep, body = raw.partition(CRLF + CRLF)
    if not sep:
        body = ""

    status_line, _, header_block = head.partition(CRLF)
    parts = status_line.split(" ", 2)
    if len(parts) < 2 or not parts[0].startswith("HTTP/"):
        raise ResponseParseError(f"Invalid status line: {status_line!r}")
    try:
        status = int(parts[1])
    except ValueError:
        raise ResponseParseError(f"Invalid status code: {parts[1]!r}") from None

    return HTTPResponse(
        status=status,
        headers=parse_headers(header_block),
        body=body,
        reason=parts[2] if len(parts) > 2 else "",
    )
