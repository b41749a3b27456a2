"""Exceptions raised by the phototagger client."""

from __future__ import annotations

from typing import Optional


class TaggerError(Exception):
    """Base class for all phototagger errors."""


class RequestConstructionError(TaggerError):
    """A request descriptor could not be built from the configuration."""


class MalformedURL(RequestConstructionError):
    """The configured base URL cannot be parsed into an HTTP(S) URL."""

    def __init__(self, url: object) -> None:
        super().__init__(f"Malformed base URL: {url!r}")
        self.url = url


class TransportError(TaggerError):
    """Network failure or non-success HTTP status."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseShapeError(TaggerError):
    """Response body is missing expected keys or has the wrong types."""


class PartialTagParseError(TaggerError):
    """A single tag entry could not be read; the entry is skipped."""

    def __init__(self, index: int, entry: object) -> None:
        super().__init__(f"Tag entry {index} has no string 'tag': {entry!r}")
        self.index = index
        self.entry = entry


__all__ = [
    "MalformedURL",
    "PartialTagParseError",
    "RequestConstructionError",
    "ResponseShapeError",
    "TaggerError",
    "TransportError",
]
