"""Types and response validation for the content (upload) endpoint."""

from __future__ import annotations

from typing import TypedDict
from typing_extensions import ReadOnly

from ..errors import ResponseShapeError


class UploadedFile(TypedDict, total=False):
    """Readonly entry of the ``uploaded`` list."""
    id: ReadOnly[str]
    filename: ReadOnly[str]


class ContentResponse(TypedDict, total=False):
    """Readonly body returned by ``POST /content``."""
    status: ReadOnly[str]
    uploaded: ReadOnly[list[UploadedFile]]
    unsuccessful: ReadOnly[list[dict[str, object]]]


def _parse_upload_response(payload: object) -> str:
    """Return the content id of the first uploaded file.

    Raises
    ------
    ResponseShapeError
        If ``uploaded`` is missing, empty, or its first entry has no string ``id``.
    """
    if not isinstance(payload, dict):
        raise ResponseShapeError(f"Upload response must be an object. Given [{type(payload).__name__}]")
    uploaded = payload.get("uploaded")
    if not isinstance(uploaded, list):
        raise ResponseShapeError("Upload response missing 'uploaded' list")
    if not uploaded:
        raise ResponseShapeError("Upload response 'uploaded' list is empty")
    first = uploaded[0]
    content_id = first.get("id") if isinstance(first, dict) else None
    if not isinstance(content_id, str):
        raise ResponseShapeError(f"First uploaded file has no string 'id': {first!r}")
    return content_id


__all__ = ["ContentResponse", "UploadedFile"]
