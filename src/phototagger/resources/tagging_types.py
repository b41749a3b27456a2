"""Types and response validation for the tagging endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypedDict
from typing_extensions import ReadOnly

from ..errors import PartialTagParseError, ResponseShapeError


class TagEntry(TypedDict, total=False):
    """Readonly tag/confidence pair."""
    tag: ReadOnly[str]
    confidence: ReadOnly[float]


class TaggingResult(TypedDict, total=False):
    """Readonly per-image entry of the ``results`` list."""
    image: ReadOnly[str]
    tags: ReadOnly[list[TagEntry]]


class TaggingResponse(TypedDict, total=False):
    """Readonly body returned by ``GET /tagging``."""
    results: ReadOnly[list[TaggingResult]]
    unsuccessful: ReadOnly[list[dict[str, object]]]


@dataclass
class TagErrors:
    """Tag entries skipped while reading a tagging response."""
    dropped: list[PartialTagParseError] = field(default_factory=list)


def _normalize_tags(entries: list[object]) -> tuple[list[str], TagErrors]:
    """Project entries onto their ``tag`` strings, preserving order."""
    tags: list[str] = []
    errors = TagErrors()
    for index, entry in enumerate(entries):
        tag = entry.get("tag") if isinstance(entry, dict) else None
        if not isinstance(tag, str):
            errors.dropped.append(PartialTagParseError(index, entry))
            continue
        tags.append(tag)
    return tags, errors


def _parse_tagging_response(payload: object) -> tuple[list[str], TagErrors]:
    """Return the tags of the first result and the entries that were skipped.

    Raises
    ------
    ResponseShapeError
        If ``results`` is missing or empty, or its first entry has no ``tags`` list.
    """
    if not isinstance(payload, dict):
        raise ResponseShapeError(f"Tagging response must be an object. Given [{type(payload).__name__}]")
    results = payload.get("results")
    if not isinstance(results, list):
        raise ResponseShapeError("Tagging response missing 'results' list")
    if not results:
        raise ResponseShapeError("Tagging response 'results' list is empty")
    first = results[0]
    entries = first.get("tags") if isinstance(first, dict) else None
    if not isinstance(entries, list):
        raise ResponseShapeError(f"First tagging result has no 'tags' list: {first!r}")
    return _normalize_tags(entries)


__all__ = ["TagEntry", "TagErrors", "TaggingResponse", "TaggingResult"]
