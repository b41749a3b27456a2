"""Shared types and validation helpers for resources."""

from __future__ import annotations

from typing import Literal

# --- Shared Validation Mode --- #
ValidationMode = Literal["off", "warn", "strict"]


def _is_content_id(value: object) -> bool:
    """Return True for a non-blank content id string."""
    return isinstance(value, str) and bool(value.strip())


def _is_image_bytes(value: object) -> bool:
    """Return True for non-empty raw image bytes."""
    return isinstance(value, (bytes, bytearray, memoryview)) and len(value) > 0
