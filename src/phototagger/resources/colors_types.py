"""Types for the colors endpoint."""

from __future__ import annotations

from typing import TypedDict
from typing_extensions import ReadOnly


class PhotoColor(TypedDict, total=False):
    """Readonly dominant color of a photo."""
    red: ReadOnly[int]
    green: ReadOnly[int]
    blue: ReadOnly[int]
    colorName: ReadOnly[str]


__all__ = ["PhotoColor"]
