"""Outcome types for the upload-and-tag workflow."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

from .resources.colors_types import PhotoColor

OutcomeStatus = Literal["success", "empty", "failed"]
FailureReason = Literal["invalid_input", "request_construction", "transport", "response_shape"]


@dataclass
class TaggingOutcome:
    """Result of one upload-and-tag run.

    ``on_complete`` callers only see ``tags``; the status tells "no tags
    found" apart from a failed stage.
    """
    status: OutcomeStatus
    tags: list[str] = field(default_factory=list)
    colors: list[PhotoColor] = field(default_factory=list)
    content_id: Optional[str] = None
    reason: Optional[FailureReason] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status != "failed"

    @classmethod
    def completed(
        cls,
        tags: list[str],
        *,
        content_id: str,
        colors: Optional[list[PhotoColor]] = None,
    ) -> "TaggingOutcome":
        return cls(
            status="success" if tags else "empty",
            tags=list(tags),
            colors=list(colors or []),
            content_id=content_id,
        )

    @classmethod
    def failed(
        cls,
        reason: FailureReason,
        detail: Optional[str] = None,
        *,
        content_id: Optional[str] = None,
    ) -> "TaggingOutcome":
        return cls(status="failed", content_id=content_id, reason=reason, detail=detail)


__all__ = ["FailureReason", "OutcomeStatus", "TaggingOutcome"]
