"""Upload an image, then fetch its tags.

The two requests run strictly one after the other on the calling thread:
the tag lookup needs the content id returned by the upload. Every failure
(bad input, bad configuration, transport, unexpected response shape) ends
the run and is reported as an empty tag list; nothing is raised to the
caller. Color lookup is unimplemented and always yields an empty list.
"""

from __future__ import annotations

from typing import Callable, Optional, TYPE_CHECKING

from .errors import RequestConstructionError, TaggerError, TransportError
from .resources._common_types import _is_image_bytes
from .utils import clamp_fraction
from .workflow_types import FailureReason, TaggingOutcome

if TYPE_CHECKING:  # pragma: no cover
    from .client import PhotoTagger

ProgressHandler = Callable[[float], None]
CompletionHandler = Callable[[list[str]], None]


def _failure_reason(exc: TaggerError) -> FailureReason:
    if isinstance(exc, RequestConstructionError):
        return "request_construction"
    if isinstance(exc, TransportError):
        return "transport"
    return "response_shape"


class ProgressRelay:
    """Forward upload fractions, clamped to [0, 1] and never decreasing."""

    def __init__(self, callback: ProgressHandler) -> None:
        self._callback = callback
        self._last: Optional[float] = None

    def __call__(self, fraction: float) -> None:
        value = clamp_fraction(fraction)
        if self._last is not None and value < self._last:
            return
        self._last = value
        self._callback(value)


class TaggingWorkflow:
    """Upload-then-tag sequence bound to a client."""

    def __init__(self, client: "PhotoTagger") -> None:
        self._client = client

    @property
    def _logger(self):
        return self._client._logger

    def run(
        self,
        image: bytes,
        on_progress: Optional[ProgressHandler] = None,
        on_complete: Optional[CompletionHandler] = None,
    ) -> TaggingOutcome:
        """Upload ``image``, fetch its tags and call ``on_complete`` once.

        Parameters
        ----------
        image
            Raw JPEG bytes.
        on_progress
            Receives upload fractions in ``[0, 1]`` in non-decreasing order.
        on_complete
            Receives the tag list, empty when any stage failed.

        Returns
        -------
        TaggingOutcome
            Status, tags and the failure reason, if any.
        """
        outcome = self._execute(image, on_progress)
        if on_complete is not None:
            on_complete(list(outcome.tags))
        return outcome

    def _execute(self, image: bytes, on_progress: Optional[ProgressHandler]) -> TaggingOutcome:
        if not _is_image_bytes(image):
            self._logger.warning("Could not read image bytes for upload: %s", type(image).__name__)
            return TaggingOutcome.failed("invalid_input", "Image data must be non-empty bytes")

        relay = ProgressRelay(on_progress) if on_progress is not None else None
        try:
            content_id = self._client.content.upload(
                image,
                progress=relay,
                validation="off",
                raise_on_error=True,
            )
        except TaggerError as exc:
            self._logger.warning("Error while uploading file: %s", exc)
            return TaggingOutcome.failed(_failure_reason(exc), str(exc))
        if content_id is None:  # pragma: no cover - upload raises when raise_on_error is set
            return TaggingOutcome.failed("response_shape", "Upload returned no content id")

        try:
            tags = self._client.tagging.get(content_id, validation="off", raise_on_error=True)
        except TaggerError as exc:
            self._logger.warning("Error while fetching tags for %s: %s", content_id, exc)
            return TaggingOutcome.failed(_failure_reason(exc), str(exc), content_id=content_id)
        if tags is None:  # pragma: no cover - tagging raises when raise_on_error is set
            return TaggingOutcome.failed("response_shape", "Tag lookup returned nothing", content_id=content_id)

        colors = self._client.colors.get(content_id)
        return TaggingOutcome.completed(tags, content_id=content_id, colors=colors)


__all__ = ["ProgressRelay", "TaggingWorkflow"]
