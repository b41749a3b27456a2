"""Tagging resource wrapper."""

from __future__ import annotations

from typing import Optional

from ..errors import ResponseShapeError
from ..router import FetchTags
from .base import Resource
from .tagging_types import _parse_tagging_response
from ._common_types import ValidationMode, _is_content_id


class Tagging(Resource):
    """Tag lookup operations."""

    def get(
        self,
        content_id: str,
        *,
        validation: ValidationMode = "warn",
        raise_on_error: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> list[str] | None:
        """Fetch the tags computed for an uploaded image.

        Parameters
        ----------
        content_id
            Identifier returned by :meth:`Content.upload`.
        validation
            Validation mode: ``"off"`` sends inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.
        raise_on_error
            Raise transport and response-shape errors instead of returning
            ``None``. Defaults to the client setting.
        timeout
            Request timeout in seconds.

        Returns
        -------
        list[str] or None
            Tags in the order the service ranked them, or ``None`` on error.
            Entries without a string ``tag`` are skipped.
        """
        if not _is_content_id(content_id):
            if validation == "strict":
                raise ValueError(f"Invalid content_id: {content_id!r}")
            if validation == "warn":
                self._logger.warning("Invalid content_id for tagging: %r", content_id)
                return None

        response = self._get(FetchTags(content_id), timeout=timeout, raise_on_error=raise_on_error)
        if response is None:
            return None

        try:
            tags, errors = _parse_tagging_response(response)
        except ResponseShapeError as exc:
            self._logger.warning("Invalid tag information received from the service: %s", exc)
            if self._should_raise(raise_on_error):
                raise
            return None
        for error in errors.dropped:
            self._logger.debug("Skipping tag entry: %s", error)
        return tags
