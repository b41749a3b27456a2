"""Color resource wrapper."""

from __future__ import annotations

from .base import Resource
from .colors_types import PhotoColor


class Colors(Resource):
    """Dominant color operations."""

    def get(self, content_id: str) -> list[PhotoColor]:
        """Return the dominant colors of an uploaded image.

        Color lookup is unimplemented: no request is sent and the result is
        always empty. ``FetchColors`` describes the request it would use.
        """
        self._logger.debug("Color lookup unimplemented; no colors for %s", content_id)
        return []
