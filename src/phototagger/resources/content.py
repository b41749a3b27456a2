"""Content (image upload) resource wrapper."""

from __future__ import annotations

from typing import Optional

from ..errors import ResponseShapeError
from ..multipart import MultipartUpload, ProgressCallback
from ..router import UploadContent
from .base import Resource
from .content_types import _parse_upload_response
from ._common_types import ValidationMode, _is_image_bytes


class Content(Resource):
    """Image upload operations."""

    def upload(
        self,
        image: bytes,
        *,
        progress: Optional[ProgressCallback] = None,
        validation: ValidationMode = "warn",
        raise_on_error: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> str | None:
        """Upload JPEG bytes and return the content id assigned by the service.

        Parameters
        ----------
        image
            Raw JPEG bytes, sent as the ``imagefile`` multipart field.
        progress
            Called with the fraction of the request body sent so far.
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
        str or None
            Content id of the uploaded image, or ``None`` on error.
        """
        if not _is_image_bytes(image):
            if validation == "strict":
                raise ValueError(f"Invalid image data: {type(image).__name__}")
            if validation == "warn":
                self._logger.warning("Could not read image bytes for upload: %s", type(image).__name__)
                return None

        data = bytes(image) if _is_image_bytes(image) else image
        body = MultipartUpload(data, progress=progress)
        response = self._post(UploadContent(), body=body, timeout=timeout, raise_on_error=raise_on_error)
        if response is None:
            return None

        try:
            content_id = _parse_upload_response(response)
        except ResponseShapeError as exc:
            self._logger.warning("Invalid information received from service: %s", exc)
            if self._should_raise(raise_on_error):
                raise
            return None
        self._logger.info("Content uploaded with ID: %s", content_id)
        return content_id
