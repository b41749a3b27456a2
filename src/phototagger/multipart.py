"""Multipart upload body that reports how much of itself has been sent."""

from __future__ import annotations

from typing import Callable, Optional

from urllib3.filepost import encode_multipart_formdata

IMAGE_FIELD = "imagefile"
IMAGE_FILENAME = "image.jpg"
IMAGE_MIME_TYPE = "image/jpeg"

ProgressCallback = Callable[[float], None]


class MultipartUpload:
    """Encoded ``multipart/form-data`` body readable as a file object.

    ``requests`` sends file-like bodies by calling :meth:`read` in blocks and
    takes ``Content-Length`` from ``len()``. Every non-empty read reports the
    fraction of the body consumed so far to ``progress``.
    """

    def __init__(
        self,
        data: bytes,
        *,
        field_name: str = IMAGE_FIELD,
        filename: str = IMAGE_FILENAME,
        mime_type: str = IMAGE_MIME_TYPE,
        progress: Optional[ProgressCallback] = None,
        boundary: Optional[str] = None,
    ) -> None:
        body, content_type = encode_multipart_formdata(
            {field_name: (filename, data, mime_type)},
            boundary=boundary,
        )
        self._body = body
        self.content_type = content_type
        self.progress = progress
        self._position = 0

    def __len__(self) -> int:
        return len(self._body)

    @property
    def bytes_read(self) -> int:
        return self._position

    def getvalue(self) -> bytes:
        """Return the whole encoded body without moving the read position."""
        return self._body

    def read(self, size: int = -1) -> bytes:
        if size is None or size < 0:
            end = len(self._body)
        else:
            end = min(len(self._body), self._position + size)
        chunk = self._body[self._position:end]
        self._position = end
        if chunk and self.progress is not None:
            self.progress(self._position / len(self._body))
        return chunk

    def rewind(self) -> None:
        """Reset the read position so the body can be sent again."""
        self._position = 0
