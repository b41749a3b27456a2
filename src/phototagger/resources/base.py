"""Base resource helpers."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

from ..router import TaggingRequest

if TYPE_CHECKING:  # pragma: no cover
    from ..client import PhotoTagger
    from ..multipart import MultipartUpload


class Resource:
    """Shared helpers for resource classes."""

    def __init__(self, client: "PhotoTagger") -> None:
        self._client = client

    @property
    def _logger(self):
        return self._client._logger

    def _should_raise(self, raise_on_error: Optional[bool]) -> bool:
        if raise_on_error is None:
            return bool(self._client.raise_on_error)
        return raise_on_error

    def _request(
        self,
        request: TaggingRequest,
        *,
        body: Optional["MultipartUpload"] = None,
        timeout: Optional[float] = None,
        raise_on_error: Optional[bool] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        return self._client.request(request, body=body, timeout=timeout, raise_on_error=raise_on_error)

    def _get(
        self,
        request: TaggingRequest,
        *,
        timeout: Optional[float] = None,
        raise_on_error: Optional[bool] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        return self._request(request, timeout=timeout, raise_on_error=raise_on_error)

    def _post(
        self,
        request: TaggingRequest,
        *,
        body: Optional["MultipartUpload"] = None,
        timeout: Optional[float] = None,
        raise_on_error: Optional[bool] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        return self._request(request, body=body, timeout=timeout, raise_on_error=raise_on_error)
