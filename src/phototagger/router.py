"""Translate tagging operations into transport-ready request descriptors.

Each :data:`TaggingRequest` variant maps to a fixed HTTP method, path and
parameter mapping. :func:`build_request` combines that with the client
configuration (base URL, credential, timeout) without touching the network,
so the output can be asserted on directly in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Mapping, Union
from urllib.parse import urlencode

from urllib3.exceptions import LocationParseError
from urllib3.util import parse_url

from .errors import MalformedURL, RequestConstructionError

HTTPMethod = Literal["GET", "POST"]

DEFAULT_TIMEOUT = 10


@dataclass(frozen=True)
class UploadContent:
    """Upload image bytes; the body is attached by the caller."""

    method: HTTPMethod = field(default="POST", init=False)
    path: str = field(default="/content", init=False)

    @property
    def parameters(self) -> dict[str, object]:
        return {}


@dataclass(frozen=True)
class FetchTags:
    """Fetch the tags computed for an uploaded content id."""

    content_id: str
    method: HTTPMethod = field(default="GET", init=False)
    path: str = field(default="/tagging", init=False)

    @property
    def parameters(self) -> dict[str, object]:
        return {"content": self.content_id}


@dataclass(frozen=True)
class FetchColors:
    """Fetch the dominant colors for an uploaded content id."""

    content_id: str
    method: HTTPMethod = field(default="GET", init=False)
    path: str = field(default="/colors", init=False)

    @property
    def parameters(self) -> dict[str, object]:
        return {"content": self.content_id, "extract_object_colors": 0}


TaggingRequest = Union[UploadContent, FetchTags, FetchColors]


@dataclass(frozen=True)
class RequestDescriptor:
    """Fully specified outbound request, minus any upload body."""

    method: HTTPMethod
    url: str
    headers: Mapping[str, str]
    timeout: float
    parameters: Mapping[str, object]
    encoded_parameters: str

    @property
    def full_url(self) -> str:
        """URL including the query string for GET requests."""
        if self.method == "GET" and self.encoded_parameters:
            return f"{self.url}?{self.encoded_parameters}"
        return self.url

    @property
    def query(self) -> dict[str, object] | None:
        """Parameters to send in the query string, or None."""
        if self.method == "GET" and self.parameters:
            return dict(self.parameters)
        return None


def _validate_base_url(base_url: object) -> str:
    if not isinstance(base_url, str) or not base_url.strip():
        raise MalformedURL(base_url)
    try:
        parsed = parse_url(base_url.strip())
    except LocationParseError as exc:
        raise MalformedURL(base_url) from exc
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise MalformedURL(base_url)
    return base_url.strip().rstrip("/")


def build_request(
    request: TaggingRequest,
    *,
    base_url: str,
    authorization: str | None,
    timeout: float = DEFAULT_TIMEOUT,
) -> RequestDescriptor:
    """Build the request descriptor for one tagging operation.

    Parameters
    ----------
    request
        Operation variant (:class:`UploadContent`, :class:`FetchTags` or
        :class:`FetchColors`).
    base_url
        Service root, e.g. ``http://api.imagga.com/v1``.
    authorization
        Value of the ``Authorization`` header sent with every request.
    timeout
        Request timeout in seconds.

    Returns
    -------
    RequestDescriptor
        Method, URL, headers, timeout and URL-encoded parameters.

    Raises
    ------
    MalformedURL
        If ``base_url`` is not an absolute HTTP(S) URL.
    RequestConstructionError
        If no credential is configured.
    """
    root = _validate_base_url(base_url)
    if not authorization:
        raise RequestConstructionError("No authorization credential configured")

    parameters = request.parameters
    return RequestDescriptor(
        method=request.method,
        url=root + request.path,
        headers={"Authorization": authorization},
        timeout=timeout,
        parameters=parameters,
        encoded_parameters=urlencode(parameters, doseq=True),
    )


__all__ = [
    "DEFAULT_TIMEOUT",
    "FetchColors",
    "FetchTags",
    "HTTPMethod",
    "RequestDescriptor",
    "TaggingRequest",
    "UploadContent",
    "build_request",
]
