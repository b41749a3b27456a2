"""Public package surface for the phototagger client."""

from .client import DEFAULT_BASE_URL, PhotoTagger
from .errors import (
    MalformedURL,
    PartialTagParseError,
    RequestConstructionError,
    ResponseShapeError,
    TaggerError,
    TransportError,
)
from .resources.colors_types import PhotoColor
from .router import FetchColors, FetchTags, RequestDescriptor, TaggingRequest, UploadContent, build_request
from .workflow_types import TaggingOutcome

__all__ = [
    "DEFAULT_BASE_URL",
    "FetchColors",
    "FetchTags",
    "MalformedURL",
    "PartialTagParseError",
    "PhotoColor",
    "PhotoTagger",
    "RequestConstructionError",
    "RequestDescriptor",
    "ResponseShapeError",
    "TaggerError",
    "TaggingOutcome",
    "TaggingRequest",
    "TransportError",
    "UploadContent",
    "build_request",
]
