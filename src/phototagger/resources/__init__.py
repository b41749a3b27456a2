"""Resource module exports."""

from .colors import Colors
from .colors_types import PhotoColor
from .content import Content
from .content_types import ContentResponse, UploadedFile
from .tagging import Tagging
from .tagging_types import TagEntry, TaggingResponse, TaggingResult

__all__ = [
    "Colors",
    "Content",
    "ContentResponse",
    "PhotoColor",
    "TagEntry",
    "Tagging",
    "TaggingResponse",
    "TaggingResult",
    "UploadedFile",
]
