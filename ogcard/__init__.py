"""Open Graph / Twitter Card metadata extraction for link previews"""

from ogcard.core.models import OpenGraph, FetchFailure, ImageSize
from ogcard.services.metadata_extractor import OpenGraphExtractor
from ogcard.services.exceptions import EmptyInputError, NoMetadataFoundError

__version__ = "1.0.0"

__all__ = [
    "OpenGraph",
    "FetchFailure",
    "ImageSize",
    "OpenGraphExtractor",
    "EmptyInputError",
    "NoMetadataFoundError",
]
