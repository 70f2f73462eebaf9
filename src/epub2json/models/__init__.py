"""Data models."""

from epub2json.models.output import BookInfo, ConversionResult
from epub2json.models.package import (
    ManifestEntry,
    Metadata,
    SpineItem,
)
from epub2json.models.toc import (
    ContentNode,
    TableOfContents,
)

__all__ = [
    # Package models
    "ManifestEntry",
    "Metadata",
    "SpineItem",
    # TOC models
    "ContentNode",
    "TableOfContents",
    # Output models
    "BookInfo",
    "ConversionResult",
]
