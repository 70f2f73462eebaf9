"""Data models for conversion output."""

from pydantic import BaseModel, Field

from epub2json.models.package import Metadata
from epub2json.models.toc import TableOfContents


class ConversionResult(BaseModel):
    """Summary of a finished conversion run."""

    epub_path: str
    output_dir: str
    package_root: str
    title: str
    toc_entries: int = 0
    pages_merged: int = 0
    assets_copied: int = 0
    written: list[str] = Field(default_factory=list)


class BookInfo(BaseModel):
    """Package structure read without writing any output."""

    package_root: str
    metadata: Metadata
    toc: TableOfContents
    manifest_items: int
    spine_items: int
    linear_items: int
