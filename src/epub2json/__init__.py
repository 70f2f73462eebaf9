"""Convert EPUB packages into JSON metadata, a TOC tree and merged HTML."""

__version__ = "0.1.0"
