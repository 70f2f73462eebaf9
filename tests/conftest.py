"""Shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from builders import default_files, make_epub


@pytest.fixture
def write_epub(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing an EPUB built from a files dict into tmp_path."""

    def _write(files: dict[str, str | bytes], name: str = "book.epub") -> Path:
        return make_epub(tmp_path / name, files)

    return _write


@pytest.fixture
def book_files() -> dict[str, str | bytes]:
    return default_files()


@pytest.fixture
def epub_path(write_epub, book_files) -> Path:
    return write_epub(book_files)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "out"
