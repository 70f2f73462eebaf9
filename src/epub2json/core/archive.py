"""Read entries from an EPUB zip container."""

import logging
import posixpath
import zipfile
from pathlib import Path

from epub2json.errors import InputError, MissingEntryError

log = logging.getLogger(__name__)


def normalize_entry_path(path: str) -> str:
    """Normalize an archive path to the form used by the zip directory."""
    normalized = posixpath.normpath(path.replace("\\", "/"))
    return normalized.lstrip("/")


class EpubArchive:
    """Open EPUB archive with lookup by normalized entry path."""

    def __init__(self, epub_path: Path):
        self.path = epub_path
        if not epub_path.exists():
            raise InputError(f"File not found: {epub_path}")
        try:
            self._zip = zipfile.ZipFile(epub_path)
        except zipfile.BadZipFile as e:
            raise InputError(f"Not a valid EPUB archive: {epub_path} ({e})") from e
        except OSError as e:
            raise InputError(f"Could not read {epub_path}: {e.strerror or e}") from e
        self._entries = {
            normalize_entry_path(info.filename): info
            for info in self._zip.infolist()
            if not info.is_dir()
        }
        log.debug("Opened %s with %d entries", epub_path, len(self._entries))

    def __enter__(self) -> "EpubArchive":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._zip.close()

    def has(self, path: str) -> bool:
        return normalize_entry_path(path) in self._entries

    def read(self, path: str, missing: str | None = None) -> bytes:
        """Read an entry's bytes.

        Args:
            path: Entry path relative to the archive root
            missing: Message for the error raised when the entry is absent

        Raises:
            MissingEntryError: If the archive has no such entry
        """
        key = normalize_entry_path(path)
        info = self._entries.get(key)
        if info is None:
            raise MissingEntryError(missing or f"Could not find {path}.")
        return self._zip.read(info)

    def find_package_root(self, roots: list[str], package_file: str) -> str:
        """Return the first root directory that contains the package file.

        Raises:
            MissingEntryError: If no candidate root holds the package file
        """
        for root in roots:
            if self.has(posixpath.join(root, package_file)):
                log.debug("Using package root %s", root)
                return root
        tried = ", ".join(posixpath.join(root, package_file) for root in roots)
        raise MissingEntryError(f"Could not find {package_file} (tried {tried}).")
