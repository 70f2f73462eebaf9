"""Copy image and text assets out of the archive."""

import logging

from epub2json.core.archive import EpubArchive
from epub2json.core.manifest import ManifestIndex
from epub2json.core.output_writer import OutputWriter
from epub2json.core.package import PackageDocument
from epub2json.models.package import ManifestEntry

log = logging.getLogger(__name__)


def select_assets(
    manifest: ManifestIndex, prefixes: tuple[str, ...]
) -> list[ManifestEntry]:
    """Manifest entries whose media type starts with one of ``prefixes``."""
    return [
        entry for entry in manifest.values() if entry.media_type.startswith(prefixes)
    ]


def copy_assets(
    archive: EpubArchive,
    package: PackageDocument,
    manifest: ManifestIndex,
    writer: OutputWriter,
    prefixes: tuple[str, ...],
) -> list[str]:
    """Copy every qualifying asset to the same relative href under the output.

    Returns:
        The hrefs written, in manifest order

    Raises:
        MissingEntryError: If an asset is not in the archive
        PolicyError: If an href points outside the output directory
    """
    copied = []
    for entry in select_assets(manifest, prefixes):
        data = archive.read(
            package.entry_path(entry.href),
            missing=f"Could not find {entry.href}.",
        )
        writer.write_bytes(entry.href, data)
        log.debug("Copied %s (%s)", entry.href, entry.media_type)
        copied.append(entry.href)
    return copied
