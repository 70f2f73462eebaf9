"""Locate and validate the OPF package descriptor."""

import logging
import posixpath
from dataclasses import dataclass

from epub2json.config import ConverterConfig
from epub2json.core.archive import EpubArchive
from epub2json.core.descriptor import DescriptorNode, parse_descriptor

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageDocument:
    """Validated OPF with its three required sections."""

    root: str
    source: str
    metadata: DescriptorNode
    manifest: DescriptorNode
    spine: DescriptorNode

    def entry_path(self, href: str) -> str:
        """Archive path of a manifest href."""
        return posixpath.join(self.root, href)


def load_package(archive: EpubArchive, config: ConverterConfig) -> PackageDocument:
    """Find, parse and validate the package descriptor.

    Raises:
        MissingEntryError: If no configured root holds the descriptor
        SchemaError: If package, metadata, manifest or spine is missing
    """
    root = archive.find_package_root(config.package_roots, config.package_file)
    data = archive.read(posixpath.join(root, config.package_file))

    package = parse_descriptor(data, config.package_file, "package")
    document = PackageDocument(
        root=root,
        source=config.package_file,
        metadata=package.require_first("metadata"),
        manifest=package.require_first("manifest"),
        spine=package.require_first("spine"),
    )
    log.debug("Loaded %s from %s", config.package_file, root)
    return document
