"""Resolve the NCX navigation document into a table of contents tree."""

import logging
import posixpath

from epub2json.core.archive import EpubArchive
from epub2json.core.descriptor import DescriptorNode, parse_descriptor
from epub2json.core.manifest import ManifestIndex
from epub2json.core.package import PackageDocument
from epub2json.errors import SchemaError
from epub2json.models.toc import ContentNode, TableOfContents

log = logging.getLogger(__name__)


def resolve_toc(
    archive: EpubArchive,
    package: PackageDocument,
    manifest: ManifestIndex,
) -> TableOfContents:
    """Locate the NCX through the spine's toc attribute and convert it.

    Raises:
        SchemaError: If spine@toc, ncx, ncx.docTitle or ncx.navMap is missing
        MissingReferenceError: If spine@toc names an unknown manifest id
        MissingEntryError: If the NCX file is not in the archive
    """
    toc_id = package.spine.require_attr("toc")
    entry = manifest.resolve(toc_id, f"{package.spine.path}@toc")
    data = archive.read(
        package.entry_path(entry.href),
        missing="Could not find table of contents.",
    )

    ncx = parse_descriptor(data, posixpath.basename(entry.href), "ncx")
    doc_title = ncx.require_first("docTitle")
    nav_map = ncx.require_first("navMap")

    title = doc_title.first("text")
    return TableOfContents(
        title=title.text if title is not None else "",
        contents=build_contents(nav_map.children("navPoint")),
    )


def build_contents(nav_points: list[DescriptorNode]) -> list[ContentNode]:
    """Convert one sibling group of nav-points.

    A single malformed nav-point discards the whole group: the result is
    either every node of the group or an empty list.
    """
    try:
        return [_build_node(nav_point) for nav_point in nav_points]
    except SchemaError as e:
        log.warning("%s", e.message)
        return []


def _build_node(nav_point: DescriptorNode) -> ContentNode:
    label = nav_point.require_first("navLabel").require_first("text")
    src = nav_point.require_first("content").require_attr("src")

    node = ContentNode(text=label.text, href=src)
    nested = nav_point.children("navPoint")
    if nested:
        node.contents = build_contents(nested)
    return node
