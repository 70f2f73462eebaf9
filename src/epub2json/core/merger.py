"""Merge the linear spine into a single HTML document."""

import logging
import warnings
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

from epub2json.core.archive import EpubArchive, normalize_entry_path
from epub2json.core.descriptor import DescriptorNode
from epub2json.core.manifest import ManifestIndex
from epub2json.core.package import PackageDocument
from epub2json.errors import PolicyError
from epub2json.models.package import SpineItem

# Suppress XML parsing warnings - EPUB pages are XHTML
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)

log = logging.getLogger(__name__)


@dataclass
class MergedDocument:
    """Head and body fragments accumulated across the spine walk."""

    # dict keys keep insertion order and drop repeats
    head_fragments: dict[str, None] = field(default_factory=dict)
    body_fragments: list[str] = field(default_factory=list)
    pages: int = 0

    def add_page(self, markup: bytes) -> None:
        """Collect head children (except title) and top-level body children."""
        soup = BeautifulSoup(markup, "lxml")

        head = soup.find("head")
        if head is not None:
            for child in head.find_all(recursive=False):
                if child.name != "title":
                    self.head_fragments.setdefault(str(child), None)

        body = soup.find("body")
        if body is not None:
            self.body_fragments.extend(
                str(child) for child in body.find_all(recursive=False)
            )

        self.pages += 1

    def render(self) -> str:
        return "\n".join(
            [
                "<html>",
                "<head>",
                "\n".join(self.head_fragments),
                "</head>",
                "<body>",
                "\n".join(self.body_fragments),
                "</body>",
                "</html>",
            ]
        )


def read_spine(spine: DescriptorNode) -> list[SpineItem]:
    """Spine itemrefs in document order.

    Only an explicit linear="no" marks an item as non-linear.
    """
    return [
        SpineItem(
            idref=itemref.require_attr("idref"),
            linear=itemref.attr("linear") != "no",
        )
        for itemref in spine.children("itemref")
    ]


def _in_content_dir(href: str, content_dir: str) -> bool:
    parts = PurePosixPath(normalize_entry_path(href)).parts
    return len(parts) > 1 and parts[0] == content_dir


def merge_spine(
    archive: EpubArchive,
    package: PackageDocument,
    manifest: ManifestIndex,
    content_dir: str,
) -> MergedDocument:
    """Walk the linear spine and merge every page.

    Raises:
        PolicyError: If a spine item is not XHTML or lives outside
            ``content_dir``
        MissingReferenceError: If an idref is not in the manifest
        MissingEntryError: If a page is missing from the archive
    """
    merged = MergedDocument()
    referrer = f"{package.spine.path}.itemref@idref"

    for item in read_spine(package.spine):
        if not item.linear:
            log.debug("Skipping non-linear spine item %s", item.idref)
            continue

        entry = manifest.resolve(item.idref, referrer)
        if not entry.is_xhtml:
            raise PolicyError(
                f"{package.source} has non-HTML item in {package.spine.path}."
            )
        # Every page must sit in the directory the merged file is written to
        if not _in_content_dir(entry.href, content_dir):
            raise PolicyError(
                f"{package.source} has non-standard path '{entry.href}' "
                f"in {package.spine.path}."
            )

        merged.add_page(
            archive.read(
                package.entry_path(entry.href),
                missing=f"Could not find {entry.href}.",
            )
        )
        log.debug("Merged %s", entry.href)

    return merged
