"""Run the full EPUB conversion pipeline."""

import logging
from collections.abc import Callable
from pathlib import Path

from epub2json.config import ConverterConfig
from epub2json.core.archive import EpubArchive
from epub2json.core.assets import copy_assets
from epub2json.core.manifest import ManifestIndex
from epub2json.core.merger import merge_spine, read_spine
from epub2json.core.metadata import extract_metadata
from epub2json.core.output_writer import OutputWriter
from epub2json.core.package import load_package
from epub2json.core.toc import resolve_toc
from epub2json.models.output import BookInfo, ConversionResult

log = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


class EpubConverter:
    """Convert one EPUB into metadata.json, toc.json, merged HTML and assets.

    Stages run in dependency order and stop at the first failure. Everything
    that can be checked without touching the output directory (package
    location, required OPF sections, metadata, manifest) is validated before
    the first artifact is written; later failures leave earlier artifacts on
    disk.
    """

    def __init__(
        self,
        epub_path: Path,
        config: ConverterConfig | None = None,
        progress: ProgressCallback | None = None,
    ):
        self.epub_path = epub_path
        self.config = config or ConverterConfig()
        self.progress = progress

    def _report(self, message: str) -> None:
        log.debug(message)
        if self.progress is not None:
            self.progress(message)

    def convert(self, output_dir: Path) -> ConversionResult:
        """Write all artifacts under ``output_dir``.

        Raises:
            ConversionError: On the first input, schema, reference or
                policy failure
        """
        config = self.config
        self._report(f"Opening {self.epub_path.name}...")

        with EpubArchive(self.epub_path) as archive:
            self._report(f"Extracting {config.package_file}...")
            package = load_package(archive, config)
            metadata = extract_metadata(package.metadata)

            self._report("Indexing manifest...")
            manifest = ManifestIndex.from_manifest(package.manifest)

            writer = OutputWriter(output_dir)
            if config.clean_output:
                self._report(f"Clearing {output_dir}...")
                writer.clear()

            self._report("Writing metadata.json...")
            writer.write_model("metadata.json", metadata)

            self._report("Extracting table of contents...")
            toc = resolve_toc(archive, package, manifest)
            self._report("Writing toc.json...")
            writer.write_model("toc.json", toc, exclude_none=True)

            self._report("Merging HTML...")
            merged = merge_spine(archive, package, manifest, config.content_dir)
            self._report(f"Writing {config.merged_path}...")
            writer.write_text(config.merged_path, merged.render())

            self._report("Copying assets...")
            assets = copy_assets(
                archive, package, manifest, writer, config.asset_prefixes
            )

        return ConversionResult(
            epub_path=str(self.epub_path),
            output_dir=str(output_dir),
            package_root=package.root,
            title=metadata.title,
            toc_entries=toc.count(),
            pages_merged=merged.pages,
            assets_copied=len(assets),
            written=writer.written,
        )

    def inspect(self) -> BookInfo:
        """Validate the package and read its structure without writing."""
        with EpubArchive(self.epub_path) as archive:
            package = load_package(archive, self.config)
            metadata = extract_metadata(package.metadata)
            manifest = ManifestIndex.from_manifest(package.manifest)
            toc = resolve_toc(archive, package, manifest)
            spine = read_spine(package.spine)

        return BookInfo(
            package_root=package.root,
            metadata=metadata,
            toc=toc,
            manifest_items=len(manifest),
            spine_items=len(spine),
            linear_items=sum(1 for item in spine if item.linear),
        )
