"""Converter settings."""

from pydantic import BaseModel, Field

DEFAULT_PACKAGE_ROOTS = ["OPS", "OEBPS"]


class ConverterConfig(BaseModel):
    """Settings for a single conversion run."""

    package_roots: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PACKAGE_ROOTS)
    )
    package_file: str = "package.opf"
    # Spine pages must live here; the merged document is written here too
    content_dir: str = "xhtml"
    merged_file: str = "index.html"
    asset_prefixes: tuple[str, ...] = ("image/", "text/")
    clean_output: bool = False

    @property
    def merged_path(self) -> str:
        """Relative output path of the merged HTML document."""
        return f"{self.content_dir}/{self.merged_file}"
