"""Convert command implementation."""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel

from epub2json.config import ConverterConfig
from epub2json.core.converter import EpubConverter
from epub2json.models.output import ConversionResult


def execute_convert(
    epub_path: Path,
    output_dir: Path,
    config: ConverterConfig,
    quiet: bool,
    console: Console,
) -> ConversionResult:
    """Execute the convert command.

    Conversion errors propagate to the caller, which owns the exit status.
    """
    progress = None if quiet else (lambda message: console.print(f"[dim]{message}[/]"))
    converter = EpubConverter(epub_path, config=config, progress=progress)
    result = converter.convert(output_dir)

    if not quiet:
        summary_lines = [
            f"[green]Converted {epub_path.name} to JSON[/]",
            "",
            f"[dim]Title:[/] {result.title}",
            f"[dim]Package root:[/] {result.package_root}",
            f"[dim]TOC entries:[/] {result.toc_entries}",
            f"[dim]Pages merged:[/] {result.pages_merged}",
            f"[dim]Assets copied:[/] {result.assets_copied}",
            f"[dim]Output directory:[/] {result.output_dir}",
        ]
        console.print()
        console.print(
            Panel(
                "\n".join(summary_lines),
                title="Complete",
                border_style="green",
            )
        )

    return result
