"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from epub2json.commands.convert import execute_convert
from epub2json.commands.info import execute_info
from epub2json.config import DEFAULT_PACKAGE_ROOTS, ConverterConfig
from epub2json.errors import ConversionError

app = typer.Typer(
    name="epub2json",
    help="Convert EPUB files into JSON metadata, a TOC tree and merged HTML.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

PackageRootOption = Annotated[
    Optional[list[str]],
    typer.Option(
        "--package-root",
        help=(
            "Directory holding package.opf; repeat to search several "
            f"(default: {', '.join(DEFAULT_PACKAGE_ROOTS)})"
        ),
    ),
]


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging",
        ),
    ] = False,
) -> None:
    """Convert EPUB files into JSON metadata, a TOC tree and merged HTML."""
    setup_logging(verbose)


@app.command()
def convert(
    epub: Annotated[
        Path,
        typer.Option(
            "--epub",
            help="Path to the EPUB file",
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output directory",
        ),
    ],
    package_roots: PackageRootOption = None,
    content_dir: Annotated[
        str,
        typer.Option(
            "--content-dir",
            help="Directory of the spine pages; the merged HTML is written there too",
        ),
    ] = "xhtml",
    clean: Annotated[
        bool,
        typer.Option(
            "--clean/--no-clean",
            help="Remove the output directory before writing",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress progress output",
        ),
    ] = False,
) -> None:
    """Convert an EPUB into metadata.json, toc.json, merged HTML and assets."""
    config = ConverterConfig(
        package_roots=package_roots or list(DEFAULT_PACKAGE_ROOTS),
        content_dir=content_dir,
        clean_output=clean,
    )

    try:
        execute_convert(
            epub_path=epub.resolve(),
            output_dir=output.resolve(),
            config=config,
            quiet=quiet,
            console=console,
        )
    except ConversionError as e:
        err_console.print(f"[red]Error: {escape(e.message)}[/]", highlight=False)
        raise typer.Exit(1)
    except OSError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/]", highlight=False)
        raise typer.Exit(1)


@app.command()
def info(
    epub: Annotated[
        Path,
        typer.Option(
            "--epub",
            help="Path to the EPUB file",
        ),
    ],
    package_roots: PackageRootOption = None,
) -> None:
    """Display book metadata and table of contents."""
    config = ConverterConfig(package_roots=package_roots or list(DEFAULT_PACKAGE_ROOTS))

    try:
        execute_info(epub_path=epub.resolve(), config=config, console=console)
    except ConversionError as e:
        err_console.print(f"[red]Error: {escape(e.message)}[/]", highlight=False)
        raise typer.Exit(1)
    except OSError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/]", highlight=False)
        raise typer.Exit(1)
