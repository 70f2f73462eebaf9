"""Info command implementation."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.tree import Tree

from epub2json.config import ConverterConfig
from epub2json.core.converter import EpubConverter
from epub2json.models.output import BookInfo
from epub2json.models.toc import ContentNode


def _add_nodes(branch: Tree, nodes: list[ContentNode]) -> None:
    """Recursively add TOC nodes to a rich tree."""
    for node in nodes:
        child = branch.add(f"{escape(node.text)} [dim]{escape(node.href)}[/]")
        if node.contents:
            _add_nodes(child, node.contents)


def execute_info(
    epub_path: Path,
    config: ConverterConfig,
    console: Console,
) -> BookInfo:
    """Display book metadata and table of contents."""
    info = EpubConverter(epub_path, config=config).inspect()
    metadata = info.metadata

    info_lines = [
        f"[bold]{escape(metadata.title)}[/]",
        "",
        f"[dim]Author(s):[/] {escape(', '.join(metadata.creators))}",
        f"[dim]Publisher:[/] {escape(metadata.publisher)}",
        f"[dim]Date:[/] {escape(metadata.date)}",
        f"[dim]Language:[/] {escape(metadata.language)}",
        f"[dim]Identifier:[/] {escape(metadata.identifier)}",
        f"[dim]Package root:[/] {info.package_root}",
        f"[dim]Manifest items:[/] {info.manifest_items}",
        f"[dim]Spine items:[/] {info.spine_items} ({info.linear_items} linear)",
    ]

    console.print()
    console.print(
        Panel(
            "\n".join(info_lines),
            title="Book Information",
            border_style="green",
        )
    )

    console.print()
    tree = Tree(f"[bold cyan]{escape(info.toc.title or 'Table of Contents')}[/]")
    _add_nodes(tree, info.toc.contents)
    console.print(tree)
    console.print()

    return info
