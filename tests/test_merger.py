"""Tests for the spine walk and HTML merge."""

import pytest

from builders import DEFAULT_MANIFEST, build_opf, build_page
from epub2json.config import ConverterConfig
from epub2json.core.archive import EpubArchive
from epub2json.core.descriptor import parse_descriptor
from epub2json.core.manifest import ManifestIndex
from epub2json.core.merger import MergedDocument, merge_spine, read_spine
from epub2json.core.package import load_package
from epub2json.errors import (
    ErrorKind,
    MissingEntryError,
    MissingReferenceError,
    PolicyError,
)


@pytest.fixture
def merge_for(write_epub, book_files):
    """Merge the spine of the default book with overridden entries."""

    def _merge(**overrides):
        book_files.update(overrides)
        path = write_epub(book_files)
        with EpubArchive(path) as archive:
            package = load_package(archive, ConverterConfig())
            manifest = ManifestIndex.from_manifest(package.manifest)
            return merge_spine(archive, package, manifest, "xhtml")

    return _merge


def _opf(**kwargs) -> dict[str, str]:
    return {"OPS/package.opf": build_opf(**kwargs)}


class TestReadSpine:
    def test_linear_defaults_to_true(self):
        spine = parse_descriptor(build_opf().encode(), "package.opf", "package")

        items = read_spine(spine.require_first("spine"))

        assert [(i.idref, i.linear) for i in items] == [
            ("p1", True),
            ("p2", False),
            ("p3", True),
        ]


class TestMergedDocument:
    def test_head_fragments_are_deduplicated(self):
        merged = MergedDocument()
        merged.add_page(build_page("<p>a</p>", head='<meta charset="utf-8"/>').encode())
        merged.add_page(build_page("<p>b</p>", head='<meta charset="utf-8"/>').encode())

        assert merged.render().count('<meta charset="utf-8"/>') == 1
        assert merged.pages == 2

    def test_title_is_dropped_from_head(self):
        merged = MergedDocument()
        merged.add_page(build_page("<p>a</p>", title="Chapter 1").encode())

        assert "<title>" not in merged.render()

    def test_render_layout(self):
        merged = MergedDocument()
        merged.add_page(build_page("<p>a</p>", head='<meta charset="utf-8"/>').encode())

        assert merged.render() == "\n".join(
            [
                "<html>",
                "<head>",
                '<meta charset="utf-8"/>',
                "</head>",
                "<body>",
                "<p>a</p>",
                "</body>",
                "</html>",
            ]
        )

    def test_page_without_head(self):
        merged = MergedDocument()
        merged.add_page(b"<html><body><p>bare</p></body></html>")

        assert merged.body_fragments == ["<p>bare</p>"]
        assert list(merged.head_fragments) == []


class TestMergeSpine:
    def test_merges_linear_pages_in_order(self, merge_for):
        merged = merge_for()

        assert merged.body_fragments == [
            '<h1 id="a">Part One</h1>',
            '<p id="b">First page</p>',
            "<p>Third page</p>",
        ]
        assert merged.pages == 2

    def test_non_linear_page_is_excluded(self, merge_for):
        rendered = merge_for().render()

        assert "Second page" not in rendered
        assert rendered.index("First page") < rendered.index("Third page")

    def test_shared_head_elements_appear_once(self, merge_for):
        rendered = merge_for().render()

        assert rendered.count('<meta charset="utf-8"/>') == 1
        assert rendered.count("style.css") == 1

    def test_non_html_spine_item(self, merge_for):
        with pytest.raises(PolicyError) as exc_info:
            merge_for(**_opf(spine=[("p1", None), ("css", None)]))

        assert exc_info.value.message == "package.opf has non-HTML item in package.spine."
        assert exc_info.value.kind == ErrorKind.POLICY

    def test_page_outside_content_dir(self, merge_for):
        manifest = [
            ("ncx", "toc.ncx", "application/x-dtbncx+xml"),
            ("p1", "text/p1.xhtml", "application/xhtml+xml"),
        ]

        with pytest.raises(PolicyError) as exc_info:
            merge_for(**_opf(manifest=manifest, spine=[("p1", None)]))

        assert exc_info.value.message == (
            "package.opf has non-standard path 'text/p1.xhtml' in package.spine."
        )

    def test_prefix_lookalike_dir_is_rejected(self, merge_for):
        manifest = [
            ("ncx", "toc.ncx", "application/x-dtbncx+xml"),
            ("p1", "xhtml-old/p1.xhtml", "application/xhtml+xml"),
        ]

        with pytest.raises(PolicyError, match="non-standard path"):
            merge_for(**_opf(manifest=manifest, spine=[("p1", None)]))

    def test_unknown_idref(self, merge_for):
        with pytest.raises(MissingReferenceError, match="'p9'"):
            merge_for(**_opf(spine=[("p9", None)]))

    def test_non_linear_unknown_idref_is_never_resolved(self, merge_for):
        merged = merge_for(**_opf(spine=[("p1", None), ("p9", "no")]))

        assert merged.pages == 1

    def test_missing_page_file(self, merge_for, book_files):
        del book_files["OPS/xhtml/p3.xhtml"]

        with pytest.raises(MissingEntryError) as exc_info:
            merge_for()

        assert exc_info.value.message == "Could not find xhtml/p3.xhtml."

    def test_manifest_order_does_not_affect_merge_order(self, merge_for):
        manifest = list(reversed(DEFAULT_MANIFEST))

        merged = merge_for(**_opf(manifest=manifest))

        assert merged.body_fragments[-1] == "<p>Third page</p>"
