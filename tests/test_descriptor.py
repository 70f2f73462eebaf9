"""Tests for the XML descriptor node abstraction."""

import pytest

from builders import build_opf
from epub2json.core.descriptor import parse_descriptor
from epub2json.errors import ErrorKind, SchemaError


def _package(**kwargs):
    return parse_descriptor(build_opf(**kwargs).encode(), "package.opf", "package")


class TestParseDescriptor:
    def test_root_node_path_is_root_name(self):
        package = _package()

        assert package.name == "package"
        assert package.path == "package"

    def test_wrong_root_element_is_schema_error(self):
        with pytest.raises(SchemaError) as exc_info:
            parse_descriptor(b"<ncx/>", "package.opf", "package")

        assert exc_info.value.message == "package.opf is missing required package element."
        assert exc_info.value.kind == ErrorKind.SCHEMA

    def test_malformed_xml_is_schema_error(self):
        with pytest.raises(SchemaError, match="not well-formed"):
            parse_descriptor(b"<package><metadata></package>", "package.opf", "package")


class TestDescriptorNode:
    def test_children_match_local_name_across_namespaces(self):
        metadata = _package().require_first("metadata")

        creators = metadata.children("dc:creator")

        assert [c.text for c in creators] == ["Ada Lovelace", "Charles Babbage"]
        assert creators[0].path == "package.metadata.dc:creator"

    def test_singleton_is_still_a_list(self):
        package = _package()

        assert len(package.children("spine")) == 1

    def test_unfiltered_children_keep_document_order(self):
        package = _package()

        assert [c.name for c in package.children()] == ["metadata", "manifest", "spine"]

    def test_attr_lookup(self):
        spine = _package().require_first("spine")

        assert spine.attr("toc") == "ncx"
        assert spine.attr("page-progression-direction") is None

    def test_require_names_full_path(self):
        metadata = _package(omit=("dc:title",)).require_first("metadata")

        with pytest.raises(SchemaError) as exc_info:
            metadata.require("dc:title")

        assert exc_info.value.message == (
            "package.opf is missing required package.metadata.dc:title element."
        )
        assert exc_info.value.path == "package.metadata.dc:title"

    def test_require_attr_names_attribute(self):
        spine = _package(toc_id=None).require_first("spine")

        with pytest.raises(SchemaError) as exc_info:
            spine.require_attr("toc")

        assert exc_info.value.message == (
            "package.opf is missing required package.spine@toc attribute."
        )

    def test_text_is_stripped(self):
        node = parse_descriptor(
            b"<ncx><docTitle><text>\n  Title \n</text></docTitle></ncx>", "toc.ncx", "ncx"
        )

        assert node.require_first("docTitle").require_first("text").text == "Title"
