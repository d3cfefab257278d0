"""Tests for the region parser."""

import pytest

from regionkeeper.errors import MalformedRegionError
from regionkeeper.regions.document import Document, Segment
from regionkeeper.regions.lexicon import CommentLexicon
from regionkeeper.regions.oracle import Marker
from regionkeeper.regions.parser import RegionParser


class TestLossless:
    @pytest.mark.parametrize("text", [
        "",
        "int x = 1;\n",
        "/* plain comment */\nint y; // trailing\n",
        "a /* never closed",
        "// [[regionA]] is not a marker\n",
        "line\r\nother\r\n// c\r\n",
    ])
    def test_text_without_markers(self, java_parser, text):
        doc = java_parser.parse(text)
        assert doc.text == text
        assert doc.regions == []

    def test_plain_text_is_single_segment(self, java_parser):
        doc = java_parser.parse("x\n// note\ny\n")
        assert doc.segments == (Segment("x\n// note\ny\n", start=0, end=12),)

    def test_empty_text(self, java_parser):
        doc = java_parser.parse("")
        assert len(doc) == 0
        assert doc.text == ""

    def test_text_with_regions(self, java_parser):
        text = "a\n// [[region:A]]\nold\n// [[end]]\nb\n/* [[region:B]] */x/* [[end:B]] */"
        assert java_parser.parse(text).text == text


class TestRegions:
    def test_single_line_markers(self, java_parser):
        doc = java_parser.parse("a\n// [[region:A]]\nold\n// [[end]]\nb\n")
        plain_before, region, plain_after = doc.segments
        assert plain_before.content == "a\n"
        assert region.id == "A"
        assert region.content == "old\n"
        assert region.start_marker == "// [[region:A]]\n"
        assert region.end_marker == "// [[end]]\n"
        assert plain_after.content == "b\n"

    def test_source_bounds(self, java_parser):
        text = "a\n// [[region:A]]\nold\n// [[end]]\nb\n"
        region = java_parser.parse(text).get("A")
        assert region.start == 2
        assert text[region.start:region.end] == region.text

    def test_marker_at_end_of_input(self, java_parser):
        doc = java_parser.parse("// [[region:A]]\nold\n// [[end]]")
        assert len(doc) == 1
        assert doc.segments[0].end_marker == "// [[end]]"

    def test_multiline_markers(self, java_parser):
        doc = java_parser.parse("/* [[region:X]] */body/* [[end:X]] */")
        region = doc.get("X")
        assert region.content == "body"
        assert region.start_marker == "/* [[region:X]] */"

    def test_comments_inside_region_are_content(self, java_parser):
        doc = java_parser.parse("// [[region:A]]\n/* keep */\n// also\n// [[end]]\n")
        assert doc.get("A").content == "/* keep */\n// also\n"

    def test_sequential_regions(self, java_parser):
        doc = java_parser.parse(
            "// [[region:A]]\na\n// [[end]]\n"
            "// [[region:B]]\nb\n// [[end]]\n"
        )
        assert doc.ids == ["A", "B"]
        assert len(doc) == 2

    def test_crlf_line_endings(self, java_parser):
        text = "// [[region:A]]\r\nx\r\n// [[end]]\r\n"
        doc = java_parser.parse(text)
        assert doc.get("A").content == "x\r\n"
        assert doc.text == text

    def test_protected_oracle(self, xml_parser):
        text = "<a>\n<!-- PROTECTED REGION ID(x.y) START -->\n<b/>\n<!-- PROTECTED REGION END -->\n</a>\n"
        region = xml_parser.parse(text).get("x.y")
        assert region.content == "\n<b/>\n"
        assert region.end_marker == "<!-- PROTECTED REGION END -->"

    def test_longest_comment_token(self):
        lexicon = CommentLexicon().add_comment("#").add_comment("#!", "!#")
        parser = RegionParser(lexicon)
        doc = parser.parse("#! [[region:A]] !#x#! [[end]] !#")
        assert doc.get("A").content == "x"

    def test_same_id_twice_in_sequence_is_parsed(self, java_parser):
        doc = java_parser.parse(
            "// [[region:A]]\nx\n// [[end]]\n// [[region:A]]\ny\n// [[end]]\n"
        )
        assert doc.ids == ["A", "A"]


class TestMalformed:
    def test_unterminated_region(self, java_parser):
        with pytest.raises(MalformedRegionError, match="unterminated") as exc_info:
            java_parser.parse("// [[region:B]]\nbody")
        assert exc_info.value.line == 1

    def test_end_without_start(self, java_parser):
        with pytest.raises(MalformedRegionError, match="without a matching start") as exc_info:
            java_parser.parse("x\n// [[end]]\n")
        assert exc_info.value.line == 2

    def test_mismatched_end_id(self, java_parser):
        with pytest.raises(MalformedRegionError, match="does not match"):
            java_parser.parse("// [[region:A]]\n// [[end:B]]\n")

    def test_start_while_open(self, java_parser):
        with pytest.raises(MalformedRegionError, match="still open") as exc_info:
            java_parser.parse("// [[region:A]]\n// [[region:B]]\n// [[end]]\n// [[end]]\n")
        assert exc_info.value.line == 2

    def test_line_numbers_count_lone_cr(self, java_parser):
        with pytest.raises(MalformedRegionError) as exc_info:
            java_parser.parse("a\rb\r// [[end]]\r")
        assert exc_info.value.line == 3

    def test_line_numbers_count_crlf_once(self, java_parser):
        with pytest.raises(MalformedRegionError) as exc_info:
            java_parser.parse("a\r\n// [[end]]\r\n")
        assert exc_info.value.line == 2

    def test_is_value_error(self, java_parser):
        with pytest.raises(ValueError):
            java_parser.parse("// [[end]]")


class TestConstruction:
    def test_empty_lexicon_rejected(self):
        with pytest.raises(ValueError):
            RegionParser(CommentLexicon())

    def test_for_preset(self):
        parser = RegionParser.for_preset("hash", oracle="protected", inverse=True)
        assert parser.inverse
        assert parser.name == "hash"

    def test_document_is_immutable(self, java_parser):
        doc = java_parser.parse("x")
        assert isinstance(doc, Document)
        with pytest.raises(AttributeError):
            doc.segments = ()


class _NoIdOracle:
    def classify(self, body):
        return Marker("start") if body.strip() == "open" else None


def test_start_marker_needs_id():
    parser = RegionParser(CommentLexicon().add_comment("#"), _NoIdOracle())
    with pytest.raises(MalformedRegionError, match="without id"):
        parser.parse("x\n# open\n")


class _MiddleOracle:
    def classify(self, body):
        return Marker("middle", "x") if body.strip() == "middle" else None


def test_unknown_marker_kind_rejected():
    parser = RegionParser(CommentLexicon().add_comment("#"), _MiddleOracle())
    with pytest.raises(MalformedRegionError, match="unknown marker kind 'middle'") as exc_info:
        parser.parse("x\n# middle\n")
    assert exc_info.value.line == 2
