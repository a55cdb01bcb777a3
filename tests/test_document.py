"""Tests for document module."""

from velo_assist.document import TextDocument
from velo_assist.models import Position, Range

CONTENT = "first line\nsecond line\nthird line"


def _range(start_line, start_char, end_line, end_char):
    return Range(start=Position(start_line, start_char), end=Position(end_line, end_char))


class TestGetText:
    """Tests for TextDocument.get_text."""

    def test_full_text(self):
        assert TextDocument(CONTENT).get_text() == CONTENT

    def test_single_line_selection(self):
        assert TextDocument(CONTENT).get_text(_range(1, 0, 1, 6)) == "second"

    def test_multi_line_selection(self):
        assert TextDocument(CONTENT).get_text(_range(0, 6, 2, 5)) == "line\nsecond line\nthird"

    def test_end_line_clamped(self):
        assert TextDocument(CONTENT).get_text(_range(1, 7, 10, 3)) == "line\nthi"

    def test_start_line_past_end_is_clamped(self):
        assert TextDocument("a\nb\nc").get_text(_range(5, 0, 7, 0)) == ""

    def test_character_past_end_of_line_is_clamped(self):
        assert TextDocument(CONTENT).get_text(_range(0, 6, 0, 100)) == "line"

    def test_start_after_end_is_empty(self):
        assert TextDocument(CONTENT).get_text(_range(2, 0, 1, 0)) == ""


class TestLines:
    """Tests for line helpers."""

    def test_line_count(self):
        assert TextDocument(CONTENT).line_count == 3
        assert TextDocument("").line_count == 1
        assert TextDocument("a\n").line_count == 2

    def test_line_at(self):
        document = TextDocument(CONTENT)

        assert document.line_at(1) == "second line"
        assert document.line_at(7) == ""

    def test_offset_and_position(self):
        document = TextDocument(CONTENT)

        assert document.offset_at(Position(1, 3)) == 14
        assert document.position_at(14) == Position(1, 3)

    def test_offset_clamps_line_and_character(self):
        document = TextDocument(CONTENT)

        assert document.offset_at(Position(0, 100)) == 10
        assert document.offset_at(Position(9, 0)) == 23
        assert document.clamp(Position(-1, -4)) == Position(0, 0)


class TestReplace:
    """Tests for TextDocument.replace."""

    def test_replace_selection(self):
        document = TextDocument(CONTENT)

        result = document.replace(_range(1, 0, 1, 6), "2nd")

        assert result == "first line\n2nd line\nthird line"

    def test_replace_keeps_following_lines_when_end_past_line(self):
        document = TextDocument("Text('a')\nline two\nline three")

        result = document.replace(_range(0, 0, 0, 100), "X")

        assert result == "X\nline two\nline three"

    def test_replace_matches_get_text_span(self):
        document = TextDocument(CONTENT)
        selection = _range(1, 7, 1, 50)

        result = document.replace(selection, "[" + document.get_text(selection) + "]")

        assert result == "first line\nsecond [line]\nthird line"


class TestFromPath:
    """Tests for TextDocument.from_path."""

    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "page.dart"
        path.write_text("Text('héllo')", encoding="utf-8")

        document = TextDocument.from_path(path)

        assert document.get_text() == "Text('héllo')"
        assert document.path == path
