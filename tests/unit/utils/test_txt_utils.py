"""Tests for poem text and row helpers."""
from tankacho.utils.txt import (
    POEM_LINE_COUNT,
    cell,
    is_blank_row,
    pad_lines,
    split_form_text,
    split_poem_lines,
)


class TestSplitPoemLines:
    """Tests for split_poem_lines."""

    def test_pads_to_five(self):
        assert split_poem_lines("a\nb") == ["a", "b", "", "", ""]

    def test_truncates_beyond_five(self):
        assert split_poem_lines("1\n2\n3\n4\n5\n6\n7") == ["1", "2", "3", "4", "5"]

    def test_crlf(self):
        assert split_poem_lines("a\r\nb")[:2] == ["a", "b"]

    def test_empty(self):
        assert split_poem_lines("") == [""] * POEM_LINE_COUNT
        assert split_poem_lines(None) == [""] * POEM_LINE_COUNT


class TestPadLines:
    """Tests for pad_lines."""

    def test_none_becomes_empty(self):
        assert pad_lines([None, "b"]) == ["", "b", "", "", ""]

    def test_exact_length_unchanged(self):
        lines = ["1", "2", "3", "4", "5"]
        assert pad_lines(lines) == lines


class TestRowHelpers:
    """Tests for is_blank_row and cell."""

    def test_blank_rows(self):
        assert is_blank_row([])
        assert is_blank_row(["", "", ""])

    def test_whitespace_is_not_blank(self):
        """Only cells that are exactly empty count as blank."""
        assert not is_blank_row(["", " "])

    def test_cell_short_row(self):
        assert cell(["a"], 3) == ""
        assert cell(["a"], 0) == "a"


class TestSplitFormText:
    """Tests for split_form_text."""

    def test_trims_without_padding(self):
        assert split_form_text("  春の夜の \n夢") == ["春の夜の", "夢"]
