"""Tests for tag parsers."""
from tankacho.utils.parsers import (
    join_native_tags,
    parse_form_tags,
    parse_legacy_labels,
    parse_native_tags,
)


class TestNativeTags:
    """Tests for the ;-separated native tags cell."""

    def test_split_and_trim(self):
        assert parse_native_tags("spring; haru ;;") == ["spring", "haru"]

    def test_empty(self):
        assert parse_native_tags("") == []
        assert parse_native_tags(None) == []

    def test_commas_are_not_separators(self):
        assert parse_native_tags("a,b;c") == ["a,b", "c"]

    def test_duplicates_kept(self):
        assert parse_native_tags("a;a") == ["a", "a"]

    def test_join_inverse(self):
        tags = ["spring", "haru"]
        assert parse_native_tags(join_native_tags(tags)) == tags


class TestLegacyLabels:
    """Tests for the legacy labels cell."""

    def test_mixed_separators(self):
        assert parse_legacy_labels("春、恋 旅,夏;秋") == ["春", "恋", "旅", "夏", "秋"]

    def test_runs_of_separators(self):
        assert parse_legacy_labels(" 春 、、 ,恋 ") == ["春", "恋"]

    def test_empty(self):
        assert parse_legacy_labels("") == []


class TestFormTags:
    """Tests for comma-separated form input."""

    def test_split(self):
        assert parse_form_tags("spring, haru ,") == ["spring", "haru"]

    def test_spaces_kept_inside_tag(self):
        assert parse_form_tags("cherry blossom") == ["cherry blossom"]
