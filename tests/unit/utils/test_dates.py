"""Tests for legacy date normalization."""
import pytest
from datetime import date, datetime

from tankacho.utils.dates import normalize_dashed, normalize_era, today_prefix


class TestNormalizeEra:
    """Tests for normalize_era."""

    def test_pads_month_and_day(self):
        assert normalize_era("2023年4月5日") == "2023-04-05"

    def test_already_padded(self):
        assert normalize_era("2023年11月25日") == "2023-11-25"

    def test_trailing_text_dropped(self):
        """The date is found inside a longer string."""
        assert normalize_era("2023年4月5日 10:30") == "2023-04-05"

    @pytest.mark.parametrize("value", ["not a date", "2023-04-05", "令和5年4月5日", ""])
    def test_non_matching_is_identity(self, value):
        assert normalize_era(value) == value


class TestNormalizeDashed:
    """Tests for normalize_dashed."""

    @pytest.mark.parametrize(
        "value,expected",
        [("2023-4-5", "2023-04-05"), ("2023-04-05", "2023-04-05"), ("2023-12-1", "2023-12-01")],
    )
    def test_pads(self, value, expected):
        assert normalize_dashed(value) == expected

    @pytest.mark.parametrize("value", ["yesterday", "2023/4/5", ""])
    def test_non_matching_is_identity(self, value):
        assert normalize_dashed(value) == value


class TestTodayPrefix:
    """Tests for today_prefix."""

    def test_date(self):
        assert today_prefix(date(2024, 3, 1)) == "2024-03-01"

    def test_datetime(self):
        assert today_prefix(datetime(2024, 3, 1, 23, 59)) == "2024-03-01"

    def test_iso_string(self):
        assert today_prefix("2024-03-01T09:30:00.000Z") == "2024-03-01"
