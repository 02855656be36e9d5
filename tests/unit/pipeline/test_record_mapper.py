"""Tests for mapping decoded rows to entry and series records."""
from unittest.mock import MagicMock

from tankacho.core.logging_manager import TankaLogger
from tankacho.dataclasses import EntryStatus
from tankacho.pipeline.configs.csv_configs import NATIVE_HEADER
from tankacho.pipeline.csv_codec import decode
from tankacho.pipeline.format_detector import CsvFormat
from tankacho.pipeline.record_mapper import MAPPERS, map_rows


class TestNativeMapping:
    """Tests for the native format."""

    def test_fields_map_positionally(self, native_csv):
        records = map_rows(CsvFormat.NATIVE, decode(native_csv), "1")
        b = records.entries[1]
        assert b.id == "b"
        assert b.date == "2024-01-02"
        assert b.lines == ["春の", "夜の", "", "", ""]
        assert b.tags == ["spring", "haru"]
        assert b.category == "旅"
        assert b.memo == "memo, with comma"
        assert b.status is EntryStatus.PUBLISHED

    def test_blank_rows_counted(self, native_csv):
        records = map_rows(CsvFormat.NATIVE, decode(native_csv), "1")
        assert [e.id for e in records.entries] == ["a", "b", "c"]
        assert records.blank_rows == 1
        assert records.rows_read == 4

    def test_empty_status_defaults_unpublished(self, native_csv):
        records = map_rows(CsvFormat.NATIVE, decode(native_csv), "1")
        assert records.entries[2].status is EntryStatus.UNPUBLISHED
        assert records.entries[2].series_id == "s-new"
        assert records.entries[2].memo == "two\nlines"

    def test_unknown_status_warns(self):
        logger = MagicMock(spec=TankaLogger)
        rows = [NATIVE_HEADER, ["a", "", "x", "", "", "", "", "", "", "", "", "draft"]]
        records = map_rows(CsvFormat.NATIVE, rows, "1", logger=logger)
        assert records.entries[0].status is EntryStatus.UNPUBLISHED
        logger.log_warning.assert_called_once()

    def test_row_without_id_is_invalid(self):
        rows = [NATIVE_HEADER, ["", "2024-01-01", "x"]]
        records = map_rows(CsvFormat.NATIVE, rows, "1")
        assert records.entries == []
        assert records.invalid_rows == 1

    def test_short_row_padded(self):
        records = map_rows(CsvFormat.NATIVE, [NATIVE_HEADER, ["a", "2024-01-01", "x"]], "1")
        entry = records.entries[0]
        assert entry.lines == ["x", "", "", "", ""]
        assert entry.tags == []


class TestLegacyEntryMapping:
    """Tests for the old per-poem export."""

    def test_entries(self, legacy_entry_csv):
        records = map_rows(CsvFormat.LEGACY_ENTRY, decode(legacy_entry_csv), "99")
        first, second = records.entries

        assert first.id == "import-99-1"
        assert first.date == "2023-04-05"
        assert first.lines == ["春の夜の", "夢ばかりなる", "手枕に", "", ""]
        assert first.tags == ["春", "恋", "旅"]
        assert first.memo == "note"
        assert first.status is EntryStatus.PUBLISHED
        assert first.category == ""
        assert first.series_id == ""

        assert second.id == "import-99-2"
        assert second.date == "2022-12-01"
        assert second.status is EntryStatus.UNPUBLISHED
        assert records.blank_rows == 1

    def test_no_series_produced(self, legacy_entry_csv):
        assert map_rows(CsvFormat.LEGACY_ENTRY, decode(legacy_entry_csv), "1").series == []


class TestLegacySeriesMapping:
    """Tests for the old per-series export."""

    def test_series_and_entries(self, legacy_series_csv):
        records = map_rows(CsvFormat.LEGACY_SERIES, decode(legacy_series_csv), "7")

        assert [s.id for s in records.series] == ["series-7-1", "series-7-2"]
        assert records.series[0].name == "春の連作"
        assert records.series[1].name == "series-7-2"
        assert records.series[0].plan_count == 0

        ids = [e.id for e in records.entries]
        assert ids == [
            "import-series-7-1-1",
            "import-series-7-1-3",
            "import-series-7-2-1",
        ]
        first = records.entries[0]
        assert first.lines[:2] == ["一首目", "二行目"]
        assert first.date == "2023-04-05"
        assert first.series_id == "series-7-1"
        assert first.status is EntryStatus.UNPUBLISHED
        assert first.tags == []

    def test_series_entry_lists_left_for_merge(self, legacy_series_csv):
        records = map_rows(CsvFormat.LEGACY_SERIES, decode(legacy_series_csv), "7")
        assert all(s.entries == [] for s in records.series)


def test_every_format_has_a_mapper():
    assert set(MAPPERS) == set(CsvFormat)


def test_header_only():
    records = map_rows(CsvFormat.NATIVE, [NATIVE_HEADER], "1")
    assert records.rows_read == 0
    assert records.entries == []
