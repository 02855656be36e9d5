"""Tests for native CSV export."""
import pytest
from unittest.mock import MagicMock, patch

from tankacho.core.exceptions import ExportError
from tankacho.core.logging_manager import TankaLogger
from tankacho.pipeline.configs.csv_configs import NATIVE_HEADER
from tankacho.pipeline.csv_codec import decode
from tankacho.pipeline.csv_export import (
    entries_to_rows,
    entry_to_row,
    export_csv,
    export_csv_file,
)


class TestRows:
    """Tests for row building."""

    def test_entry_row(self, make_entry):
        entry = make_entry("a", tags=["spring", "haru"], series_id="s", memo="m")
        assert entry_to_row(entry) == [
            "a", "2024-01-01", "x", "", "", "", "", "spring;haru", "", "s", "m", "unpublished",
        ]

    def test_header_first(self, make_entry):
        rows = entries_to_rows([make_entry("a")])
        assert rows[0] == NATIVE_HEADER
        assert len(rows) == 2

    def test_empty_store_is_header_only(self, store):
        assert export_csv(store) == ",".join(NATIVE_HEADER)


class TestExportCsv:
    """Tests for export_csv."""

    def test_store_order(self, populated_store):
        rows = decode(export_csv(populated_store))
        assert [r[0] for r in rows[1:]] == ["a", "b", "c", "d"]

    def test_quotes_special_cells(self, store, make_entry):
        store.upsert_entry(make_entry("a", memo='comma, "quote"\nbreak'))
        text = export_csv(store)
        assert '"comma, ""quote""\nbreak"' in text
        assert decode(text)[1][10] == 'comma, "quote"\nbreak'


class TestExportCsvFile:
    """Tests for export_csv_file."""

    def test_writes_file(self, populated_store, tmp_path):
        logger = MagicMock(spec=TankaLogger)
        path = tmp_path / "exports" / "out.csv"
        stats = export_csv_file(populated_store, path, logger=logger)

        assert stats.entries_exported == 4
        assert stats.output_path == path
        assert path.read_text(encoding="utf-8") == export_csv(populated_store)
        logger.log_operation.assert_called_once()

    def test_write_failure(self, populated_store, tmp_path):
        with patch("pathlib.Path.write_text", side_effect=PermissionError("denied")):
            with pytest.raises(ExportError):
                export_csv_file(populated_store, tmp_path / "out.csv")
