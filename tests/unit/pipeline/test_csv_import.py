"""Tests for import orchestration."""
import pytest
from unittest.mock import MagicMock

from tankacho.core.exceptions import CsvImportError
from tankacho.core.logging_manager import TankaLogger
from tankacho.pipeline.csv_import import import_csv, import_csv_file, make_batch_id


class TestMakeBatchId:
    """Tests for make_batch_id."""

    def test_uses_given_millis(self, store):
        assert make_batch_id(store, millis=1000) == "1000"

    def test_skips_batches_in_use(self, store, make_entry):
        store.upsert_entry(make_entry("import-1000-1"))
        store.ensure_series("series-1001-1")
        assert make_batch_id(store, millis=1000) == "1002"

    def test_defaults_to_now(self, store):
        assert make_batch_id(store).isdigit()


class TestImportCsv:
    """Tests for import_csv."""

    def test_native(self, store, native_csv):
        stats = import_csv(store, native_csv)
        assert stats.source_format == "native"
        assert stats.entries_imported == 3
        assert stats.blank_rows == 1
        assert stats.series_created == 1
        assert store.get_series("s-new").entries == ["c"]

    def test_legacy_entry_uses_batch(self, store, legacy_entry_csv):
        stats = import_csv(store, legacy_entry_csv, batch_id="42")
        assert stats.source_format == "legacy_entry"
        assert [e.id for e in store.entries] == ["import-42-1", "import-42-2"]

    def test_legacy_series(self, store, legacy_series_csv):
        stats = import_csv(store, legacy_series_csv, batch_id="5")
        assert stats.series_created == 2
        assert stats.entries_imported == 3
        assert store.get_series("series-5-1").entries == [
            "import-series-5-1-1",
            "import-series-5-1-3",
        ]
        assert store.check_integrity() == []

    def test_two_legacy_imports_do_not_collide(self, store, legacy_entry_csv):
        import_csv(store, legacy_entry_csv, batch_id="42")
        second = import_csv(store, legacy_entry_csv)
        assert second.entries_imported == 2
        assert len(store) == 4

    @pytest.mark.parametrize("text", ["", "id,date,line1"])
    def test_nothing_to_import(self, store, text):
        stats = import_csv(store, text)
        assert stats.entries_imported == 0
        assert len(store) == 0

    def test_logs_operation(self, store, native_csv):
        logger = MagicMock(spec=TankaLogger)
        import_csv(store, native_csv, logger=logger)
        operations = [c[0][0] for c in logger.log_operation.call_args_list]
        assert "import_csv" in operations


class TestImportCsvFile:
    """Tests for import_csv_file."""

    def test_reads_file(self, store, write_csv, native_csv):
        stats = import_csv_file(store, write_csv(native_csv))
        assert stats.entries_imported == 3

    def test_strips_bom(self, store, tmp_path, native_csv):
        path = tmp_path / "bom.csv"
        path.write_text("\ufeff" + native_csv, encoding="utf-8")
        import_csv_file(store, path)
        assert store.get_entry("a") is not None

    def test_missing_file(self, store, tmp_path):
        with pytest.raises(CsvImportError):
            import_csv_file(store, tmp_path / "missing.csv")

    def test_undecodable_file(self, store, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(CsvImportError):
            import_csv_file(store, path)
