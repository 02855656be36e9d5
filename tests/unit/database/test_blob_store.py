"""Tests for the blob store backends."""
import pytest
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from tankacho.core.exceptions import PersistenceError
from tankacho.database import MemoryBlobStore, SqlBlobStore, TankaStore


class TestMemoryBlobStore:
    """Tests for MemoryBlobStore."""

    def test_get_missing(self):
        assert MemoryBlobStore().get("tankaEntries") is None

    def test_set_and_get(self):
        blobs = MemoryBlobStore()
        blobs.set("a", "[]")
        assert blobs.get("a") == "[]"

    def test_set_many(self):
        blobs = MemoryBlobStore({"a": "old"})
        blobs.set_many({"a": "1", "b": "2"})
        assert blobs.blobs == {"a": "1", "b": "2"}


class TestSqlBlobStore:
    """Tests for the SQLite backend."""

    def test_creates_database_file(self, tmp_path):
        db_path = tmp_path / "sub" / "tankacho.db"
        blobs = SqlBlobStore(db_path)
        try:
            assert db_path.exists()
        finally:
            blobs.dispose()

    def test_get_missing(self, sql_blobs):
        assert sql_blobs.get("seriesList") is None

    def test_overwrite(self, sql_blobs):
        sql_blobs.set("tankaEntries", "[1]")
        sql_blobs.set("tankaEntries", "[2]")
        assert sql_blobs.get("tankaEntries") == "[2]"

    def test_unicode_payload(self, sql_blobs):
        sql_blobs.set("tankaEntries", '["春の夜の"]')
        assert sql_blobs.get("tankaEntries") == '["春の夜の"]'

    def test_persists_across_instances(self, tmp_path):
        db_path = tmp_path / "tankacho.db"
        first = SqlBlobStore(db_path)
        first.set_many({"tankaEntries": "[]", "seriesList": "[]"})
        first.dispose()

        second = SqlBlobStore(db_path)
        try:
            assert second.get("seriesList") == "[]"
        finally:
            second.dispose()

    def test_store_round_trip(self, sql_blobs, populated_store):
        """A saved store reloads identically from SQLite."""
        populated_store.blob_store = sql_blobs
        populated_store.save()

        reloaded = TankaStore(sql_blobs)
        reloaded.load()
        assert reloaded.entries == populated_store.entries
        assert reloaded.series == populated_store.series

    def test_sqlalchemy_errors_become_persistence_errors(self, sql_blobs):
        with patch.object(
            sql_blobs, "SessionLocal", side_effect=OperationalError("stmt", {}, Exception("locked"))
        ):
            with pytest.raises(PersistenceError) as exc_info:
                sql_blobs.get("tankaEntries")
        assert "Blob store operation failed" in str(exc_info.value)

    def test_bad_path_raises_persistence_error(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(PersistenceError):
            SqlBlobStore(blocker / "tankacho.db")
