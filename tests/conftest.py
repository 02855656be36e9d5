"""
conftest.py
-----------
Shared pytest fixtures for Tankachō tests.

Provides fixtures for:
- In-memory and SQLite-backed stores
- A fixed clock for deterministic ids and dates
- Sample CSV texts in each supported format
"""
import pytest
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

from tankacho.core.logging_manager import TankaLogger
from tankacho.database import MemoryBlobStore, SqlBlobStore, TankaStore
from tankacho.dataclasses import EntryStatus, TankaEntry


NATIVE_HEADER_LINE = "id,date,line1,line2,line3,line4,line5,tags,category,seriesId,memo,status"


# ----- Clock Fixtures -----

class FixedClock:
    """Callable clock that returns a settable moment."""

    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def __call__(self) -> datetime:
        return self.moment


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2024-03-01T09:30:00.123Z (epoch ms 1709285400123)."""
    return FixedClock(datetime(2024, 3, 1, 9, 30, 0, 123000, tzinfo=timezone.utc))


# ----- Store Fixtures -----

@pytest.fixture
def mock_logger():
    """MagicMock with the TankaLogger interface."""
    return MagicMock(spec=TankaLogger)


@pytest.fixture
def memory_blobs():
    """Empty dict-backed blob store."""
    return MemoryBlobStore()


@pytest.fixture
def store(memory_blobs, fixed_clock):
    """Empty store over a MemoryBlobStore with a fixed clock."""
    return TankaStore(memory_blobs, clock=fixed_clock)


@pytest.fixture
def sql_blobs(tmp_path):
    """SQLite blob store in a temporary directory."""
    blobs = SqlBlobStore(tmp_path / "tankacho.db")
    yield blobs
    blobs.dispose()


@pytest.fixture
def make_entry():
    """Factory for entries with sensible defaults."""

    def _make(entry_id, date="2024-01-01", lines=None, **kwargs):
        return TankaEntry(
            id=entry_id,
            date=date,
            lines=lines or ["x", "", "", "", ""],
            **kwargs,
        )

    return _make


@pytest.fixture
def populated_store(store, make_entry):
    """
    Store with two series and four entries:

    - a (2024-01-01, tags spring/haru, published, in s1)
    - b (2024-02-01, tag summer, in s1)
    - c (2024-03-01, tag Haruka, category Travel)
    - d (2024-01-15, in s2)
    """
    store.ensure_series("s1", "Spring set")
    store.ensure_series("s2", "Second")
    store.upsert_entry(make_entry(
        "a", "2024-01-01", ["春の夜の", "夢ばかりなる", "", "", ""],
        tags=["spring", "haru"], series_id="s1", status=EntryStatus.PUBLISHED,
    ))
    store.upsert_entry(make_entry("b", "2024-02-01", tags=["summer"], series_id="s1"))
    store.upsert_entry(make_entry(
        "c", "2024-03-01", tags=["Haruka"], category="Travel", memo="by the sea",
    ))
    store.upsert_entry(make_entry("d", "2024-01-15", series_id="s2"))
    return store


# ----- Sample CSV Fixtures -----

@pytest.fixture
def native_csv():
    """Native export with a quoted multi-line memo and a blank row."""
    return "\n".join([
        NATIVE_HEADER_LINE,
        'a,2024-01-01,x,,,,,spring,,,,unpublished',
        'b,2024-01-02,春の,夜の,,,,spring;haru,旅,,"memo, with comma",published',
        ",,,,,,,,,,,",
        'c,2024-01-03,one,two,,,,,,s-new,"two\nlines",',
    ])


@pytest.fixture
def legacy_entry_csv():
    """Old per-poem export: era dates, labels, completion marker."""
    return "\n".join([
        "短歌,メモ,ラベル,作成日,更新日,完成日",
        '"春の夜の\n夢ばかりなる\n手枕に",note,"春、恋 旅",2023年4月5日,,2023年4月6日',
        'ひとり,,,,2022年12月1日,(未完成)',
        ",,,,,",
    ])


@pytest.fixture
def legacy_series_csv():
    """Old per-series export: dashed dates, one poem per trailing column."""
    return "\n".join([
        "連作名,説明,作成日,更新日,1,2,3",
        '春の連作,desc,2023-4-5,,"一首目\n二行目",,三首目',
        ",desc only,2023-5-1,,poem",
    ])


@pytest.fixture
def write_csv(tmp_path):
    """Write text to a CSV file under tmp_path and return its path."""

    def _write(text, name="input.csv"):
        path = Path(tmp_path) / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
