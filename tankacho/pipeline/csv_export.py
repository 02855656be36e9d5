#!/usr/bin/env python3
"""
csv_export.py
-------------
Write the store's entries as native CSV.

The export always uses the native header and one row per entry in store
order. Tags are joined with ``;``. Cells are quoted when needed, so the
result imports back into an empty store unchanged.

Usage:
    from tankacho.pipeline.csv_export import export_csv, export_csv_file

    text = export_csv(store)
    stats = export_csv_file(store, EXPORT_DIR / DEFAULT_EXPORT_NAME)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Iterable, List, Optional, Union

# --- Local imports ---
from tankacho.core.cli import ExportStats
from tankacho.core.exceptions import ExportError
from tankacho.core.logging_manager import TankaLogger, safe_logger
from tankacho.dataclasses import TankaEntry
from tankacho.database.store import TankaStore
from tankacho.pipeline.configs.csv_configs import NATIVE_HEADER
from tankacho.pipeline.csv_codec import encode
from tankacho.utils.parsers import join_native_tags


def entry_to_row(entry: TankaEntry) -> List[str]:
    """One native CSV row for an entry."""
    return [
        entry.id,
        entry.date,
        *entry.lines,
        join_native_tags(entry.tags),
        entry.category,
        entry.series_id,
        entry.memo,
        entry.status.value,
    ]


def entries_to_rows(entries: Iterable[TankaEntry]) -> List[List[str]]:
    """Header plus one row per entry."""
    return [list(NATIVE_HEADER)] + [entry_to_row(e) for e in entries]


def export_csv(store: TankaStore) -> str:
    """Native CSV text for every entry in the store."""
    return encode(entries_to_rows(store.entries))


def export_csv_file(
    store: TankaStore,
    path: Union[str, Path],
    logger: Optional[TankaLogger] = None,
) -> ExportStats:
    """
    Write the native CSV export to a file.

    Args:
        store: Source store
        path: Output file (parent directories are created)
        logger: Optional logger

    Returns:
        ExportStats with the number of entries written

    Raises:
        ExportError: If the file cannot be written
    """
    path = Path(path)
    stats = ExportStats(output_path=path)
    text = export_csv(store)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        safe_logger(logger).log_error(e, {"operation": "export_csv", "path": str(path)})
        raise ExportError(f"Failed to write export {path}: {e}") from e

    stats.entries_exported = len(store)
    safe_logger(logger).log_operation("export_csv", stats.to_dict())
    return stats
