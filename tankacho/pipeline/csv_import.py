#!/usr/bin/env python3
"""
csv_import.py
-------------
Import CSV text or files into a TankaStore.

The import path is the same for every schema:

    text -> decode -> detect_format(header) -> map_rows -> import_merge

The importer is lenient. Malformed quoting, blank rows, rows without an id
and id collisions are all absorbed and reported through ImportStats. Only
problems with the input as a whole (unreadable file, undecodable bytes)
raise CsvImportError.

Usage:
    from tankacho.pipeline.csv_import import import_csv_file

    stats = import_csv_file(store, Path("tanka.csv"), logger=logger)
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import time
from pathlib import Path
from typing import Optional, Union

# --- Local imports ---
from tankacho.core.cli import ImportStats
from tankacho.core.exceptions import CsvImportError
from tankacho.core.logging_manager import TankaLogger, safe_logger
from tankacho.database.store import TankaStore
from tankacho.pipeline.csv_codec import decode
from tankacho.pipeline.format_detector import detect_format
from tankacho.pipeline.record_mapper import map_rows


def make_batch_id(store: TankaStore, millis: Optional[int] = None) -> str:
    """
    Pick the token used in ids synthesized for one import.

    Starts from the current epoch milliseconds and moves forward until no
    stored entry or series already uses ids derived from it.

    Args:
        store: Store the records will be merged into
        millis: Starting value (defaults to now)

    Returns:
        Batch id as a decimal string
    """
    batch = int(time.time() * 1000) if millis is None else millis
    while _batch_in_use(store, str(batch)):
        batch += 1
    return str(batch)


def _batch_in_use(store: TankaStore, batch: str) -> bool:
    entry_prefix = f"import-{batch}-"
    series_prefix = f"series-{batch}-"
    return any(e.id.startswith(entry_prefix) for e in store.entries) or any(
        s.id.startswith(series_prefix) for s in store.series
    )


def import_csv(
    store: TankaStore,
    text: str,
    logger: Optional[TankaLogger] = None,
    batch_id: Optional[str] = None,
) -> ImportStats:
    """
    Import CSV text into the store.

    Args:
        store: Target store (saved afterwards when its autosave is on)
        text: Full CSV file contents
        logger: Optional logger
        batch_id: Token for synthesized legacy ids (see make_batch_id)

    Returns:
        ImportStats for the import; empty input yields all-zero stats
    """
    log = safe_logger(logger)
    rows = decode(text)
    if not rows or rows == [[""]]:
        log.log_info("Empty CSV input, nothing imported")
        return ImportStats()

    source_format = detect_format(rows[0])
    batch = batch_id or make_batch_id(store)
    log.log_info(
        "Importing CSV",
        {"format": source_format.value, "rows": len(rows) - 1, "batch": batch},
    )

    records = map_rows(source_format, rows, batch, logger=logger)
    stats = store.import_merge(records)
    log.log_operation("import_csv", stats.to_dict())
    return stats


def import_csv_file(
    store: TankaStore,
    path: Union[str, Path],
    logger: Optional[TankaLogger] = None,
    encoding: str = "utf-8-sig",
) -> ImportStats:
    """
    Read a CSV file and import it.

    Args:
        store: Target store
        path: CSV file
        logger: Optional logger
        encoding: Text encoding (default tolerates a UTF-8 BOM)

    Returns:
        ImportStats for the import

    Raises:
        CsvImportError: If the file cannot be read or decoded
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise CsvImportError(f"Import file not found: {path}") from e
    except UnicodeDecodeError as e:
        raise CsvImportError(f"Import file is not valid {encoding}: {path}") from e
    except OSError as e:
        raise CsvImportError(f"Cannot read import file {path}: {e}") from e

    safe_logger(logger).log_debug("Read import file", {"path": str(path), "chars": len(text)})
    return import_csv(store, text, logger=logger)
