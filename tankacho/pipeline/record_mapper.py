#!/usr/bin/env python3
"""
record_mapper.py
----------------
Turn decoded CSV rows into entry and series records.

One mapping function per CsvFormat, dispatched through a closed table
(``MAPPERS``). Adding a format means adding an enum member and one mapper.

The mapper never touches the store. It produces a MappedRecords bundle
that ``TankaStore.import_merge`` applies, so duplicate handling and series
auto-creation are identical for every format.

Row conventions shared by all formats:
    - Row 0 is the header and is ignored.
    - Rows whose cells are all ``""`` are skipped and counted as blank.
    - Poem text is split on line breaks and padded/truncated to five lines.

Id synthesis for legacy formats uses a per-import ``batch_id`` (normally the
import's epoch milliseconds) plus the row index, so ids never collide
within one import call.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

# --- Local imports ---
from tankacho.core.logging_manager import TankaLogger, safe_logger
from tankacho.dataclasses import EntryStatus, Series, TankaEntry
from tankacho.pipeline.configs.csv_configs import (
    INCOMPLETE_MARKER,
    LEGACY_ENTRY_ID_TEMPLATE,
    LEGACY_SERIES_ENTRY_ID_TEMPLATE,
    LEGACY_SERIES_ID_TEMPLATE,
    LegacyEntryColumns,
    LegacySeriesColumns,
    NativeColumns,
)
from tankacho.pipeline.format_detector import CsvFormat
from tankacho.utils.dates import normalize_dashed, normalize_era
from tankacho.utils.parsers import parse_legacy_labels, parse_native_tags
from tankacho.utils.txt import cell, is_blank_row, pad_lines, split_poem_lines


@dataclass
class MappedRecords:
    """
    Records produced from one CSV file.

    Attributes:
        source_format: Format the rows were mapped as
        entries: Entry records in file order
        series: Series declared by the file (legacy series format only);
            their ``entries`` lists are left empty and are rebuilt from
            each entry's ``series_id`` when merged
        rows_read: Data rows seen (header excluded)
        blank_rows: Data rows skipped as blank
        invalid_rows: Native rows skipped for having no id
    """
    source_format: CsvFormat
    entries: List[TankaEntry] = field(default_factory=list)
    series: List[Series] = field(default_factory=list)
    rows_read: int = 0
    blank_rows: int = 0
    invalid_rows: int = 0


RowMapper = Callable[
    [Sequence[Sequence[str]], str, MappedRecords, Optional[TankaLogger]], None
]


# ----- Native -----
def _map_native(
    rows: Sequence[Sequence[str]],
    batch_id: str,
    records: MappedRecords,
    logger: Optional[TankaLogger],
) -> None:
    for index, row in enumerate(rows[1:], start=1):
        if is_blank_row(row):
            records.blank_rows += 1
            continue
        if not cell(row, NativeColumns.ID).strip():
            safe_logger(logger).log_warning("Native row without id skipped", {"row": index})
            records.invalid_rows += 1
            continue

        raw_status = cell(row, NativeColumns.STATUS)
        status = EntryStatus.parse(raw_status)
        if status is None:
            safe_logger(logger).log_warning(
                "Unknown status, using unpublished",
                {"row": index, "status": raw_status},
            )
            status = EntryStatus.UNPUBLISHED

        records.entries.append(
            TankaEntry(
                id=cell(row, NativeColumns.ID),
                date=cell(row, NativeColumns.DATE),
                lines=pad_lines(
                    list(row[NativeColumns.FIRST_LINE:NativeColumns.LAST_LINE + 1])
                ),
                tags=parse_native_tags(cell(row, NativeColumns.TAGS)),
                category=cell(row, NativeColumns.CATEGORY),
                series_id=cell(row, NativeColumns.SERIES_ID),
                memo=cell(row, NativeColumns.MEMO),
                status=status,
            )
        )


# ----- Legacy entry export -----
def _legacy_entry_status(completed: str) -> EntryStatus:
    completed = completed.strip()
    if completed and completed != INCOMPLETE_MARKER:
        return EntryStatus.PUBLISHED
    return EntryStatus.UNPUBLISHED


def _map_legacy_entries(
    rows: Sequence[Sequence[str]],
    batch_id: str,
    records: MappedRecords,
    logger: Optional[TankaLogger],
) -> None:
    for index, row in enumerate(rows[1:], start=1):
        if is_blank_row(row):
            records.blank_rows += 1
            continue

        created = cell(row, LegacyEntryColumns.CREATED)
        updated = cell(row, LegacyEntryColumns.UPDATED)
        records.entries.append(
            TankaEntry(
                id=LEGACY_ENTRY_ID_TEMPLATE.format(batch=batch_id, row=index),
                date=normalize_era(created or updated or ""),
                lines=split_poem_lines(cell(row, LegacyEntryColumns.POEM)),
                tags=parse_legacy_labels(cell(row, LegacyEntryColumns.LABELS)),
                memo=cell(row, LegacyEntryColumns.MEMO),
                status=_legacy_entry_status(cell(row, LegacyEntryColumns.COMPLETED)),
            )
        )


# ----- Legacy series export -----
def _map_legacy_series(
    rows: Sequence[Sequence[str]],
    batch_id: str,
    records: MappedRecords,
    logger: Optional[TankaLogger],
) -> None:
    for index, row in enumerate(rows[1:], start=1):
        if is_blank_row(row):
            records.blank_rows += 1
            continue

        series_id = LEGACY_SERIES_ID_TEMPLATE.format(batch=batch_id, row=index)
        name = cell(row, LegacySeriesColumns.NAME)
        records.series.append(Series(id=series_id, name=name or series_id))

        created = cell(row, LegacySeriesColumns.CREATED)
        updated = cell(row, LegacySeriesColumns.UPDATED)
        date = normalize_dashed(created or updated or "")

        for column in range(LegacySeriesColumns.FIRST_POEM, len(row)):
            poem = row[column]
            if not poem or not poem.strip():
                continue
            offset = column - LegacySeriesColumns.FIRST_POEM + 1
            records.entries.append(
                TankaEntry(
                    id=LEGACY_SERIES_ENTRY_ID_TEMPLATE.format(
                        series_id=series_id, offset=offset
                    ),
                    date=date,
                    lines=split_poem_lines(poem),
                    series_id=series_id,
                )
            )


MAPPERS: Dict[CsvFormat, RowMapper] = {
    CsvFormat.NATIVE: _map_native,
    CsvFormat.LEGACY_ENTRY: _map_legacy_entries,
    CsvFormat.LEGACY_SERIES: _map_legacy_series,
}


def map_rows(
    source_format: CsvFormat,
    rows: Sequence[Sequence[str]],
    batch_id: str,
    logger: Optional[TankaLogger] = None,
) -> MappedRecords:
    """
    Map decoded rows (header first) to records for one format.

    Args:
        source_format: Result of detect_format on the header
        rows: All decoded rows, header included
        batch_id: Unique token for this import, used in synthesized ids
        logger: Optional logger for row-level warnings

    Returns:
        MappedRecords for the file
    """
    records = MappedRecords(source_format=source_format)
    records.rows_read = max(len(rows) - 1, 0)
    MAPPERS[source_format](rows, batch_id, records, logger)

    safe_logger(logger).log_debug(
        "Mapped CSV rows",
        {
            "format": source_format.value,
            "rows_read": records.rows_read,
            "entries": len(records.entries),
            "series": len(records.series),
            "blank_rows": records.blank_rows,
            "invalid_rows": records.invalid_rows,
        },
    )
    return records
