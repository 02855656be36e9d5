#!/usr/bin/env python3
"""
format_detector.py
------------------
Classify a decoded CSV by its header row.

Exactly one of three formats is returned:

    - LEGACY_ENTRY:  first header cell is ``短歌`` and the header has ``メモ``
    - LEGACY_SERIES: first header cell is ``連作名`` and the header has ``説明``
    - NATIVE:        anything else

Native is the fallback, so a file is only treated as legacy when it
carries that format's exact header shape.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import List, Sequence

# --- Local imports ---
from tankacho.pipeline.configs.csv_configs import (
    LEGACY_ENTRY_FIRST_LABEL,
    LEGACY_ENTRY_MARKER_LABEL,
    LEGACY_SERIES_FIRST_LABEL,
    LEGACY_SERIES_MARKER_LABEL,
)


class CsvFormat(str, Enum):
    """
    CSV schemas understood by the importer.
    - NATIVE: This notebook's own export (round-trip capable)
    - LEGACY_ENTRY: Per-poem export of the predecessor app
    - LEGACY_SERIES: Per-series export of the predecessor app
    """

    NATIVE = "native"
    LEGACY_ENTRY = "legacy_entry"
    LEGACY_SERIES = "legacy_series"

    @classmethod
    def choices(cls) -> List[str]:
        return [fmt.value for fmt in cls]

    @property
    def display_name(self) -> str:
        display_map = {
            CsvFormat.NATIVE: "Native",
            CsvFormat.LEGACY_ENTRY: "Legacy entries",
            CsvFormat.LEGACY_SERIES: "Legacy series",
        }
        return display_map[self]


def _has_shape(header: Sequence[str], first_label: str, marker_label: str) -> bool:
    return bool(header) and header[0] == first_label and marker_label in header


def detect_format(header: Sequence[str]) -> CsvFormat:
    """
    Classify a CSV file from its header row.

    Args:
        header: First decoded row of the file

    Returns:
        The matching CsvFormat (NATIVE when no legacy shape matches)
    """
    if _has_shape(header, LEGACY_ENTRY_FIRST_LABEL, LEGACY_ENTRY_MARKER_LABEL):
        return CsvFormat.LEGACY_ENTRY
    if _has_shape(header, LEGACY_SERIES_FIRST_LABEL, LEGACY_SERIES_MARKER_LABEL):
        return CsvFormat.LEGACY_SERIES
    return CsvFormat.NATIVE
