#!/usr/bin/env python3
"""
Pipeline configuration modules.

- csv_configs: Header labels, column positions and id templates for the
  three CSV schemas
"""

from tankacho.pipeline.configs.csv_configs import (
    NATIVE_HEADER,
    LEGACY_ENTRY_FIRST_LABEL,
    LEGACY_ENTRY_MARKER_LABEL,
    LEGACY_SERIES_FIRST_LABEL,
    LEGACY_SERIES_MARKER_LABEL,
    INCOMPLETE_MARKER,
    NativeColumns,
    LegacyEntryColumns,
    LegacySeriesColumns,
)

__all__ = [
    "NATIVE_HEADER",
    "LEGACY_ENTRY_FIRST_LABEL",
    "LEGACY_ENTRY_MARKER_LABEL",
    "LEGACY_SERIES_FIRST_LABEL",
    "LEGACY_SERIES_MARKER_LABEL",
    "INCOMPLETE_MARKER",
    "NativeColumns",
    "LegacyEntryColumns",
    "LegacySeriesColumns",
]
