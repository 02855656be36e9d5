#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers and operation statistics.

Functions:
    setup_logger: Initialize a TankaLogger for CLI operations

Classes:
    OperationStats: Base class for all statistics
    ImportStats: Counts for a CSV import (imported, duplicates, blank rows...)
    ExportStats: Counts for a CSV export

Usage:
    from tankacho.core.cli import setup_logger, ImportStats

    logger = setup_logger(log_dir, "import")
    stats = ImportStats(source_format="native")
    stats.entries_imported += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from tankacho.core.logging_manager import TankaLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> TankaLogger:
    """
    Setup logging for CLI operations.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier for logging (e.g. 'cli', 'import')

    Returns:
        Configured TankaLogger writing under ``log_dir/operations``
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return TankaLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for operation statistics.

    Attributes:
        start_time: Operation start timestamp
    """
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def duration(self) -> float:
        """Elapsed seconds since start_time (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        return f"{self.duration():.2f}s"

    def to_dict(self) -> Dict[str, Any]:
        return {"duration": self.duration()}


@dataclass
class ImportStats(OperationStats):
    """
    Statistics for a single CSV import.

    Attributes:
        source_format: Detected CSV format value ('native', 'legacy_entry'...)
        rows_read: Data rows in the file (header excluded)
        entries_imported: New entries added to the store
        series_created: Series created (explicitly or auto-vivified)
        duplicates_skipped: Entries dropped because their id already existed
        blank_rows: Rows skipped because every cell was empty
        invalid_rows: Rows skipped because a required cell was missing
    """
    source_format: str = ""
    rows_read: int = 0
    entries_imported: int = 0
    series_created: int = 0
    duplicates_skipped: int = 0
    blank_rows: int = 0
    invalid_rows: int = 0

    def __post_init__(self) -> None:
        for name in (
            "rows_read",
            "entries_imported",
            "series_created",
            "duplicates_skipped",
            "blank_rows",
            "invalid_rows",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def summary(self) -> str:
        """Get formatted summary with import metrics."""
        parts = [
            f"{self.entries_imported} entries imported",
            f"{self.series_created} series created",
            f"{self.duplicates_skipped} duplicates skipped",
            f"{self.blank_rows} blank rows",
        ]
        if self.invalid_rows:
            parts.append(f"{self.invalid_rows} invalid rows")
        if self.source_format:
            parts.insert(0, f"format={self.source_format}")
        parts.append(f"{self.duration():.2f}s")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "source_format": self.source_format,
            "rows_read": self.rows_read,
            "entries_imported": self.entries_imported,
            "series_created": self.series_created,
            "duplicates_skipped": self.duplicates_skipped,
            "blank_rows": self.blank_rows,
            "invalid_rows": self.invalid_rows,
        })
        return d


@dataclass
class ExportStats(OperationStats):
    """
    Statistics for a CSV export.

    Attributes:
        entries_exported: Number of entries written
        output_path: Destination file, or None when written to a stream
    """
    entries_exported: int = 0
    output_path: Optional[Path] = None

    def summary(self) -> str:
        target = str(self.output_path) if self.output_path else "stdout"
        return f"{self.entries_exported} entries exported to {target}, {self.duration():.2f}s"

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "entries_exported": self.entries_exported,
            "output_path": str(self.output_path) if self.output_path else None,
        })
        return d
