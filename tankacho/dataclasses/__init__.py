"""Record types for the tanka store: entries and series."""

from .tanka_entry import EntryStatus, TankaEntry
from .series import Series

__all__ = ["EntryStatus", "TankaEntry", "Series"]
