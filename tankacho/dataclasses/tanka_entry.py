#!/usr/bin/env python3
"""
tanka_entry.py
-------------------

Defines the TankaEntry record: one five-line poem plus its metadata.

Entries serialize to the same camelCase JSON the notebook has always
persisted (``seriesId``), so existing stores load unchanged.
"""
from __future__ import annotations

# --- Standard Library ---
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional

# --- Local ---
from tankacho.utils.txt import POEM_LINE_COUNT, pad_lines


class EntryStatus(str, Enum):
    """
    Publication status of an entry.
    - UNPUBLISHED: Draft or not yet sent anywhere (default)
    - PUBLISHED: Completed / published
    """

    UNPUBLISHED = "unpublished"
    PUBLISHED = "published"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available status values."""
        return [status.value for status in cls]

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["EntryStatus"]:
        """
        Look up a status by its value.

        Returns:
            Matching status, UNPUBLISHED for blank input, None if unknown
        """
        text = (value or "").strip()
        if not text:
            return cls.UNPUBLISHED
        for status in cls:
            if status.value == text:
                return status
        return None


@dataclass
class TankaEntry:
    """
    One poem record.

    Fields:
    - id:        Opaque unique identifier
    - date:      ``YYYY-MM-DD`` or an ISO-8601 timestamp
    - lines:     Exactly five poem lines (missing lines are "")
    - tags:      Trimmed, non-empty tags in input order
    - category:  Free text, may be empty
    - series_id: "" or the id of the one series holding this entry
    - memo:      Free text, may be empty
    - status:    EntryStatus
    """
    id:        str
    date:      str                = ""
    lines:     List[str]          = field(default_factory=lambda: [""] * POEM_LINE_COUNT)
    tags:      List[str]          = field(default_factory=list)
    category:  str                = ""
    series_id: str                = ""
    memo:      str                = ""
    status:    EntryStatus        = EntryStatus.UNPUBLISHED

    def __post_init__(self) -> None:
        self.lines = pad_lines(self.lines)
        self.tags = [t.strip() for t in self.tags if t and t.strip()]
        if not isinstance(self.status, EntryStatus):
            self.status = EntryStatus.parse(self.status) or EntryStatus.UNPUBLISHED

    # ---- Derived ----
    @property
    def title(self) -> str:
        """First line, used as a display title."""
        return self.lines[0]

    def contains_keyword(self, keyword: str) -> bool:
        """Case-sensitive substring match on any line or the memo."""
        return any(keyword in line for line in self.lines) or keyword in self.memo

    def copy(self, **changes: Any) -> "TankaEntry":
        """Independent copy with optional field changes."""
        data = {"lines": list(self.lines), "tags": list(self.tags)}
        data.update(changes)
        return replace(self, **data)

    # ---- Serialization ----
    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable dict in the persisted (camelCase) shape."""
        return {
            "id": self.id,
            "date": self.date,
            "lines": list(self.lines),
            "tags": list(self.tags),
            "category": self.category,
            "seriesId": self.series_id,
            "memo": self.memo,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TankaEntry":
        """Build an entry from its persisted dict, tolerating missing keys."""
        return cls(
            id=str(data["id"]),
            date=data.get("date") or "",
            lines=list(data.get("lines") or []),
            tags=list(data.get("tags") or []),
            category=data.get("category") or "",
            series_id=data.get("seriesId") or "",
            memo=data.get("memo") or "",
            status=EntryStatus.parse(data.get("status")) or EntryStatus.UNPUBLISHED,
        )
