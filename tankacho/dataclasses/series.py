#!/usr/bin/env python3
"""
series.py
-------------------

Defines the Series record: a named, ordered grouping of entries (連作)
with an optional target size.
"""
from __future__ import annotations

# --- Standard Library ---
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List


@dataclass
class Series:
    """
    A named grouping of entries.

    Fields:
    - id:         Opaque unique identifier
    - name:       Display name
    - plan_count: Target number of entries (0 = no target)
    - entries:    Ordered entry ids, no duplicates
    """
    id:         str
    name:       str
    plan_count: int       = 0
    entries:    List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.entries = dedupe(self.entries)

    @property
    def progress(self) -> str:
        """``count/plan`` when a plan is set, otherwise just the count."""
        count = len(self.entries)
        if self.plan_count > 0:
            return f"{count}/{self.plan_count}"
        return str(count)

    def add(self, entry_id: str) -> bool:
        """Append an entry id unless already present. Returns True if added."""
        if entry_id in self.entries:
            return False
        self.entries.append(entry_id)
        return True

    def discard(self, entry_id: str) -> bool:
        """Remove an entry id if present. Returns True if removed."""
        if entry_id not in self.entries:
            return False
        self.entries = [eid for eid in self.entries if eid != entry_id]
        return True

    # ---- Serialization ----
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "planCount": self.plan_count,
            "entries": list(self.entries),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Series":
        try:
            plan_count = int(data.get("planCount") or 0)
        except (TypeError, ValueError):
            plan_count = 0
        return cls(
            id=str(data["id"]),
            name=data.get("name") or str(data["id"]),
            plan_count=max(plan_count, 0),
            entries=[str(eid) for eid in data.get("entries") or []],
        )


def dedupe(ids: Iterable[str]) -> List[str]:
    """Drop repeated ids, keeping the first occurrence of each."""
    seen = set()
    result = []
    for eid in ids:
        if eid not in seen:
            seen.add(eid)
            result.append(eid)
    return result
