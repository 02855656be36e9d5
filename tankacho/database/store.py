#!/usr/bin/env python3
"""
store.py
--------
The authoritative in-memory collection of entries and series.

TankaStore owns both collections and is the only place that mutates them,
so the links between them are maintained in one spot:

    1. Entry ids are unique; series ids are unique.
    2. An entry with a non-empty ``series_id`` is listed exactly once in
       that series' ``entries``.
    3. Every id listed in a series names an existing entry.
    4. An entry is listed by at most one series.

Operations:
    - upsert_entry / create_entry / edit_entry: form submission and edits
    - create_series / ensure_series: explicit and implicit series creation
    - set_deck_membership: replace a series' entry list wholesale; entries
      dropped from the list are unassigned, entries added are moved out of
      their previous series
    - query / entries_on: filtered, date-sorted views
    - import_merge: apply MappedRecords (first write wins on id collisions)
    - load / save: whole-collection persistence through a BlobStore

Persistence:
    Entries and series are stored as two JSON blobs, ``tankaEntries`` and
    ``seriesList``. Every mutation completes in memory before it is saved.
    With ``autosave=True`` (the default) each public mutation saves
    immediately afterwards.

Usage:
    from tankacho.database import TankaStore, SqlBlobStore

    store = TankaStore(SqlBlobStore(STORE_PATH), logger=logger)
    store.load()
    entry = store.create_entry(["春の夜の", "夢ばかりなる", "", "", ""])
    series = store.create_series("春", plan_count=10)
    store.set_deck_membership(series.id, [entry.id])
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from datetime import date, datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union

# --- Local imports ---
from tankacho.core.cli import ImportStats
from tankacho.core.exceptions import PersistenceError, StoreError
from tankacho.core.logging_manager import TankaLogger, safe_logger
from tankacho.core.validators import DataValidator
from tankacho.dataclasses import EntryStatus, Series, TankaEntry
from tankacho.dataclasses.series import dedupe
from tankacho.pipeline.record_mapper import MappedRecords
from tankacho.utils.dates import today_prefix
from tankacho.utils.txt import pad_lines

from .blob_store import BlobStore
from .decorators import log_store_operation

ENTRIES_BLOB = "tankaEntries"
SERIES_BLOB = "seriesList"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _iso_timestamp(moment: datetime) -> str:
    """ISO-8601 with millisecond precision and a ``Z`` suffix."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def _epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp()) * 1000 + moment.microsecond // 1000


class TankaStore:
    """
    Entries and series kept mutually consistent.

    Attributes:
        blob_store: Persistence backend
        logger: Optional TankaLogger
        autosave: Save after every public mutation
    """

    def __init__(
        self,
        blob_store: BlobStore,
        logger: Optional[TankaLogger] = None,
        autosave: bool = True,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """
        Create an empty store bound to a blob store.

        Args:
            blob_store: Backend used by load() and save()
            logger: Optional logger
            autosave: Save after every public mutation (default: True)
            clock: Source of "now" for new ids and dates
        """
        self.blob_store = blob_store
        self.logger = logger
        self.autosave = autosave
        self.clock = clock
        self._entries: Dict[str, TankaEntry] = {}
        self._series: Dict[str, Series] = {}

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def entries(self) -> List[TankaEntry]:
        """All entries in insertion order."""
        return list(self._entries.values())

    @property
    def series(self) -> List[Series]:
        """All series in insertion order."""
        return list(self._series.values())

    def get_entry(self, entry_id: str) -> Optional[TankaEntry]:
        return self._entries.get(entry_id)

    def get_series(self, series_id: str) -> Optional[Series]:
        return self._series.get(series_id)

    def __len__(self) -> int:
        return len(self._entries)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    @log_store_operation("load")
    def load(self) -> None:
        """
        Replace the in-memory collections with the persisted ones.

        Links inherited from older data are repaired on the way in (see
        ``_repair_links``). Missing blobs load as empty collections.

        Raises:
            PersistenceError: If a blob cannot be read or is not valid JSON
        """
        entries_data = self._read_blob(ENTRIES_BLOB)
        series_data = self._read_blob(SERIES_BLOB)

        try:
            entries = [TankaEntry.from_dict(item) for item in entries_data]
            series = [Series.from_dict(item) for item in series_data]
        except (KeyError, TypeError, AttributeError) as e:
            raise PersistenceError(f"Persisted records have an unexpected shape: {e}") from e

        self._entries = {}
        for entry in entries:
            self._entries.setdefault(entry.id, entry)
        self._series = {}
        for item in series:
            self._series.setdefault(item.id, item)

        repairs = self._repair_links()
        safe_logger(self.logger).log_info(
            "Store loaded",
            {
                "entries": len(self._entries),
                "series": len(self._series),
                "repairs": repairs,
            },
        )

    def _read_blob(self, name: str) -> list:
        payload = self.blob_store.get(name)
        if not payload:
            return []
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Blob '{name}' is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise PersistenceError(f"Blob '{name}' must hold a JSON array")
        return data

    @log_store_operation("save")
    def save(self) -> None:
        """
        Write both collections in full.

        Raises:
            PersistenceError: If the backend write fails
        """
        self.blob_store.set_many(
            {
                ENTRIES_BLOB: json.dumps(
                    [e.to_dict() for e in self._entries.values()], ensure_ascii=False
                ),
                SERIES_BLOB: json.dumps(
                    [s.to_dict() for s in self._series.values()], ensure_ascii=False
                ),
            }
        )

    def _commit(self) -> None:
        if self.autosave:
            self.save()

    def _repair_links(self) -> int:
        """
        Make loaded data satisfy the store invariants.

        Series lists are authoritative: dangling and repeated ids are
        dropped, an entry claimed by several series stays with the first,
        and each entry's ``series_id`` is rewritten to match its series.

        Returns:
            Number of changes made
        """
        repairs = 0
        owner: Dict[str, str] = {}
        for series in self._series.values():
            kept = []
            for entry_id in series.entries:
                if entry_id not in self._entries or entry_id in owner:
                    repairs += 1
                    continue
                owner[entry_id] = series.id
                kept.append(entry_id)
            series.entries = kept

        for entry in self._entries.values():
            expected = owner.get(entry.id, "")
            if entry.series_id != expected:
                entry.series_id = expected
                repairs += 1

        if repairs:
            safe_logger(self.logger).log_warning(
                "Repaired entry/series links on load", {"repairs": repairs}
            )
        return repairs

    # ------------------------------------------------------------------
    # Series
    # ------------------------------------------------------------------
    def ensure_series(self, series_id: str, fallback_name: str = "") -> Series:
        """
        Return the series with this id, creating an empty one if needed.

        Args:
            series_id: Series id to look up or create
            fallback_name: Name for a newly created series (defaults to id)

        Returns:
            The existing or new Series
        """
        series = self._series.get(series_id)
        if series is None:
            series = Series(id=series_id, name=fallback_name or series_id)
            self._series[series_id] = series
            safe_logger(self.logger).log_debug(
                "Series created", {"series_id": series_id, "name": series.name}
            )
        return series

    @log_store_operation("create_series")
    def create_series(self, name: str, plan_count: Union[int, str, None] = 0) -> Series:
        """
        Create a new, empty series.

        Args:
            name: Display name (required)
            plan_count: Target size; blank or non-numeric means no target

        Returns:
            The new Series (id ``series-<epoch ms>``)

        Raises:
            ValidationError: If the name is blank or the plan count negative
        """
        name = DataValidator.normalize_string(name)
        DataValidator.validate_required_fields({"name": name}, ["name"])
        count = DataValidator.normalize_plan_count(plan_count)

        series_id = self._fresh_id("series", self._series)
        series = Series(id=series_id, name=name, plan_count=count)
        self._series[series_id] = series
        self._commit()
        return series

    def series_progress(self, series_id: str) -> str:
        """``count/plan`` or ``count`` for a series."""
        series = self._require_series(series_id)
        return series.progress

    @log_store_operation("set_deck_membership")
    def set_deck_membership(self, series_id: str, entry_ids: Iterable[str]) -> Series:
        """
        Replace a series' entry list wholesale.

        The new list is deduplicated with order preserved, and ids with no
        entry are dropped. Entries removed from the list get an empty
        ``series_id``; entries added get this series' id and are removed
        from whichever series held them before.

        Args:
            series_id: Series to edit
            entry_ids: New ordered membership

        Returns:
            The updated Series

        Raises:
            StoreError: If the series does not exist
        """
        series = self._require_series(series_id)
        requested = dedupe(entry_ids)
        new_ids = [eid for eid in requested if eid in self._entries]
        if len(new_ids) != len(requested):
            safe_logger(self.logger).log_warning(
                "Unknown entry ids dropped from deck",
                {
                    "series_id": series_id,
                    "dropped": [eid for eid in requested if eid not in self._entries],
                },
            )

        keep = set(new_ids)
        for entry_id in series.entries:
            if entry_id not in keep:
                self._entries[entry_id].series_id = ""

        for entry_id in new_ids:
            entry = self._entries[entry_id]
            if entry.series_id and entry.series_id != series_id:
                previous = self._series.get(entry.series_id)
                if previous is not None:
                    previous.discard(entry_id)
            entry.series_id = series_id

        series.entries = new_ids
        self._commit()
        return series

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------
    @log_store_operation("upsert_entry")
    def upsert_entry(
        self, entry: TankaEntry, previous_series_id: Optional[str] = None
    ) -> TankaEntry:
        """
        Insert an entry or replace the stored entry with the same id.

        If the entry moves away from a series (``previous_series_id`` or the
        stored entry's series), it is removed from that series' list. If
        ``entry.series_id`` is set, the id is appended to that series'
        list unless already present.

        Args:
            entry: Entry to store
            previous_series_id: Series the entry belonged to before the edit

        Returns:
            The stored entry

        Raises:
            StoreError: If ``entry.series_id`` names an unknown series
        """
        self._link_entry(entry, previous_series_id)
        self._commit()
        return entry

    def _link_entry(self, entry: TankaEntry, previous_series_id: Optional[str]) -> None:
        target = entry.series_id
        if target and target not in self._series:
            raise StoreError(f"Unknown series: {target}")

        existing = self._entries.get(entry.id)
        previous = {previous_series_id or ""}
        if existing is not None:
            previous.add(existing.series_id)
        for series_id in previous:
            if series_id and series_id != target and series_id in self._series:
                self._series[series_id].discard(entry.id)

        self._entries[entry.id] = entry
        if target:
            self._series[target].add(entry.id)

    @log_store_operation("create_entry")
    def create_entry(
        self,
        lines: Sequence[str],
        tags: Optional[Sequence[str]] = None,
        category: str = "",
        series_id: str = "",
        memo: str = "",
    ) -> TankaEntry:
        """
        Create an entry from a form submission.

        Args:
            lines: Poem lines as entered (trimmed; padded to five here)
            tags: Tags (blank tags dropped)
            category: Optional category
            series_id: Optional existing series to join
            memo: Optional memo

        Returns:
            The new entry (id ``tanka-<epoch ms>``, ISO timestamp date)

        Raises:
            EntryValidationError: If every line is blank
            StoreError: If series_id names an unknown series
        """
        lines = list(lines)
        DataValidator.validate_poem_lines(lines)
        entry = TankaEntry(
            id=self._fresh_id("tanka", self._entries),
            date=_iso_timestamp(self.clock()),
            lines=pad_lines([line.strip() for line in lines]),
            tags=list(tags or []),
            category=DataValidator.normalize_string(category),
            series_id=series_id or "",
            memo=DataValidator.normalize_string(memo),
            status=EntryStatus.UNPUBLISHED,
        )
        self._link_entry(entry, None)
        self._commit()
        return entry

    @log_store_operation("edit_entry")
    def edit_entry(
        self,
        entry_id: str,
        lines: Optional[Sequence[str]] = None,
        tags: Optional[Sequence[str]] = None,
        category: Optional[str] = None,
        series_id: Optional[str] = None,
        memo: Optional[str] = None,
        status: Optional[EntryStatus] = None,
    ) -> TankaEntry:
        """
        Apply a form edit to an existing entry.

        Arguments left as None keep their current value. The date never
        changes.

        Raises:
            StoreError: If the entry or the target series does not exist
            EntryValidationError: If the new lines are all blank
        """
        existing = self._require_entry(entry_id)
        changes = {}
        if lines is not None:
            lines = list(lines)
            DataValidator.validate_poem_lines(lines)
            changes["lines"] = pad_lines([line.strip() for line in lines])
        if tags is not None:
            changes["tags"] = list(tags)
        if category is not None:
            changes["category"] = DataValidator.normalize_string(category)
        if series_id is not None:
            changes["series_id"] = series_id
        if memo is not None:
            changes["memo"] = DataValidator.normalize_string(memo)
        if status is not None:
            changes["status"] = status

        updated = existing.copy(**changes)
        self._link_entry(updated, existing.series_id)
        self._commit()
        return updated

    def _fresh_id(self, prefix: str, taken: Dict[str, object]) -> str:
        millis = _epoch_millis(self.clock())
        candidate = f"{prefix}-{millis}"
        while candidate in taken:
            millis += 1
            candidate = f"{prefix}-{millis}"
        return candidate

    def _require_entry(self, entry_id: str) -> TankaEntry:
        entry = self._entries.get(entry_id)
        if entry is None:
            raise StoreError(f"Entry not found: {entry_id}")
        return entry

    def _require_series(self, series_id: str) -> Series:
        series = self._series.get(series_id)
        if series is None:
            raise StoreError(f"Unknown series: {series_id}")
        return series

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def query(
        self,
        keyword: Optional[str] = None,
        tag: Optional[str] = None,
        category: Optional[str] = None,
        status: Union[EntryStatus, str, None] = None,
    ) -> List[TankaEntry]:
        """
        Filter entries and sort them newest first.

        Every non-empty argument must match:
            - keyword: case-sensitive substring of any line or the memo
            - tag: case-insensitive substring of any tag
            - category: case-insensitive substring of the category
            - status: exact status

        Entries with equal dates keep their insertion order.

        Returns:
            Matching entries, date descending
        """
        results = self.entries
        if keyword:
            results = [e for e in results if e.contains_keyword(keyword)]
        if tag:
            needle = tag.lower()
            results = [e for e in results if any(needle in t.lower() for t in e.tags)]
        if category:
            needle = category.lower()
            results = [e for e in results if needle in (e.category or "").lower()]
        if status:
            wanted = status.value if isinstance(status, EntryStatus) else status
            results = [e for e in results if e.status.value == wanted]
        return sorted(results, key=lambda e: e.date, reverse=True)

    def entries_on(self, day: Union[date, datetime, str]) -> List[TankaEntry]:
        """Entries whose date falls on the given day (``YYYY-MM-DD`` prefix)."""
        prefix = today_prefix(day)
        return [e for e in self._entries.values() if e.date.startswith(prefix)]

    def series_entries(self, series_id: str) -> List[TankaEntry]:
        """A series' entries in deck order."""
        series = self._require_series(series_id)
        return [self._entries[eid] for eid in series.entries]

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------
    @log_store_operation("import_merge")
    def import_merge(self, records: MappedRecords) -> ImportStats:
        """
        Add imported records without overwriting anything.

        Series are merged by id (existing series are kept as they are).
        Entries whose id already exists are dropped. An entry naming an
        unknown series creates that series, named after its id.

        Args:
            records: Output of record_mapper.map_rows

        Returns:
            ImportStats for the merge
        """
        stats = ImportStats(
            source_format=records.source_format.value,
            rows_read=records.rows_read,
            blank_rows=records.blank_rows,
            invalid_rows=records.invalid_rows,
        )

        for incoming in records.series:
            if incoming.id in self._series:
                continue
            self._series[incoming.id] = Series(
                id=incoming.id, name=incoming.name, plan_count=incoming.plan_count
            )
            stats.series_created += 1

        for entry in records.entries:
            if entry.id in self._entries:
                stats.duplicates_skipped += 1
                continue
            if entry.series_id and entry.series_id not in self._series:
                self.ensure_series(entry.series_id, entry.series_id)
                stats.series_created += 1
            self._link_entry(entry, None)
            stats.entries_imported += 1

        safe_logger(self.logger).log_operation("import_merge_stats", stats.to_dict())
        self._commit()
        return stats

    # ------------------------------------------------------------------
    # Integrity
    # ------------------------------------------------------------------
    def check_integrity(self) -> List[str]:
        """
        List violations of the store invariants.

        Returns:
            Human-readable problems; empty when the store is consistent
        """
        problems: List[str] = []
        owner: Dict[str, str] = {}

        for series in self._series.values():
            if len(set(series.entries)) != len(series.entries):
                problems.append(f"Series {series.id} lists an entry more than once")
            for entry_id in series.entries:
                if entry_id not in self._entries:
                    problems.append(f"Series {series.id} lists missing entry {entry_id}")
                elif entry_id in owner and owner[entry_id] != series.id:
                    problems.append(
                        f"Entry {entry_id} is listed by {owner[entry_id]} and {series.id}"
                    )
                else:
                    owner[entry_id] = series.id

        for entry in self._entries.values():
            if len(entry.lines) != 5:
                problems.append(f"Entry {entry.id} has {len(entry.lines)} lines")
            if any(not t.strip() for t in entry.tags):
                problems.append(f"Entry {entry.id} has a blank tag")
            if entry.series_id:
                series = self._series.get(entry.series_id)
                if series is None:
                    problems.append(f"Entry {entry.id} points to missing series {entry.series_id}")
                elif series.entries.count(entry.id) != 1:
                    problems.append(f"Entry {entry.id} is not listed by its series {entry.series_id}")
            elif entry.id in owner:
                problems.append(f"Entry {entry.id} is listed by {owner[entry.id]} but unassigned")

        return problems
