"""
Shared helpers for the CLI commands: opening the store from the click context
and one-line entry rendering.
"""
from __future__ import annotations

import click

from tankacho.database import SqlBlobStore, TankaStore
from tankacho.dataclasses import TankaEntry


def open_store(ctx: click.Context) -> TankaStore:
    """
    Return the store for this invocation, loading it on first use.

    The store lives on ``ctx.obj["store"]`` so tests can inject one backed by
    a MemoryBlobStore. Otherwise an SqlBlobStore is opened at
    ``ctx.obj["store_path"]`` and disposed when the context closes.
    """
    obj = ctx.ensure_object(dict)
    store = obj.get("store")
    if store is not None:
        return store

    logger = obj.get("logger")
    blobs = SqlBlobStore(obj["store_path"], logger=logger)
    ctx.call_on_close(blobs.dispose)
    store = TankaStore(blobs, logger=logger)
    store.load()
    obj["store"] = store
    return store


def format_entry(entry: TankaEntry) -> str:
    """``id  date  status  first line  [tags]`` on one line."""
    poem = " / ".join(line for line in entry.lines if line)
    parts = [entry.id, entry.date or "-", entry.status.value, poem]
    if entry.tags:
        parts.append("[" + ", ".join(entry.tags) + "]")
    if entry.series_id:
        parts.append(f"<{entry.series_id}>")
    return "  ".join(parts)
