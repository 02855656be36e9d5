"""
Tankachō Package
================

A personal tanka notebook: five-line poem entries, named series (連作) of
entries, and CSV interchange with earlier tools.

The package keeps every entry and series in a single in-memory store that
preserves the links between the two collections, persists both collections
as JSON blobs in SQLite, and reads/writes CSV in three schemas (the native
export plus two legacy formats produced by a predecessor app).

Main Components:
    - pipeline: CSV codec, format detection, record mapping, import/export, CLI
    - database: TankaStore and the blob persistence backends
    - dataclasses: TankaEntry and Series records
    - core: Logging, exceptions, validation, paths
    - utils: Date normalization and text/tag parsing helpers

Primary Interfaces:
    - tankacho.pipeline.cli: Command-line interface (``tanka``)
    - tankacho.database.store.TankaStore: Main store interface

Example Usage:
    >>> from tankacho.database import TankaStore, MemoryBlobStore
    >>> from tankacho.pipeline.csv_import import import_csv
    >>> store = TankaStore(MemoryBlobStore())
    >>> stats = import_csv(store, text)
    >>> store.save()

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Tankacho Project"

from tankacho.database.store import TankaStore
from tankacho.core.paths import DATA_DIR, EXPORT_DIR, LOG_DIR, STORE_PATH

__all__ = [
    "TankaStore",
    "DATA_DIR",
    "EXPORT_DIR",
    "LOG_DIR",
    "STORE_PATH",
]
