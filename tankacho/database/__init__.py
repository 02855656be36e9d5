"""
Persistence layer: the TankaStore and its blob backends.
"""
from .blob_store import BlobStore, MemoryBlobStore, SqlBlobStore
from .store import ENTRIES_BLOB, SERIES_BLOB, TankaStore

__all__ = [
    "BlobStore",
    "MemoryBlobStore",
    "SqlBlobStore",
    "TankaStore",
    "ENTRIES_BLOB",
    "SERIES_BLOB",
]
