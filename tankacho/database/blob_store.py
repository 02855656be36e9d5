#!/usr/bin/env python3
"""
blob_store.py
-------------
Named-blob persistence for the tanka store.

The store only ever needs two operations: read a whole blob by name and
write a whole blob by name. Two backends implement them:

    - SqlBlobStore: SQLite file through SQLAlchemy (the default)
    - MemoryBlobStore: a dict, for tests and embedding

All backend failures surface as PersistenceError.

Usage:
    from tankacho.database.blob_store import SqlBlobStore

    blobs = SqlBlobStore(Path("data/tankacho.db"))
    blobs.set("tankaEntries", "[]")
    text = blobs.get("tankaEntries")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional, Union

# --- Third party ---
from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import Session, sessionmaker

# --- Local imports ---
from tankacho.core.exceptions import PersistenceError
from tankacho.core.logging_manager import TankaLogger, safe_logger

from .decorators import handle_store_errors
from .models import Base, Blob


class BlobStore(ABC):
    """Whole-blob get/set by name."""

    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        """Return the blob's text, or None if it was never written."""

    @abstractmethod
    def set(self, name: str, payload: str) -> None:
        """Replace the blob's text."""

    def set_many(self, blobs: Mapping[str, str]) -> None:
        """Write several blobs. Backends may make this atomic."""
        for name, payload in blobs.items():
            self.set(name, payload)


class MemoryBlobStore(BlobStore):
    """Dict-backed blob store."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self.blobs: Dict[str, str] = dict(initial or {})

    def get(self, name: str) -> Optional[str]:
        return self.blobs.get(name)

    def set(self, name: str, payload: str) -> None:
        self.blobs[name] = payload


class SqlBlobStore(BlobStore):
    """
    SQLite-backed blob store.

    Attributes:
        db_path: Filesystem path to the SQLite database file
        engine: SQLAlchemy engine instance
        SessionLocal: SQLAlchemy session factory
    """

    def __init__(
        self,
        db_path: Union[str, Path],
        logger: Optional[TankaLogger] = None,
    ) -> None:
        """
        Open (and create if needed) the blob database.

        Args:
            db_path: Path to the SQLite file
            logger: Optional logger

        Raises:
            PersistenceError: If the database cannot be opened
        """
        self.db_path = Path(db_path).expanduser().resolve()
        self.logger = logger
        self._setup_engine()

    def _setup_engine(self) -> None:
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self.engine: Engine = create_engine(
                f"sqlite:///{self.db_path}",
                echo=False,
                future=True,
            )
            self.SessionLocal: sessionmaker = sessionmaker(
                bind=self.engine,
                autoflush=True,
                expire_on_commit=False,
                future=True,
            )
            Base.metadata.create_all(self.engine)
            safe_logger(self.logger).log_operation(
                "blob_store_init", {"db_path": str(self.db_path)}
            )
        except Exception as e:
            safe_logger(self.logger).log_error(e, {"operation": "blob_store_init"})
            raise PersistenceError(f"Blob store initialization failed: {e}") from e

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Transactional scope: commit on success, rollback on error."""
        session = self.SessionLocal()
        session_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        safe_logger(self.logger).log_debug("session_start", {"session_id": session_id})
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            safe_logger(self.logger).log_error(
                e, {"operation": "session_rollback", "session_id": session_id}
            )
            raise
        finally:
            session.close()

    @handle_store_errors
    def get(self, name: str) -> Optional[str]:
        with self.session_scope() as session:
            blob = session.get(Blob, name)
            return blob.payload if blob is not None else None

    @handle_store_errors
    def set(self, name: str, payload: str) -> None:
        self.set_many({name: payload})

    @handle_store_errors
    def set_many(self, blobs: Mapping[str, str]) -> None:
        """Write all blobs in one transaction."""
        with self.session_scope() as session:
            for name, payload in blobs.items():
                blob = session.get(Blob, name)
                if blob is None:
                    session.add(Blob(name=name, payload=payload))
                else:
                    blob.payload = payload
        safe_logger(self.logger).log_debug(
            "Blobs written", {"names": list(blobs.keys())}
        )

    def dispose(self) -> None:
        """Release the engine's connections."""
        self.engine.dispose()
