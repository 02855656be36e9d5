"""
Blob Model
----------

ORM model for the key-value table backing SqlBlobStore.

Classes:
    - Base: Declarative base
    - Blob: One named JSON payload (``tankaEntries``, ``seriesList``)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime, timezone

# --- Third party ---
from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for the store schema."""

    pass


class Blob(Base):
    """
    A named text payload, read and written whole.

    Attributes:
        name: Blob name (primary key)
        payload: Serialized JSON text
        updated_at: Timestamp of the last write
    """

    __tablename__ = "blobs"

    name: Mapped[str] = mapped_column(String(64), primary_key=True)
    payload: Mapped[str] = mapped_column(Text, nullable=False, default="")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Blob(name={self.name!r}, size={len(self.payload or '')})>"
