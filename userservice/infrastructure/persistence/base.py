"""Declarative base and timestamp mixin for all database models.

- BaseModel: id (UUIDv7) + created_at, for immutable rows
- BaseMutableModel: adds updated_at, for rows that change after insert

Models are infrastructure detail; repositories map them to domain entities.
The generic ``Uuid`` and ``DateTime(timezone=True)`` types keep the schema
portable between PostgreSQL (production) and SQLite (tests).
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


def utc_now() -> datetime:
    """Timezone-aware current time (column default)."""
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from the database.

    SQLite drops tzinfo on ``DateTime(timezone=True)`` columns; PostgreSQL
    returns aware values which pass through converted to UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
        id: UUIDv7 primary key (time-ordered)
        created_at: Row creation timestamp (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class BaseMutableModel(BaseModel):
    """Base class for models updated after creation (adds updated_at)."""

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
        onupdate=utc_now,
    )

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data
