"""Declarative base for the catalog tables.

- BaseModel: id (uuid7 unless the domain assigned one) and created_at
- BaseMutableModel: adds updated_at for rows that change after insert

Domain entities never inherit from these; repositories map between the
two. Generic ``Uuid`` and timezone-aware ``DateTime`` keep the same models
working on SQLite and PostgreSQL.
"""

from datetime import datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Shared id and created_at columns."""

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
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Adds updated_at; use through BaseMutableModel."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base for rows updated in place (id, created_at, updated_at)."""

    __abstract__ = True
