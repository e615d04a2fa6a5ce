"""Declarative base and column types shared by the ORM models.

Two abstract bases:
- ``BaseModel``: UUIDv7 ``id`` and ``created_at``. Used by rows that are
  written once and then only have state columns flipped (sessions, reset
  tokens) or never change at all (audit log).
- ``BaseMutableModel``: adds ``updated_at`` for rows edited in place
  (users).

The schema targets PostgreSQL but sticks to portable types (``Uuid``,
``JSON``, ``String``) so the repositories run unchanged on SQLite.
ORM models stay in this package; the domain layer never imports them.
"""

from datetime import UTC, datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Dialect, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator
from uuid_extensions import uuid7


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


class UTCDateTime(TypeDecorator[datetime]):
    """DateTime(timezone=True) that always returns aware UTC datetimes.

    Backends that drop tzinfo (SQLite) hand back naive values; those are
    re-attached to UTC on read. Aware values are converted to UTC on write.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError("naive datetime is not allowed; use UTC")
        return value.astimezone(UTC)

    def process_result_value(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class BaseModel(DeclarativeBase):
    """Root of every table: time-ordered UUID key plus creation time.

    ``datetime`` annotations map to UTCDateTime by default.
    """

    __abstract__ = True

    type_annotation_map = {datetime: UTCDateTime}

    id: Mapped[PythonUUID] = mapped_column(Uuid, primary_key=True, default=uuid7)

    # Set in Python so sub-second precision matches on both backends.
    created_at: Mapped[datetime] = mapped_column(
        default=utc_now, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"


class BaseMutableModel(BaseModel):
    """Base for rows edited in place.

    ``updated_at`` refreshes on ORM flushes; bulk UPDATE statements set it
    themselves.
    """

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        default=utc_now, server_default=func.now(), onupdate=utc_now
    )
