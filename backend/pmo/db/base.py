"""PMO: SQLAlchemy declarative base."""
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime, Uuid, inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class RecordMixin:
    """Id, audit and soft-delete columns shared by every PMO table."""

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    created_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    updated_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    deleted_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    @classmethod
    def column_attrs(cls) -> dict[str, str]:
        """Column name -> mapped attribute key (they differ for `metadata`)."""
        return {attr.columns[0].name: attr.key for attr in inspect(cls).column_attrs}

    def to_dict(self) -> dict[str, Any]:
        return {column: getattr(self, key) for column, key in self.column_attrs().items()}
