"""PMO: Document and Media metadata models (file bytes live in external storage)."""
import uuid

from sqlalchemy import JSON, BigInteger, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pmo.db.base import Base, RecordMixin


class Document(RecordMixin, Base):
    """Document attached to any owner via documentable_type + documentable_id."""

    __tablename__ = "documents"

    documentable_type: Mapped[str] = mapped_column(String(50), nullable=False)
    documentable_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    document_type: Mapped[str] = mapped_column(String(50), nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    mime_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    file_size: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    extra_metadata: Mapped[dict | None] = mapped_column("metadata", JSON, nullable=True)


class Media(RecordMixin, Base):
    """Image / video record attached to any owner via mediable_type + mediable_id."""

    __tablename__ = "media"

    mediable_type: Mapped[str] = mapped_column(String(50), nullable=False)
    mediable_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    media_type: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    alt_text: Mapped[str | None] = mapped_column(String(255), nullable=True)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    mime_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    file_size: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    extra_metadata: Mapped[dict | None] = mapped_column("metadata", JSON, nullable=True)
