"""PMO: Document and media metadata schemas."""
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from pmo.models.enums import DocumentType, EntityType, MediaType
from pmo.schemas.common import RecordResponse


class DocumentFilters(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    documentable_type: EntityType | None = None
    documentable_id: UUID | None = None
    document_type: DocumentType | None = None
    category: str | None = Field(None, max_length=100)


class DocumentCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    documentable_type: EntityType
    documentable_id: UUID
    document_type: DocumentType = DocumentType.OTHER
    category: str | None = Field(None, max_length=100)
    file_name: str = Field(min_length=1, max_length=255)
    file_path: str = Field(min_length=1, max_length=1024)
    mime_type: str | None = Field(None, max_length=100)
    file_size: int | None = Field(None, ge=0)
    description: str | None = None
    metadata: dict[str, Any] | None = None


class DocumentUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    document_type: DocumentType | None = None
    category: str | None = Field(None, max_length=100)
    file_name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    metadata: dict[str, Any] | None = None


class DocumentResponse(RecordResponse):
    documentable_type: EntityType
    documentable_id: UUID
    document_type: DocumentType
    category: str | None = None
    file_name: str
    file_path: str
    mime_type: str | None = None
    file_size: int | None = None
    description: str | None = None
    metadata: dict[str, Any] | None = None


class MediaFilters(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    mediable_type: EntityType | None = None
    mediable_id: UUID | None = None
    media_type: MediaType | None = None
    title: str | None = Field(None, max_length=255)  # partial, case-insensitive


class MediaCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    mediable_type: EntityType
    mediable_id: UUID
    media_type: MediaType = MediaType.IMAGE
    title: str | None = Field(None, max_length=255)
    description: str | None = None
    alt_text: str | None = Field(None, max_length=255)
    file_name: str = Field(min_length=1, max_length=255)
    file_path: str = Field(min_length=1, max_length=1024)
    mime_type: str | None = Field(None, max_length=100)
    file_size: int | None = Field(None, ge=0)
    metadata: dict[str, Any] | None = None


class MediaUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    media_type: MediaType | None = None
    title: str | None = Field(None, max_length=255)
    description: str | None = None
    alt_text: str | None = Field(None, max_length=255)
    metadata: dict[str, Any] | None = None


class MediaResponse(RecordResponse):
    mediable_type: EntityType
    mediable_id: UUID
    media_type: MediaType
    title: str | None = None
    description: str | None = None
    alt_text: str | None = None
    file_name: str
    file_path: str
    mime_type: str | None = None
    file_size: int | None = None
    metadata: dict[str, Any] | None = None
