"""PMO: Paginated response envelope shared by every list endpoint."""
import math
from collections.abc import Sequence
from datetime import datetime
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageMeta(BaseModel):
    """Pagination metadata. Serialized as {total, page, limit, totalPages}."""

    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(ge=0)
    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    total_pages: int = Field(ge=0, alias="totalPages")


class Page(BaseModel, Generic[T]):
    """Standard list envelope: {data, meta}."""

    data: list[T]
    meta: PageMeta


def build_page(data: Sequence[T], total: int, page: int, limit: int) -> Page[T]:
    """Wrap one page of already-fetched items and the filtered total."""
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    return Page(
        data=list(data),
        meta=PageMeta(
            total=total,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit),
        ),
    )


class RecordResponse(BaseModel):
    """Id and audit columns present on every resource response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_by: UUID | None = None
    updated_by: UUID | None = None
    created_at: datetime
    updated_at: datetime
