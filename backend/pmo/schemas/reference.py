"""PMO: Funding source and repair type schemas (reference data)."""
from typing import Any

from pydantic import BaseModel, Field

from pmo.schemas.common import RecordResponse


class ReferenceFilters(BaseModel):
    name: str | None = Field(None, max_length=255)  # partial, case-insensitive


class ReferenceCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    metadata: dict[str, Any] | None = None


class ReferenceUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    metadata: dict[str, Any] | None = None


class ReferenceResponse(RecordResponse):
    name: str
    description: str | None = None
    metadata: dict[str, Any] | None = None


FundingSourceFilters = RepairTypeFilters = ReferenceFilters
FundingSourceCreate = RepairTypeCreate = ReferenceCreate
FundingSourceUpdate = RepairTypeUpdate = ReferenceUpdate
FundingSourceResponse = RepairTypeResponse = ReferenceResponse
