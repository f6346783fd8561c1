"""PMO: Contractor schemas."""
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pmo.models.enums import ContractorStatus
from pmo.schemas.common import RecordResponse


class ContractorFilters(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: ContractorStatus | None = None
    name: str | None = Field(None, max_length=255)  # partial, case-insensitive


class ContractorCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(min_length=1, max_length=255)
    contact_person: str | None = None
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    address: str | None = None
    tin_number: str | None = Field(None, max_length=50)
    registration_number: str | None = Field(None, max_length=100)
    validity_date: date | None = None
    status: ContractorStatus = ContractorStatus.ACTIVE
    metadata: dict[str, Any] | None = None


class ContractorUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str | None = Field(None, min_length=1, max_length=255)
    contact_person: str | None = None
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    address: str | None = None
    tin_number: str | None = Field(None, max_length=50)
    registration_number: str | None = Field(None, max_length=100)
    validity_date: date | None = None
    status: ContractorStatus | None = None
    metadata: dict[str, Any] | None = None


class ContractorStatusUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: ContractorStatus


class ContractorResponse(RecordResponse):
    name: str
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    tin_number: str | None = None
    registration_number: str | None = None
    validity_date: date | None = None
    status: ContractorStatus
    metadata: dict[str, Any] | None = None
