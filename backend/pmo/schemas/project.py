"""PMO: Project, construction project and repair project schemas, with milestones and phases."""
from datetime import date
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pmo.models.enums import Campus, ProgressStatus, ProjectStatus, ProjectType, RepairStatus, UrgencyLevel
from pmo.schemas.common import RecordResponse


def _check_range(start: date | None, end: date | None, start_name: str, end_name: str) -> None:
    if start is not None and end is not None and end < start:
        raise ValueError(f"{end_name} must not be before {start_name}")


# ── Projects ─────────────────────────────────────────────────────────────────

class ProjectFilters(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    type: ProjectType | None = None
    status: ProjectStatus | None = None
    campus: Campus | None = None


class ProjectCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    project_code: str = Field(min_length=1, max_length=100)
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    project_type: ProjectType
    status: ProjectStatus = ProjectStatus.DRAFT
    campus: Campus | None = None
    start_date: date | None = None
    end_date: date | None = None
    budget: Decimal | None = Field(None, ge=0)
    client_id: UUID | None = None
    metadata: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _dates(self):
        _check_range(self.start_date, self.end_date, "start_date", "end_date")
        return self


class ProjectUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    project_code: str | None = Field(None, min_length=1, max_length=100)
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    project_type: ProjectType | None = None
    status: ProjectStatus | None = None
    campus: Campus | None = None
    start_date: date | None = None
    end_date: date | None = None
    budget: Decimal | None = Field(None, ge=0)
    client_id: UUID | None = None
    metadata: dict[str, Any] | None = None


class ProjectResponse(RecordResponse):
    project_code: str
    title: str
    description: str | None = None
    project_type: ProjectType
    status: ProjectStatus
    campus: Campus | None = None
    start_date: date | None = None
    end_date: date | None = None
    budget: Decimal | None = None
    client_id: UUID | None = None
    metadata: dict[str, Any] | None = None


# ── Construction projects ────────────────────────────────────────────────────

class ConstructionProjectFilters(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: ProjectStatus | None = None
    campus: Campus | None = None
    contractor_id: UUID | None = None
    funding_source_id: UUID | None = None
    start_from: date | None = None
    start_to: date | None = None

    @model_validator(mode="after")
    def _range(self):
        _check_range(self.start_from, self.start_to, "start_from", "start_to")
        return self


class ConstructionProjectCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    project_id: UUID
    project_code: str = Field(min_length=1, max_length=100)
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    beneficiaries: str | None = None
    status: ProjectStatus = ProjectStatus.PENDING
    campus: Campus | None = None
    contractor_id: UUID | None = None
    funding_source_id: UUID | None = None
    start_date: date | None = None
    target_completion_date: date | None = None
    physical_progress: Decimal | None = Field(None, ge=0, le=100)
    contract_amount: Decimal | None = Field(None, ge=0)
    client_id: UUID | None = None
    metadata: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _dates(self):
        _check_range(self.start_date, self.target_completion_date, "start_date", "target_completion_date")
        return self


class ConstructionProjectUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    project_id: UUID | None = None
    project_code: str | None = Field(None, min_length=1, max_length=100)
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    beneficiaries: str | None = None
    status: ProjectStatus | None = None
    campus: Campus | None = None
    contractor_id: UUID | None = None
    funding_source_id: UUID | None = None
    start_date: date | None = None
    target_completion_date: date | None = None
    physical_progress: Decimal | None = Field(None, ge=0, le=100)
    contract_amount: Decimal | None = Field(None, ge=0)
    client_id: UUID | None = None
    metadata: dict[str, Any] | None = None


class ConstructionProjectResponse(RecordResponse):
    project_id: UUID
    project_code: str
    title: str
    description: str | None = None
    beneficiaries: str | None = None
    status: ProjectStatus
    campus: Campus | None = None
    contractor_id: UUID | None = None
    funding_source_id: UUID | None = None
    start_date: date | None = None
    target_completion_date: date | None = None
    physical_progress: Decimal | None = None
    contract_amount: Decimal | None = None
    client_id: UUID | None = None
    metadata: dict[str, Any] | None = None


# ── Repair projects ──────────────────────────────────────────────────────────

class RepairProjectFilters(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: RepairStatus | None = None
    urgency: UrgencyLevel | None = None
    is_emergency: bool | None = None
    campus: Campus | None = None
    repair_type_id: UUID | None = None
    reported_from: date | None = None
    reported_to: date | None = None

    @model_validator(mode="after")
    def _range(self):
        _check_range(self.reported_from, self.reported_to, "reported_from", "reported_to")
        return self


class RepairProjectCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    project_id: UUID
    project_code: str = Field(min_length=1, max_length=100)
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    building_name: str | None = None
    specific_location: str | None = None
    repair_type_id: UUID | None = None
    urgency_level: UrgencyLevel = UrgencyLevel.MEDIUM
    is_emergency: bool = False
    campus: Campus | None = None
    status: RepairStatus = RepairStatus.REPORTED
    reported_date: date | None = None
    start_date: date | None = None
    end_date: date | None = None
    budget: Decimal | None = Field(None, ge=0)
    contractor_id: UUID | None = None
    client_id: UUID | None = None
    metadata: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _dates(self):
        _check_range(self.start_date, self.end_date, "start_date", "end_date")
        return self


class RepairProjectUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    project_id: UUID | None = None
    project_code: str | None = Field(None, min_length=1, max_length=100)
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    building_name: str | None = None
    specific_location: str | None = None
    repair_type_id: UUID | None = None
    urgency_level: UrgencyLevel | None = None
    is_emergency: bool | None = None
    campus: Campus | None = None
    status: RepairStatus | None = None
    reported_date: date | None = None
    start_date: date | None = None
    end_date: date | None = None
    budget: Decimal | None = Field(None, ge=0)
    contractor_id: UUID | None = None
    client_id: UUID | None = None
    metadata: dict[str, Any] | None = None


class RepairProjectResponse(RecordResponse):
    project_id: UUID
    project_code: str
    title: str
    description: str | None = None
    building_name: str | None = None
    specific_location: str | None = None
    repair_type_id: UUID | None = None
    urgency_level: UrgencyLevel
    is_emergency: bool
    campus: Campus | None = None
    status: RepairStatus
    reported_date: date | None = None
    start_date: date | None = None
    end_date: date | None = None
    budget: Decimal | None = None
    contractor_id: UUID | None = None
    client_id: UUID | None = None
    metadata: dict[str, Any] | None = None


# ── Construction milestones ──────────────────────────────────────────────────

class MilestoneFilters(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: ProgressStatus | None = None


class MilestoneCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    target_date: date | None = None
    status: ProgressStatus = ProgressStatus.PENDING
    remarks: str | None = None


class MilestoneUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    target_date: date | None = None
    status: ProgressStatus | None = None
    remarks: str | None = None


class MilestoneResponse(RecordResponse):
    construction_project_id: UUID
    title: str
    description: str | None = None
    target_date: date | None = None
    status: ProgressStatus
    remarks: str | None = None


# ── Repair phases ────────────────────────────────────────────────────────────

class PhaseFilters(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: ProgressStatus | None = None


class PhaseCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    phase_name: str = Field(min_length=1, max_length=255)
    phase_description: str | None = None
    target_progress: Decimal | None = Field(None, ge=0, le=100)
    actual_progress: Decimal | None = Field(None, ge=0, le=100)
    status: ProgressStatus = ProgressStatus.PENDING
    target_start_date: date | None = None
    target_end_date: date | None = None
    remarks: str | None = None

    @model_validator(mode="after")
    def _dates(self):
        _check_range(self.target_start_date, self.target_end_date, "target_start_date", "target_end_date")
        return self


class PhaseUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    phase_name: str | None = Field(None, min_length=1, max_length=255)
    phase_description: str | None = None
    target_progress: Decimal | None = Field(None, ge=0, le=100)
    actual_progress: Decimal | None = Field(None, ge=0, le=100)
    status: ProgressStatus | None = None
    target_start_date: date | None = None
    target_end_date: date | None = None
    remarks: str | None = None


class PhaseResponse(RecordResponse):
    repair_project_id: UUID
    phase_name: str
    phase_description: str | None = None
    target_progress: Decimal | None = None
    actual_progress: Decimal | None = None
    status: ProgressStatus
    target_start_date: date | None = None
    target_end_date: date | None = None
    remarks: str | None = None
