"""PMO: Project, ConstructionProject and RepairProject models, plus their milestones and phases."""
import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy import JSON, Boolean, Date, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pmo.db.base import Base, RecordMixin


class Project(RecordMixin, Base):
    """Parent record for every construction or repair undertaking."""

    __tablename__ = "projects"

    project_code: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    project_type: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    campus: Mapped[str | None] = mapped_column(String(50), nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    budget: Mapped[Decimal | None] = mapped_column(Numeric(15, 2), nullable=True)
    client_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True, index=True)
    extra_metadata: Mapped[dict | None] = mapped_column("metadata", JSON, nullable=True)


class ConstructionProject(RecordMixin, Base):
    __tablename__ = "construction_projects"

    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("projects.id", ondelete="RESTRICT"))
    project_code: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    beneficiaries: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    campus: Mapped[str | None] = mapped_column(String(50), nullable=True)
    contractor_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("contractors.id", ondelete="SET NULL"), nullable=True
    )
    funding_source_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("funding_sources.id", ondelete="SET NULL"), nullable=True
    )
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    target_completion_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    physical_progress: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    contract_amount: Mapped[Decimal | None] = mapped_column(Numeric(15, 2), nullable=True)
    client_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True, index=True)
    extra_metadata: Mapped[dict | None] = mapped_column("metadata", JSON, nullable=True)


class RepairProject(RecordMixin, Base):
    __tablename__ = "repair_projects"

    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("projects.id", ondelete="RESTRICT"))
    project_code: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    building_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    specific_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    repair_type_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("repair_types.id", ondelete="SET NULL"), nullable=True
    )
    urgency_level: Mapped[str] = mapped_column(String(50), nullable=False)
    is_emergency: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    campus: Mapped[str | None] = mapped_column(String(50), nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    reported_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    budget: Mapped[Decimal | None] = mapped_column(Numeric(15, 2), nullable=True)
    contractor_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("contractors.id", ondelete="SET NULL"), nullable=True
    )
    client_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True, index=True)
    extra_metadata: Mapped[dict | None] = mapped_column("metadata", JSON, nullable=True)


class ConstructionMilestone(RecordMixin, Base):
    __tablename__ = "construction_milestones"

    construction_project_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("construction_projects.id", ondelete="CASCADE"), index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    target_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)


class RepairPhase(RecordMixin, Base):
    __tablename__ = "repair_project_phases"

    repair_project_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("repair_projects.id", ondelete="CASCADE"), index=True
    )
    phase_name: Mapped[str] = mapped_column(String(255), nullable=False)
    phase_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    target_progress: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    actual_progress: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    target_start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    target_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
