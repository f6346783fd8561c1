"""PMO: Project, construction project and repair project services, with milestones and phases."""
from typing import Any

from pmo.core import permissions as resources
from pmo.schemas.project import (
    ConstructionProjectFilters,
    MilestoneFilters,
    PhaseFilters,
    ProjectFilters,
    RepairProjectFilters,
)
from pmo.services.base import (
    FilterField,
    NestedResourceService,
    Reference,
    ResourceDefinition,
    ResourceService,
)
from pmo.stores.base import FilterOp, Store

_PROJECT = Reference("project_id", resources.PROJECTS, "Project")
_CONTRACTOR = Reference("contractor_id", resources.CONTRACTORS, "Contractor")


class _UniqueCodeService(ResourceService):
    """project_code is unique among live rows of the resource."""

    @classmethod
    async def before_create(cls, store: Store, data: dict[str, Any]) -> None:
        await cls.ensure_unique(store, "project_code", data["project_code"])

    @classmethod
    async def before_update(cls, store: Store, existing: dict[str, Any], changes: dict[str, Any]) -> None:
        if "project_code" in changes and changes["project_code"] != existing["project_code"]:
            await cls.ensure_unique(store, "project_code", changes["project_code"], exclude_id=existing["id"])


class ProjectService(_UniqueCodeService):
    """Parent projects."""

    definition = ResourceDefinition(
        name=resources.PROJECTS,
        noun="Project",
        filters_model=ProjectFilters,
        sortable=frozenset({"created_at", "title", "status", "start_date", "end_date", "project_code"}),
        filter_fields={"type": FilterField("project_type")},
        owner_field="client_id",
    )
    date_ranges = (("start_date", "end_date"),)


class ConstructionProjectService(_UniqueCodeService):
    definition = ResourceDefinition(
        name=resources.CONSTRUCTION_PROJECTS,
        noun="Construction Project",
        filters_model=ConstructionProjectFilters,
        sortable=frozenset({
            "created_at", "title", "status", "start_date", "target_completion_date", "physical_progress",
        }),
        filter_fields={
            "start_from": FilterField("start_date", FilterOp.GTE),
            "start_to": FilterField("start_date", FilterOp.LTE),
        },
        owner_field="client_id",
    )
    references = (
        _PROJECT,
        _CONTRACTOR,
        Reference("funding_source_id", resources.FUNDING_SOURCES, "Funding Source"),
    )
    date_ranges = (("start_date", "target_completion_date"),)


class RepairProjectService(_UniqueCodeService):
    definition = ResourceDefinition(
        name=resources.REPAIR_PROJECTS,
        noun="Repair Project",
        filters_model=RepairProjectFilters,
        sortable=frozenset({"created_at", "title", "status", "urgency_level", "start_date", "reported_date"}),
        filter_fields={
            "urgency": FilterField("urgency_level"),
            "reported_from": FilterField("reported_date", FilterOp.GTE),
            "reported_to": FilterField("reported_date", FilterOp.LTE),
        },
        owner_field="client_id",
    )
    references = (
        _PROJECT,
        _CONTRACTOR,
        Reference("repair_type_id", resources.REPAIR_TYPES, "Repair Type"),
    )
    date_ranges = (("start_date", "end_date"),)


class MilestoneService(NestedResourceService):
    """Milestones of one construction project."""

    definition = ResourceDefinition(
        name=resources.MILESTONES,
        noun="Milestone",
        filters_model=MilestoneFilters,
        sortable=frozenset({"created_at", "target_date", "title", "status"}),
    )
    parent = ConstructionProjectService
    parent_field = "construction_project_id"


class PhaseService(NestedResourceService):
    definition = ResourceDefinition(
        name=resources.PHASES,
        noun="Phase",
        filters_model=PhaseFilters,
        sortable=frozenset({"created_at", "phase_name", "target_start_date", "status"}),
    )
    parent = RepairProjectService
    parent_field = "repair_project_id"
    date_ranges = (("target_start_date", "target_end_date"),)
