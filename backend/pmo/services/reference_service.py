"""PMO: Funding source and repair type services. Names are unique among live rows."""
from typing import Any

from pmo.core import permissions as resources
from pmo.schemas.reference import ReferenceFilters
from pmo.services.base import FilterField, ResourceDefinition, ResourceService
from pmo.stores.base import FilterOp, Store

_SORTABLE = frozenset({"created_at", "updated_at", "name"})
_NAME_FILTER = {"name": FilterField("name", FilterOp.ILIKE)}


class _ReferenceService(ResourceService):
    @classmethod
    async def before_create(cls, store: Store, data: dict[str, Any]) -> None:
        await cls.ensure_unique(store, "name", data["name"])

    @classmethod
    async def before_update(cls, store: Store, existing: dict[str, Any], changes: dict[str, Any]) -> None:
        if "name" in changes and changes["name"] != existing["name"]:
            await cls.ensure_unique(store, "name", changes["name"], exclude_id=existing["id"])


class FundingSourceService(_ReferenceService):
    definition = ResourceDefinition(
        name=resources.FUNDING_SOURCES,
        noun="Funding Source",
        filters_model=ReferenceFilters,
        sortable=_SORTABLE,
        filter_fields=_NAME_FILTER,
    )


class RepairTypeService(_ReferenceService):
    definition = ResourceDefinition(
        name=resources.REPAIR_TYPES,
        noun="Repair Type",
        filters_model=ReferenceFilters,
        sortable=_SORTABLE,
        filter_fields=_NAME_FILTER,
    )
