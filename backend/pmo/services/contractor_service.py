"""PMO: Contractor service."""
import logging
from typing import Any
from uuid import UUID

from pmo.core import permissions as resources
from pmo.core.exceptions import NotFoundError
from pmo.core.permissions import Action, Principal, authorize
from pmo.models.enums import ContractorStatus
from pmo.schemas.contractor import ContractorFilters
from pmo.services.base import FilterField, ResourceDefinition, ResourceService
from pmo.stores.base import FilterOp, Store

logger = logging.getLogger(__name__)


class ContractorService(ResourceService):
    definition = ResourceDefinition(
        name=resources.CONTRACTORS,
        noun="Contractor",
        filters_model=ContractorFilters,
        sortable=frozenset({"created_at", "updated_at", "name", "status"}),
        filter_fields={"name": FilterField("name", FilterOp.ILIKE)},
    )

    @classmethod
    async def update_status(
        cls, store: Store, principal: Principal | None, id: UUID, status: ContractorStatus | str
    ) -> dict[str, Any]:
        """Change only the status column (ACTIVE / SUSPENDED / BLACKLISTED)."""
        authorize(principal, cls.definition.name, Action.WRITE)
        existing = await cls._require(store, id)
        new_status = ContractorStatus(status).value

        item = await store.update(cls.definition.name, id, {"status": new_status, "updated_by": principal.id})
        if item is None:
            raise NotFoundError(f"Contractor {id} not found")
        logger.info(
            "CONTRACTOR_STATUS_CHANGED: id=%s, %s -> %s, by=%s",
            id, existing["status"], new_status, principal.id,
        )
        return item
