"""PMO: Setting service. Non-admin roles only ever see public settings."""
from typing import Any

from pmo.core import permissions as resources
from pmo.core.exceptions import AuthorizationError, NotFoundError
from pmo.core.permissions import Action, Principal, authorize, can_see
from pmo.schemas.setting import SettingFilters
from pmo.services.base import FilterField, ResourceDefinition, ResourceService
from pmo.stores.base import FilterClause, FilterOp, Store


class SettingService(ResourceService):
    definition = ResourceDefinition(
        name=resources.SETTINGS,
        noun="Setting",
        filters_model=SettingFilters,
        sortable=frozenset({"created_at", "updated_at", "setting_key", "setting_group", "is_public", "data_type"}),
        filter_fields={
            "group": FilterField("setting_group"),
            "key": FilterField("setting_key", FilterOp.ILIKE),
        },
        public_field="is_public",
    )

    @classmethod
    async def get_by_key(cls, store: Store, principal: Principal | None, key: str) -> dict[str, Any]:
        d = cls.definition
        scope = authorize(principal, d.name, Action.READ)
        item = await cls.find_first(store, [FilterClause("setting_key", FilterOp.EQ, key)])
        if item is None:
            raise NotFoundError(f"Setting with key '{key}' not found")
        if not can_see(principal, scope, item, d.owner_field, d.public_field):
            raise AuthorizationError("You do not have access to this setting")
        return item

    @classmethod
    async def before_create(cls, store: Store, data: dict[str, Any]) -> None:
        await cls.ensure_unique(store, "setting_key", data["setting_key"])

    @classmethod
    async def before_update(cls, store: Store, existing: dict[str, Any], changes: dict[str, Any]) -> None:
        if "setting_key" in changes and changes["setting_key"] != existing["setting_key"]:
            await cls.ensure_unique(store, "setting_key", changes["setting_key"], exclude_id=existing["id"])
