"""PMO: Document and media metadata services (owner is polymorphic)."""
from typing import Any

from pmo.core import permissions as resources
from pmo.schemas.document import DocumentFilters, MediaFilters
from pmo.services.base import FilterField, ResourceDefinition, ResourceService, ensure_exists
from pmo.stores.base import FilterOp, Store


async def _check_owner(store: Store, owner_type: str, owner_id, field_name: str) -> None:
    # owner_type values are resource keys (see EntityType)
    noun = owner_type.replace("_", " ").rstrip("s").capitalize()
    await ensure_exists(store, owner_type, owner_id, noun, field_name)


class DocumentService(ResourceService):
    definition = ResourceDefinition(
        name=resources.DOCUMENTS,
        noun="Document",
        filters_model=DocumentFilters,
        sortable=frozenset({"created_at", "document_type", "file_name"}),
    )

    @classmethod
    async def before_create(cls, store: Store, data: dict[str, Any]) -> None:
        await _check_owner(store, data["documentable_type"], data["documentable_id"], "documentable_id")


class MediaService(ResourceService):
    definition = ResourceDefinition(
        name=resources.MEDIA,
        noun="Media",
        filters_model=MediaFilters,
        sortable=frozenset({"created_at", "media_type", "title", "file_name"}),
        filter_fields={"title": FilterField("title", FilterOp.ILIKE)},
    )

    @classmethod
    async def before_create(cls, store: Store, data: dict[str, Any]) -> None:
        await _check_owner(store, data["mediable_type"], data["mediable_id"], "mediable_id")
