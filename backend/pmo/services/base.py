"""
PMO: Resource definitions and the generic list/detail/write service.

A ResourceDefinition says which filters and sort columns a resource accepts,
how each filter maps onto a store clause, and which fields drive scoped
reads. ResourceService runs every request through the same order:
validate sort → authorize → merge scope constraint → store → envelope.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar
from uuid import UUID

from pydantic import BaseModel

from pmo.core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from pmo.core.permissions import Action, Principal, authorize, can_see, scope_constraint
from pmo.core.query import QueryDescriptor, SortOrder
from pmo.schemas.common import Page, build_page
from pmo.stores.base import FilterClause, FilterOp, Store

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterField:
    """Store column and comparison a query filter maps onto."""

    column: str
    op: FilterOp = FilterOp.EQ


@dataclass(frozen=True)
class Reference:
    """A column that must point at a live row of another resource."""

    field: str
    resource: str
    noun: str


@dataclass(frozen=True)
class ResourceDefinition:
    name: str  # resource key, also the permission matrix key
    noun: str  # human name used in messages and audit events
    filters_model: type[BaseModel]
    sortable: frozenset[str]
    filter_fields: dict[str, FilterField] = field(default_factory=dict)
    owner_field: str | None = None
    public_field: str | None = None

    @property
    def event_prefix(self) -> str:
        return self.noun.upper().replace(" ", "_")

    def resolve_sort(self, sort: str) -> str:
        if sort not in self.sortable:
            allowed = ", ".join(sorted(self.sortable))
            raise ValidationError.for_field("sort", f"sort must be one of {allowed}, got {sort!r}")
        return sort

    def clauses(self, filters: dict[str, Any]) -> list[FilterClause]:
        result = []
        for name, value in filters.items():
            mapped = self.filter_fields.get(name, FilterField(name))
            result.append(FilterClause(mapped.column, mapped.op, value))
        return result


class ResourceService:
    """
    CRUD over one resource through the injected store.
    Subclasses set `definition` and override the before_* hooks for
    resource-specific rules such as uniqueness. Referenced rows and
    (start, end) date pairs are declared and checked on every write;
    updates are checked against the merged row.
    """

    definition: ClassVar[ResourceDefinition]
    references: ClassVar[tuple[Reference, ...]] = ()
    date_ranges: ClassVar[tuple[tuple[str, str], ...]] = ()

    # ── Reads ────────────────────────────────────────────────────────────────

    @classmethod
    async def list_page(cls, store: Store, principal: Principal | None, query: QueryDescriptor) -> Page[dict]:
        d = cls.definition
        sort = d.resolve_sort(query.sort)
        scope = authorize(principal, d.name, Action.READ)

        clauses = d.clauses(query.filters)
        constraint = scope_constraint(principal, scope, d.owner_field, d.public_field)
        if constraint is not None:
            column, value = constraint
            clauses = [c for c in clauses if c.column != column]
            clauses.append(FilterClause(column, FilterOp.EQ, value))

        items, total = await store.fetch(d.name, clauses, sort, query.order, query.page, query.limit)
        return build_page(items, total, query.page, query.limit)

    @classmethod
    async def get(cls, store: Store, principal: Principal | None, id: UUID) -> dict[str, Any]:
        d = cls.definition
        scope = authorize(principal, d.name, Action.READ)
        item = await cls._require(store, id)
        if not can_see(principal, scope, item, d.owner_field, d.public_field):
            raise AuthorizationError(f"You do not have access to this {d.noun.lower()}")
        return item

    # ── Writes ───────────────────────────────────────────────────────────────

    @classmethod
    async def create(cls, store: Store, principal: Principal | None, data: dict[str, Any]) -> dict[str, Any]:
        d = cls.definition
        authorize(principal, d.name, Action.WRITE)
        cls.check_date_ranges(data)
        await cls.check_references(store, data)
        await cls.before_create(store, data)

        item = await store.create(d.name, {**data, "created_by": principal.id, "updated_by": principal.id})
        logger.info("%s_CREATED: id=%s, by=%s", d.event_prefix, item["id"], principal.id)
        return item

    @classmethod
    async def update(
        cls, store: Store, principal: Principal | None, id: UUID, changes: dict[str, Any]
    ) -> dict[str, Any]:
        """Partial update: only keys present in changes are written."""
        d = cls.definition
        authorize(principal, d.name, Action.WRITE)
        existing = await cls._require(store, id)
        cls.check_date_ranges({**existing, **changes})
        await cls.check_references(store, changes)
        await cls.before_update(store, existing, changes)

        item = await store.update(d.name, id, {**changes, "updated_by": principal.id})
        if item is None:
            raise NotFoundError(f"{d.noun} {id} not found")
        logger.info(
            "%s_UPDATED: id=%s, by=%s, fields=%s",
            d.event_prefix, id, principal.id, ",".join(sorted(changes)) or "-",
        )
        return item

    @classmethod
    async def delete(cls, store: Store, principal: Principal | None, id: UUID) -> None:
        d = cls.definition
        authorize(principal, d.name, Action.WRITE)
        if not await store.delete(d.name, id, deleted_by=principal.id):
            raise NotFoundError(f"{d.noun} {id} not found")
        logger.info("%s_DELETED: id=%s, by=%s", d.event_prefix, id, principal.id)

    # ── Hooks ────────────────────────────────────────────────────────────────

    @classmethod
    async def before_create(cls, store: Store, data: dict[str, Any]) -> None:
        pass

    @classmethod
    async def before_update(cls, store: Store, existing: dict[str, Any], changes: dict[str, Any]) -> None:
        pass

    # ── Helpers ──────────────────────────────────────────────────────────────

    @classmethod
    def check_date_ranges(cls, row: dict[str, Any]) -> None:
        for start_name, end_name in cls.date_ranges:
            start, end = row.get(start_name), row.get(end_name)
            if start is not None and end is not None and end < start:
                raise ValidationError.for_field(end_name, f"{end_name} must not be before {start_name}")

    @classmethod
    async def check_references(cls, store: Store, data: dict[str, Any]) -> None:
        for ref in cls.references:
            if data.get(ref.field) is not None:
                await ensure_exists(store, ref.resource, data[ref.field], ref.noun, ref.field)

    @classmethod
    async def _require(cls, store: Store, id: UUID) -> dict[str, Any]:
        item = await store.get(cls.definition.name, id)
        if item is None:
            raise NotFoundError(f"{cls.definition.noun} {id} not found")
        return item

    @classmethod
    async def find_first(cls, store: Store, clauses: list[FilterClause]) -> dict[str, Any] | None:
        items, _ = await store.fetch(cls.definition.name, clauses, "created_at", SortOrder.DESC, 1, 1)
        return items[0] if items else None

    @classmethod
    async def ensure_unique(
        cls, store: Store, column: str, value: Any, exclude_id: UUID | None = None
    ) -> None:
        """Raise ConflictError if another live row already holds value in column."""
        items, _ = await store.fetch(
            cls.definition.name,
            [FilterClause(column, FilterOp.EQ, value)],
            "created_at",
            SortOrder.DESC,
            1,
            2,
        )
        if any(str(item["id"]) != str(exclude_id) for item in items):
            raise ConflictError(
                f"{cls.definition.noun} with {column} '{value}' already exists",
                {column: f"{column} '{value}' already exists"},
            )


async def ensure_exists(store: Store, resource: str, id: UUID, noun: str, field_name: str) -> None:
    """Raise NotFoundError naming field_name when the referenced row is missing."""
    if await store.get(resource, id) is None:
        raise NotFoundError(f"{noun} {id} not found", {field_name: f"{noun} {id} not found"})


class NestedResourceService(ResourceService):
    """
    Rows that only exist under one parent row (/{parent}/{parent_id}/{child}).
    The parent must exist and be visible to the caller; children of another
    parent are reported as not found.
    """

    parent: ClassVar[type[ResourceService]]
    parent_field: ClassVar[str]

    @classmethod
    async def list_for(
        cls, store: Store, principal: Principal | None, parent_id: UUID, query: QueryDescriptor
    ) -> Page[dict]:
        cls.definition.resolve_sort(query.sort)
        authorize(principal, cls.definition.name, Action.READ)
        await cls.parent.get(store, principal, parent_id)
        scoped = query.model_copy(update={"filters": {**query.filters, cls.parent_field: parent_id}})
        return await cls.list_page(store, principal, scoped)

    @classmethod
    async def create_for(
        cls, store: Store, principal: Principal | None, parent_id: UUID, data: dict[str, Any]
    ) -> dict[str, Any]:
        authorize(principal, cls.definition.name, Action.WRITE)
        await cls.parent.get(store, principal, parent_id)
        return await cls.create(store, principal, {**data, cls.parent_field: parent_id})

    @classmethod
    async def update_for(
        cls, store: Store, principal: Principal | None, parent_id: UUID, id: UUID, changes: dict[str, Any]
    ) -> dict[str, Any]:
        authorize(principal, cls.definition.name, Action.WRITE)
        await cls._require_child(store, principal, parent_id, id)
        return await cls.update(store, principal, id, changes)

    @classmethod
    async def delete_for(cls, store: Store, principal: Principal | None, parent_id: UUID, id: UUID) -> None:
        authorize(principal, cls.definition.name, Action.WRITE)
        await cls._require_child(store, principal, parent_id, id)
        await cls.delete(store, principal, id)

    @classmethod
    async def _require_child(
        cls, store: Store, principal: Principal | None, parent_id: UUID, id: UUID
    ) -> dict[str, Any]:
        await cls.parent.get(store, principal, parent_id)
        item = await store.get(cls.definition.name, id)
        if item is None or str(item[cls.parent_field]) != str(parent_id):
            raise NotFoundError(f"{cls.definition.noun} {id} not found")
        return item
