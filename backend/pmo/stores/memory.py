"""PMO: In-memory store for local development and tests."""
import uuid
from collections import defaultdict
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import UUID

from pmo.core.query import SortOrder
from pmo.stores.base import FilterClause, FilterOp, Store


def _normalize(value: Any) -> Any:
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


def _matches(row: dict[str, Any], clause: FilterClause) -> bool:
    value = _normalize(row.get(clause.column))
    wanted = _normalize(clause.value)
    if clause.op is FilterOp.EQ:
        return value == wanted
    if value is None:
        return False
    if clause.op is FilterOp.ILIKE:
        return str(wanted).lower() in str(value).lower()
    if clause.op is FilterOp.GTE:
        return value >= wanted
    if clause.op is FilterOp.LTE:
        return value <= wanted
    raise ValueError(f"Unsupported filter op: {clause.op}")


def _sort_key(row: dict[str, Any], column: str) -> tuple:
    # None sorts first ascending, last descending
    value = row.get(column)
    if value is None:
        return (False, 0)
    return (True, _normalize(value))


class InMemoryStore(Store):
    """Dict-backed rows per resource. One instance per app, owned by the lifespan."""

    def __init__(self) -> None:
        self._rows: dict[str, dict[UUID, dict[str, Any]]] = defaultdict(dict)

    def _live(self, resource: str) -> list[dict[str, Any]]:
        return [row for row in self._rows[resource].values() if row.get("deleted_at") is None]

    async def fetch(
        self,
        resource: str,
        clauses: list[FilterClause],
        sort: str,
        order: SortOrder,
        page: int,
        limit: int,
    ) -> tuple[list[dict[str, Any]], int]:
        rows = [row for row in self._live(resource) if all(_matches(row, c) for c in clauses)]
        total = len(rows)

        rows.sort(key=lambda row: _sort_key(row, sort), reverse=order is SortOrder.DESC)
        offset = (page - 1) * limit
        return [dict(row) for row in rows[offset:offset + limit]], total

    async def get(self, resource: str, id: UUID) -> dict[str, Any] | None:
        row = self._rows[resource].get(id)
        if row is None or row.get("deleted_at") is not None:
            return None
        return dict(row)

    async def create(self, resource: str, data: dict[str, Any]) -> dict[str, Any]:
        now = datetime.now(timezone.utc)
        row = {**data, "id": uuid.uuid4(), "created_at": now, "updated_at": now, "deleted_at": None}
        self._rows[resource][row["id"]] = row
        return dict(row)

    async def update(self, resource: str, id: UUID, changes: dict[str, Any]) -> dict[str, Any] | None:
        row = self._rows[resource].get(id)
        if row is None or row.get("deleted_at") is not None:
            return None
        row.update(changes)
        row["updated_at"] = datetime.now(timezone.utc)
        return dict(row)

    async def delete(self, resource: str, id: UUID, deleted_by: UUID | None = None) -> bool:
        row = self._rows[resource].get(id)
        if row is None or row.get("deleted_at") is not None:
            return False
        row["deleted_at"] = datetime.now(timezone.utc)
        row["deleted_by"] = deleted_by
        return True
