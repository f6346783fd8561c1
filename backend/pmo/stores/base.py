"""PMO: Storage collaborator contract.

A store answers the list fetch contract
(clauses, sort, order, page, limit) -> (items, total) plus single-row
reads and writes. Rows are plain dicts keyed by column name. Soft-deleted
rows are invisible to every read.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any
from uuid import UUID

from pmo.core.query import SortOrder


class FilterOp(str, Enum):
    EQ = "eq"
    ILIKE = "ilike"  # case-insensitive substring
    GTE = "gte"
    LTE = "lte"


@dataclass(frozen=True)
class FilterClause:
    column: str
    op: FilterOp
    value: Any


class Store(ABC):
    """Backing data store for every resource."""

    async def start(self) -> None:
        """Called once by the app lifespan before serving requests."""

    async def close(self) -> None:
        """Called once by the app lifespan at shutdown."""

    @abstractmethod
    async def fetch(
        self,
        resource: str,
        clauses: list[FilterClause],
        sort: str,
        order: SortOrder,
        page: int,
        limit: int,
    ) -> tuple[list[dict[str, Any]], int]:
        """Return one page of matching rows and the count of all matching rows."""

    @abstractmethod
    async def get(self, resource: str, id: UUID) -> dict[str, Any] | None:
        ...

    @abstractmethod
    async def create(self, resource: str, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a row; the store assigns id, created_at and updated_at."""

    @abstractmethod
    async def update(self, resource: str, id: UUID, changes: dict[str, Any]) -> dict[str, Any] | None:
        ...

    @abstractmethod
    async def delete(self, resource: str, id: UUID, deleted_by: UUID | None = None) -> bool:
        """Soft delete. Returns False when the row does not exist."""
