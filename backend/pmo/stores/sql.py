"""PMO: SQLAlchemy-backed store (PostgreSQL via asyncpg, SQLite via aiosqlite)."""
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import UUID

from sqlalchemy import Column, func, select
from sqlalchemy.sql.elements import ColumnElement

from pmo.core.query import SortOrder
from pmo.db.base import Base, RecordMixin
from pmo.db.session import create_engine, create_session_maker
from pmo.models import MODELS
from pmo.stores.base import FilterClause, FilterOp, Store

logger = logging.getLogger(__name__)

# Largest OFFSET PostgreSQL (bigint) and SQLite (INTEGER) accept
MAX_OFFSET = 2**63 - 1


def _bind_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _column(model: type[RecordMixin], name: str) -> Column:
    column = model.__table__.c.get(name)
    if column is None:
        raise ValueError(f"Unknown column '{name}' on {model.__tablename__}")
    return column


def _condition(model: type[RecordMixin], clause: FilterClause) -> ColumnElement[bool]:
    column = _column(model, clause.column)
    value = _bind_value(clause.value)
    if clause.op is FilterOp.EQ:
        return column.is_(None) if value is None else column == value
    if clause.op is FilterOp.ILIKE:
        return column.ilike(f"%{value}%")
    if clause.op is FilterOp.GTE:
        return column >= value
    if clause.op is FilterOp.LTE:
        return column <= value
    raise ValueError(f"Unsupported filter op: {clause.op}")


class SqlAlchemyStore(Store):
    """Count query plus ordered offset/limit query per list call."""

    def __init__(self, database_url: str, echo: bool = False, create_all: bool = False):
        self._engine = create_engine(database_url, echo=echo)
        self._session_maker = create_session_maker(self._engine)
        self._create_all = create_all

    async def start(self) -> None:
        if self._create_all:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Created missing tables")

    async def close(self) -> None:
        await self._engine.dispose()

    @staticmethod
    def _model(resource: str) -> type[RecordMixin]:
        try:
            return MODELS[resource]
        except KeyError:
            raise ValueError(f"Unknown resource '{resource}'")

    async def fetch(
        self,
        resource: str,
        clauses: list[FilterClause],
        sort: str,
        order: SortOrder,
        page: int,
        limit: int,
    ) -> tuple[list[dict[str, Any]], int]:
        model = self._model(resource)
        conditions = [model.deleted_at.is_(None)] + [_condition(model, c) for c in clauses]

        count_q = select(func.count()).select_from(model).where(*conditions)
        offset = (page - 1) * limit
        if offset > MAX_OFFSET:
            async with self._session_maker() as session:
                return [], (await session.execute(count_q)).scalar_one()

        sort_column = _column(model, sort)
        sort_expr = sort_column.asc() if order is SortOrder.ASC else sort_column.desc()
        q = (
            select(model)
            .where(*conditions)
            .order_by(sort_expr, model.id)
            .offset(offset)
            .limit(limit)
        )

        async with self._session_maker() as session:
            total = (await session.execute(count_q)).scalar_one()
            result = await session.execute(q)
            items = [row.to_dict() for row in result.scalars().all()]
        return items, total

    async def _get_live(self, session, model: type[RecordMixin], id: UUID):
        result = await session.execute(
            select(model).where(model.id == id, model.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    async def get(self, resource: str, id: UUID) -> dict[str, Any] | None:
        model = self._model(resource)
        async with self._session_maker() as session:
            row = await self._get_live(session, model, id)
            return row.to_dict() if row else None

    @staticmethod
    def _attrs(model: type[RecordMixin], data: dict[str, Any]) -> dict[str, Any]:
        columns = model.column_attrs()
        unknown = set(data) - set(columns)
        if unknown:
            raise ValueError(f"Unknown columns for {model.__tablename__}: {sorted(unknown)}")
        return {columns[name]: _bind_value(value) for name, value in data.items()}

    async def create(self, resource: str, data: dict[str, Any]) -> dict[str, Any]:
        model = self._model(resource)
        async with self._session_maker() as session:
            async with session.begin():
                row = model(**self._attrs(model, data))
                session.add(row)
                await session.flush()
                await session.refresh(row)
            return row.to_dict()

    async def update(self, resource: str, id: UUID, changes: dict[str, Any]) -> dict[str, Any] | None:
        model = self._model(resource)
        async with self._session_maker() as session:
            async with session.begin():
                row = await self._get_live(session, model, id)
                if row is None:
                    return None
                for key, value in self._attrs(model, changes).items():
                    setattr(row, key, value)
                row.updated_at = datetime.now(timezone.utc)
                await session.flush()
                await session.refresh(row)
            return row.to_dict()

    async def delete(self, resource: str, id: UUID, deleted_by: UUID | None = None) -> bool:
        model = self._model(resource)
        async with self._session_maker() as session:
            async with session.begin():
                row = await self._get_live(session, model, id)
                if row is None:
                    return False
                row.deleted_at = datetime.now(timezone.utc)
                row.deleted_by = deleted_by
            return True
