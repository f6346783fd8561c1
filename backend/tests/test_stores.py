"""Tests for the store implementations (in-memory and SQLAlchemy on aiosqlite)."""
import uuid
from datetime import date

import pytest
import pytest_asyncio

from pmo.core import permissions as resources
from pmo.core.query import SortOrder
from pmo.stores.base import FilterClause, FilterOp
from pmo.stores.memory import InMemoryStore
from pmo.stores.sql import SqlAlchemyStore


@pytest_asyncio.fixture(params=["memory", "sql"])
async def any_store(request):
    """Each test runs against both store backends."""
    if request.param == "memory":
        yield InMemoryStore()
        return
    store = SqlAlchemyStore("sqlite+aiosqlite:///:memory:", create_all=True)
    await store.start()
    yield store
    await store.close()


def _project(code: str, **extra) -> dict:
    return {
        "project_code": code,
        "title": f"Project {code}",
        "project_type": "CONSTRUCTION",
        "status": "PENDING",
        **extra,
    }


async def _names(store, clauses, sort="name", order=SortOrder.ASC, page=1, limit=20):
    items, total = await store.fetch(resources.CONTRACTORS, clauses, sort, order, page, limit)
    return [item["name"] for item in items], total


@pytest.mark.asyncio
async def test_create_assigns_id_and_timestamps(any_store):
    row = await any_store.create(resources.CONTRACTORS, {"name": "Alpha Builders", "status": "ACTIVE"})

    assert isinstance(row["id"], uuid.UUID)
    assert row["created_at"] is not None
    assert row["updated_at"] is not None
    assert row["deleted_at"] is None

    fetched = await any_store.get(resources.CONTRACTORS, row["id"])
    assert fetched["name"] == "Alpha Builders"


@pytest.mark.asyncio
async def test_fetch_returns_one_page_and_full_count(any_store):
    for i in range(5):
        await any_store.create(resources.CONTRACTORS, {"name": f"C{i}", "status": "ACTIVE"})
    for i in range(2):
        await any_store.create(resources.CONTRACTORS, {"name": f"S{i}", "status": "SUSPENDED"})

    names, total = await _names(
        any_store, [FilterClause("status", FilterOp.EQ, "ACTIVE")], page=2, limit=2
    )

    assert total == 5
    assert names == ["C2", "C3"]


@pytest.mark.asyncio
async def test_fetch_sorts_descending(any_store):
    for name in ("b", "c", "a"):
        await any_store.create(resources.CONTRACTORS, {"name": name, "status": "ACTIVE"})

    names, total = await _names(any_store, [], order=SortOrder.DESC, limit=2)

    assert names == ["c", "b"]
    assert total == 3


@pytest.mark.asyncio
async def test_page_past_the_end_is_empty(any_store):
    await any_store.create(resources.CONTRACTORS, {"name": "only", "status": "ACTIVE"})

    names, total = await _names(any_store, [], page=3, limit=10)

    assert names == []
    assert total == 1


@pytest.mark.asyncio
async def test_page_beyond_64_bit_offset_is_empty(any_store):
    await any_store.create(resources.CONTRACTORS, {"name": "only", "status": "ACTIVE"})

    names, total = await _names(any_store, [], order=SortOrder.DESC, page=10**19, limit=20)

    assert names == []
    assert total == 1


@pytest.mark.asyncio
async def test_ilike_is_case_insensitive_substring(any_store):
    for name in ("Alpha Builders", "BETA BUILDERS Corp", "Gamma Electric"):
        await any_store.create(resources.CONTRACTORS, {"name": name, "status": "ACTIVE"})

    names, total = await _names(any_store, [FilterClause("name", FilterOp.ILIKE, "builders")])

    assert total == 2
    assert names == ["Alpha Builders", "BETA BUILDERS Corp"]


@pytest.mark.asyncio
async def test_date_range_filters(any_store):
    await any_store.create(resources.PROJECTS, _project("P-1", start_date=date(2024, 1, 10)))
    await any_store.create(resources.PROJECTS, _project("P-2", start_date=date(2024, 3, 15)))
    await any_store.create(resources.PROJECTS, _project("P-3", start_date=date(2024, 6, 1)))
    await any_store.create(resources.PROJECTS, _project("P-4"))

    items, total = await any_store.fetch(
        resources.PROJECTS,
        [
            FilterClause("start_date", FilterOp.GTE, date(2024, 2, 1)),
            FilterClause("start_date", FilterOp.LTE, date(2024, 5, 31)),
        ],
        "created_at",
        SortOrder.DESC,
        1,
        20,
    )

    assert total == 1
    assert items[0]["project_code"] == "P-2"


@pytest.mark.asyncio
async def test_uuid_and_boolean_equality(any_store):
    owner = uuid.uuid4()
    await any_store.create(resources.PROJECTS, _project("P-1", client_id=owner))
    await any_store.create(resources.PROJECTS, _project("P-2", client_id=uuid.uuid4()))
    await any_store.create(
        resources.SETTINGS,
        {"setting_key": "site.name", "setting_group": "general", "data_type": "STRING", "is_public": True},
    )
    await any_store.create(
        resources.SETTINGS,
        {"setting_key": "smtp.password", "setting_group": "mail", "data_type": "STRING", "is_public": False},
    )

    projects, project_total = await any_store.fetch(
        resources.PROJECTS, [FilterClause("client_id", FilterOp.EQ, owner)], "created_at", SortOrder.DESC, 1, 20
    )
    settings, settings_total = await any_store.fetch(
        resources.SETTINGS, [FilterClause("is_public", FilterOp.EQ, True)], "setting_key", SortOrder.ASC, 1, 20
    )

    assert project_total == 1
    assert projects[0]["project_code"] == "P-1"
    assert settings_total == 1
    assert settings[0]["setting_key"] == "site.name"


@pytest.mark.asyncio
async def test_children_filtered_by_parent_column(any_store):
    parent = await any_store.create(resources.PROJECTS, _project("P-1"))
    first = await any_store.create(
        resources.REPAIR_PROJECTS,
        {"project_id": parent["id"], "project_code": "RP-1", "title": "Leak", "urgency_level": "LOW",
         "is_emergency": False, "status": "REPORTED"},
    )
    second = await any_store.create(
        resources.REPAIR_PROJECTS,
        {"project_id": parent["id"], "project_code": "RP-2", "title": "Crack", "urgency_level": "LOW",
         "is_emergency": False, "status": "REPORTED"},
    )
    for owner, name in ((first, "Assessment"), (first, "Works"), (second, "Assessment")):
        await any_store.create(
            resources.PHASES, {"repair_project_id": owner["id"], "phase_name": name, "status": "PENDING"}
        )

    items, total = await any_store.fetch(
        resources.PHASES,
        [FilterClause("repair_project_id", FilterOp.EQ, first["id"])],
        "phase_name",
        SortOrder.ASC,
        1,
        20,
    )

    assert total == 2
    assert [item["phase_name"] for item in items] == ["Assessment", "Works"]


@pytest.mark.asyncio
async def test_update_changes_only_given_fields(any_store):
    row = await any_store.create(resources.CONTRACTORS, {"name": "Old Name", "status": "ACTIVE"})

    updated = await any_store.update(resources.CONTRACTORS, row["id"], {"name": "New Name"})

    assert updated["name"] == "New Name"
    assert updated["status"] == "ACTIVE"
    assert updated["updated_at"] >= updated["created_at"]


@pytest.mark.asyncio
async def test_soft_delete_hides_row(any_store):
    row = await any_store.create(resources.CONTRACTORS, {"name": "Gone", "status": "ACTIVE"})
    deleter = uuid.uuid4()

    assert await any_store.delete(resources.CONTRACTORS, row["id"], deleted_by=deleter) is True

    assert await any_store.get(resources.CONTRACTORS, row["id"]) is None
    assert await any_store.update(resources.CONTRACTORS, row["id"], {"name": "Back"}) is None
    assert await any_store.delete(resources.CONTRACTORS, row["id"]) is False
    assert await _names(any_store, []) == ([], 0)


@pytest.mark.asyncio
async def test_missing_row(any_store):
    assert await any_store.get(resources.CONTRACTORS, uuid.uuid4()) is None


@pytest.mark.asyncio
async def test_metadata_is_stored_verbatim(any_store):
    blob = {"tags": ["roof", "urgent"], "inspector": {"name": "R. Cruz"}}
    row = await any_store.create(resources.CONTRACTORS, {"name": "Meta", "status": "ACTIVE", "metadata": blob})

    fetched = await any_store.get(resources.CONTRACTORS, row["id"])

    assert fetched["metadata"] == blob


@pytest.mark.asyncio
async def test_sql_store_rejects_unknown_columns():
    store = SqlAlchemyStore("sqlite+aiosqlite:///:memory:", create_all=True)
    await store.start()
    try:
        with pytest.raises(ValueError):
            await store.create(resources.CONTRACTORS, {"name": "X", "status": "ACTIVE", "colour": "red"})
    finally:
        await store.close()
