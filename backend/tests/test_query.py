"""Tests for the list query validator (paging, sorting, filters)."""
from datetime import date
from uuid import UUID

import pydantic
import pytest

from pmo.core.exceptions import ValidationError
from pmo.core.query import DEFAULT_LIMIT, MAX_LIMIT, QueryDescriptor, SortOrder, parse_query
from pmo.schemas.project import ConstructionProjectFilters, ProjectFilters, RepairProjectFilters


def test_defaults_when_query_is_empty():
    q = parse_query({})

    assert q.page == 1
    assert q.limit == DEFAULT_LIMIT == 20
    assert q.sort == "created_at"
    assert q.order is SortOrder.DESC
    assert q.filters == {}
    assert q.offset == 0


def test_empty_values_take_defaults():
    q = parse_query({"page": "", "limit": "  ", "sort": "", "order": ""})
    assert q == parse_query({})


def test_page_and_limit_are_parsed():
    q = parse_query({"page": "2", "limit": "10"})

    assert (q.page, q.limit) == (2, 10)
    assert q.offset == 10


@pytest.mark.parametrize("limit", ["1", str(MAX_LIMIT)])
def test_limit_bounds_are_inclusive(limit):
    assert parse_query({"limit": limit}).limit == int(limit)


@pytest.mark.parametrize("value", ["asc", "ASC", "Asc", " aSc "])
def test_order_asc_any_case(value):
    q = parse_query({"order": value})
    assert q.order is SortOrder.ASC
    assert q.order.value == "asc"


@pytest.mark.parametrize("value", ["desc", "DESC", "Desc"])
def test_order_desc_any_case(value):
    assert parse_query({"order": value}).order.value == "desc"


def test_unknown_order_rejected():
    with pytest.raises(ValidationError) as exc:
        parse_query({"order": "upward"})
    assert "order" in exc.value.field_errors


def test_limit_above_maximum_rejected():
    with pytest.raises(ValidationError) as exc:
        parse_query({"limit": "500"})

    assert "limit" in exc.value.field_errors
    assert "maximum 100" in exc.value.field_errors["limit"]


@pytest.mark.parametrize(
    "raw, field",
    [
        ({"page": "0"}, "page"),
        ({"page": "-3"}, "page"),
        ({"page": "two"}, "page"),
        ({"limit": "0"}, "limit"),
        ({"limit": "2.5"}, "limit"),
    ],
)
def test_bad_paging_values_name_the_field(raw, field):
    with pytest.raises(ValidationError) as exc:
        parse_query(raw)
    assert list(exc.value.field_errors) == [field]


@pytest.mark.parametrize("field", ["page", "limit"])
def test_oversized_digit_string_names_the_field(field):
    with pytest.raises(ValidationError) as exc:
        parse_query({field: "9" * 5000})
    assert list(exc.value.field_errors) == [field]


def test_all_field_errors_reported_together():
    with pytest.raises(ValidationError) as exc:
        parse_query({"page": "0", "limit": "500", "order": "sideways"})
    assert set(exc.value.field_errors) == {"page", "limit", "order"}


def test_sort_is_passed_through():
    assert parse_query({"sort": " title "}).sort == "title"


def test_parse_is_idempotent():
    raw = {"page": "3", "limit": "15", "sort": "title", "order": "ASC", "status": "COMPLETED"}
    first = parse_query(raw, ProjectFilters)

    assert parse_query(raw, ProjectFilters) == first

    normalized = {
        "page": str(first.page),
        "limit": str(first.limit),
        "sort": first.sort,
        "order": first.order.value,
        **first.filters,
    }
    assert parse_query(normalized, ProjectFilters) == first


def test_descriptor_is_immutable():
    q = parse_query({})
    with pytest.raises(pydantic.ValidationError):
        q.page = 5


def test_descriptor_rejects_out_of_range_construction():
    with pytest.raises(pydantic.ValidationError):
        QueryDescriptor(limit=MAX_LIMIT + 1)


# ── Resource filters ─────────────────────────────────────────────────────────

def test_filters_keep_known_keys_only():
    q = parse_query({"status": "IN_PROGRESS", "campus": "MAIN", "bogus": "x", "page": "1"}, ProjectFilters)
    assert q.filters == {"status": "IN_PROGRESS", "campus": "MAIN"}


def test_filter_enum_value_rejected():
    with pytest.raises(ValidationError) as exc:
        parse_query({"status": "NOT_A_STATUS"}, ProjectFilters)
    assert "status" in exc.value.field_errors


def test_filter_uuid_and_dates_are_coerced():
    contractor_id = "5b7c1d2e-8f9a-4b3c-9d1e-2f3a4b5c6d7e"
    q = parse_query(
        {"contractor_id": contractor_id, "start_from": "2024-01-01", "start_to": "2024-06-30"},
        ConstructionProjectFilters,
    )

    assert q.filters["contractor_id"] == UUID(contractor_id)
    assert q.filters["start_from"] == date(2024, 1, 1)
    assert q.filters["start_to"] == date(2024, 6, 30)


def test_filter_bad_uuid_names_field():
    with pytest.raises(ValidationError) as exc:
        parse_query({"contractor_id": "not-a-uuid"}, ConstructionProjectFilters)
    assert "contractor_id" in exc.value.field_errors


def test_inverted_date_range_rejected():
    with pytest.raises(ValidationError) as exc:
        parse_query({"start_from": "2024-06-01", "start_to": "2024-01-01"}, ConstructionProjectFilters)
    assert "filters" in exc.value.field_errors


def test_boolean_filter_coerced():
    q = parse_query({"is_emergency": "true", "urgency": "HIGH"}, RepairProjectFilters)
    assert q.filters == {"is_emergency": True, "urgency": "HIGH"}


def test_paging_and_filter_errors_combined():
    with pytest.raises(ValidationError) as exc:
        parse_query({"limit": "101", "campus": "MOON"}, ProjectFilters)
    assert set(exc.value.field_errors) == {"limit", "campus"}
