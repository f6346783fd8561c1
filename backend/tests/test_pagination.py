"""Tests for the paginated envelope builder."""
import math

import pytest

from pmo.schemas.common import Page, build_page


def test_middle_page_meta():
    items = list(range(25))[10:20]
    page = build_page(items, total=25, page=2, limit=10)

    assert page.data == items
    assert page.model_dump(by_alias=True)["meta"] == {"total": 25, "page": 2, "limit": 10, "totalPages": 3}


def test_empty_result():
    page = build_page([], total=0, page=1, limit=20)

    assert page.data == []
    assert page.model_dump(by_alias=True) == {
        "data": [],
        "meta": {"total": 0, "page": 1, "limit": 20, "totalPages": 0},
    }


@pytest.mark.parametrize(
    "total, limit",
    [(1, 20), (20, 20), (21, 20), (99, 100), (100, 100), (101, 100), (7, 1)],
)
def test_total_pages_is_ceiling(total, limit):
    page = build_page([], total=total, page=1, limit=limit)
    assert page.meta.total_pages == math.ceil(total / limit)


def test_page_past_the_end_is_empty_but_valid():
    page = build_page([], total=5, page=4, limit=2)
    assert page.meta.page == 4
    assert page.meta.total_pages == 3


def test_zero_limit_is_a_programming_error():
    with pytest.raises(ValueError):
        build_page([], total=0, page=1, limit=0)


def test_meta_accepts_alias_on_input():
    page = Page[int].model_validate({"data": [1], "meta": {"total": 1, "page": 1, "limit": 5, "totalPages": 1}})
    assert page.meta.total_pages == 1
