import pytest
from pydantic import ValidationError as PydanticValidationError

from paged_resources.core.exceptions import MalformedSortSpecification
from paged_resources.schemas.page import Direction, Order, Page, Pageable, Sort


def test_page_of_computes_total_pages():
    pageable = Pageable(page=1, size=5)
    page = Page.of(["f", "g", "h", "i", "j"], pageable, 23)

    assert page.number == 1
    assert page.size == 5
    assert page.total_pages == 5
    assert page.total_elements == 23
    assert page.number_of_elements == 5


def test_empty_page():
    page = Page.empty(Pageable(page=0, size=10))

    assert page.total_pages == 0
    assert not page.has_content()
    assert not page.has_next()
    assert not page.has_previous()
    assert page.is_first()
    assert page.is_last()


def test_next_predicate_uses_total_pages():
    assert Page(number=0, size=5, total_pages=2).has_next()
    assert not Page(number=1, size=5, total_pages=2).has_next()
    assert Page(number=1, size=5, total_pages=2).has_previous()


def test_page_is_immutable():
    page = Page(number=0, size=5, total_pages=1)

    with pytest.raises(PydanticValidationError):
        page.number = 3


def test_page_rejects_invalid_size():
    with pytest.raises(PydanticValidationError):
        Page(number=0, size=0)


def test_page_map():
    page = Page.of([1, 2], Pageable(page=0, size=2, sort=Sort.by("id")), 2)
    mapped = page.map(str)

    assert mapped.content == ["1", "2"]
    assert mapped.sort == page.sort
    assert mapped.total_pages == 1


def test_page_pageables():
    page = Page.of([1, 2], Pageable(page=1, size=2), 6)

    assert (page.pageable.page, page.pageable.size) == (1, 2)
    assert page.next_pageable().page == 2
    assert page.previous_pageable().page == 0
    assert page.previous_pageable().size == 2

    last = Page.of([5, 6], Pageable(page=2, size=2), 6)
    assert last.next_pageable() is None


def test_pageable_navigation():
    pageable = Pageable(page=3, size=10)

    assert pageable.offset == 30
    assert pageable.next().page == 4
    assert pageable.previous().page == 2
    assert pageable.first().page == 0
    assert pageable.first().previous_or_first().page == 0

    with pytest.raises(ValueError):
        pageable.first().previous()


def test_sort_parse_round_trips_str():
    sort = Sort(orders=[
        Order(property="name", direction=Direction.ASC),
        Order(property="created_at", direction=Direction.DESC),
    ])

    assert str(sort) == "name: ASC, created_at: DESC"
    assert Sort.parse(str(sort)) == sort


def test_sort_parse_unsorted():
    assert Sort.parse("UNSORTED").is_unsorted()
    assert Sort.parse("").is_unsorted()
    assert not Sort.unsorted()


def test_sort_parse_is_case_insensitive_on_direction():
    sort = Sort.parse("name:desc")

    assert sort.get_order_for("name").direction == Direction.DESC
    assert sort.get_order_for("email") is None


def test_sort_parse_rejects_missing_direction():
    with pytest.raises(MalformedSortSpecification) as exc_info:
        Sort.parse("name")

    assert exc_info.value.token == "name"
    assert exc_info.value.status_code == 400
    assert exc_info.value.code == "MALFORMED_SORT"
