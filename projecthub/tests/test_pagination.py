"""Tests for PaginationHelper and PageRequest."""

import pytest

from projecthub.core.project.pagination import PageRequest, PaginationHelper


@pytest.fixture()
def helper():
    return PaginationHelper()


@pytest.mark.parametrize("page,expected", [(None, 1), (0, 1), (-3, 1), (1, 1), (42, 42)])
def test_normalize_page(helper, page, expected):
    assert helper.normalize_page(page) == expected


@pytest.mark.parametrize("limit,expected", [
    (None, 20),
    (0, 20),
    (-1, 20),
    (5, 5),
    (100, 100),
    (101, 100),
    (10**9, 100),
])
def test_normalize_limit(helper, limit, expected):
    assert helper.normalize_limit(limit, 20, 100) == expected


def test_unknown_sort_values_fall_back(helper):
    request = helper.build_page_request(1, 10, "password", "sideways")
    assert request.sort_by == "created_at"
    assert request.sort_dir == "desc"


def test_sort_dir_is_case_insensitive(helper):
    assert helper.build_page_request(1, 10, "name", " ASC ").sort_dir == "asc"


def test_custom_sortable_fields():
    helper = PaginationHelper(sortable_fields=("title",), default_sort_field="title", default_sort_dir="asc")
    request = helper.build_page_request(2, 5)
    assert request == PageRequest(page=2, limit=5, sort_by="title", sort_dir="asc")


def test_default_sort_field_must_be_sortable():
    with pytest.raises(ValueError):
        PaginationHelper(sortable_fields=("name",), default_sort_field="created_at")


def test_page_request_offset():
    request = PageRequest(page=3, limit=25, sort_by="name", sort_dir="desc")
    assert request.offset == 50
    assert request.descending is True


def test_huge_page_is_clamped_to_addressable_offset(helper):
    request = helper.build_page_request(10**19, 10)
    assert request.offset == (2**63 - 1) // 10 * 10


def test_ordinary_page_is_untouched(helper):
    assert helper.build_page_request(7, 10).page == 7
