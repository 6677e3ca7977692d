"""Tests del cálculo de páginas y enlaces self/prev/next."""

import pytest

from app.application.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PageSlice,
    build_links,
    normalize_paging,
    offset_for,
    to_paged,
    total_pages,
)

BASE_URL = "http://testserver"


def _rels(links):
    return [link.rel for link in links]


@pytest.mark.parametrize(
    "page, page_size, expected",
    [
        (None, None, (1, DEFAULT_PAGE_SIZE)),
        (0, 10, (1, 10)),
        (-4, 10, (1, 10)),
        (3, 0, (3, 1)),
        (2, 500, (2, MAX_PAGE_SIZE)),
        (5, 100, (5, 100)),
    ],
)
def test_normalize_paging_clamps_values(page, page_size, expected):
    assert normalize_paging(page, page_size) == expected


def test_normalize_paging_keeps_offset_within_64_bits():
    page, page_size = normalize_paging(10**19, 20)

    assert page == (2**63 - 1) // 20
    assert page_size == 20
    assert 0 <= offset_for(page, page_size) <= 2**63 - 1


def test_offset_and_total_pages():
    assert offset_for(1, 20) == 0
    assert offset_for(3, 20) == 40
    assert total_pages(0, 20) == 0
    assert total_pages(20, 20) == 1
    assert total_pages(21, 20) == 2


def test_first_page_has_self_and_next():
    links = build_links(BASE_URL, "/api/motos", page=1, page_size=5, total=15)

    assert _rels(links) == ["self", "next"]
    assert links[0].href == "http://testserver/api/motos?page=1&pageSize=5"
    assert links[1].href == "http://testserver/api/motos?page=2&pageSize=5"
    assert all(link.method == "GET" for link in links)


def test_middle_page_has_prev_and_next():
    links = build_links(BASE_URL, "/api/motos", page=2, page_size=5, total=15)

    assert _rels(links) == ["self", "prev", "next"]
    assert links[1].href == "http://testserver/api/motos?page=1&pageSize=5"


def test_last_page_has_no_next():
    links = build_links(BASE_URL, "/api/usuarios", page=2, page_size=1, total=2)

    assert _rels(links) == ["self", "prev"]


def test_empty_collection_only_self():
    links = build_links(BASE_URL, "/api/zonas", page=1, page_size=20, total=0)

    assert _rels(links) == ["self"]


def test_page_beyond_last_keeps_self_and_prev():
    links = build_links(BASE_URL, "/api/zonas", page=7, page_size=20, total=0)

    assert _rels(links) == ["self", "prev"]
    assert links[0].href.endswith("/api/zonas?page=7&pageSize=20")


@pytest.mark.parametrize("total", [0, 1, 19, 20, 21, 99])
@pytest.mark.parametrize("page_size", [1, 7, 20])
def test_prev_and_next_presence(total, page_size):
    pages = total_pages(total, page_size)
    for page in range(1, pages + 3):
        rels = _rels(build_links(BASE_URL, "/api/x", page, page_size, total))
        assert rels[0] == "self"
        assert ("prev" in rels) == (page > 1)
        assert ("next" in rels) == (page < pages)


def test_to_paged_copies_slice():
    page_slice = PageSlice(items=["a", "b"], page=2, page_size=2, total=5)

    paged = to_paged(BASE_URL, page_slice, "/api/patios")

    assert paged.items == ["a", "b"]
    assert paged.page == 2
    assert paged.page_size == 2
    assert paged.total_count == 5
    assert _rels(paged.links) == ["self", "prev", "next"]

    body = paged.model_dump(by_alias=True)
    assert body["pageSize"] == 2
    assert body["totalCount"] == 5
