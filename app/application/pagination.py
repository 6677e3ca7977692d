"""
Paginación y enlaces HATEOAS para los listados.

Las páginas fuera de rango no se rechazan: devuelven items vacíos con
enlace self (y prev, porque page > 1).
"""

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from app.api.schemas.common import DB_INT_MAX, Link, PagedResult

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass
class PageSlice(Generic[T]):
    items: Sequence[T]
    page: int
    page_size: int
    total: int


def normalize_paging(
    page: int | None, page_size: int | None, max_page_size: int = MAX_PAGE_SIZE
) -> tuple[int, int]:
    if page_size is None:
        page_size = DEFAULT_PAGE_SIZE
    page_size = min(max(page_size, 1), max_page_size)
    # El offset tiene que caber en un entero de 64 bits de la base
    page = min(max(page or 1, 1), DB_INT_MAX // page_size)
    return page, page_size


def offset_for(page: int, page_size: int) -> int:
    return (page - 1) * page_size


def total_pages(total: int, page_size: int) -> int:
    return math.ceil(total / page_size)


def make_link(base_url: str, rel: str, path: str, method: str = "GET") -> Link:
    return Link(rel=rel, href=f"{base_url}{path}", method=method)


def build_links(base_url: str, base_path: str, page: int, page_size: int, total: int) -> list[Link]:
    links = [make_link(base_url, "self", f"{base_path}?page={page}&pageSize={page_size}")]
    if page > 1:
        links.append(make_link(base_url, "prev", f"{base_path}?page={page - 1}&pageSize={page_size}"))
    if page < total_pages(total, page_size):
        links.append(make_link(base_url, "next", f"{base_path}?page={page + 1}&pageSize={page_size}"))
    return links


def to_paged(base_url: str, page_slice: PageSlice, base_path: str) -> PagedResult:
    return PagedResult(
        items=list(page_slice.items),
        page=page_slice.page,
        page_size=page_slice.page_size,
        total_count=page_slice.total,
        links=build_links(
            base_url, base_path, page_slice.page, page_slice.page_size, page_slice.total
        ),
    )
