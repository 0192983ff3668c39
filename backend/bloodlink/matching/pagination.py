from __future__ import annotations

import math
from typing import List, Sequence, TypeVar

from ..errors import PageOutOfRange
from ..models.search import Page

T = TypeVar("T")


def _check_page_size(page_size: int) -> None:
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")


def total_pages(count: int, page_size: int) -> int:
    _check_page_size(page_size)
    return max(1, math.ceil(count / page_size))


def paginate(items: Sequence[T], page: int, page_size: int) -> List[T]:
    """Slice one 1-based page out of ``items``; pages past either end come back empty."""
    _check_page_size(page_size)
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(items[start : start + page_size])


def ensure_page_in_range(page: int, count: int, page_size: int) -> int:
    last = total_pages(count, page_size)
    if page < 1 or page > last:
        raise PageOutOfRange(page, last)
    return page


def build_page(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    return Page(
        items=paginate(items, page, page_size),
        page=page,
        page_size=page_size,
        total_items=len(items),
        total_pages=total_pages(len(items), page_size),
    )
