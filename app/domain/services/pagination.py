from __future__ import annotations
import math
from typing import List, Sequence, TypeVar
from pydantic import BaseModel
from app.domain.models.query import PageLink, PageNavigation, PageResult

T = TypeVar("T")


class InvalidPageSizeError(ValueError):
    """Raised when a page size is not strictly positive (programmer error)."""


class PageWindow(BaseModel):
    effective_page: int
    offset: int
    limit: int
    total_pages: int

    model_config = {"frozen": True}

    def slice(self, items: Sequence[T]) -> List[T]:
        # Offsets past the end give an empty page
        return list(items[self.offset:self.offset + self.limit])


def total_pages_for(total_count: int, page_size: int) -> int:
    if page_size <= 0:
        raise InvalidPageSizeError(f"page_size must be > 0, got {page_size}")
    return max(1, math.ceil(max(total_count, 0) / page_size))


def paginate(total_count: int, page_size: int, requested_page: int) -> PageWindow:
    """
    Compute the page window for `requested_page`, clamped to [1, total_pages].
    There is always at least one (possibly empty) page.
    """
    total_pages = total_pages_for(total_count, page_size)
    effective_page = min(max(requested_page, 1), total_pages)
    return PageWindow(
        effective_page=effective_page,
        offset=(effective_page - 1) * page_size,
        limit=page_size,
        total_pages=total_pages,
    )


def paginate_items(items: Sequence[T], page_size: int, requested_page: int) -> PageResult[T]:
    window = paginate(len(items), page_size, requested_page)
    return PageResult(
        items=window.slice(items),
        page=window.effective_page,
        total_pages=window.total_pages,
        total_items=len(items),
        page_size=page_size,
    )


def page_links(total_pages: int, current_page: int) -> List[PageLink]:
    return [PageLink(number=n, is_current=(n == current_page)) for n in range(1, max(total_pages, 1) + 1)]


def page_navigation(total_pages: int, current_page: int) -> PageNavigation:
    """Page links plus previous/next targets (None on the first/last page)."""
    total_pages = max(total_pages, 1)
    return PageNavigation(
        links=page_links(total_pages, current_page),
        previous=current_page - 1 if current_page > 1 else None,
        next=current_page + 1 if current_page < total_pages else None,
    )
