from __future__ import annotations
from enum import Enum
from typing import FrozenSet, Generic, Iterable, List, Optional, TypeVar, Union
from pydantic import BaseModel, Field

T = TypeVar("T")


class SortOption(str, Enum):
    NONE = ""
    NEWEST = "newest"
    PRICE_ASC = "priceAsc"
    PRICE_DESC = "priceDesc"
    RATING_ASC = "ratingAsc"
    RATING_DESC = "ratingDesc"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "SortOption":
        """Unknown or empty values mean "no reordering"."""
        try:
            return cls((raw or "").strip())
        except ValueError:
            return cls.NONE


class ReviewFilter(str, Enum):
    ALL = "all-reviews"
    VERIFIED = "verified-reviews"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "ReviewFilter":
        try:
            return cls((raw or "").strip())
        except ValueError:
            return cls.ALL


def parse_page(raw: Union[str, int, None]) -> int:
    """Page numbers below 1 or unparsable values fall back to the first page."""
    try:
        page = int(str(raw).strip()) if raw is not None else 1
    except ValueError:
        return 1
    return page if page >= 1 else 1


class QueryParams(BaseModel):
    keyword: str = ""
    categories: FrozenSet[str] = frozenset()  # empty = all categories
    sort: SortOption = SortOption.NONE
    page: int = Field(default=1, ge=1)

    model_config = {"frozen": True}

    @classmethod
    def from_raw(
        cls,
        keyword: Optional[str] = None,
        categories: Optional[Iterable[str]] = None,
        sort: Optional[str] = None,
        page: Union[str, int, None] = None,
    ) -> "QueryParams":
        return cls(
            keyword=(keyword or "").strip(),
            categories=frozenset(c for c in (categories or []) if c and c.strip()),
            sort=SortOption.parse(sort),
            page=parse_page(page),
        )

    def cache_fingerprint(self) -> dict:
        return {
            "keyword": self.keyword.lower(),
            "categories": sorted(self.categories),
            "sort": self.sort.value,
            "page": self.page,
        }


class PageLink(BaseModel):
    number: int
    is_current: bool


class PageNavigation(BaseModel):
    links: List[PageLink]
    previous: Optional[int] = None
    next: Optional[int] = None


class PageResult(BaseModel, Generic[T]):
    items: List[T]
    page: int
    total_pages: int
    total_items: int
    page_size: int
