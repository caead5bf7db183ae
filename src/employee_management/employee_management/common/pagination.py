from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar

from ..core.constants import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """1-based paging plus optional search and sort.

    `sort_by` is matched case-insensitively against a repository allow-list;
    unknown keys fall back to the repository default.
    """

    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE
    search_term: Optional[str] = None
    sort_by: Optional[str] = None
    sort_descending: bool = False

    def normalized(self) -> "PageRequest":
        page_number = self.page_number if self.page_number >= 1 else DEFAULT_PAGE_NUMBER
        page_size = self.page_size if 1 <= self.page_size <= MAX_PAGE_SIZE else DEFAULT_PAGE_SIZE
        search = (self.search_term or "").strip() or None
        sort_by = (self.sort_by or "").strip().lower() or None
        return PageRequest(
            page_number=page_number,
            page_size=page_size,
            search_term=search,
            sort_by=sort_by,
            sort_descending=bool(self.sort_descending),
        )

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    items: Sequence[T]
    total_count: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages
