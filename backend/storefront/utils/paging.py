"""
Page of results returned by list queries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, List, TypeVar

T = TypeVar("T")


@dataclass
class PagedList(Generic[T]):
    """One page of items plus the size of the whole result set."""

    items: List[T] = field(default_factory=list)
    page_index: int = 0
    page_size: int = 0
    total_count: int = 0

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        pages, remainder = divmod(self.total_count, self.page_size)
        return pages + 1 if remainder else pages

    @property
    def has_previous_page(self) -> bool:
        return self.page_index > 0

    @property
    def has_next_page(self) -> bool:
        return self.page_index + 1 < self.total_pages

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
