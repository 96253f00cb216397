"""Pagination result entity."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

T = TypeVar('T')
U = TypeVar('U')


def total_pages_for(total_count: int, page_size: int) -> int:
    """Ceiling of total_count / page_size in integer arithmetic."""
    return (total_count + page_size - 1) // page_size


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of items together with the size of the whole result set.

    ``items`` is stored as a tuple so the value is immutable end to end.
    ``total_pages`` is always ``ceil(total_count / page_size)`` and is 0 only
    for an empty result set.
    """

    items: Tuple[T, ...]
    total_count: int
    page_number: int
    page_size: int
    total_pages: int = field(default=-1)

    def __post_init__(self):
        # Normalise any iterable to a tuple and derive total_pages when omitted
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))
        if self.total_pages < 0:
            object.__setattr__(
                self, "total_pages", total_pages_for(self.total_count, self.page_size)
            )

    @property
    def count(self) -> int:
        """Get number of items in current page."""
        return len(self.items)

    @property
    def has_items(self) -> bool:
        """Check if page has any items."""
        return len(self.items) > 0

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page_number < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return self.page_number > 1

    @property
    def next_page(self) -> Optional[int]:
        return self.page_number + 1 if self.has_next else None

    @property
    def prev_page(self) -> Optional[int]:
        return self.page_number - 1 if self.has_prev else None

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def is_out_of_range(self) -> bool:
        """True when the requested page lies past the last page."""
        return self.page_number > self.total_pages

    @property
    def page_info(self) -> Dict[str, Any]:
        """Get comprehensive page information."""
        return {
            "current_page": self.page_number,
            "page_size": self.page_size,
            "total_items": self.total_count,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
            "next_page": self.next_page,
            "prev_page": self.prev_page,
            "offset": self.offset,
            "items_on_page": self.count,
        }

    def map(self, fn: Callable[[T], U]) -> "PageResult[U]":
        """Return a copy with fn applied to every item and the same metadata."""
        return PageResult(
            items=tuple(fn(item) for item in self.items),
            total_count=self.total_count,
            page_number=self.page_number,
            page_size=self.page_size,
            total_pages=self.total_pages,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation with snake_case keys."""
        return {
            "items": list(self.items),
            "total_count": self.total_count,
            "page_number": self.page_number,
            "page_size": self.page_size,
            "total_pages": self.total_pages,
        }
