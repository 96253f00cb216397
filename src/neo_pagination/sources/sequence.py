"""In-memory page source."""

from typing import Generic, List, Sequence, TypeVar

T = TypeVar('T')


class SequenceSource(Generic[T]):
    """Page source over an already materialised sequence."""

    def __init__(self, items: Sequence[T]):
        self._items = items

    def count(self) -> int:
        return len(self._items)

    def fetch_window(self, offset: int, limit: int) -> List[T]:
        return list(self._items[offset:offset + limit])
