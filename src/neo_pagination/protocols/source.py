"""Data source protocols consumed by the paginator."""

from typing import Protocol, runtime_checkable, TypeVar, Sequence

T = TypeVar('T', covariant=True)


@runtime_checkable
class PageSource(Protocol[T]):
    """Protocol for collections that can be counted and read by window.

    Implementations must return rows in a stable order; the paginator
    assumes ordering was established upstream (e.g. by primary key).
    """

    def count(self) -> int:
        """Return the total number of rows in the collection."""
        ...

    def fetch_window(self, offset: int, limit: int) -> Sequence[T]:
        """Return at most ``limit`` rows starting at position ``offset``.

        Args:
            offset: Number of rows to skip (0-based)
            limit: Maximum number of rows to return

        Returns:
            Rows in the collection's order; empty past the end
        """
        ...


@runtime_checkable
class AsyncPageSource(Protocol[T]):
    """Async counterpart of ``PageSource`` for asyncio database drivers."""

    async def count(self) -> int:
        """Return the total number of rows in the collection."""
        ...

    async def fetch_window(self, offset: int, limit: int) -> Sequence[T]:
        """Return at most ``limit`` rows starting at position ``offset``."""
        ...
