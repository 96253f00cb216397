"""Offset/limit pagination over any countable, windowable source."""

import logging
from typing import Optional, Sequence, TypeVar

from ..config.settings import PaginationSettings, get_pagination_settings
from ..core.exceptions import InvalidArgumentError, SourceContractError
from ..entities import PageRequest, PageResult, total_pages_for
from ..protocols import AsyncPageSource, PageSource

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _assemble(
    source: object,
    request: PageRequest,
    items: Sequence[T],
    total_count: int
) -> PageResult[T]:
    """Build the page result, guarding the invariants against odd sources."""
    if isinstance(total_count, bool) or not isinstance(total_count, int) or total_count < 0:
        raise SourceContractError(
            f"Source returned an invalid total count: {total_count!r}",
            source=source,
            total_count=repr(total_count),
        )

    items = tuple(items)
    if len(items) > request.limit:
        logger.warning(
            f"Source returned {len(items)} rows for a window of {request.limit}; truncating"
        )
        items = items[:request.limit]

    result = PageResult(
        items=items,
        total_count=total_count,
        page_number=request.page_number,
        page_size=request.page_size,
        total_pages=total_pages_for(total_count, request.page_size),
    )

    logger.debug(
        f"Paginated page={result.page_number} size={result.page_size}: "
        f"{result.count} items, total_count={result.total_count}, "
        f"total_pages={result.total_pages}"
    )
    return result


def paginate_request(source: PageSource[T], request: PageRequest) -> PageResult[T]:
    """Fetch the window described by request and the total row count.

    Issues two independent reads (window, then count). They are not a
    snapshot, so concurrent writes between them can make the total and the
    items disagree.
    """
    items = source.fetch_window(request.offset, request.limit)
    total_count = source.count()
    return _assemble(source, request, items, total_count)


async def paginate_request_async(source: AsyncPageSource[T], request: PageRequest) -> PageResult[T]:
    """Async variant of ``paginate_request``; reads are awaited in sequence."""
    items = await source.fetch_window(request.offset, request.limit)
    total_count = await source.count()
    return _assemble(source, request, items, total_count)


def paginate(source: PageSource[T], page_number: int, page_size: int) -> PageResult[T]:
    """Return page ``page_number`` (1-indexed) of ``page_size`` items from source.

    Args:
        source: Object exposing ``count()`` and ``fetch_window(offset, limit)``
        page_number: Page to return, starting at 1
        page_size: Maximum number of items per page

    Returns:
        PageResult with the items and total_count/total_pages metadata. A page
        past the end yields no items but still reports the totals.

    Raises:
        InvalidArgumentError: If page_number or page_size is below 1; raised
            before the source is touched
    """
    return paginate_request(source, PageRequest(page_number=page_number, page_size=page_size))


async def paginate_async(source: AsyncPageSource[T], page_number: int, page_size: int) -> PageResult[T]:
    """Async variant of ``paginate`` for sources with coroutine methods."""
    return await paginate_request_async(
        source, PageRequest(page_number=page_number, page_size=page_size)
    )


class Paginator:
    """Paginator bound to a set of ``PaginationSettings``.

    Fills in the configured default page size when none is given and rejects
    sizes above the configured maximum.
    """

    def __init__(self, settings: Optional[PaginationSettings] = None):
        self._settings = settings if settings is not None else get_pagination_settings()

    @property
    def settings(self) -> PaginationSettings:
        return self._settings

    def build_request(self, page_number: int = 1, page_size: Optional[int] = None) -> PageRequest:
        """Create a validated PageRequest applying default and maximum size."""
        if page_size is None:
            page_size = self._settings.default_page_size

        request = PageRequest(page_number=page_number, page_size=page_size)

        max_page_size = self._settings.max_page_size
        if max_page_size is not None and request.page_size > max_page_size:
            raise InvalidArgumentError(
                f"page_size must be <= {max_page_size}, got {request.page_size}",
                field="page_size",
                value=request.page_size,
                maximum=max_page_size,
            )
        return request

    def paginate(
        self,
        source: PageSource[T],
        page_number: int = 1,
        page_size: Optional[int] = None
    ) -> PageResult[T]:
        """Paginate a sync source."""
        return paginate_request(source, self.build_request(page_number, page_size))

    async def paginate_async(
        self,
        source: AsyncPageSource[T],
        page_number: int = 1,
        page_size: Optional[int] = None
    ) -> PageResult[T]:
        """Paginate an async source."""
        return await paginate_request_async(source, self.build_request(page_number, page_size))
