"""FastAPI dependencies for pagination query parameters."""

from typing import Optional
from fastapi import Depends, Query

from ..config.settings import PaginationSettings, get_pagination_settings
from ..entities import PageRequest
from ..services import Paginator


def get_page_request(
    page_number: int = Query(1, description="Page number (1-indexed)"),
    page_size: Optional[int] = Query(None, description="Items per page"),
    settings: PaginationSettings = Depends(get_pagination_settings),
) -> PageRequest:
    """Get a validated PageRequest from query parameters.

    Omitted page_size falls back to the configured default. Values below 1
    and sizes above the configured maximum raise InvalidArgumentError, which
    becomes a 400 error body once the exception handlers are registered.

    Usage:
        @router.get("/users", response_model=PageResponse[UserOut])
        async def list_users(page: PageRequest = Depends(get_page_request)):
            result = await paginate_request_async(source, page)
            return PageResponse.from_page_result(result)
    """
    return Paginator(settings).build_request(page_number, page_size)
