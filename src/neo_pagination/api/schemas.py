"""Pydantic response model for paginated API payloads."""

from typing import Any, Callable, Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field

from ..entities import PageResult

T = TypeVar('T')


class PageResponse(BaseModel, Generic[T]):
    """Response model for one page of items.

    Field names are the public wire contract and stay snake_case.
    """

    model_config = ConfigDict(from_attributes=True)

    items: List[T] = Field(..., description="Items on the current page")
    total_count: int = Field(..., ge=0, description="Total number of items across all pages")
    page_number: int = Field(..., ge=1, description="Current page number (1-indexed)")
    page_size: int = Field(..., ge=1, description="Maximum number of items per page")
    total_pages: int = Field(..., ge=0, description="Total number of pages; 0 for an empty result")

    @classmethod
    def from_page_result(
        cls,
        result: PageResult,
        item_mapper: Optional[Callable[[Any], Any]] = None
    ) -> "PageResponse[T]":
        """Create response from a PageResult, optionally converting each item."""
        if item_mapper is not None:
            result = result.map(item_mapper)
        return cls(
            items=list(result.items),
            total_count=result.total_count,
            page_number=result.page_number,
            page_size=result.page_size,
            total_pages=result.total_pages,
        )
