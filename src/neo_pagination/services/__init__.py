"""Pagination services."""

from .paginator import (
    Paginator,
    paginate,
    paginate_async,
    paginate_request,
    paginate_request_async,
)

__all__ = [
    "Paginator",
    "paginate",
    "paginate_async",
    "paginate_request",
    "paginate_request_async",
]
