"""Pagination entities for requests and results."""

from .requests import PageRequest
from .responses import PageResult, total_pages_for

__all__ = [
    "PageRequest",
    "PageResult",
    "total_pages_for",
]
