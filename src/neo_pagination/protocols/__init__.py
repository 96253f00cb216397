"""Pagination protocols for data sources."""

from .source import PageSource, AsyncPageSource

__all__ = [
    "PageSource",
    "AsyncPageSource",
]
