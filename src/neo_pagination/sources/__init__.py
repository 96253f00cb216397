"""Page source adapters for common data-access layers."""

from .sequence import SequenceSource
from .sqlalchemy_source import (
    SqlAlchemySource,
    AsyncSqlAlchemySource,
    count_statement,
    window_statement,
    entity_statement,
)
from .asyncpg_source import AsyncpgSource

__all__ = [
    "SequenceSource",
    "SqlAlchemySource",
    "AsyncSqlAlchemySource",
    "AsyncpgSource",
    "count_statement",
    "window_statement",
    "entity_statement",
]
