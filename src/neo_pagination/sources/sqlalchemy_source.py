"""SQLAlchemy ORM page sources for sync and async sessions."""

from typing import Any, Generic, List, Type, TypeVar

from sqlalchemy import Result, Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from ..core.exceptions import SourceContractError

T = TypeVar('T')


def count_statement(statement: Select) -> Select:
    """Wrap statement in ``SELECT count(*)``, dropping its ORDER BY."""
    return select(func.count()).select_from(statement.order_by(None).subquery())


def window_statement(statement: Select, offset: int, limit: int) -> Select:
    """Apply OFFSET/LIMIT to statement."""
    return statement.offset(offset).limit(limit)


def entity_statement(entity: Type[Any]) -> Select:
    """Select every row of a mapped class ordered by its primary key.

    Works for any primary key shape (integer, UUID, composite).
    """
    mapper = inspect(entity)
    return select(entity).order_by(*mapper.primary_key)


def _check_unlimited(statement: Select) -> None:
    """Reject statements that already carry LIMIT/OFFSET/FETCH.

    The window replaces those clauses while the count keeps them, so the two
    reads would describe different row sets.
    """
    clauses = {
        "limit": statement._limit_clause,
        "offset": statement._offset_clause,
        "fetch": statement._fetch_clause,
    }
    present = sorted(name for name, clause in clauses.items() if clause is not None)
    if present:
        raise SourceContractError(
            f"Statement already has {', '.join(present).upper()}; "
            "pass the unlimited statement and let the paginator window it",
            clauses=present,
        )


def _returns_scalars(statement: Select) -> bool:
    """One selected entity or column yields scalars; anything else yields rows."""
    return len(statement.column_descriptions) == 1


def _selects_entity(statement: Select) -> bool:
    """True when the single selected item is a mapped class, not a column."""
    descriptions = statement.column_descriptions
    if len(descriptions) != 1:
        return False
    entity = descriptions[0].get("entity")
    return entity is not None and descriptions[0].get("expr") is entity


def _window_items(statement: Select, result: Result) -> List[Any]:
    if _selects_entity(statement):
        # joined eager loads of collections repeat the parent row
        return list(result.unique().scalars().all())
    if _returns_scalars(statement):
        return list(result.scalars().all())
    return list(result.all())


class SqlAlchemySource(Generic[T]):
    """Page source executing a ``Select`` on a sync ``Session``.

    The session is borrowed: it is never committed or closed here. The
    statement must not carry its own LIMIT/OFFSET.
    """

    def __init__(self, session: Session, statement: Select):
        _check_unlimited(statement)
        self._session = session
        self._statement = statement

    @classmethod
    def for_entity(cls, session: Session, entity: Type[T]) -> "SqlAlchemySource[T]":
        """Source over all rows of a mapped class in primary key order."""
        return cls(session, entity_statement(entity))

    @property
    def statement(self) -> Select:
        return self._statement

    def count(self) -> int:
        return int(self._session.execute(count_statement(self._statement)).scalar_one())

    def fetch_window(self, offset: int, limit: int) -> List[T]:
        result = self._session.execute(window_statement(self._statement, offset, limit))
        return _window_items(self._statement, result)


class AsyncSqlAlchemySource(Generic[T]):
    """Page source executing a ``Select`` on an ``AsyncSession``."""

    def __init__(self, session: AsyncSession, statement: Select):
        _check_unlimited(statement)
        self._session = session
        self._statement = statement

    @classmethod
    def for_entity(cls, session: AsyncSession, entity: Type[T]) -> "AsyncSqlAlchemySource[T]":
        """Source over all rows of a mapped class in primary key order."""
        return cls(session, entity_statement(entity))

    @property
    def statement(self) -> Select:
        return self._statement

    async def count(self) -> int:
        result = await self._session.execute(count_statement(self._statement))
        return int(result.scalar_one())

    async def fetch_window(self, offset: int, limit: int) -> List[T]:
        result = await self._session.execute(window_statement(self._statement, offset, limit))
        return _window_items(self._statement, result)
