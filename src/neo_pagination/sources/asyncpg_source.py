"""asyncpg page source over a raw SQL query."""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

import asyncpg

from ..core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

RowMapper = Callable[[asyncpg.Record], Any]


def _record_to_dict(record: asyncpg.Record) -> Dict[str, Any]:
    return dict(record)


def _validate_schema_name(schema: str) -> None:
    """Reject schema names that are not plain identifiers."""
    if not schema or not schema.replace("_", "").isalnum():
        raise InvalidArgumentError(
            f"Invalid schema name: {schema}",
            field="schema",
            value=schema,
        )


class AsyncpgSource:
    """Page source running an ordered SELECT through an asyncpg pool or connection.

    ``query`` must already carry its ORDER BY and may reference positional
    parameters ``$1..$n`` supplied through ``args``. A ``{schema}`` placeholder
    is formatted with ``schema`` when one is given.

    Example:
        source = AsyncpgSource(
            pool,
            "SELECT id, email FROM {schema}.users WHERE active = $1 ORDER BY id",
            True,
            schema="admin",
        )
        page = await paginate_async(source, page_number=2, page_size=25)
    """

    def __init__(
        self,
        connection: Union[asyncpg.Pool, asyncpg.Connection],
        query: str,
        *args: Any,
        schema: Optional[str] = None,
        row_mapper: Optional[RowMapper] = None
    ):
        if schema is not None:
            _validate_schema_name(schema)
            query = query.format(schema=schema)

        self._connection = connection
        self._query = query.strip().rstrip(";").rstrip()
        self._args = list(args)
        self._row_mapper = row_mapper or _record_to_dict

    @property
    def query(self) -> str:
        return self._query

    def build_count_query(self) -> str:
        return f"SELECT COUNT(*) FROM ({self._query}) AS paginated_count"

    def build_window_query(self) -> str:
        next_param = len(self._args) + 1
        return f"{self._query} LIMIT ${next_param} OFFSET ${next_param + 1}"

    async def count(self) -> int:
        total = await self._connection.fetchval(self.build_count_query(), *self._args)
        return int(total or 0)

    async def fetch_window(self, offset: int, limit: int) -> List[Any]:
        window_query = self.build_window_query()
        logger.debug(f"Fetching window offset={offset} limit={limit}: {window_query}")
        records = await self._connection.fetch(window_query, *self._args, limit, offset)
        return [self._row_mapper(record) for record in records]
