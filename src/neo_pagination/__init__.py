"""Neo-Pagination - page number / page size pagination for ORM entity queries.

Provides:
- ``paginate`` / ``paginate_async`` over any source exposing ``count()`` and
  ``fetch_window(offset, limit)``
- Immutable ``PageResult`` values with a snake_case wire representation
- Sources for SQLAlchemy sessions, asyncpg pools and in-memory sequences
- FastAPI helpers (response model, query dependency, error handlers)
"""

from .__version__ import __version__

from .entities import PageRequest, PageResult, total_pages_for

from .protocols import PageSource, AsyncPageSource

from .services import (
    Paginator,
    paginate,
    paginate_async,
    paginate_request,
    paginate_request_async,
)

from .sources import (
    SequenceSource,
    SqlAlchemySource,
    AsyncSqlAlchemySource,
    AsyncpgSource,
)

from .core.exceptions import (
    NeoPaginationError,
    ConfigurationError,
    ValidationError,
    InvalidArgumentError,
    SourceContractError,
    get_http_status_code,
    create_error_response,
)

from .config import (
    PaginationSettings,
    get_pagination_settings,
    setup_logging,
    get_logger,
)

__all__ = [
    "__version__",

    # Entities
    "PageRequest",
    "PageResult",
    "total_pages_for",

    # Protocols
    "PageSource",
    "AsyncPageSource",

    # Services
    "Paginator",
    "paginate",
    "paginate_async",
    "paginate_request",
    "paginate_request_async",

    # Sources
    "SequenceSource",
    "SqlAlchemySource",
    "AsyncSqlAlchemySource",
    "AsyncpgSource",

    # Exceptions
    "NeoPaginationError",
    "ConfigurationError",
    "ValidationError",
    "InvalidArgumentError",
    "SourceContractError",
    "get_http_status_code",
    "create_error_response",

    # Configuration
    "PaginationSettings",
    "get_pagination_settings",
    "setup_logging",
    "get_logger",
]
