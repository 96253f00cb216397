"""Exception hierarchy for neo-pagination."""

from .base import (
    NeoPaginationError,
    get_http_status_code,
    create_error_response,
)
from .domain import (
    ConfigurationError,
    ValidationError,
    InvalidArgumentError,
    SourceContractError,
)
from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    # Base
    "NeoPaginationError",

    # Domain
    "ConfigurationError",
    "ValidationError",
    "InvalidArgumentError",
    "SourceContractError",

    # Utilities
    "get_http_status_code",
    "create_error_response",
    "HTTP_STATUS_MAP",
]
