"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import NeoPaginationError
from .domain import (
    ConfigurationError,
    InvalidArgumentError,
    SourceContractError,
    ValidationError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    InvalidArgumentError: 400,

    # 422 Unprocessable Entity
    ValidationError: 422,

    # 500 Internal Server Error
    ConfigurationError: 500,
    SourceContractError: 500,
    NeoPaginationError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Resolve the status code of the closest mapped class in the MRO."""
    for exception_class in type(exception).__mro__:
        if exception_class in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_class]
    return 500
