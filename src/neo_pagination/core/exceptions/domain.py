"""Domain-specific exceptions for neo-pagination."""

from typing import Any, Optional

from .base import NeoPaginationError


# Configuration Errors
class ConfigurationError(NeoPaginationError):
    """Raised when pagination settings are inconsistent."""
    pass


# Validation Errors
class ValidationError(NeoPaginationError):
    """Raised when input validation fails."""
    pass


class InvalidArgumentError(ValidationError, ValueError):
    """Raised when a page number or page size is out of range."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        **details: Any
    ):
        if field is not None:
            details = {"field": field, "value": value, **details}
        super().__init__(message, details=details)
        self.field = field
        self.value = value


# Source Errors
class SourceContractError(NeoPaginationError):
    """Raised when a page source breaks its count/window contract.

    Covers invalid totals returned by ``count()`` and statements the source
    cannot page consistently. These are server-side faults, never the
    caller's page arguments.
    """

    def __init__(self, message: str, source: Any = None, **details: Any):
        if source is not None:
            details = {"source": type(source).__name__, **details}
        super().__init__(message, details=details)
