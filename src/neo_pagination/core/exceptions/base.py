"""Root of the neo-pagination error hierarchy.

Every error raised by this library, as opposed to errors coming out of the
database driver, derives from NeoPaginationError. Each one exposes a stable
``error_code`` and a ``details`` mapping so API layers can serialise it
without knowing the concrete class.
"""

from typing import Any, Dict, Optional


class NeoPaginationError(Exception):
    """Base class for errors raised by the pagination layer itself.

    Args:
        message: Human readable description
        error_code: Stable identifier for clients; the class name when omitted
        details: Structured context such as the offending field and bound
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = dict(details) if details else {}

    def to_dict(self) -> Dict[str, Any]:
        """Body of the ``error`` object in API responses."""
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": type(self).__name__,
        }


def get_http_status_code(exception: Exception) -> int:
    """HTTP status for an exception; 500 for anything not mapped."""
    from .http_mapping import get_http_status_code as lookup_status_code
    return lookup_status_code(exception)


def create_error_response(exception: NeoPaginationError) -> Dict[str, Any]:
    """Wrap ``exception.to_dict()`` in the ``{"error": ...}`` envelope."""
    return {"error": exception.to_dict()}
