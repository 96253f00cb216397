"""Pagination request entities."""

from dataclasses import dataclass
from typing import Any

from ..core.exceptions import InvalidArgumentError


def _require_positive_int(field_name: str, value: Any) -> None:
    """Raise InvalidArgumentError unless value is an int >= 1."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{field_name} must be an integer, got {type(value).__name__}",
            field=field_name,
            value=value,
        )
    if value < 1:
        raise InvalidArgumentError(
            f"{field_name} must be >= 1, got {value}",
            field=field_name,
            value=value,
            minimum=1,
        )


@dataclass(frozen=True)
class PageRequest:
    """Page number / page size request (1-indexed)."""

    page_number: int = 1
    page_size: int = 20

    def __post_init__(self):
        """Validate pagination parameters."""
        _require_positive_int("page_number", self.page_number)
        _require_positive_int("page_size", self.page_size)

    @property
    def offset(self) -> int:
        """Calculate offset from page_number and page_size."""
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Get limit (alias for page_size)."""
        return self.page_size
