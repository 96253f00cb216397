"""
Pagination settings loaded from the environment.

Values are read from ``PAGINATION_*`` environment variables (or a ``.env``
file) and validated once per process through ``get_pagination_settings``.
"""
from typing import Optional
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ConfigurationError


class PaginationSettings(BaseSettings):
    """Defaults and limits applied by ``Paginator`` and the API helpers."""

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    default_page_size: int = Field(default=20, ge=1)
    max_page_size: Optional[int] = Field(default=None, ge=1)

    @model_validator(mode="after")
    def check_bounds(self) -> "PaginationSettings":
        if self.max_page_size is not None and self.default_page_size > self.max_page_size:
            raise ConfigurationError(
                f"default_page_size ({self.default_page_size}) exceeds "
                f"max_page_size ({self.max_page_size})",
                details={
                    "default_page_size": self.default_page_size,
                    "max_page_size": self.max_page_size,
                },
            )
        return self


@lru_cache()
def get_pagination_settings() -> PaginationSettings:
    """Get cached pagination settings."""
    return PaginationSettings()
