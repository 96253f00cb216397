"""FastAPI integration: response model, dependencies and error handlers."""

from .schemas import PageResponse
from .dependencies import get_page_request
from .exception_handlers import register_exception_handlers, neo_pagination_error_handler

__all__ = [
    "PageResponse",
    "get_page_request",
    "register_exception_handlers",
    "neo_pagination_error_handler",
]
