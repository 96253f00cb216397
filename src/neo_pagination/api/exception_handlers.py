"""
Exception handlers exposing pagination errors as JSON responses.
"""
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.exceptions import (
    NeoPaginationError,
    create_error_response,
    get_http_status_code,
)

logger = logging.getLogger(__name__)


async def neo_pagination_error_handler(request: Request, exc: NeoPaginationError) -> JSONResponse:
    """Handle neo-pagination exceptions."""
    status_code = get_http_status_code(exc)
    if status_code >= 500:
        logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.error_code} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status_code, content=create_error_response(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Register pagination exception handlers for the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(NeoPaginationError, neo_pagination_error_handler)
