"""
Secure Error Handling

Consistent JSON error payloads for the API, and utilities for handling
unexpected errors without leaking internals to clients.
"""

import logging
import uuid
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def log_and_sanitize_error(
    error: Exception,
    context: str,
    user_message: Optional[str] = None
) -> tuple[str, str]:
    """
    Log full error details server-side and return sanitized message for client.

    Args:
        error: The exception that occurred
        context: Description of what operation failed (e.g., "POST /calendar/seed")
        user_message: Optional custom message to show user. If None, uses generic message.

    Returns:
        Tuple of (sanitized_message, error_id) for client response
    """
    # Generate unique error ID for correlation
    error_id = str(uuid.uuid4())[:8]

    logger.error(
        f"{context} failed [{error_id}]: {type(error).__name__}: {str(error)}",
        exc_info=error
    )

    if user_message:
        sanitized = f"{user_message} (Error ID: {error_id})"
    else:
        sanitized = f"{context} failed. Please try again later. (Error ID: {error_id})"

    return sanitized, error_id


def error_response(message: str, category: str, status_code: int) -> JSONResponse:
    """Consistent error payloads across the API."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "category": category,
        },
    )


def category_for_status(status_code: int) -> str:
    if status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN):
        return "security"
    if status_code >= 500:
        return "server_error"
    return "client_error"


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    message = (
        detail.get("message") if isinstance(detail, dict) else str(detail)
    ) or "Request failed."
    category = (
        detail.get("category") if isinstance(detail, dict) else None
    ) or category_for_status(exc.status_code)

    return error_response(
        message=message,
        category=category,
        status_code=exc.status_code,
    )


async def unexpected_exception_handler(request: Request, exc: Exception):
    message, _ = log_and_sanitize_error(
        exc,
        f"{request.method} {request.url.path}",
        user_message="An unexpected server error occurred. Please try again later.",
    )
    return error_response(
        message=message,
        category="server_error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def setup_error_handlers(app: FastAPI) -> None:
    """Register the shared exception handlers on a FastAPI app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
