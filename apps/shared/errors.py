"""
Secure Error Handling

Helpers for turning failures into client-safe JSON bodies. Internal detail
is logged server-side only and correlated through a short error id.
"""

import logging
import uuid

from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
ERROR_ID_HEADER = "X-Error-ID"


def log_and_sanitize_error(error: Exception, context: str) -> str:
    """
    Log full error details server-side and return an id for the client.

    Args:
        error: The exception that occurred
        context: Description of what failed (e.g., "GET /blogpost")

    Returns:
        Short error id to hand back to the client for correlation
    """
    error_id = str(uuid.uuid4())[:8]

    logger.error(
        f"{context} failed [{error_id}]: {type(error).__name__}: {str(error)}",
        exc_info=error,
    )

    return error_id


def error_response(message: str, status_code: int, **extra) -> JSONResponse:
    """Consistent error payloads across the API."""
    return JSONResponse(status_code=status_code, content={"message": message, **extra})


def internal_error_response(error: Exception, context: str) -> JSONResponse:
    """Log `error` and answer with the fixed, non-leaking 500 body."""
    error_id = log_and_sanitize_error(error, context)
    response = error_response(INTERNAL_ERROR_MESSAGE, 500)
    response.headers[ERROR_ID_HEADER] = error_id
    return response
