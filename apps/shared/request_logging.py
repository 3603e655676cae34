"""Access logging for API services."""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.responses import Response

logger = logging.getLogger("access")


def setup_request_logging(app: FastAPI) -> None:
    """Log one line per request: client, method, path, status and duration."""

    @app.middleware("http")
    async def log_request(request: Request, call_next) -> Response:
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            # Unhandled errors surface here as exceptions; they are answered with a 500
            elapsed_ms = (time.perf_counter() - started) * 1000
            client = request.client.host if request.client else "-"
            logger.info(
                '%s "%s %s" %s %.1fms',
                client,
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )
