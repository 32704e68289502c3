"""
Middleware configuration for the application.
Includes Correlation ID setup, request logging and bare OPTIONS handling.
"""

import time
import structlog
from typing import Callable
from fastapi import Request, Response
from asgi_correlation_id import CorrelationIdMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log requests and responses with timing."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        logger.info(
            "Request started",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)

            process_time = time.time() - start_time

            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                process_time_ms=round(process_time * 1000, 2),
            )

            return response

        except Exception:
            process_time = time.time() - start_time
            logger.exception(
                "Request failed",
                method=request.method,
                path=request.url.path,
                process_time_ms=round(process_time * 1000, 2),
            )
            raise


class OptionsMiddleware(BaseHTTPMiddleware):
    """Answer any OPTIONS request the CORS layer did not treat as a preflight."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200)
        return await call_next(request)


def setup_middleware(app):
    """Setup all middleware for the application."""

    # Starlette runs middleware last-added-first, so OPTIONS sits innermost
    app.add_middleware(OptionsMiddleware)

    # Request Logging
    app.add_middleware(RequestLoggingMiddleware)

    # Correlation ID wraps logging so every line carries the request id
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
