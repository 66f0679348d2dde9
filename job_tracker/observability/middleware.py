"""
FastAPI middleware for observability.

Correlation ID and request logging middleware.

Dependencies: fastapi, job_tracker.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from job_tracker.observability.correlation import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from job_tracker.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request with status and timing.

    Static asset requests are logged at DEBUG. Requests the tracker page
    makes to the handlers in-process are logged like any other request and
    share the page request's correlation ID.
    """

    def __init__(self, app, quiet_prefixes: tuple[str, ...] = ("/static",)):
        super().__init__(app)
        self.quiet_prefixes = quiet_prefixes

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        method = request.method
        path = request.url.path
        level = logging.DEBUG if path.startswith(self.quiet_prefixes) else logging.INFO

        try:
            response: Response = await call_next(request)
        except Exception as e:
            log_exception_with_context(
                logger, f"{method} {path} - unhandled exception", e,
                method=method, path=path, elapsed_ms=_elapsed_ms(started),
            )
            raise

        logger.log(
            level,
            f"{method} {path} - {response.status_code}",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "elapsed_ms": _elapsed_ms(started),
            },
        )
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """
        Inject correlation ID into request context.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        correlation_id = get_correlation_id()
        try:
            response: Response = await call_next(request)
        finally:
            reset_correlation_id(token)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
