"""
Handler error handling utilities.

Provides a decorator turning any failure of a handler into the JSON
failure envelope with a 500 status.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse

from job_tracker.core.exceptions import (
    ConfigurationError,
    InvalidRequestBodyError,
    SheetsBackendError,
)
from job_tracker.models.common import ErrorResponse
from job_tracker.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_sheets_errors(message: str, expose_detail: bool) -> Callable[[F], F]:
    """
    Decorator factory mapping handler failures to the failure envelope.

    Configuration, backend and unexpected errors are all reported the same
    way, with status 500: the caller decides whether to retry.

    Args:
        message: User-facing failure message
        expose_detail: Include the error text under ``error`` in the body

    Returns:
        Callable: Decorator for an async route function
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except InvalidRequestBodyError as e:
                logger.warning(
                    "Rejected request body",
                    extra={"handler": func.__name__, "error_msg": e.message},
                )
                return _failure(message, e.message if expose_detail else None)

            except ConfigurationError as e:
                log_exception_with_context(
                    logger, "Handler misconfigured", e,
                    handler=func.__name__, missing=e.details.get("missing"),
                )
                return _failure(message, e.message if expose_detail else None)

            except SheetsBackendError as e:
                log_exception_with_context(
                    logger, "Spreadsheet backend error", e,
                    handler=func.__name__, operation=e.operation,
                    status_code=e.status_code,
                )
                return _failure(message, e.message if expose_detail else None)

            except Exception as e:
                log_exception_with_context(
                    logger, "Unexpected failure in handler", e,
                    handler=func.__name__,
                )
                return _failure(message, str(e) if expose_detail else None)

        return wrapper  # type: ignore

    return decorator


def _failure(message: str, detail: str | None) -> JSONResponse:
    body = ErrorResponse(message=message, error=detail)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(exclude_none=True),
    )
