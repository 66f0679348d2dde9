"""
Structured logging helpers.

Context values are summarized before they reach a log record: sheet rows
become row counts and credential fields are masked.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

from job_tracker.core.exceptions import JobTrackerException

REDACTED = "***"
SENSITIVE_KEYS = frozenset({"private_key", "authorization", "cookie", "token"})
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Render a context value for a log record.

    Args:
        value: Value to render
        max_length: Longest string kept before truncating

    Returns:
        str: Short representation; 2D arrays become ``N rows``
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        if value and all(isinstance(row, list) for row in value):
            return f"{len(value)} rows"
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict(keys={sorted(map(str, value))})"

    try:
        text = value if isinstance(value, str) else str(value)
    except Exception as e:
        return f"<unrenderable {type(value).__name__}: {type(e).__name__}>"
    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def _context(context: dict[str, Any]) -> dict[str, str]:
    extra = {}
    for key, val in context.items():
        # LogRecord refuses extras that shadow its own attributes
        name = f"ctx_{key}" if key in _RECORD_ATTRS else key
        extra[name] = REDACTED if key.lower() in SENSITIVE_KEYS else safe_log_value(val)
    return extra


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with summarized, redacted context.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Extra fields for the record
    """
    logger.log(level, message, extra=_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with its traceback and context.

    Details carried by application exceptions (operation, status code,
    missing settings) are merged into the record.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Extra fields for the record
    """
    if isinstance(exc, JobTrackerException):
        context = {**exc.details, **context}
        error_msg = exc.message
    else:
        error_msg = str(exc)
    extra = _context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(error_msg)
    logger.error(message, exc_info=exc, extra=extra)
