"""
Correlation ID context manager.

Manages correlation ID propagation across async boundaries using contextvars.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

from contextvars import ContextVar, Token
import logging
import uuid

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> Token:
    """
    Set correlation ID in context.

    Args:
        correlation_id: Optional correlation ID (generates new if None)

    Returns:
        Token: Token restoring the previous value via reset_correlation_id
    """
    return correlation_id_ctx.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token) -> None:
    """Restore the correlation ID that was current before set_correlation_id."""
    correlation_id_ctx.reset(token)


def get_correlation_id() -> str:
    """
    Get current correlation ID from context.

    Returns:
        str: Current correlation ID, "-" outside a request
    """
    return correlation_id_ctx.get() or "-"


class CorrelationIdFilter(logging.Filter):
    """Stamp every log record with the current correlation ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True
