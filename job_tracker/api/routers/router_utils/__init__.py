"""Shared helpers for the handler routers."""

from .error_handling import handle_sheets_errors

__all__ = ["handle_sheets_errors"]
