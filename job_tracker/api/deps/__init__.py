"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_service_cache,
    get_settings_dependency,
    get_sheet_data_service,
    get_sheets_factory,
    get_submission_service,
)

__all__ = [
    "get_service_cache",
    "get_settings_dependency",
    "get_sheet_data_service",
    "get_sheets_factory",
    "get_submission_service",
]
