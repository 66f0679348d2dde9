"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: job_tracker.configs, job_tracker.application, job_tracker.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from job_tracker.application.services import JobSubmissionService, SheetDataService
from job_tracker.boundary.sheets import ServiceAccountConfig, SheetsClientFactory
from job_tracker.configs import Settings, get_settings


class ServiceCache:
    """Container for instances built once from configuration."""

    def __init__(self):
        self._sheets_factory = None
        self._session_store = None

    @property
    def sheets_factory(self) -> SheetsClientFactory:
        """Get cached Sheets client factory (credentials loaded once)."""
        if self._sheets_factory is None:
            settings = get_settings()
            self._sheets_factory = SheetsClientFactory(
                ServiceAccountConfig.from_settings(settings.google_sheets)
            )
        return self._sheets_factory

    @property
    def session_store(self):
        """Get cached tracker page session store."""
        if self._session_store is None:
            from job_tracker.presentation.session_store import TrackerSessionStore

            settings = get_settings()
            self._session_store = TrackerSessionStore(
                max_sessions=settings.tracker_ui.max_sessions
            )
        return self._session_store

    def clear(self) -> None:
        """Clear all cached instances."""
        self._sheets_factory = None
        self._session_store = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_sheets_factory() -> SheetsClientFactory:
    """
    Get the Sheets client factory.

    Returns:
        SheetsClientFactory: Factory opening one session per request
    """
    return get_service_cache().sheets_factory


def get_submission_service(
    sheets: SheetsClientFactory = Depends(get_sheets_factory),
    settings: Settings = Depends(get_settings_dependency),
) -> JobSubmissionService:
    """
    Get job submission service instance.

    Args:
        sheets: Sheets client factory (injected)
        settings: Application settings (injected)

    Returns:
        JobSubmissionService: Write path service
    """
    return JobSubmissionService(
        sheets=sheets,
        write_range=settings.google_sheets.write_range,
    )


def get_sheet_data_service(
    sheets: SheetsClientFactory = Depends(get_sheets_factory),
    settings: Settings = Depends(get_settings_dependency),
) -> SheetDataService:
    """
    Get sheet data service instance.

    Args:
        sheets: Sheets client factory (injected)
        settings: Application settings (injected)

    Returns:
        SheetDataService: Read path service
    """
    return SheetDataService(
        sheets=sheets,
        read_range=settings.google_sheets.read_range,
    )
