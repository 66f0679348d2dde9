"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from job_tracker.configs.base import BaseSettings
from job_tracker.configs.google_sheets import GoogleSheetsSettings
from job_tracker.configs.tracker_ui import TrackerUISettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    google_sheets: GoogleSheetsSettings = Field(default_factory=GoogleSheetsSettings)
    tracker_ui: TrackerUISettings = Field(default_factory=TrackerUISettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from job_tracker.configs import get_settings
        settings = get_settings()
    """
    return Settings()
