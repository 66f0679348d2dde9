"""
Presentation layer configuration.

Dependencies: pydantic_settings
System role: Tracker page behavior settings
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrackerUISettings(BaseSettings):
    """Settings for the tracker page."""

    model_config = SettingsConfigDict(
        env_prefix="TRACKER_UI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    banner_seconds: float = Field(
        default=5.0,
        description="Seconds a success/error banner stays visible",
    )
    date_display_format: str = Field(
        default="%m/%d/%Y",
        description="strftime format used to redisplay dates in the table",
    )
    sheet_date_formats: list[str] = Field(
        default=["%m/%d/%Y", "%d/%m/%Y", "%Y/%m/%d"],
        description="strptime formats tried, in order, on non-ISO sheet dates (JSON list in env)",
    )
    api_base_url: str | None = Field(
        default=None,
        description="Base URL of the handlers; unset calls the running app in-process",
    )
    max_sessions: int = Field(
        default=500,
        description="Maximum number of browser sessions kept in memory",
    )
    session_cookie: str = Field(
        default="job_tracker_session",
        description="Cookie carrying the browser session key",
    )
