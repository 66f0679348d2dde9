"""
Application-wide settings shared by the config modules.

Dependencies: pydantic_settings
System role: Runtime mode and log verbosity
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BaseSettings(PydanticBaseSettings):
    """Runtime mode of the job tracker process, read from the environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name reported in the startup log line",
    )
    debug: bool = Field(
        default=False,
        description="Run uvicorn with auto-reload",
    )
    log_level: LogLevel = Field(
        default="INFO",
        description="Root level handed to configure_logging",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        """Accept ``info`` as well as ``INFO``."""
        return v.strip().upper() if isinstance(v, str) else v
