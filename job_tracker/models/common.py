"""
Common response models.

Envelopes returned by the job handlers.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any

from pydantic import BaseModel, Field

from job_tracker.models.job import CellValue


class SubmitJobResponse(BaseModel):
    """Write endpoint success envelope."""

    success: bool = True
    message: str
    data: dict[str, Any] | None = Field(default=None, description="Raw append response")


class SheetDataResponse(BaseModel):
    """Read endpoint success envelope."""

    success: bool = True
    data: list[list[CellValue]] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Failure envelope shared by both handlers."""

    success: bool = False
    message: str = Field(description="User-facing error message")
    error: str | None = Field(default=None, description="Error detail, write path only")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
