"""Pydantic schemas for the job handlers and the tracker page."""

from .common import (
    ErrorResponse,
    HealthResponse,
    SheetDataResponse,
    SubmitJobResponse,
)
from .job import CellValue, JobEntryRequest, JobRecord, JobRow

__all__ = [
    "CellValue",
    "ErrorResponse",
    "HealthResponse",
    "JobEntryRequest",
    "JobRecord",
    "JobRow",
    "SheetDataResponse",
    "SubmitJobResponse",
]
