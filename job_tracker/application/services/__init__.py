"""Service orchestrators."""

from .sheet_data_service import SheetDataService
from .submission_service import JobSubmissionService

__all__ = [
    "JobSubmissionService",
    "SheetDataService",
]
