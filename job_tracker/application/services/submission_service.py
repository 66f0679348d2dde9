"""
Job submission service orchestrator.

Turns a job entry into a positional sheet row and appends it.

Dependencies: job_tracker.boundary.sheets, job_tracker.core
System role: Write path use case
"""

from datetime import datetime, timezone
import logging
from typing import Any

from fastapi.concurrency import run_in_threadpool

from job_tracker.boundary.sheets import WRITE_SCOPES, SheetsClientFactory
from job_tracker.core.exceptions import JobTrackerException
from job_tracker.core.job_columns import ROW_WIDTH
from job_tracker.models.job import JobEntryRequest

logger = logging.getLogger(__name__)


def submission_timestamp(now: datetime | None = None) -> str:
    """
    ISO-8601 UTC timestamp with millisecond precision.

    Args:
        now: Moment to format (defaults to the current time)

    Returns:
        str: e.g. ``2024-01-15T10:30:00.123Z``
    """
    now = now or datetime.now(timezone.utc)
    return (
        now.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def build_row(entry: JobEntryRequest, submitted_at: str) -> list[str]:
    """
    Map a job entry onto the 14-column sheet layout.

    Args:
        entry: Job entry as received
        submitted_at: Submission timestamp for the last column

    Returns:
        list[str]: The 13 input fields in column order, then the timestamp

    Raises:
        JobTrackerException: If the row does not span the sheet layout
    """
    row = entry.ordered_values() + [submitted_at]
    if len(row) != ROW_WIDTH:
        raise JobTrackerException(
            "Job row does not match the sheet layout",
            details={"expected": ROW_WIDTH, "actual": len(row)},
        )
    return row


class JobSubmissionService:
    """Write path orchestrator."""

    def __init__(self, sheets: SheetsClientFactory, write_range: str) -> None:
        """
        Initialize submission service.

        Args:
            sheets: Factory opening one Sheets session per call
            write_range: A1 range rows are appended to
        """
        self.sheets = sheets
        self.write_range = write_range

    async def submit(self, entry: JobEntryRequest) -> dict[str, Any]:
        """
        Append one job entry to the sheet. No retry.

        Args:
            entry: Job entry to persist

        Returns:
            dict: Raw append response from the Sheets API

        Raises:
            ConfigurationError: Credentials missing or malformed
            SheetsBackendError: The append failed
        """
        row = build_row(entry, submission_timestamp())
        response = await run_in_threadpool(self._append, row)
        logger.info(
            "Job entry submitted",
            extra={"job_number": entry.job_number, "range": self.write_range},
        )
        return response

    def _append(self, row: list[str]) -> dict[str, Any]:
        with self.sheets.open(WRITE_SCOPES) as client:
            return client.append_row(self.write_range, row)
