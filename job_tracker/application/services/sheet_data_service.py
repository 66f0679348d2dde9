"""
Sheet data service orchestrator.

Dependencies: job_tracker.boundary.sheets
System role: Read path use case
"""

import logging
from typing import Any

from fastapi.concurrency import run_in_threadpool

from job_tracker.boundary.sheets import READ_SCOPES, SheetsClientFactory
from job_tracker.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class SheetDataService:
    """Read path orchestrator: a full scan of the configured range."""

    def __init__(self, sheets: SheetsClientFactory, read_range: str) -> None:
        """
        Initialize sheet data service.

        Args:
            sheets: Factory opening one Sheets session per call
            read_range: A1 range to fetch
        """
        self.sheets = sheets
        self.read_range = read_range

    async def fetch_values(self) -> list[list[Any]]:
        """
        Fetch every row of the configured range, header row included.

        Returns:
            list[list]: Raw cell values

        Raises:
            ConfigurationError: Credentials missing or malformed
            SheetsBackendError: The read failed
        """
        values = await run_in_threadpool(self._read)
        log_with_context(
            logger, logging.INFO, "Sheet data fetched",
            range=self.read_range, rows=values,
        )
        return values

    def _read(self) -> list[list[Any]]:
        with self.sheets.open(READ_SCOPES) as client:
            return client.get_values(self.read_range)
