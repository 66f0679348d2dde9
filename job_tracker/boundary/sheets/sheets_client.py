"""
Google Sheets client for job row operations.

Handles appending one row and reading a column range. Each client wraps
one authenticated API session; the factory opens a fresh one per request.

Dependencies: google-api-python-client, google-auth
System role: Spreadsheet store of record
"""

from contextlib import contextmanager
import logging
from typing import Any, Iterator

from google.auth.exceptions import GoogleAuthError
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from job_tracker.boundary.sheets.credentials import ServiceAccountConfig
from job_tracker.core.exceptions import SheetsBackendError

logger = logging.getLogger(__name__)

VALUE_INPUT_OPTION = "USER_ENTERED"


class GoogleSheetsClient:
    """Append/read client over one spreadsheet (values collection only)."""

    def __init__(self, service: Any, spreadsheet_id: str) -> None:
        """
        Initialize client around a built ``sheets`` v4 resource.

        Args:
            service: googleapiclient Resource for the Sheets API
            spreadsheet_id: Spreadsheet to operate on
        """
        self._service = service
        self._spreadsheet_id = spreadsheet_id

    def append_row(self, range_: str, values: list[Any]) -> dict[str, Any]:
        """
        Append one row after the last row of the range.

        Args:
            range_: A1 range, e.g. ``Sheet1!A:N``
            values: Cell values in column order

        Returns:
            dict: Raw append response (spreadsheetId, tableRange, updates)

        Raises:
            SheetsBackendError: If the API call fails
        """
        request = self._service.spreadsheets().values().append(
            spreadsheetId=self._spreadsheet_id,
            range=range_,
            valueInputOption=VALUE_INPUT_OPTION,
            body={"values": [values]},
        )
        response = self._execute(request, operation="append", range_=range_)
        logger.info(
            "Row appended",
            extra={
                "range": range_,
                "updated_range": response.get("updates", {}).get("updatedRange"),
            },
        )
        return response

    def get_values(self, range_: str) -> list[list[Any]]:
        """
        Read every row in a range.

        Args:
            range_: A1 range, e.g. ``Sheet1!A:O``

        Returns:
            list[list]: Rows of cell values, ``[]`` for an empty range.
            Trailing empty cells are omitted by the API.

        Raises:
            SheetsBackendError: If the API call fails
        """
        request = self._service.spreadsheets().values().get(
            spreadsheetId=self._spreadsheet_id,
            range=range_,
        )
        response = self._execute(request, operation="get", range_=range_)
        values = response.get("values") or []
        logger.info("Range read", extra={"range": range_, "row_count": len(values)})
        return values

    def close(self) -> None:
        """Release the underlying HTTP connection."""
        self._service.close()

    def _execute(self, request: Any, operation: str, range_: str) -> dict[str, Any]:
        try:
            return request.execute()
        except HttpError as e:
            raise SheetsBackendError(
                f"Sheets {operation} failed: {e}",
                operation=operation,
                status_code=getattr(e.resp, "status", None),
                details={"range": range_},
            ) from e
        except GoogleAuthError as e:
            raise SheetsBackendError(
                f"Sheets authentication failed: {e}",
                operation=operation,
                details={"range": range_},
            ) from e
        except OSError as e:
            # httplib2 surfaces connection failures as OSError subclasses
            raise SheetsBackendError(
                f"Sheets {operation} transport error: {e}",
                operation=operation,
                details={"range": range_},
            ) from e


class SheetsClientFactory:
    """Opens one authenticated Sheets session per request."""

    def __init__(self, config: ServiceAccountConfig) -> None:
        """
        Initialize factory with credentials loaded at startup.

        Args:
            config: Spreadsheet id and service-account identity
        """
        self._config = config

    @property
    def config(self) -> ServiceAccountConfig:
        return self._config

    @property
    def is_configured(self) -> bool:
        return not self._config.missing_fields()

    @contextmanager
    def open(self, scopes: tuple[str, ...]) -> Iterator[GoogleSheetsClient]:
        """
        Open a scoped client and close it when the block exits.

        Args:
            scopes: OAuth scopes for this session

        Yields:
            GoogleSheetsClient: Client bound to the configured spreadsheet

        Raises:
            ConfigurationError: Missing or malformed credentials
        """
        credentials = self._config.build_credentials(scopes)
        service = build(
            "sheets",
            "v4",
            credentials=credentials,
            cache_discovery=False,
        )
        client = GoogleSheetsClient(service, self._config.spreadsheet_id)
        try:
            yield client
        finally:
            client.close()
