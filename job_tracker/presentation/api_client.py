"""
HTTP client for the job handlers, used by the tracker page.

Dependencies: httpx
System role: Presentation-side calls to the write and read handlers
"""

import logging
from typing import Any

import httpx

from job_tracker.core.exceptions import TrackerApiError

logger = logging.getLogger(__name__)

SUBMIT_PATH = "/api/submit"
SHEET_DATA_PATH = "/api/sheet-data"

SUBMIT_OK_MESSAGE = "Job entry submitted successfully!"
SUBMIT_FAILED_MESSAGE = "Failed to submit job entry"
SUBMIT_RETRY_MESSAGE = "Failed to submit job entry. Please try again."
FETCH_FAILED_MESSAGE = "Failed to load data. Please try again."


def _json_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class TrackerApiClient:
    """Calls the submission and read handlers over HTTP."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        """
        Initialize client.

        Args:
            http: Async HTTP client whose base URL points at the handlers
        """
        self._http = http

    async def submit_job(self, payload: dict[str, str]) -> str:
        """
        Send a validated job entry to the write handler.

        Args:
            payload: Job entry with camelCase keys, dates already ISO

        Returns:
            str: The handler's success message

        Raises:
            TrackerApiError: Transport failure or a non-2xx response
        """
        try:
            response = await self._http.post(SUBMIT_PATH, json=payload)
        except httpx.HTTPError as e:
            logger.error(
                "Submit request failed",
                extra={"error_type": type(e).__name__, "error_msg": str(e)},
            )
            raise TrackerApiError(SUBMIT_RETRY_MESSAGE) from e

        body = _json_body(response)
        if response.is_error:
            raise TrackerApiError(
                body.get("message") or SUBMIT_FAILED_MESSAGE,
                status_code=response.status_code,
                details={"error": body.get("error")},
            )
        return body.get("message") or SUBMIT_OK_MESSAGE

    async def fetch_sheet_data(self) -> Any:
        """
        Fetch the raw sheet values from the read handler.

        Returns:
            The ``data`` member of the response as sent; shape is not checked here

        Raises:
            TrackerApiError: Transport failure or a non-2xx response
        """
        try:
            response = await self._http.get(SHEET_DATA_PATH)
        except httpx.HTTPError as e:
            logger.error(
                "Sheet data request failed",
                extra={"error_type": type(e).__name__, "error_msg": str(e)},
            )
            raise TrackerApiError(FETCH_FAILED_MESSAGE) from e

        body = _json_body(response)
        if response.is_error:
            raise TrackerApiError(
                FETCH_FAILED_MESSAGE,
                status_code=response.status_code,
                details={"message": body.get("message")},
            )
        return body.get("data")
