"""
Tracker page controller.

Applies user actions (tab switch, submit, refresh, reset) to a
TrackerState, calling the handlers through TrackerApiClient.

Dependencies: job_tracker.presentation
System role: Presentation state machine
"""

import logging
import time
from typing import Callable, Mapping

from job_tracker.core.exceptions import MalformedSheetDataError, TrackerApiError
from job_tracker.presentation.api_client import TrackerApiClient
from job_tracker.presentation.form import validate_entry
from job_tracker.presentation.state import (
    Banner,
    FetchState,
    SubmitState,
    Tab,
    TrackerState,
)
from job_tracker.presentation.table import rows_to_job_rows

logger = logging.getLogger(__name__)


class TrackerController:
    """Drives one browser's TrackerState."""

    def __init__(
        self,
        state: TrackerState,
        api: TrackerApiClient,
        banner_seconds: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize controller.

        Args:
            state: State to mutate
            api: Handler client
            banner_seconds: How long banners stay visible
            clock: Monotonic time source
        """
        self.state = state
        self.api = api
        self.banner_seconds = banner_seconds
        self.clock = clock

    async def switch_tab(self, tab: Tab, draft: Mapping[str, str] | None = None) -> None:
        """
        Activate a tab.

        A draft posted from the add form replaces the stored form values so
        unsaved input survives the switch. Activating the view tab always
        fetches; returning to add never does.
        """
        if draft is not None:
            self.state.form_values = dict(draft)
        self.state.tab = tab
        if tab is Tab.VIEW:
            self.state.view_visited = True
            await self.refresh()

    async def submit(self, values: Mapping[str, str]) -> None:
        """
        Validate and submit the add form.

        Ignored while a submission is in flight. Validation errors stay on
        the page and the write handler is not called.
        """
        if self.state.submit_state is SubmitState.SUBMITTING:
            logger.info("Submit ignored, another submission is in flight")
            return

        self.state.form_values = dict(values)
        payload, errors = validate_entry(values)
        self.state.form_errors = errors
        if errors:
            logger.info("Job entry failed validation", extra={"fields": sorted(errors)})
            return

        self.state.submit_state = SubmitState.SUBMITTING
        self.state.banner = None
        try:
            message = await self.api.submit_job(payload)
        except TrackerApiError as e:
            logger.warning(
                "Job entry submission failed",
                extra={"status_code": e.status_code, "error": e.message},
            )
            self._show_banner(False, e.message)
            return
        finally:
            self.state.submit_state = SubmitState.IDLE

        self.reset_form()
        self._show_banner(True, message)
        if self.state.view_visited:
            # The row is saved; a failed reload must not hide that
            await self.refresh(report_failure=False)

    async def refresh(self, report_failure: bool = True) -> None:
        """
        Re-fetch the table. Ignored while a fetch is in flight.

        A failed fetch keeps the rows already shown and, when report_failure
        is set, replaces the banner with the failure message. Malformed data
        renders as the empty state.
        """
        if self.state.fetch_state is FetchState.LOADING:
            logger.info("Refresh ignored, a fetch is in flight")
            return

        self.state.fetch_state = FetchState.LOADING
        try:
            values = await self.api.fetch_sheet_data()
        except TrackerApiError as e:
            logger.warning(
                "Sheet data fetch failed",
                extra={"status_code": e.status_code, "error": e.message},
            )
            if report_failure:
                self._show_banner(False, e.message)
            return
        finally:
            self.state.fetch_state = FetchState.IDLE

        try:
            self.state.rows = rows_to_job_rows(values)
        except MalformedSheetDataError as e:
            logger.warning("Malformed sheet data, showing no rows", extra=e.details)
            self.state.rows = []

    def reset_form(self) -> None:
        """Clear the add form and its validation errors."""
        self.state.clear_form()

    def _show_banner(self, success: bool, message: str) -> None:
        self.state.banner = Banner(
            success=success,
            message=message,
            expires_at=self.clock() + self.banner_seconds,
        )
