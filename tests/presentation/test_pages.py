"""
Test suite for the tracker page routes.

Page flows run through TestClient with the handler client and session
store overridden; the last class drives the real in-process handlers
with only the Sheets factory mocked.

System role: Verification of the tracker page HTTP surface
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from job_tracker.api.deps import get_sheets_factory
from job_tracker.core.exceptions import SheetsBackendError, TrackerApiError
from job_tracker.main import create_app
from job_tracker.presentation.api_client import TrackerApiClient
from job_tracker.presentation.pages import get_session_store, get_tracker_api
from job_tracker.presentation.session_store import TrackerSessionStore


def _unavailable_api():
    raise AssertionError("handler client requested")


@pytest.fixture
def store() -> TrackerSessionStore:
    return TrackerSessionStore()


@pytest.fixture
def api(sheet_values) -> AsyncMock:
    api = AsyncMock(spec=TrackerApiClient)
    api.submit_job.return_value = "Job entry submitted successfully!"
    api.fetch_sheet_data.return_value = sheet_values
    return api


@pytest.fixture
def client(store, api) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_session_store] = lambda: store
    app.dependency_overrides[get_tracker_api] = lambda: api
    return TestClient(app)


class TestTrackerPage:
    """Test suite for page rendering and actions."""

    def test_home_renders_add_form(self, client, api) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert "Job Tracker" in response.text
        assert 'name="jobNumber"' in response.text
        assert "Reset Form" in response.text
        api.fetch_sheet_data.assert_not_called()

    def test_home_starts_a_fresh_state(self, client, store) -> None:
        client.get("/")
        first_key = client.cookies.get("job_tracker_session")
        client.get("/")

        assert client.cookies.get("job_tracker_session") != first_key
        assert store.get(first_key) is None
        assert len(store) == 1

    def test_reload_after_action_starts_over(self, client, api) -> None:
        client.get("/")
        client.post("/tracker/tab", data={"tab": "view", "jobNumber": "J777"})

        response = client.get("/tracker")

        assert 'name="jobNumber"' in response.text
        assert 'value="J777"' not in response.text
        assert "Job Entries (" not in response.text

    def test_reload_drops_banner(self, client, sample_entry_payload) -> None:
        client.get("/")
        client.post("/tracker/submit", data=sample_entry_payload)

        response = client.get("/tracker")

        assert "Job entry submitted successfully!" not in response.text

    def test_tracker_without_session_renders_add_form(self, client, store) -> None:
        response = client.get("/tracker")

        assert response.status_code == 200
        assert 'name="jobNumber"' in response.text
        assert len(store) == 1

    def test_view_tab_shows_rows(self, client, api) -> None:
        client.get("/")

        response = client.post("/tracker/tab", data={"tab": "view"})

        assert response.status_code == 200
        assert "Job Entries (2)" in response.text
        assert "J001" in response.text
        assert "status-completed" in response.text
        assert "status-in-progress" in response.text
        assert "01/15/2024" in response.text
        api.fetch_sheet_data.assert_awaited_once()

    def test_view_tab_empty_state(self, client, api, header_row) -> None:
        api.fetch_sheet_data.return_value = [header_row]
        client.get("/")

        response = client.post("/tracker/tab", data={"tab": "view"})

        assert "No job entries available yet" in response.text
        assert "Job Entries (" not in response.text

    def test_tab_switch_keeps_draft(self, client, api) -> None:
        client.get("/")

        client.post("/tracker/tab", data={"tab": "view", "jobNumber": "J777"})
        response = client.post("/tracker/tab", data={"tab": "add"})

        assert 'value="J777"' in response.text
        assert 'name="jobNumber"' in response.text
        api.fetch_sheet_data.assert_awaited_once()

    def test_submit_with_missing_fields_shows_errors(self, client, api) -> None:
        client.get("/")

        response = client.post("/tracker/submit", data={"jobNumber": "J1"})

        assert "Customer Name is required" in response.text
        assert "Delivery Details are required" in response.text
        assert 'value="J1"' in response.text
        api.submit_job.assert_not_called()

    def test_submit_success_shows_banner(self, client, api, sample_entry_payload) -> None:
        client.get("/")

        response = client.post("/tracker/submit", data=sample_entry_payload)

        assert "Job entry submitted successfully!" in response.text
        assert "banner-success" in response.text
        assert 'value="J001"' not in response.text

    def test_submit_failure_keeps_input(self, client, api, sample_entry_payload) -> None:
        api.submit_job.side_effect = TrackerApiError("Failed to submit job entry", status_code=500)
        client.get("/")

        response = client.post("/tracker/submit", data=sample_entry_payload)

        assert "banner-error" in response.text
        assert "Failed to submit job entry" in response.text
        assert 'value="J001"' in response.text

    def test_refresh_failure_shows_banner(self, client, api) -> None:
        client.get("/")
        client.post("/tracker/tab", data={"tab": "view"})
        api.fetch_sheet_data.side_effect = TrackerApiError(
            "Failed to load data. Please try again.", status_code=500
        )

        response = client.post("/tracker/refresh")

        assert "Failed to load data. Please try again." in response.text
        assert "Job Entries (2)" in response.text

    def test_reset_clears_form(self, client) -> None:
        client.get("/")
        client.post("/tracker/submit", data={"jobNumber": "J1"})

        response = client.post("/tracker/reset")

        assert 'value="J1"' not in response.text
        assert "is required" not in response.text

    def test_reset_does_not_open_handler_client(self, store) -> None:
        app = create_app()
        app.dependency_overrides[get_session_store] = lambda: store
        app.dependency_overrides[get_tracker_api] = _unavailable_api
        client = TestClient(app)
        client.get("/")

        response = client.post("/tracker/reset")

        assert response.status_code == 200
        assert 'name="jobNumber"' in response.text

    def test_unknown_tab_rejected(self, client) -> None:
        client.get("/")

        response = client.post("/tracker/tab", data={"tab": "settings"})

        assert response.status_code == 422


class TestInProcessHandlers:
    """Page actions calling the real handlers in-process."""

    @pytest.fixture
    def app_client(self, store, mock_sheets_factory) -> TestClient:
        app = create_app()
        app.dependency_overrides[get_session_store] = lambda: store
        app.dependency_overrides[get_sheets_factory] = lambda: mock_sheets_factory
        return TestClient(app)

    def test_submit_appends_row(
        self, app_client, mock_sheets_client, sample_entry_payload
    ) -> None:
        app_client.get("/")

        response = app_client.post("/tracker/submit", data=sample_entry_payload)

        assert "Job entry submitted successfully!" in response.text
        mock_sheets_client.append_row.assert_called_once()
        _, row = mock_sheets_client.append_row.call_args.args
        assert row[:2] == ["J001", "Acme"]
        assert len(row) == 14

    def test_view_reads_sheet(self, app_client, mock_sheets_client, sheet_values) -> None:
        mock_sheets_client.get_values.return_value = sheet_values
        app_client.get("/")

        response = app_client.post("/tracker/tab", data={"tab": "view"})

        assert "Job Entries (2)" in response.text
        assert "Globex" in response.text

    def test_backend_failure_surfaces_banner(
        self, app_client, mock_sheets_client, sample_entry_payload
    ) -> None:
        mock_sheets_client.append_row.side_effect = SheetsBackendError(
            "Sheets append failed", operation="append", status_code=403
        )
        app_client.get("/")

        response = app_client.post("/tracker/submit", data=sample_entry_payload)

        assert "Failed to submit job entry" in response.text
        assert 'value="J001"' in response.text
