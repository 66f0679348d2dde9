import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from job_tracker.api.deps import get_sheet_data_service
from job_tracker.core.exceptions import ConfigurationError, SheetsBackendError
from job_tracker.main import create_app


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


@pytest.fixture
def mock_sheet_data_service():
    return AsyncMock()


def test_get_sheet_data_returns_raw_rows(client, mock_sheet_data_service, sheet_values):
    mock_sheet_data_service.fetch_values.return_value = sheet_values
    client.app.dependency_overrides[get_sheet_data_service] = lambda: mock_sheet_data_service

    response = client.get("/api/sheet-data")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    # Header row is left for the caller to skip
    assert body["data"] == sheet_values


def test_get_sheet_data_mixed_cell_types(client, mock_sheet_data_service):
    mock_sheet_data_service.fetch_values.return_value = [["Job#"], ["J1", 3, True, None, 2.5]]
    client.app.dependency_overrides[get_sheet_data_service] = lambda: mock_sheet_data_service

    response = client.get("/api/sheet-data")

    assert response.status_code == 200
    assert response.json()["data"][1] == ["J1", 3, True, None, 2.5]


def test_get_sheet_data_empty_sheet(client, mock_sheet_data_service):
    mock_sheet_data_service.fetch_values.return_value = []
    client.app.dependency_overrides[get_sheet_data_service] = lambda: mock_sheet_data_service

    response = client.get("/api/sheet-data")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": []}


@pytest.mark.parametrize(
    "error",
    [
        SheetsBackendError("Sheets get failed: 403 forbidden", operation="get", status_code=403),
        ConfigurationError("Google Sheets is not configured", missing=["GOOGLE_SHEET_ID"]),
        RuntimeError("unexpected"),
    ],
)
def test_get_sheet_data_failure_hides_detail(client, mock_sheet_data_service, error):
    mock_sheet_data_service.fetch_values.side_effect = error
    client.app.dependency_overrides[get_sheet_data_service] = lambda: mock_sheet_data_service

    response = client.get("/api/sheet-data")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Failed to fetch sheet data"}
