import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from job_tracker.api.deps import get_submission_service
from job_tracker.core.exceptions import ConfigurationError, SheetsBackendError
from job_tracker.main import create_app
from job_tracker.models import JobEntryRequest


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


@pytest.fixture
def mock_submission_service():
    return AsyncMock()


def test_submit_job_entry(client, mock_submission_service, sample_entry_payload):
    append_result = {"spreadsheetId": "sheet-123", "updates": {"updatedRows": 1}}
    mock_submission_service.submit.return_value = append_result

    client.app.dependency_overrides[get_submission_service] = lambda: mock_submission_service

    response = client.post("/api/submit", json=sample_entry_payload)

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Job entry submitted successfully!",
        "data": append_result,
    }
    mock_submission_service.submit.assert_called_once()
    entry = mock_submission_service.submit.call_args.args[0]
    assert isinstance(entry, JobEntryRequest)
    assert entry.job_number == "J001"
    assert entry.remark == ""


def test_submit_passes_fields_through_without_validation(client, mock_submission_service):
    mock_submission_service.submit.return_value = {}
    client.app.dependency_overrides[get_submission_service] = lambda: mock_submission_service

    response = client.post("/api/submit", json={"jobNumber": "J9", "quantity": 12, "remark": None})

    assert response.status_code == 200
    entry = mock_submission_service.submit.call_args.args[0]
    assert entry.quantity == "12"
    assert entry.customer_name == ""
    assert entry.remark == ""


def test_submit_backend_failure_returns_500(client, mock_submission_service, sample_entry_payload):
    mock_submission_service.submit.side_effect = SheetsBackendError(
        "Sheets append failed: quota exceeded", operation="append", status_code=429
    )
    client.app.dependency_overrides[get_submission_service] = lambda: mock_submission_service

    response = client.post("/api/submit", json=sample_entry_payload)

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Failed to submit job entry"
    assert "quota exceeded" in body["error"]


def test_submit_missing_configuration_returns_500(client, mock_submission_service, sample_entry_payload):
    mock_submission_service.submit.side_effect = ConfigurationError(
        "Google Sheets is not configured", missing=["GOOGLE_SHEET_ID"]
    )
    client.app.dependency_overrides[get_submission_service] = lambda: mock_submission_service

    response = client.post("/api/submit", json=sample_entry_payload)

    assert response.status_code == 500
    assert response.json()["error"] == "Google Sheets is not configured"


def test_submit_unexpected_error_returns_500(client, mock_submission_service, sample_entry_payload):
    mock_submission_service.submit.side_effect = RuntimeError("boom")
    client.app.dependency_overrides[get_submission_service] = lambda: mock_submission_service

    response = client.post("/api/submit", json=sample_entry_payload)

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Failed to submit job entry",
        "error": "boom",
    }


def test_submit_non_json_body_returns_failure_envelope(client, mock_submission_service):
    client.app.dependency_overrides[get_submission_service] = lambda: mock_submission_service

    response = client.post(
        "/api/submit",
        content=b"jobNumber=J001",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Failed to submit job entry"
    assert "not valid JSON" in body["error"]
    mock_submission_service.submit.assert_not_called()


@pytest.mark.parametrize(
    "payload,field",
    [
        ({"jobNumber": True}, "jobNumber"),
        ({"customerName": {"name": "Acme"}}, "customerName"),
    ],
)
def test_submit_wrong_field_type_returns_failure_envelope(
    client, mock_submission_service, payload, field
):
    client.app.dependency_overrides[get_submission_service] = lambda: mock_submission_service

    response = client.post("/api/submit", json=payload)

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Failed to submit job entry"
    assert field in body["error"]
    mock_submission_service.submit.assert_not_called()


def test_submit_non_object_body_returns_failure_envelope(client, mock_submission_service):
    client.app.dependency_overrides[get_submission_service] = lambda: mock_submission_service

    response = client.post("/api/submit", json=["J001", "Acme"])

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to submit job entry"
    mock_submission_service.submit.assert_not_called()


def test_submit_probe(client, mock_submission_service):
    client.app.dependency_overrides[get_submission_service] = lambda: mock_submission_service

    response = client.get("/api/submit")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Form submission API is working"}
    mock_submission_service.submit.assert_not_called()
