"""
Health check API endpoints.

Routes: GET /health, GET /health/sheets

Dependencies: job_tracker.boundary
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends

from job_tracker.api.deps import get_sheets_factory
from job_tracker.boundary.sheets import SheetsClientFactory
from job_tracker.models import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/sheets", response_model=HealthResponse)
async def health_check_sheets(
    sheets: SheetsClientFactory = Depends(get_sheets_factory),
) -> HealthResponse:
    """Report whether spreadsheet credentials are configured (no API call)."""
    missing = sheets.config.missing_fields()
    if missing:
        return HealthResponse(
            status="unconfigured",
            message=f"Missing settings: {', '.join(missing)}",
        )
    return HealthResponse(status="healthy", message="Google Sheets credentials configured")
