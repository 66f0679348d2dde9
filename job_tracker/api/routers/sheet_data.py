"""
Sheet data API endpoints.

Routes: GET /sheet-data

Dependencies: job_tracker.application.services, job_tracker.models
System role: Read path HTTP API
"""

from fastapi import APIRouter, Depends

from job_tracker.api.deps import get_sheet_data_service
from job_tracker.application.services import SheetDataService
from job_tracker.models import SheetDataResponse

from .router_utils import handle_sheets_errors

router = APIRouter(prefix="/sheet-data", tags=["jobs"])

FETCH_FAILURE_MESSAGE = "Failed to fetch sheet data"


@router.get("", response_model=SheetDataResponse)
@handle_sheets_errors(FETCH_FAILURE_MESSAGE, expose_detail=False)
async def get_sheet_data(
    sheet_data_service: SheetDataService = Depends(get_sheet_data_service),
) -> SheetDataResponse:
    """
    Return every row of the configured range, header row included.

    Args:
        sheet_data_service: Injected SheetDataService

    Returns:
        SheetDataResponse: success flag and the raw 2D array of cells

    Failure response (500):
        {"success": false, "message": "Failed to fetch sheet data"}
    """
    values = await sheet_data_service.fetch_values()
    return SheetDataResponse(data=values)
