"""
Job submission API endpoints.

Routes: POST /submit, GET /submit

Dependencies: job_tracker.application.services, job_tracker.models
System role: Write path HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from job_tracker.api.deps import get_submission_service
from job_tracker.application.services import JobSubmissionService
from job_tracker.core.exceptions import InvalidRequestBodyError
from job_tracker.models import HealthResponse, JobEntryRequest, SubmitJobResponse

from .router_utils import handle_sheets_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/submit", tags=["jobs"])

SUBMIT_SUCCESS_MESSAGE = "Job entry submitted successfully!"
SUBMIT_FAILURE_MESSAGE = "Failed to submit job entry"


async def read_job_entry(request: Request) -> JobEntryRequest:
    """
    Parse the request body into a job entry.

    Read inside the handler so a malformed body gets the same failure
    envelope as a backend error.

    Raises:
        InvalidRequestBodyError: Body is not JSON or does not fit JobEntryRequest
    """
    try:
        body = await request.json()
    except ValueError as e:
        raise InvalidRequestBodyError(f"Request body is not valid JSON: {e}") from e
    try:
        return JobEntryRequest.model_validate(body)
    except ValidationError as e:
        fields = sorted({".".join(map(str, err["loc"])) or "body" for err in e.errors()})
        raise InvalidRequestBodyError(
            f"Invalid job entry fields: {', '.join(fields)}",
            details={"fields": fields},
        ) from e


@router.post("", response_model=SubmitJobResponse)
@handle_sheets_errors(SUBMIT_FAILURE_MESSAGE, expose_detail=True)
async def submit_job_entry(
    request: Request,
    submission_service: JobSubmissionService = Depends(get_submission_service),
) -> SubmitJobResponse:
    """
    Append one job entry as a new sheet row.

    The row is the 13 input fields in column order followed by the
    submission timestamp. Fields are not re-validated here.

    Args:
        request: Incoming request; body is a job entry with camelCase keys
        submission_service: Injected JobSubmissionService

    Returns:
        SubmitJobResponse: success flag, message and the raw append response

    Failure response (500):
        {"success": false, "message": "Failed to submit job entry", "error": "..."}
    """
    entry = await read_job_entry(request)
    logger.info("Submitting job entry", extra={"job_number": entry.job_number})
    result = await submission_service.submit(entry)
    return SubmitJobResponse(message=SUBMIT_SUCCESS_MESSAGE, data=result)


@router.get("", response_model=HealthResponse)
async def submit_probe() -> HealthResponse:
    """Report that the submission handler is reachable; never touches the sheet."""
    return HealthResponse(status="ok", message="Form submission API is working")
