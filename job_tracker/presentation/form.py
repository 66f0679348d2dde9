"""
Entry form validation.

Required-field checks and date normalization applied before the write
handler is called. The write handler itself does not re-validate.

Dependencies: job_tracker.core.job_schema
System role: Job entry form business validation
"""

from datetime import date, datetime
from typing import Mapping

from job_tracker.core.job_schema import DATE_FIELDS, FIELDS_BY_ID, JOB_FIELDS


def normalize_date(value: str) -> str:
    """
    Normalize a date or datetime string to ``YYYY-MM-DD``.

    Args:
        value: Date as entered (``2024-01-15`` or an ISO datetime)

    Returns:
        str: ISO calendar date

    Raises:
        ValueError: If the value is not an ISO date or datetime
    """
    text = value.strip()
    try:
        return date.fromisoformat(text).isoformat()
    except ValueError:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date().isoformat()


def collect_form_values(form: Mapping[str, object]) -> dict[str, str]:
    """Pick the job fields out of submitted form data, as strings."""
    values = {}
    for field in JOB_FIELDS:
        raw = form.get(field.id)
        values[field.id] = raw if isinstance(raw, str) else ""
    return values


def validate_entry(values: Mapping[str, str]) -> tuple[dict[str, str], dict[str, str]]:
    """
    Validate form values against the static job schema.

    Args:
        values: Raw form values keyed by field id

    Returns:
        tuple: (payload for the write handler, errors keyed by field id).
        The payload is only meaningful when there are no errors.
    """
    payload: dict[str, str] = {}
    errors: dict[str, str] = {}

    for field in JOB_FIELDS:
        value = values.get(field.id) or ""
        if field.required and not value.strip():
            errors[field.id] = field.required_message
            continue
        payload[field.id] = value

    for field_id in DATE_FIELDS:
        if field_id in errors or not payload.get(field_id):
            continue
        try:
            payload[field_id] = normalize_date(payload[field_id])
        except ValueError:
            errors[field_id] = f"{FIELDS_BY_ID[field_id].label} must be a valid date"

    return payload, errors
