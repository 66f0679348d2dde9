"""
Table view mapping.

Reshapes the read handler's raw 2D array into displayed job rows and
holds the display rules for statuses and dates.

Dependencies: job_tracker.core, job_tracker.models
System role: Sheet rows to typed records
"""

from datetime import date, datetime
from typing import Any, Sequence

from job_tracker.core import job_columns as col
from job_tracker.core.exceptions import MalformedSheetDataError
from job_tracker.core.job_schema import JobStatus
from job_tracker.models.job import JobRow

STATUS_STYLES: dict[str, str] = {
    JobStatus.PENDING.value: "pending",
    JobStatus.IN_PROGRESS.value: "in-progress",
    JobStatus.COMPLETED.value: "completed",
    JobStatus.DELIVERED.value: "delivered",
}
NEUTRAL_STYLE = "neutral"
EMPTY_PLACEHOLDER = "-"

# Tried in order; an ambiguous 05/03/2024 reads month-first by default
SHEET_DATE_FORMATS = ("%m/%d/%Y", "%d/%m/%Y", "%Y/%m/%d")


def status_style(status: Any) -> str:
    """CSS class for a status value; unknown values get the neutral style."""
    if not isinstance(status, str):
        return NEUTRAL_STYLE
    return STATUS_STYLES.get(status, NEUTRAL_STYLE)


def cell_text(cell: Any) -> str:
    """Render a raw cell as text. Absent cells are empty."""
    if cell is None:
        return ""
    if isinstance(cell, bool):
        return "TRUE" if cell else "FALSE"
    if isinstance(cell, float) and cell.is_integer():
        return str(int(cell))
    return str(cell)


def parse_sheet_date(
    value: str, formats: Sequence[str] = SHEET_DATE_FORMATS
) -> date | None:
    """
    Parse a date as it comes back from the sheet.

    ``USER_ENTERED`` appends let the sheet turn ISO dates into its own
    locale format, so ISO is accepted first and then each of formats.
    """
    text = value.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def format_display_date(
    value: str,
    display_format: str,
    input_formats: Sequence[str] = SHEET_DATE_FORMATS,
) -> str:
    """
    Redisplay a date for the table.

    Args:
        value: Date text from the sheet
        display_format: strftime format for display
        input_formats: strptime formats tried after ISO, in order

    Returns:
        str: Formatted date, ``-`` when empty, the raw text when unparseable
    """
    if not value or not value.strip():
        return EMPTY_PLACEHOLDER
    parsed = parse_sheet_date(value, input_formats)
    if parsed is None:
        return value
    return parsed.strftime(display_format)


def row_to_job_row(row: list[Any], sno: int) -> JobRow:
    """
    Map one positional sheet row onto a JobRow.

    The Sheets API omits trailing empty cells, so missing cells are empty.

    Args:
        row: Cell values in column order
        sno: 1-based position among the loaded data rows

    Returns:
        JobRow: Displayed record
    """

    def cell(index: int) -> str:
        return cell_text(row[index]) if index < len(row) else ""

    return JobRow(
        sno=str(sno),
        job_number=cell(col.JOB_NUMBER),
        customer_name=cell(col.CUSTOMER_NAME),
        job_name=cell(col.JOB_NAME),
        job_location=cell(col.JOB_LOCATION),
        sales_person=cell(col.SALES_PERSON),
        job_size=cell(col.JOB_SIZE),
        quantity=cell(col.QUANTITY),
        job_category=cell(col.JOB_CATEGORY),
        job_booked_date=cell(col.JOB_BOOKED_DATE),
        job_status=cell(col.JOB_STATUS),
        delivery_date=cell(col.DELIVERY_DATE),
        delivery_details=cell(col.DELIVERY_DETAILS),
        remark=cell(col.REMARK),
    )


def rows_to_job_rows(values: Any) -> list[JobRow]:
    """
    Turn the read handler's data into displayed rows, skipping the header.

    Sequence numbers are positional and recomputed on every fetch.

    Args:
        values: Raw 2D array from the read handler

    Returns:
        list[JobRow]: One row per data row, possibly empty

    Raises:
        MalformedSheetDataError: If values is not a list of lists
    """
    if not isinstance(values, list):
        raise MalformedSheetDataError(
            "Sheet data is not a list of rows",
            details={"type": type(values).__name__},
        )
    for index, row in enumerate(values):
        if not isinstance(row, list):
            raise MalformedSheetDataError(
                "Sheet row is not a list of cells",
                details={"row_index": index, "type": type(row).__name__},
            )

    data_rows = values[col.HEADER_ROW_COUNT:]
    return [row_to_job_row(row, sno) for sno, row in enumerate(data_rows, start=1)]
