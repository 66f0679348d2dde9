"""
Positional column layout of the job sheet.

Rows in the spreadsheet are positional: column order is the contract,
headers are not read. Row 0 is a header row.

Dependencies: None
System role: Single source of truth for the persisted row layout
"""

JOB_NUMBER = 0
CUSTOMER_NAME = 1
JOB_NAME = 2
JOB_LOCATION = 3
SALES_PERSON = 4
JOB_SIZE = 5
QUANTITY = 6
JOB_CATEGORY = 7
JOB_BOOKED_DATE = 8
JOB_STATUS = 9
DELIVERY_DATE = 10
DELIVERY_DETAILS = 11
REMARK = 12
SUBMISSION_DATE = 13

HEADER_ROW_COUNT = 1

# Field name per column, in sheet order. The last column is server-side only.
INPUT_COLUMNS: tuple[str, ...] = (
    "jobNumber",
    "customerName",
    "jobName",
    "jobLocation",
    "salesPerson",
    "jobSize",
    "quantity",
    "jobCategory",
    "jobBookedDate",
    "jobStatus",
    "deliveryDate",
    "deliveryDetails",
    "remark",
)
SHEET_COLUMNS: tuple[str, ...] = INPUT_COLUMNS + ("submissionDate",)

ROW_WIDTH = len(SHEET_COLUMNS)
