"""
Job domain models and schemas.

Request schema for the write endpoint and the record types the table
view is built from.

Dependencies: pydantic
System role: Job entry API contracts
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from job_tracker.core.job_columns import INPUT_COLUMNS

# A single spreadsheet cell as returned by the Sheets API
CellValue = Union[str, int, float, bool, None]


class _CamelModel(BaseModel):
    """Base model exchanging camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


class JobEntryRequest(_CamelModel):
    """
    Request schema for appending a job entry.

    Values are passed through as sent; required-field checks happen on
    the entry form before this endpoint is called. Absent or null fields
    become empty cells.
    """

    job_number: str = Field("", description="Job number (identity-like, not unique)")
    customer_name: str = Field("", description="Customer name")
    job_name: str = Field("", description="Job name")
    job_location: str = Field("", description="Job location")
    sales_person: str = Field("", description="Sales person")
    job_size: str = Field("", description="Job size")
    quantity: str = Field("", description="Quantity, numeric text")
    job_category: str = Field("", description="Job category")
    job_booked_date: str = Field("", description="Booked date, YYYY-MM-DD")
    job_status: str = Field("", description="Job status")
    delivery_date: str = Field("", description="Delivery date, YYYY-MM-DD")
    delivery_details: str = Field("", description="Delivery details")
    remark: str = Field("", description="Optional remark")

    @field_validator("*", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    def ordered_values(self) -> list[str]:
        """Field values in sheet column order."""
        data = self.model_dump(by_alias=True)
        return [data[column] for column in INPUT_COLUMNS]


class JobRecord(_CamelModel):
    """A job entry as read back from the sheet."""

    job_number: str = ""
    customer_name: str = ""
    job_name: str = ""
    job_location: str = ""
    sales_person: str = ""
    job_size: str = ""
    quantity: str = ""
    job_category: str = ""
    job_booked_date: str = ""
    job_status: str = ""
    delivery_date: str = ""
    delivery_details: str = ""
    remark: str = ""


class JobRow(JobRecord):
    """A displayed table row: a record plus its 1-based position."""

    sno: str
