"""
Static job entry schema.

Field descriptors driving both the entry form and its validation,
plus the enumerated job statuses.

Dependencies: None
System role: Statically known form schema
"""

from dataclasses import dataclass, field
from enum import Enum


class JobStatus(str, Enum):
    """Enumerated job statuses offered by the form."""

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    DELIVERED = "Delivered"


class FieldType(str, Enum):
    """Input widget rendered for a field."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"
    TEXTAREA = "textarea"


@dataclass(frozen=True)
class FieldDescriptor:
    """One form field: identity, label, widget and requiredness."""

    id: str
    label: str
    type: FieldType
    required: bool = True
    placeholder: str = ""
    options: tuple[str, ...] = field(default_factory=tuple)
    badge: str | None = None
    full_width: bool = False

    @property
    def required_message(self) -> str:
        # "Delivery Details are required", "Job Number is required"
        verb = "are" if self.label.endswith("Details") else "is"
        return f"{self.label} {verb} required"


JOB_FIELDS: tuple[FieldDescriptor, ...] = (
    FieldDescriptor("jobNumber", "Job Number", FieldType.TEXT,
                    placeholder="Enter job number", badge="ID"),
    FieldDescriptor("customerName", "Customer Name", FieldType.TEXT,
                    placeholder="Enter customer name"),
    FieldDescriptor("jobName", "Job Name", FieldType.TEXT,
                    placeholder="Enter job name"),
    FieldDescriptor("jobLocation", "Job Location", FieldType.TEXT,
                    placeholder="Enter job location"),
    FieldDescriptor("salesPerson", "Sales Person", FieldType.TEXT,
                    placeholder="Enter sales person name"),
    FieldDescriptor("jobSize", "Job Size", FieldType.TEXT,
                    placeholder="Enter job size"),
    FieldDescriptor("quantity", "Quantity", FieldType.NUMBER,
                    placeholder="Enter quantity"),
    FieldDescriptor("jobCategory", "Job Category", FieldType.TEXT,
                    placeholder="Enter job category"),
    FieldDescriptor("jobBookedDate", "Job Booked Date", FieldType.DATE),
    FieldDescriptor("jobStatus", "Job Status", FieldType.SELECT,
                    options=tuple(s.value for s in JobStatus), badge="Status"),
    FieldDescriptor("deliveryDate", "Delivery Date", FieldType.DATE),
    FieldDescriptor("deliveryDetails", "Delivery Details", FieldType.TEXTAREA,
                    placeholder="Enter delivery details", full_width=True),
    FieldDescriptor("remark", "Remark", FieldType.TEXTAREA, required=False,
                    placeholder="Any additional remarks", full_width=True),
)

FIELDS_BY_ID: dict[str, FieldDescriptor] = {f.id: f for f in JOB_FIELDS}
DATE_FIELDS: tuple[str, ...] = tuple(f.id for f in JOB_FIELDS if f.type is FieldType.DATE)
