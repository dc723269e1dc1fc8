"""
Reservation schemas
"""

from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, Field

from .base import CamelModel, PatchModel, UtcDatetime


class ReservationStatus(str, Enum):
    """Reservation lifecycle states"""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def _table_reference(value: Any) -> Any:
    # Table references are stored as text; clients often send the numeric id
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


TableReference = Annotated[
    str, Field(min_length=1, max_length=50), BeforeValidator(_table_reference)
]


class ReservationCreate(CamelModel):
    """Insert shape of a reservation"""

    customer_name: str = Field(..., min_length=1, max_length=200)
    customer_phone: str = Field(..., min_length=1, max_length=50)
    customer_email: Optional[str] = Field(default=None, max_length=255)
    date: str = Field(..., min_length=1, max_length=20, description="YYYY-MM-DD")
    time: str = Field(..., min_length=1, max_length=20, description="HH:MM")
    guests: int = Field(..., ge=1)
    event_type: str = Field(..., min_length=1, max_length=100)
    table_id: TableReference
    notes: Optional[str] = None
    status: ReservationStatus = ReservationStatus.PENDING


class ReservationUpdate(PatchModel):
    """Partial reservation update"""

    nullable_fields = frozenset({"customer_email", "notes"})

    customer_name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    customer_phone: Optional[str] = Field(default=None, min_length=1, max_length=50)
    customer_email: Optional[str] = Field(default=None, max_length=255)
    date: Optional[str] = Field(default=None, min_length=1, max_length=20)
    time: Optional[str] = Field(default=None, min_length=1, max_length=20)
    guests: Optional[int] = Field(default=None, ge=1)
    event_type: Optional[str] = Field(default=None, min_length=1, max_length=100)
    table_id: Optional[TableReference] = None
    notes: Optional[str] = None
    status: Optional[ReservationStatus] = None


class ReservationRecord(CamelModel):
    """Stored reservation"""

    id: int
    customer_name: str
    customer_phone: str
    customer_email: Optional[str] = None
    date: str
    time: str
    guests: int
    event_type: str
    table_id: str
    notes: Optional[str] = None
    status: ReservationStatus
    created_at: UtcDatetime
