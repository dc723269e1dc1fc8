"""
Order schemas
"""

import json
from enum import Enum
from typing import Annotated, Any, List, Optional

from pydantic import BeforeValidator, Field

from .base import CamelModel, PatchModel, UtcDatetime


class OrderStatus(str, Enum):
    """Order lifecycle states"""

    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class OrderLine(CamelModel):
    """One line of an order, copied from the cart at checkout"""

    id: int
    name: str = Field(..., min_length=1)
    price: int = Field(..., ge=0)
    quantity: int = Field(..., ge=1)


def parse_order_lines(value: Any) -> Any:
    """Accept the serialized form of the items list as well as the list itself"""
    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as exc:
            raise ValueError("items must be a JSON list") from exc
    return value


OrderLines = Annotated[
    List[OrderLine], Field(min_length=1), BeforeValidator(parse_order_lines)
]


class OrderCreate(CamelModel):
    """Insert shape of an order"""

    customer_name: str = Field(..., min_length=1, max_length=200)
    customer_phone: Optional[str] = Field(default=None, max_length=50)
    customer_email: Optional[str] = Field(default=None, max_length=255)
    items: OrderLines
    total: int = Field(..., ge=0)
    status: OrderStatus = OrderStatus.PENDING
    notes: Optional[str] = None


class OrderUpdate(PatchModel):
    """Partial order update"""

    nullable_fields = frozenset({"customer_phone", "customer_email", "notes"})

    customer_name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    customer_phone: Optional[str] = Field(default=None, max_length=50)
    customer_email: Optional[str] = Field(default=None, max_length=255)
    items: Optional[OrderLines] = None
    total: Optional[int] = Field(default=None, ge=0)
    status: Optional[OrderStatus] = None
    notes: Optional[str] = None


class OrderRecord(CamelModel):
    """Stored order"""

    id: int
    customer_name: str
    customer_phone: Optional[str] = None
    customer_email: Optional[str] = None
    items: OrderLines
    total: int
    status: OrderStatus
    notes: Optional[str] = None
    created_at: UtcDatetime
