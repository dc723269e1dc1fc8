"""
Staff schemas
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel, PatchModel, UtcDatetime


class StaffCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    role: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=50)
    email: Optional[str] = Field(default=None, max_length=255)
    is_active: bool = True


class StaffUpdate(PatchModel):
    nullable_fields = frozenset({"phone", "email"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    role: Optional[str] = Field(default=None, min_length=1, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=50)
    email: Optional[str] = Field(default=None, max_length=255)
    is_active: Optional[bool] = None


class StaffRecord(CamelModel):
    id: int
    name: str
    role: str
    phone: Optional[str] = None
    email: Optional[str] = None
    is_active: bool = True
    created_at: UtcDatetime
