"""
Dining table schemas

``type`` is free text; the fixtures use ``table`` for regular tables and
``hall`` for event halls.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel, PatchModel


class TableCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    capacity: int = Field(..., ge=1)
    type: str = Field(default="table", min_length=1, max_length=50)
    is_available: bool = True
    description: Optional[str] = None


class TableUpdate(PatchModel):
    nullable_fields = frozenset({"description"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    capacity: Optional[int] = Field(default=None, ge=1)
    type: Optional[str] = Field(default=None, min_length=1, max_length=50)
    is_available: Optional[bool] = None
    description: Optional[str] = None


class TableRecord(CamelModel):
    id: int
    name: str
    capacity: int
    type: str
    is_available: bool = True
    description: Optional[str] = None
