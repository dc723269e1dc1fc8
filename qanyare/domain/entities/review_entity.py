"""
Review schemas
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel, PatchModel, UtcDatetime


class ReviewCreate(CamelModel):
    """Insert shape of a review; new reviews wait for approval"""

    customer_name: str = Field(..., min_length=1, max_length=200)
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1)
    is_approved: bool = False


class ReviewUpdate(PatchModel):
    """Partial review update, usually the approval toggle"""

    customer_name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    comment: Optional[str] = Field(default=None, min_length=1)
    is_approved: Optional[bool] = None


class ReviewRecord(CamelModel):
    """Stored review"""

    id: int
    customer_name: str
    rating: int
    comment: str
    is_approved: bool = False
    created_at: UtcDatetime
