"""
Analytics DTOs
"""

from pydantic import Field

from qanyare.domain.entities.base import CamelModel


class StatsResponse(CamelModel):
    """Dashboard figures, recomputed on every request"""

    total_orders: int = Field(..., ge=0)
    total_reservations: int = Field(..., ge=0)
    total_revenue: int = Field(..., ge=0)
    total_customers: int = Field(..., ge=0)
    total_reviews: int = Field(..., ge=0)
    avg_rating: float = Field(..., ge=0, le=5)
    total_staff: int = Field(..., ge=0)
