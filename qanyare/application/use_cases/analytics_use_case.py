"""
Analytics Use Case

Dashboard figures computed from the live collections on every call.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import List

from qanyare.application.dtos.analytics_dtos import StatsResponse
from qanyare.domain.entities.review_entity import ReviewRecord
from qanyare.domain.storage import Storage


class AnalyticsUseCase:
    """Use case for the admin dashboard statistics"""

    def __init__(self, storage: Storage):
        self._storage = storage
        self._logger = logging.getLogger(self.__class__.__name__)

    async def get_stats(self) -> StatsResponse:
        orders = await self._storage.orders.list()
        reservations = await self._storage.reservations.list()
        approved_reviews = await self._storage.reviews.list_approved()
        active_staff = await self._storage.staff.list()

        customers = {order.customer_name for order in orders}
        customers.update(reservation.customer_name for reservation in reservations)

        stats = StatsResponse(
            total_orders=len(orders),
            total_reservations=len(reservations),
            total_revenue=sum(order.total for order in orders),
            total_customers=len(customers),
            total_reviews=len(approved_reviews),
            avg_rating=self.average_rating(approved_reviews),
            total_staff=len(active_staff),
        )
        self._logger.debug("Computed dashboard stats: %s", stats.model_dump())
        return stats

    @staticmethod
    def average_rating(reviews: List[ReviewRecord]) -> float:
        """Mean rating rounded half-up to one decimal, 0 without reviews"""
        if not reviews:
            return 0.0
        mean = Decimal(sum(review.rating for review in reviews)) / Decimal(len(reviews))
        return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
