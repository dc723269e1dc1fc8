"""
SQLAlchemy implementations of the reservation, review, staff and table repositories
"""

from typing import List

from qanyare.domain.entities.reservation_entity import ReservationRecord
from qanyare.domain.entities.review_entity import ReviewRecord
from qanyare.domain.entities.staff_entity import StaffRecord
from qanyare.domain.entities.table_entity import TableRecord
from qanyare.domain.repositories.reservation_repository import ReservationRepository
from qanyare.domain.repositories.review_repository import ReviewRepository
from qanyare.domain.repositories.staff_repository import StaffRepository
from qanyare.domain.repositories.table_repository import TableRepository
from qanyare.infrastructure.database.models import DiningTable as SQLTable
from qanyare.infrastructure.database.models import Reservation as SQLReservation
from qanyare.infrastructure.database.models import Review as SQLReview
from qanyare.infrastructure.database.models import Staff as SQLStaff
from qanyare.infrastructure.repositories.sqlalchemy_crud_repository import (
    SQLAlchemyCrudRepository,
)


class SQLAlchemyReservationRepository(SQLAlchemyCrudRepository, ReservationRepository):
    model = SQLReservation
    record_type = ReservationRecord
    timestamped = True
    newest_first = True


class SQLAlchemyReviewRepository(SQLAlchemyCrudRepository, ReviewRepository):
    model = SQLReview
    record_type = ReviewRecord
    timestamped = True
    newest_first = True

    async def list_approved(self) -> List[ReviewRecord]:
        return self._select(SQLReview.is_approved.is_(True))


class SQLAlchemyStaffRepository(SQLAlchemyCrudRepository, StaffRepository):
    model = SQLStaff
    record_type = StaffRecord
    timestamped = True

    async def list(self, include_inactive: bool = False) -> List[StaffRecord]:
        if include_inactive:
            return self._select()
        return self._select(SQLStaff.is_active.is_(True))


class SQLAlchemyTableRepository(SQLAlchemyCrudRepository, TableRepository):
    model = SQLTable
    record_type = TableRecord
