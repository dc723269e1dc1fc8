"""
Reservation repository interface
"""

from ..entities.reservation_entity import ReservationCreate, ReservationRecord
from .crud_repository import CrudRepository


class ReservationRepository(CrudRepository[ReservationRecord, ReservationCreate]):
    """Repository interface for reservations; listings are newest first"""
