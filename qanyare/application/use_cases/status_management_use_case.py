"""
Status Management Use Case

Applies order and reservation updates, optionally holding status changes to
the lifecycle graphs below.
"""

import logging
from typing import Any, Dict, List, Optional

from qanyare.domain.entities.order_entity import OrderRecord, OrderStatus, OrderUpdate
from qanyare.domain.entities.reservation_entity import (
    ReservationRecord,
    ReservationStatus,
    ReservationUpdate,
)
from qanyare.domain.repositories.order_repository import OrderRepository
from qanyare.domain.repositories.reservation_repository import ReservationRepository
from qanyare.infrastructure.utilities.exceptions import (
    InvalidStatusTransitionError,
    NotFoundError,
)


class StatusManagementUseCase:
    """Use case for order and reservation status transitions"""

    ORDER_TRANSITIONS: Dict[str, List[str]] = {
        OrderStatus.PENDING.value: [OrderStatus.PREPARING.value, OrderStatus.CANCELLED.value],
        OrderStatus.PREPARING.value: [OrderStatus.READY.value, OrderStatus.CANCELLED.value],
        OrderStatus.READY.value: [OrderStatus.COMPLETED.value],
        OrderStatus.COMPLETED.value: [],  # Terminal state
        OrderStatus.CANCELLED.value: [],  # Terminal state
    }

    RESERVATION_TRANSITIONS: Dict[str, List[str]] = {
        ReservationStatus.PENDING.value: [
            ReservationStatus.CONFIRMED.value,
            ReservationStatus.CANCELLED.value,
        ],
        ReservationStatus.CONFIRMED.value: [
            ReservationStatus.COMPLETED.value,
            ReservationStatus.CANCELLED.value,
        ],
        ReservationStatus.COMPLETED.value: [],  # Terminal state
        ReservationStatus.CANCELLED.value: [],  # Terminal state
    }

    INITIAL_STATUSES: Dict[str, str] = {
        "Order": OrderStatus.PENDING.value,
        "Reservation": ReservationStatus.PENDING.value,
    }

    def __init__(
        self,
        order_repository: OrderRepository,
        reservation_repository: ReservationRepository,
        enforce_transitions: bool = False,
    ):
        self._order_repository = order_repository
        self._reservation_repository = reservation_repository
        self._enforce_transitions = enforce_transitions
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def enforces_transitions(self) -> bool:
        return self._enforce_transitions

    def validate_initial_status(self, entity: str, status: str) -> None:
        """New orders and reservations start in their initial status when transitions are enforced"""
        initial = self.INITIAL_STATUSES[entity]
        if self._enforce_transitions and status != initial:
            raise InvalidStatusTransitionError(entity, "new", status, [initial])

    async def update_order(self, order_id: int, update: OrderUpdate) -> OrderRecord:
        """Apply a partial order update"""
        current = await self._order_repository.get(order_id)
        if current is None:
            raise NotFoundError("Order", order_id)

        changes = self._checked_changes(
            "Order", current.status, update.changes(), self.ORDER_TRANSITIONS
        )
        if not changes:
            return current

        updated = await self._order_repository.update(order_id, changes)
        if updated is None:
            raise NotFoundError("Order", order_id)

        self._log_status_change("Order", order_id, current.status, updated.status)
        return updated

    async def update_reservation(
        self, reservation_id: int, update: ReservationUpdate
    ) -> ReservationRecord:
        """Apply a partial reservation update"""
        current = await self._reservation_repository.get(reservation_id)
        if current is None:
            raise NotFoundError("Reservation", reservation_id)

        changes = self._checked_changes(
            "Reservation", current.status, update.changes(), self.RESERVATION_TRANSITIONS
        )
        if not changes:
            return current

        updated = await self._reservation_repository.update(reservation_id, changes)
        if updated is None:
            raise NotFoundError("Reservation", reservation_id)

        self._log_status_change("Reservation", reservation_id, current.status, updated.status)
        return updated

    def is_valid_transition(
        self, transitions: Dict[str, List[str]], current: str, requested: str
    ) -> bool:
        return requested == current or requested in transitions.get(current, [])

    def _checked_changes(
        self,
        entity: str,
        current_status: str,
        changes: Dict[str, Any],
        transitions: Dict[str, List[str]],
    ) -> Dict[str, Any]:
        requested: Optional[str] = changes.get("status")
        if requested is None or not self._enforce_transitions:
            return changes

        if not self.is_valid_transition(transitions, current_status, requested):
            self._logger.warning(
                "Rejected %s status change %s -> %s", entity.lower(), current_status, requested
            )
            raise InvalidStatusTransitionError(
                entity, current_status, requested, transitions.get(current_status, [])
            )

        if requested == current_status:
            # Same-state patch leaves the status untouched
            changes = {key: value for key, value in changes.items() if key != "status"}
        return changes

    def _log_status_change(self, entity: str, record_id: int, old: str, new: str) -> None:
        if old != new:
            self._logger.info("%s %s status %s -> %s", entity, record_id, old, new)
