"""
Reservation routes

Status changes go through the status management use case.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from qanyare.application.use_cases.status_management_use_case import (
    StatusManagementUseCase,
)
from qanyare.domain.entities import (
    ReservationCreate,
    ReservationRecord,
    ReservationUpdate,
)
from qanyare.domain.storage import Storage
from qanyare.infrastructure.utilities.exceptions import NotFoundError
from qanyare.presentation.api.dependencies import get_status_use_case, get_storage

router = APIRouter(prefix="/reservations", tags=["reservations"])


@router.get("", response_model=List[ReservationRecord])
async def list_reservations(storage: Storage = Depends(get_storage)):
    return await storage.reservations.list()


@router.get("/{reservation_id}", response_model=ReservationRecord)
async def get_reservation(reservation_id: int, storage: Storage = Depends(get_storage)):
    reservation = await storage.reservations.get(reservation_id)
    if reservation is None:
        raise NotFoundError("Reservation", reservation_id)
    return reservation


@router.post("", response_model=ReservationRecord, status_code=status.HTTP_201_CREATED)
async def create_reservation(
    payload: ReservationCreate,
    storage: Storage = Depends(get_storage),
    status_use_case: StatusManagementUseCase = Depends(get_status_use_case),
):
    status_use_case.validate_initial_status("Reservation", payload.status)
    return await storage.reservations.create(payload)


@router.patch("/{reservation_id}", response_model=ReservationRecord)
async def update_reservation(
    reservation_id: int,
    payload: ReservationUpdate,
    status_use_case: StatusManagementUseCase = Depends(get_status_use_case),
):
    return await status_use_case.update_reservation(reservation_id, payload)
