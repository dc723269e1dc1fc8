"""
Order routes

Status changes go through the status management use case.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from qanyare.application.use_cases.status_management_use_case import (
    StatusManagementUseCase,
)
from qanyare.domain.entities import OrderCreate, OrderRecord, OrderUpdate
from qanyare.domain.storage import Storage
from qanyare.infrastructure.utilities.exceptions import NotFoundError
from qanyare.presentation.api.dependencies import get_status_use_case, get_storage

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=List[OrderRecord])
async def list_orders(storage: Storage = Depends(get_storage)):
    return await storage.orders.list()


@router.get("/{order_id}", response_model=OrderRecord)
async def get_order(order_id: int, storage: Storage = Depends(get_storage)):
    order = await storage.orders.get(order_id)
    if order is None:
        raise NotFoundError("Order", order_id)
    return order


@router.post("", response_model=OrderRecord, status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: OrderCreate,
    storage: Storage = Depends(get_storage),
    status_use_case: StatusManagementUseCase = Depends(get_status_use_case),
):
    status_use_case.validate_initial_status("Order", payload.status)
    return await storage.orders.create(payload)


@router.patch("/{order_id}", response_model=OrderRecord)
async def update_order(
    order_id: int,
    payload: OrderUpdate,
    status_use_case: StatusManagementUseCase = Depends(get_status_use_case),
):
    return await status_use_case.update_order(order_id, payload)
