"""
Staff routes
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, Query, status

from qanyare.domain.entities import StaffCreate, StaffRecord, StaffUpdate
from qanyare.domain.storage import Storage
from qanyare.infrastructure.utilities.exceptions import NotFoundError
from qanyare.presentation.api.dependencies import get_storage

router = APIRouter(prefix="/staff", tags=["staff"])

ENTITY = "Staff member"


@router.get("", response_model=List[StaffRecord])
async def list_staff(
    include_inactive: bool = Query(False, alias="includeInactive"),
    storage: Storage = Depends(get_storage),
):
    return await storage.staff.list(include_inactive=include_inactive)


@router.get("/{staff_id}", response_model=StaffRecord)
async def get_staff_member(staff_id: int, storage: Storage = Depends(get_storage)):
    member = await storage.staff.get(staff_id)
    if member is None:
        raise NotFoundError(ENTITY, staff_id)
    return member


@router.post("", response_model=StaffRecord, status_code=status.HTTP_201_CREATED)
async def create_staff_member(payload: StaffCreate, storage: Storage = Depends(get_storage)):
    return await storage.staff.create(payload)


@router.patch("/{staff_id}", response_model=StaffRecord)
async def update_staff_member(
    staff_id: int, payload: StaffUpdate, storage: Storage = Depends(get_storage)
):
    member = await storage.staff.update(staff_id, payload.changes())
    if member is None:
        raise NotFoundError(ENTITY, staff_id)
    return member


@router.delete("/{staff_id}")
async def delete_staff_member(
    staff_id: int, storage: Storage = Depends(get_storage)
) -> Dict[str, str]:
    if not await storage.staff.delete(staff_id):
        raise NotFoundError(ENTITY, staff_id)
    return {"message": f"{ENTITY} deleted successfully"}
