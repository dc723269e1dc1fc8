"""
Category routes
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, Query, status

from qanyare.domain.entities import CategoryCreate, CategoryRecord, CategoryUpdate
from qanyare.domain.storage import Storage
from qanyare.infrastructure.utilities.exceptions import NotFoundError
from qanyare.presentation.api.dependencies import get_storage

router = APIRouter(prefix="/categories", tags=["categories"])

ENTITY = "Category"


@router.get("", response_model=List[CategoryRecord])
async def list_categories(
    include_inactive: bool = Query(False, alias="includeInactive"),
    storage: Storage = Depends(get_storage),
):
    return await storage.categories.list(include_inactive=include_inactive)


@router.get("/{category_id}", response_model=CategoryRecord)
async def get_category(category_id: int, storage: Storage = Depends(get_storage)):
    category = await storage.categories.get(category_id)
    if category is None:
        raise NotFoundError(ENTITY, category_id)
    return category


@router.post("", response_model=CategoryRecord, status_code=status.HTTP_201_CREATED)
async def create_category(payload: CategoryCreate, storage: Storage = Depends(get_storage)):
    return await storage.categories.create(payload)


@router.patch("/{category_id}", response_model=CategoryRecord)
async def update_category(
    category_id: int, payload: CategoryUpdate, storage: Storage = Depends(get_storage)
):
    category = await storage.categories.update(category_id, payload.changes())
    if category is None:
        raise NotFoundError(ENTITY, category_id)
    return category


@router.delete("/{category_id}")
async def delete_category(
    category_id: int, storage: Storage = Depends(get_storage)
) -> Dict[str, str]:
    if not await storage.categories.delete(category_id):
        raise NotFoundError(ENTITY, category_id)
    return {"message": f"{ENTITY} deleted successfully"}
