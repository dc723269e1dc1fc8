"""
Menu item routes
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from qanyare.domain.entities import MenuItemCreate, MenuItemRecord, MenuItemUpdate
from qanyare.domain.storage import Storage
from qanyare.infrastructure.utilities.exceptions import NotFoundError
from qanyare.presentation.api.dependencies import get_storage

router = APIRouter(prefix="/menu-items", tags=["menu"])

ENTITY = "Menu item"


@router.get("", response_model=List[MenuItemRecord])
async def list_menu_items(
    category_id: Optional[int] = Query(None, alias="categoryId"),
    include_inactive: bool = Query(False, alias="includeInactive"),
    storage: Storage = Depends(get_storage),
):
    if category_id is not None:
        return await storage.menu_items.list_by_category(
            category_id, include_inactive=include_inactive
        )
    return await storage.menu_items.list(include_inactive=include_inactive)


@router.get("/{item_id}", response_model=MenuItemRecord)
async def get_menu_item(item_id: int, storage: Storage = Depends(get_storage)):
    item = await storage.menu_items.get(item_id)
    if item is None:
        raise NotFoundError(ENTITY, item_id)
    return item


@router.post("", response_model=MenuItemRecord, status_code=status.HTTP_201_CREATED)
async def create_menu_item(payload: MenuItemCreate, storage: Storage = Depends(get_storage)):
    return await storage.menu_items.create(payload)


@router.patch("/{item_id}", response_model=MenuItemRecord)
async def update_menu_item(
    item_id: int, payload: MenuItemUpdate, storage: Storage = Depends(get_storage)
):
    item = await storage.menu_items.update(item_id, payload.changes())
    if item is None:
        raise NotFoundError(ENTITY, item_id)
    return item


@router.delete("/{item_id}")
async def delete_menu_item(
    item_id: int, storage: Storage = Depends(get_storage)
) -> Dict[str, str]:
    if not await storage.menu_items.delete(item_id):
        raise NotFoundError(ENTITY, item_id)
    return {"message": f"{ENTITY} deleted successfully"}
