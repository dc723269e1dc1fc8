"""
Dining table routes
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, status

from qanyare.domain.entities import TableCreate, TableRecord, TableUpdate
from qanyare.domain.storage import Storage
from qanyare.infrastructure.utilities.exceptions import NotFoundError
from qanyare.presentation.api.dependencies import get_storage

router = APIRouter(prefix="/tables", tags=["tables"])


@router.get("", response_model=List[TableRecord])
async def list_tables(storage: Storage = Depends(get_storage)):
    return await storage.tables.list()


@router.get("/{table_id}", response_model=TableRecord)
async def get_table(table_id: int, storage: Storage = Depends(get_storage)):
    table = await storage.tables.get(table_id)
    if table is None:
        raise NotFoundError("Table", table_id)
    return table


@router.post("", response_model=TableRecord, status_code=status.HTTP_201_CREATED)
async def create_table(payload: TableCreate, storage: Storage = Depends(get_storage)):
    return await storage.tables.create(payload)


@router.patch("/{table_id}", response_model=TableRecord)
async def update_table(
    table_id: int, payload: TableUpdate, storage: Storage = Depends(get_storage)
):
    table = await storage.tables.update(table_id, payload.changes())
    if table is None:
        raise NotFoundError("Table", table_id)
    return table


@router.delete("/{table_id}")
async def delete_table(
    table_id: int, storage: Storage = Depends(get_storage)
) -> Dict[str, str]:
    if not await storage.tables.delete(table_id):
        raise NotFoundError("Table", table_id)
    return {"message": "Table deleted successfully"}
