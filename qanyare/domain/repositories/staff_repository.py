"""
Staff repository interface
"""

from abc import abstractmethod
from typing import List

from ..entities.staff_entity import StaffCreate, StaffRecord
from .crud_repository import CrudRepository


class StaffRepository(CrudRepository[StaffRecord, StaffCreate]):
    """Repository interface for staff members"""

    @abstractmethod
    async def list(self, include_inactive: bool = False) -> List[StaffRecord]:
        """Return staff members ordered by id"""
