"""
Category and menu item repository interfaces

Listings hide soft-deleted records (``is_active`` false) unless asked otherwise.
"""

from abc import abstractmethod
from typing import List

from ..entities.menu_entities import (
    CategoryCreate,
    CategoryRecord,
    MenuItemCreate,
    MenuItemRecord,
)
from .crud_repository import CrudRepository


class CategoryRepository(CrudRepository[CategoryRecord, CategoryCreate]):
    """Repository interface for menu categories"""

    @abstractmethod
    async def list(self, include_inactive: bool = False) -> List[CategoryRecord]:
        """Return categories ordered by id"""


class MenuItemRepository(CrudRepository[MenuItemRecord, MenuItemCreate]):
    """Repository interface for menu items"""

    @abstractmethod
    async def list(self, include_inactive: bool = False) -> List[MenuItemRecord]:
        """Return menu items ordered by id"""

    @abstractmethod
    async def list_by_category(
        self, category_id: int, include_inactive: bool = False
    ) -> List[MenuItemRecord]:
        """Return the menu items referencing a category, ordered by id"""
