"""
SQLAlchemy implementations of CategoryRepository and MenuItemRepository
"""

from typing import List

from qanyare.domain.entities.menu_entities import CategoryRecord, MenuItemRecord
from qanyare.domain.repositories.menu_repository import (
    CategoryRepository,
    MenuItemRepository,
)
from qanyare.infrastructure.database.models import Category as SQLCategory
from qanyare.infrastructure.database.models import MenuItem as SQLMenuItem
from qanyare.infrastructure.repositories.sqlalchemy_crud_repository import (
    SQLAlchemyCrudRepository,
)


class SQLAlchemyCategoryRepository(SQLAlchemyCrudRepository, CategoryRepository):
    """SQLAlchemy implementation of category repository"""

    model = SQLCategory
    record_type = CategoryRecord

    async def list(self, include_inactive: bool = False) -> List[CategoryRecord]:
        if include_inactive:
            return self._select()
        return self._select(SQLCategory.is_active.is_(True))


class SQLAlchemyMenuItemRepository(SQLAlchemyCrudRepository, MenuItemRepository):
    """SQLAlchemy implementation of menu item repository"""

    model = SQLMenuItem
    record_type = MenuItemRecord

    async def list(self, include_inactive: bool = False) -> List[MenuItemRecord]:
        if include_inactive:
            return self._select()
        return self._select(SQLMenuItem.is_active.is_(True))

    async def list_by_category(
        self, category_id: int, include_inactive: bool = False
    ) -> List[MenuItemRecord]:
        criteria = [SQLMenuItem.category_id == category_id]
        if not include_inactive:
            criteria.append(SQLMenuItem.is_active.is_(True))
        return self._select(*criteria)
