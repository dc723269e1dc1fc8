"""
In-memory implementations of the repository contracts

Each collection is a dict keyed by id with its own id counter. Records are
copied on the way in and out so callers never share state with the store.
There is no locking; concurrent updates are last-write-wins.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Type

from qanyare.domain.entities.base import CamelModel, utc_now
from qanyare.domain.entities.menu_entities import CategoryRecord, MenuItemRecord
from qanyare.domain.entities.order_entity import OrderRecord
from qanyare.domain.entities.reservation_entity import ReservationRecord
from qanyare.domain.entities.review_entity import ReviewRecord
from qanyare.domain.entities.staff_entity import StaffRecord
from qanyare.domain.entities.table_entity import TableRecord
from qanyare.domain.entities.user_entity import UserCreate, UserRecord
from qanyare.domain.repositories import (
    CategoryRepository,
    CrudRepository,
    MenuItemRepository,
    OrderRepository,
    ReservationRepository,
    ReviewRepository,
    StaffRepository,
    TableRepository,
    UserRepository,
)
from qanyare.domain.storage import Storage
from qanyare.infrastructure.utilities.exceptions import UsernameTakenError


class InMemoryCrudRepository(CrudRepository):
    """Dict-backed collection mirroring SQLAlchemyCrudRepository behavior"""

    record_type: Type[CamelModel]
    timestamped: bool = False
    newest_first: bool = False

    def __init__(self):
        self._records: Dict[int, CamelModel] = {}
        self._next_id = 1
        self._logger = logging.getLogger(self.__class__.__name__)

    async def list(self) -> List[Any]:
        return self._select()

    async def get(self, record_id: int) -> Optional[Any]:
        record = self._records.get(record_id)
        return record.model_copy(deep=True) if record is not None else None

    async def create(self, data: CamelModel) -> Any:
        values = data.model_dump()
        values["id"] = self._next_id
        if self.timestamped:
            values["created_at"] = utc_now()

        record = self.record_type.model_validate(values)
        self._records[record.id] = record
        self._next_id += 1

        self._logger.info("Created %s %s", self.record_type.__name__, record.id)
        return record.model_copy(deep=True)

    async def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[Any]:
        current = self._records.get(record_id)
        if current is None:
            return None

        merged = {**current.model_dump(), **changes, "id": record_id}
        record = self.record_type.model_validate(merged)
        self._records[record_id] = record
        return record.model_copy(deep=True)

    async def delete(self, record_id: int) -> bool:
        if self._records.pop(record_id, None) is None:
            return False

        self._logger.info("Deleted %s %s", self.record_type.__name__, record_id)
        return True

    async def count(self) -> int:
        return len(self._records)

    def _select(self, predicate: Optional[Callable[[Any], bool]] = None) -> List[Any]:
        records = [
            record
            for record in self._records.values()
            if predicate is None or predicate(record)
        ]
        if self.newest_first:
            records.sort(key=lambda record: (record.created_at, record.id), reverse=True)
        else:
            records.sort(key=lambda record: record.id)
        return [record.model_copy(deep=True) for record in records]


def _is_active(record: Any) -> bool:
    return record.is_active


class InMemoryUserRepository(InMemoryCrudRepository, UserRepository):
    record_type = UserRecord
    timestamped = True

    async def create(self, data: UserCreate) -> UserRecord:
        if any(record.username == data.username for record in self._records.values()):
            raise UsernameTakenError(data.username)
        return await super().create(data)

    async def find_by_username(self, username: str) -> Optional[UserRecord]:
        for record in self._records.values():
            if record.username == username:
                return record.model_copy(deep=True)
        return None


class InMemoryCategoryRepository(InMemoryCrudRepository, CategoryRepository):
    record_type = CategoryRecord

    async def list(self, include_inactive: bool = False) -> List[CategoryRecord]:
        return self._select(None if include_inactive else _is_active)


class InMemoryMenuItemRepository(InMemoryCrudRepository, MenuItemRepository):
    record_type = MenuItemRecord

    async def list(self, include_inactive: bool = False) -> List[MenuItemRecord]:
        return self._select(None if include_inactive else _is_active)

    async def list_by_category(
        self, category_id: int, include_inactive: bool = False
    ) -> List[MenuItemRecord]:
        return self._select(
            lambda record: record.category_id == category_id
            and (include_inactive or record.is_active)
        )


class InMemoryOrderRepository(InMemoryCrudRepository, OrderRepository):
    record_type = OrderRecord
    timestamped = True
    newest_first = True


class InMemoryReservationRepository(InMemoryCrudRepository, ReservationRepository):
    record_type = ReservationRecord
    timestamped = True
    newest_first = True


class InMemoryReviewRepository(InMemoryCrudRepository, ReviewRepository):
    record_type = ReviewRecord
    timestamped = True
    newest_first = True

    async def list_approved(self) -> List[ReviewRecord]:
        return self._select(lambda record: record.is_approved)


class InMemoryStaffRepository(InMemoryCrudRepository, StaffRepository):
    record_type = StaffRecord
    timestamped = True

    async def list(self, include_inactive: bool = False) -> List[StaffRecord]:
        return self._select(None if include_inactive else _is_active)


class InMemoryTableRepository(InMemoryCrudRepository, TableRepository):
    record_type = TableRecord


def build_in_memory_storage() -> Storage:
    """Fresh, empty in-memory storage"""
    return Storage(
        users=InMemoryUserRepository(),
        categories=InMemoryCategoryRepository(),
        menu_items=InMemoryMenuItemRepository(),
        orders=InMemoryOrderRepository(),
        reservations=InMemoryReservationRepository(),
        reviews=InMemoryReviewRepository(),
        staff=InMemoryStaffRepository(),
        tables=InMemoryTableRepository(),
    )
