"""
Domain entities package

Pydantic schemas for the eight restaurant entities. Each entity has an insert
shape (``*Create``), a partial update shape (``*Update``) and a stored shape
(``*Record``). Shared by the API and the client package.
"""

from .base import CamelModel, PatchModel, utc_now
from .menu_entities import (
    CategoryCreate,
    CategoryRecord,
    CategoryUpdate,
    MenuItemCreate,
    MenuItemRecord,
    MenuItemUpdate,
)
from .order_entity import OrderCreate, OrderLine, OrderRecord, OrderStatus, OrderUpdate
from .reservation_entity import (
    ReservationCreate,
    ReservationRecord,
    ReservationStatus,
    ReservationUpdate,
)
from .review_entity import ReviewCreate, ReviewRecord, ReviewUpdate
from .staff_entity import StaffCreate, StaffRecord, StaffUpdate
from .table_entity import TableCreate, TableRecord, TableUpdate
from .user_entity import UserCreate, UserPublic, UserRecord

__all__ = [
    "CamelModel",
    "PatchModel",
    "utc_now",
    "CategoryCreate",
    "CategoryRecord",
    "CategoryUpdate",
    "MenuItemCreate",
    "MenuItemRecord",
    "MenuItemUpdate",
    "OrderCreate",
    "OrderLine",
    "OrderRecord",
    "OrderStatus",
    "OrderUpdate",
    "ReservationCreate",
    "ReservationRecord",
    "ReservationStatus",
    "ReservationUpdate",
    "ReviewCreate",
    "ReviewRecord",
    "ReviewUpdate",
    "StaffCreate",
    "StaffRecord",
    "StaffUpdate",
    "TableCreate",
    "TableRecord",
    "TableUpdate",
    "UserCreate",
    "UserPublic",
    "UserRecord",
]
