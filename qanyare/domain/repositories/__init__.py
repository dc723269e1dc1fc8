"""
Domain repository interfaces

Contains abstract repository interfaces that define contracts for data access.
Both storage backends implement every one of them.
"""

from .crud_repository import CrudRepository
from .menu_repository import CategoryRepository, MenuItemRepository
from .order_repository import OrderRepository
from .reservation_repository import ReservationRepository
from .review_repository import ReviewRepository
from .staff_repository import StaffRepository
from .table_repository import TableRepository
from .user_repository import UserRepository

__all__ = [
    "CrudRepository",
    "CategoryRepository",
    "MenuItemRepository",
    "OrderRepository",
    "ReservationRepository",
    "ReviewRepository",
    "StaffRepository",
    "TableRepository",
    "UserRepository",
]
