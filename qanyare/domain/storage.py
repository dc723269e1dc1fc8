"""
Storage bundle

The application talks to one ``Storage`` regardless of which backend built it.
"""

from dataclasses import dataclass

from .repositories import (
    CategoryRepository,
    MenuItemRepository,
    OrderRepository,
    ReservationRepository,
    ReviewRepository,
    StaffRepository,
    TableRepository,
    UserRepository,
)


@dataclass(frozen=True)
class Storage:
    """One repository per entity collection"""

    users: UserRepository
    categories: CategoryRepository
    menu_items: MenuItemRepository
    orders: OrderRepository
    reservations: ReservationRepository
    reviews: ReviewRepository
    staff: StaffRepository
    tables: TableRepository
