"""
Repository implementations

``build_sqlalchemy_storage`` and ``build_in_memory_storage`` return the same
``Storage`` contract backed by a relational database or by process memory.
"""

from qanyare.domain.storage import Storage
from qanyare.infrastructure.database.operations import DatabaseManager

from .in_memory_repositories import build_in_memory_storage
from .sqlalchemy_booking_repositories import (
    SQLAlchemyReservationRepository,
    SQLAlchemyReviewRepository,
    SQLAlchemyStaffRepository,
    SQLAlchemyTableRepository,
)
from .sqlalchemy_menu_repository import (
    SQLAlchemyCategoryRepository,
    SQLAlchemyMenuItemRepository,
)
from .sqlalchemy_order_repository import SQLAlchemyOrderRepository
from .sqlalchemy_user_repository import SQLAlchemyUserRepository


def build_sqlalchemy_storage(db_manager: DatabaseManager) -> Storage:
    """Storage whose repositories share the manager's session factory"""
    session_factory = db_manager.get_session_factory()
    return Storage(
        users=SQLAlchemyUserRepository(session_factory),
        categories=SQLAlchemyCategoryRepository(session_factory),
        menu_items=SQLAlchemyMenuItemRepository(session_factory),
        orders=SQLAlchemyOrderRepository(session_factory),
        reservations=SQLAlchemyReservationRepository(session_factory),
        reviews=SQLAlchemyReviewRepository(session_factory),
        staff=SQLAlchemyStaffRepository(session_factory),
        tables=SQLAlchemyTableRepository(session_factory),
    )


__all__ = ["build_in_memory_storage", "build_sqlalchemy_storage"]
