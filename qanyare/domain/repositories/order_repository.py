"""
Order repository interface
"""

from ..entities.order_entity import OrderCreate, OrderRecord
from .crud_repository import CrudRepository


class OrderRepository(CrudRepository[OrderRecord, OrderCreate]):
    """Repository interface for orders; listings are newest first"""
