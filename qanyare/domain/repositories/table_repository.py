"""
Dining table repository interface
"""

from ..entities.table_entity import TableCreate, TableRecord
from .crud_repository import CrudRepository


class TableRepository(CrudRepository[TableRecord, TableCreate]):
    """Repository interface for tables and halls; listings are ordered by id"""
