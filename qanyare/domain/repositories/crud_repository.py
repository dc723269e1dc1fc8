"""
Generic CRUD repository interface

Defines the contract every storage backend provides for each entity type.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

RecordT = TypeVar("RecordT")
CreateT = TypeVar("CreateT")


class CrudRepository(ABC, Generic[RecordT, CreateT]):
    """
    Abstract repository for one entity collection

    Ids are assigned by the backend. Returned records are snapshots: mutating
    them never changes what is stored.
    """

    @abstractmethod
    async def list(self) -> List[RecordT]:
        """
        Return every record in the collection's listing order

        Returns:
            List of records, possibly empty
        """

    @abstractmethod
    async def get(self, record_id: int) -> Optional[RecordT]:
        """
        Find a record by its id

        Args:
            record_id: The record's identifier

        Returns:
            The record if found, None otherwise
        """

    @abstractmethod
    async def create(self, data: CreateT) -> RecordT:
        """
        Store a new record

        Args:
            data: Validated insert payload

        Returns:
            The stored record with its assigned id (and timestamp where the
            entity has one)
        """

    @abstractmethod
    async def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[RecordT]:
        """
        Apply a partial update

        Args:
            record_id: The record's identifier
            changes: Field values keyed by snake_case name; keys not present
                are left unchanged

        Returns:
            The updated record, or None if no record has that id
        """

    @abstractmethod
    async def delete(self, record_id: int) -> bool:
        """
        Remove a record

        Returns:
            True if a record was removed, False if none had that id
        """

    @abstractmethod
    async def count(self) -> int:
        """Number of stored records, active or not"""
