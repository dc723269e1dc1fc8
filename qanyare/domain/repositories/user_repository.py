"""
User repository interface
"""

from abc import abstractmethod
from typing import Optional

from ..entities.user_entity import UserCreate, UserRecord
from .crud_repository import CrudRepository


class UserRepository(CrudRepository[UserRecord, UserCreate]):
    """
    Repository interface for user accounts

    ``create`` raises ``UsernameTakenError`` when the username is already registered.
    """

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[UserRecord]:
        """Find a user by exact username match"""
