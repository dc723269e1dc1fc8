"""
Review repository interface
"""

from abc import abstractmethod
from typing import List

from ..entities.review_entity import ReviewCreate, ReviewRecord
from .crud_repository import CrudRepository


class ReviewRepository(CrudRepository[ReviewRecord, ReviewCreate]):
    """Repository interface for reviews; listings are newest first"""

    @abstractmethod
    async def list_approved(self) -> List[ReviewRecord]:
        """Return only approved reviews, newest first"""
