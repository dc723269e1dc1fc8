"""
SQLAlchemy implementation of UserRepository
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from qanyare.domain.entities.user_entity import UserCreate, UserRecord
from qanyare.domain.repositories.user_repository import UserRepository
from qanyare.infrastructure.database.models import User as SQLUser
from qanyare.infrastructure.repositories.session_handler import managed_session
from qanyare.infrastructure.repositories.sqlalchemy_crud_repository import (
    SQLAlchemyCrudRepository,
)
from qanyare.infrastructure.utilities.exceptions import UsernameTakenError


class SQLAlchemyUserRepository(SQLAlchemyCrudRepository, UserRepository):
    """SQLAlchemy implementation of user repository"""

    model = SQLUser
    record_type = UserRecord
    timestamped = True

    async def create(self, data: UserCreate) -> UserRecord:
        """Insert a user; the unique username constraint maps to UsernameTakenError"""
        try:
            return await super().create(data)
        except IntegrityError as e:
            self._logger.info("Username already registered: %s", data.username)
            raise UsernameTakenError(data.username) from e

    async def find_by_username(self, username: str) -> Optional[UserRecord]:
        """Find user by exact username"""
        with managed_session(self._session_factory) as session:
            sql_user = (
                session.query(SQLUser).filter(SQLUser.username == username).first()
            )

            if not sql_user:
                return None

            return self._to_record(sql_user)
