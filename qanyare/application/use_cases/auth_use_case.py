"""
Auth Use Case

Handles login and self-registration of user accounts.
"""

import logging

from qanyare.application.dtos.auth_dtos import LoginRequest, RegisterRequest
from qanyare.domain.entities.user_entity import UserCreate, UserPublic
from qanyare.domain.repositories.user_repository import UserRepository
from qanyare.infrastructure.security.password_hasher import (
    hash_password,
    verify_password,
)
from qanyare.infrastructure.utilities.exceptions import (
    AuthenticationError,
    UsernameTakenError,
)


class AuthUseCase:
    """Use case for credential checks and account creation"""

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository
        self._logger = logging.getLogger(self.__class__.__name__)

    async def login(self, request: LoginRequest) -> UserPublic:
        """
        Verify credentials

        Raises:
            AuthenticationError: unknown username or wrong password; the two
                cases are indistinguishable to the caller
        """
        user = await self._user_repository.find_by_username(request.username)
        if user is None or not verify_password(request.password, user.password_hash):
            self._logger.warning("Failed login for %s", request.username)
            raise AuthenticationError(request.username)

        self._logger.info("User %s logged in", user.id)
        return user.to_public()

    async def register(self, request: RegisterRequest) -> UserPublic:
        """
        Create a non-admin account

        Raises:
            UsernameTakenError: the username is already registered
        """
        if await self._user_repository.find_by_username(request.username) is not None:
            self._logger.info("Registration rejected, username taken: %s", request.username)
            raise UsernameTakenError(request.username)

        user = await self._user_repository.create(
            UserCreate(
                username=request.username,
                password_hash=hash_password(request.password),
                name=request.name,
                email=request.email,
                phone=request.phone,
                is_admin=False,
            )
        )
        self._logger.info("Registered user %s", user.id)
        return user.to_public()
