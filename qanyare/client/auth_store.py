"""
Signed-in user state

The current user and the admin marker are mirrored to the ``qanyare-user`` and
``qanyare-admin`` storage slots. Sessions never expire; they end on logout.
"""

import logging
from typing import Optional

from qanyare.application.dtos.auth_dtos import RegisterRequest
from qanyare.client.api_client import RestaurantApiClient
from qanyare.client.client_storage import ClientStorage
from qanyare.client.notifications import LoggingNotifier, Notification, Notifier
from qanyare.domain.entities.user_entity import UserPublic
from qanyare.infrastructure.utilities.exceptions import ApiError

logger = logging.getLogger(__name__)


class AuthStore:
    """Auth container backed by the login and registration endpoints"""

    def __init__(
        self,
        api_client: RestaurantApiClient,
        storage: ClientStorage,
        notifier: Optional[Notifier] = None,
    ):
        self._api = api_client
        self._storage = storage
        self._notifier = notifier or LoggingNotifier()
        self._user = self._load_user()
        self._is_admin = storage.get_admin() is not None

    @property
    def user(self) -> Optional[UserPublic]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def is_admin(self) -> bool:
        return self._is_admin

    def login(self, username: str, password: str) -> UserPublic:
        """
        Sign in through the API.

        Raises:
            ApiError: the server rejected the credentials or could not be reached
        """
        try:
            user = self._api.login(username, password)
        except ApiError:
            self._notifier.notify(
                Notification("Login failed", "Invalid username or password.", "destructive")
            )
            raise

        self._sign_in(user)
        self._notifier.notify(Notification("Login successful", f"Welcome back, {user.name}!"))
        return user

    def register(
        self,
        username: str,
        password: str,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> UserPublic:
        """Create an account and sign in as it"""
        request = RegisterRequest(
            username=username, password=password, name=name, email=email, phone=phone
        )
        try:
            user = self._api.register(request)
        except ApiError as e:
            self._notifier.notify(Notification("Registration failed", e.user_message, "destructive"))
            raise

        self._sign_in(user)
        self._notifier.notify(Notification("Account created", f"Welcome, {user.name}!"))
        return user

    def logout(self) -> None:
        self._user = None
        self._is_admin = False
        self._storage.clear_user()
        self._storage.clear_admin()
        self._notifier.notify(
            Notification("Logged out", "You have been logged out successfully.")
        )

    def _sign_in(self, user: UserPublic) -> None:
        self._user = user
        stored = user.model_dump(mode="json", by_alias=True)
        self._storage.set_user(stored)
        if user.is_admin:
            self._is_admin = True
            self._storage.set_admin(stored)
        else:
            self._is_admin = False
            self._storage.clear_admin()

    def _load_user(self) -> Optional[UserPublic]:
        stored = self._storage.get_user()
        if not stored:
            return None
        try:
            return UserPublic.model_validate(stored)
        except ValueError as e:
            logger.warning("Ignoring unreadable stored user: %s", e)
            return None
