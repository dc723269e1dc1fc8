"""
Dependency Injection Container

Manages the instantiation and lifecycle of dependencies for Clean Architecture.
"""

import logging
from typing import Any, Dict, Optional

from qanyare.application.use_cases.analytics_use_case import AnalyticsUseCase
from qanyare.application.use_cases.auth_use_case import AuthUseCase
from qanyare.application.use_cases.status_management_use_case import (
    StatusManagementUseCase,
)
from qanyare.domain.storage import Storage
from qanyare.infrastructure.configuration.config import Settings, get_config
from qanyare.infrastructure.database.fixtures import seed_storage
from qanyare.infrastructure.database.operations import DatabaseManager
from qanyare.infrastructure.repositories import (
    build_in_memory_storage,
    build_sqlalchemy_storage,
)

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency injection container for Clean Architecture

    Manages the instantiation and lifecycle of:
    - Storage backend (Infrastructure layer)
    - Use Cases (Application layer)
    """

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or get_config()
        self._instances: Dict[str, Any] = {}
        self._db_manager: Optional[DatabaseManager] = None
        self._logger = logging.getLogger(self.__class__.__name__)
        self._setup_dependencies()

    def _setup_dependencies(self):
        """Setup all dependencies and their relationships"""
        self._logger.info("Setting up dependency injection container...")

        self._register_storage()
        self._register_use_cases()

        self._logger.info("Dependency injection container setup complete")

    def _register_storage(self):
        """Select the storage backend named in configuration"""
        if self.config.storage_backend == "memory":
            self._instances["storage"] = build_in_memory_storage()
        else:
            self._db_manager = DatabaseManager(self.config)
            self._instances["storage"] = build_sqlalchemy_storage(self._db_manager)

        self._logger.info("Storage backend registered: %s", self.config.storage_backend)

    def _register_use_cases(self):
        """Register use case implementations with their dependencies"""
        storage = self.get_storage()

        self._instances["auth_use_case"] = AuthUseCase(user_repository=storage.users)

        self._instances["status_management_use_case"] = StatusManagementUseCase(
            order_repository=storage.orders,
            reservation_repository=storage.reservations,
            enforce_transitions=self.config.enforce_status_transitions,
        )

        self._instances["analytics_use_case"] = AnalyticsUseCase(storage=storage)

        self._logger.debug("Use cases registered successfully")

    async def initialize(self) -> None:
        """Create tables (relational backend) and load fixtures when configured"""
        if self._db_manager is not None:
            self._db_manager.create_tables()
        if self.config.seed_on_startup:
            await seed_storage(self.get_storage(), self.config)

    def health_check(self) -> Dict[str, Any]:
        """Report storage health"""
        if self._db_manager is None:
            return {"status": "healthy"}
        return self._db_manager.health_check()

    def close(self) -> None:
        if self._db_manager is not None:
            self._db_manager.close()

    # Storage getters
    def get_storage(self) -> Storage:
        return self._instances["storage"]

    def get_db_manager(self) -> Optional[DatabaseManager]:
        return self._db_manager

    # Use case getters
    def get_auth_use_case(self) -> AuthUseCase:
        return self._instances["auth_use_case"]

    def get_status_management_use_case(self) -> StatusManagementUseCase:
        return self._instances["status_management_use_case"]

    def get_analytics_use_case(self) -> AnalyticsUseCase:
        return self._instances["analytics_use_case"]
