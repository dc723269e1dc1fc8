"""
Configuration management for the Qanyare restaurant service
"""

import logging
import threading
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from qanyare.infrastructure.utilities.constants import ConfigValidation

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Storage configuration
    database_url: str = Field(
        default="sqlite:///qanyare.db", description="Database connection URL"
    )
    storage_backend: Literal["database", "memory"] = Field(
        default="database", description="Storage implementation selected at startup"
    )
    seed_on_startup: bool = Field(
        default=True, description="Load fixture data into empty collections on startup"
    )

    # Application settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: str = Field(default="logs", description="Directory for log files")
    log_to_file: bool = Field(default=True, description="Write rotating JSON log files")
    environment: str = Field(
        default="development", description="Application environment"
    )

    # Business rules
    enforce_status_transitions: bool = Field(
        default=False,
        description="Reject order/reservation status changes outside the transition graph",
    )

    # Seeded administrator account
    admin_username: str = Field(default="admin", min_length=1)
    admin_password: str = Field(default="password123", min_length=1)
    admin_name: str = Field(default="Admin User")

    # HTTP server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, gt=0, lt=65536, description="Bind port")
    cors_origins: List[str] = Field(default=["*"], description="Allowed CORS origins")

    # Client package
    api_base_url: str = Field(
        default="http://localhost:8000", description="Base URL used by the API client"
    )
    client_storage_path: str = Field(
        default=".qanyare/client_storage.json",
        description="File backing the client-side durable storage",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ConfigValidation.VALID_LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("environment")
    @classmethod
    def _check_environment(cls, value: str) -> str:
        if value not in ConfigValidation.VALID_ENVIRONMENTS:
            logger.warning("Unknown environment: %s", value)
        return value

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def uses_sqlite(self) -> bool:
        return self.database_url.startswith(ConfigValidation.SQLITE_PREFIX)


_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_config() -> Settings:
    """Get the global settings instance, ensuring thread safety."""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = Settings()
    return _settings_instance


def reset_config() -> None:
    """Drop the cached settings so the next get_config() re-reads the environment."""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
