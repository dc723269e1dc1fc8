"""
Application constants for the Qanyare restaurant service

Centralizes magic numbers and hard-coded values.
"""

from typing import Final


# Database configuration constants
class DatabaseSettings:
    """Database connection and pool configuration"""

    POOL_RECYCLE_SECONDS: Final[int] = 3600  # 1 hour
    SQLITE_TIMEOUT_SECONDS: Final[int] = 30

    # Production settings
    PRODUCTION_POOL_SIZE: Final[int] = 20
    PRODUCTION_MAX_OVERFLOW: Final[int] = 30

    # Development settings
    DEVELOPMENT_POOL_SIZE: Final[int] = 5
    DEVELOPMENT_MAX_OVERFLOW: Final[int] = 10


# Logging configuration constants
class LoggingSettings:
    """Logging file sizes and rotation settings"""

    MAX_LOG_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10MB
    MAIN_LOG_BACKUP_COUNT: Final[int] = 10
    ERROR_LOG_BACKUP_COUNT: Final[int] = 10

    MAIN_LOG_FILE: Final[str] = "app.json.log"
    ERROR_LOG_FILE: Final[str] = "errors.json.log"

    CONSOLE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    CONSOLE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

    QUIET_LOGGERS: Final[tuple[str, ...]] = ("sqlalchemy.engine", "uvicorn.access", "httpx")


# Performance monitoring constants
class PerformanceSettings:
    """Performance thresholds and monitoring settings"""

    SLOW_QUERY_THRESHOLD_MS: Final[int] = 1000
    SLOW_REQUEST_THRESHOLD_MS: Final[int] = 2000


# Password hashing
class SecuritySettings:
    """Password hashing parameters"""

    HASH_ALGORITHM: Final[str] = "sha256"
    HASH_ITERATIONS: Final[int] = 100_000
    SALT_BYTES: Final[int] = 16


# Configuration validation
class ConfigValidation:
    """Accepted configuration values"""

    VALID_ENVIRONMENTS: Final[tuple[str, ...]] = ("development", "test", "staging", "production")
    VALID_LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    SQLITE_PREFIX: Final[str] = "sqlite"


# Client-side durable storage slots
class StorageKeys:
    """Named slots of the client storage file"""

    CART: Final[str] = "qanyare-cart"
    USER: Final[str] = "qanyare-user"
    ADMIN: Final[str] = "qanyare-admin"


# HTTP response messages
class ErrorMessages:
    """User-facing error messages returned by the API"""

    INVALID_DATA: Final[str] = "Invalid data"
    INVALID_CREDENTIALS: Final[str] = "Invalid credentials"
    USERNAME_TAKEN: Final[str] = "Username already exists"
    INTERNAL_ERROR: Final[str] = "Internal server error"
    DATABASE_ERROR: Final[str] = "Sorry, there was a problem with our system. Please try again in a moment."
