"""
Custom exceptions for the Qanyare restaurant service
"""

import logging
from typing import Any, List, Optional

from qanyare.infrastructure.utilities.constants import ErrorMessages

logger = logging.getLogger(__name__)


class QanyareError(Exception):
    """Base exception for the restaurant service"""

    status_code = 500

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message)
        self.user_message = user_message or "An error occurred. Please try again."
        self.error_code = error_code or "GENERAL_ERROR"


class DatabaseError(QanyareError):
    """Database-related errors"""

    def __init__(self, message: str, operation: str = None):
        super().__init__(message, ErrorMessages.DATABASE_ERROR, "DATABASE_ERROR")
        self.operation = operation


class ValidationError(QanyareError):
    """Input validation errors"""

    status_code = 400

    def __init__(self, message: str, field: str = None):
        super().__init__(
            message, message, "VALIDATION_ERROR"  # Validation errors are user-friendly
        )
        self.field = field


class BusinessLogicError(QanyareError):
    """Business rule violations"""

    status_code = 400

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message, user_message or message, error_code or "BUSINESS_ERROR")


class NotFoundError(BusinessLogicError):
    """Referenced record does not exist"""

    status_code = 404

    def __init__(self, entity: str, record_id: Any):
        super().__init__(
            f"{entity} not found: {record_id}", f"{entity} not found", "NOT_FOUND"
        )
        self.entity = entity
        self.record_id = record_id


class ConflictError(BusinessLogicError):
    """Request conflicts with the current state of a record"""

    status_code = 409

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message, user_message, error_code or "CONFLICT")


class UsernameTakenError(ConflictError):
    """Username already registered"""

    def __init__(self, username: str):
        super().__init__(
            f"Username already exists: {username}",
            ErrorMessages.USERNAME_TAKEN,
            "USERNAME_TAKEN",
        )
        self.username = username


class InvalidStatusTransitionError(ConflictError):
    """Status change outside the allowed transition graph"""

    def __init__(self, entity: str, current: str, requested: str, allowed: List[str]):
        allowed_text = ", ".join(allowed) if allowed else "none (terminal state)"
        super().__init__(
            f"Invalid {entity} status transition: {current} -> {requested}",
            f"Cannot change {entity.lower()} status from {current} to {requested}. "
            f"Allowed: {allowed_text}",
            "INVALID_STATUS_TRANSITION",
        )
        self.current = current
        self.requested = requested
        self.allowed = allowed


class AuthenticationError(QanyareError):
    """Credential mismatch"""

    status_code = 401

    def __init__(self, username: str = None):
        super().__init__(
            f"Authentication failed for {username!r}",
            ErrorMessages.INVALID_CREDENTIALS,
            "AUTHENTICATION_FAILED",
        )
        self.username = username


class ApiError(QanyareError):
    """Non-success response received by the API client"""

    def __init__(self, status_code: int, message: str, errors: Optional[list] = None):
        super().__init__(f"HTTP {status_code}: {message}", message, "API_ERROR")
        self.status_code = status_code
        self.errors = errors or []
