"""
Use Cases

Contains the business use cases of the application.
Each use case represents a single business operation.
"""

from .analytics_use_case import AnalyticsUseCase
from .auth_use_case import AuthUseCase
from .status_management_use_case import StatusManagementUseCase

__all__ = ["AnalyticsUseCase", "AuthUseCase", "StatusManagementUseCase"]
