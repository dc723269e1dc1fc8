"""
Data Transfer Objects
"""

from .analytics_dtos import StatsResponse
from .auth_dtos import AuthResponse, LoginRequest, RegisterRequest

__all__ = ["AuthResponse", "LoginRequest", "RegisterRequest", "StatsResponse"]
