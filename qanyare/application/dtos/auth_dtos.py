"""
Auth DTOs

Request and response bodies of the login and registration endpoints.
"""

from typing import Optional

from pydantic import Field

from qanyare.domain.entities.base import CamelModel
from qanyare.domain.entities.user_entity import UserPublic


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)


class AuthResponse(CamelModel):
    """Successful login or registration; never carries the password"""

    user: UserPublic
