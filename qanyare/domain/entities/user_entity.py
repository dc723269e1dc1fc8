"""
User schemas
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel, UtcDatetime


class UserCreate(CamelModel):
    """Insert shape of a user; the password is already hashed"""

    username: str = Field(..., min_length=1, max_length=100)
    password_hash: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    is_admin: bool = False


class UserPublic(CamelModel):
    """User as returned to clients, without credentials"""

    id: int
    username: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    is_admin: bool = False
    created_at: UtcDatetime


class UserRecord(UserPublic):
    """Stored user"""

    password_hash: str

    def to_public(self) -> UserPublic:
        return UserPublic.model_validate(self.model_dump(exclude={"password_hash"}))
