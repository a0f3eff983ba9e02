"""
Data models for users of the authentication service.
"""

from pydantic import BaseModel

from .enums import UserRole


class User(BaseModel):
    """A registered user. Only the password hash is ever stored."""

    username: str
    hashed_password: str
    role: UserRole = UserRole.CUSTOMER
    is_active: bool = True
