"""
Pydantic models for user data.

``User`` is the stored record and carries the password hash; it is
never returned by the API.  ``UserRead`` is the public view used in
every response.  Usernames and emails are unique across all users;
that rule is enforced by ``UserService``, not by the schema.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel


Role = Literal["admin", "organizer", "community_manager", "participant"]


class UserBase(CamelModel):
    username: str = Field(..., min_length=1, examples=["runner42"])
    email: str = Field(..., min_length=3, examples=["runner42@example.com"])
    full_name: str = Field(..., examples=["Rina Runner"])
    role: Role = "participant"
    avatar: Optional[str] = None


class UserCreate(UserBase):
    """Schema for registering a user.  ``password`` is plain text on input."""

    password: str = Field(..., min_length=1)


class UserUpdate(CamelModel):
    """Fields a PATCH may change.  The password is not among them."""

    username: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=3)
    full_name: Optional[str] = None
    role: Optional[Role] = None
    avatar: Optional[str] = None


class User(UserBase):
    """Stored user record (password holds a ``salt$hash`` string)."""

    id: int
    password: str
    created_at: datetime


class UserRead(UserBase):
    """Public view of a user; the password field is stripped."""

    id: int
    created_at: datetime


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(CamelModel):
    token: str
    user: UserRead
