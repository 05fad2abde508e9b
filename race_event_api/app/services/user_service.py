"""
Business logic for users.

Passwords are hashed with ``core.security.hash_password`` before they
reach the store, and only the public ``UserRead`` view ever leaves this
service.  Usernames and emails are unique across all users; the rule
is checked on creation and on every update that changes either field.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from ..core.errors import ConflictError, NotFoundError
from ..core.security import hash_password
from ..schemas.user import User, UserCreate, UserRead, UserUpdate
from ..storage.interfaces import Storage
from .base import apply_update, validate_payload


logger = logging.getLogger(__name__)


def to_public(user: User) -> UserRead:
    """Strip the password hash from a stored user."""
    return UserRead.model_validate(user.model_dump(exclude={"password"}))


class UserService:
    """Service for user accounts."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def _check_unique(self, username: Optional[str], email: Optional[str], user_id: Optional[int] = None) -> None:
        if username is not None:
            other = self._storage.get_user_by_username(username)
            if other is not None and other.id != user_id:
                raise ConflictError("Username already exists")
        if email is not None:
            other = self._storage.get_user_by_email(email)
            if other is not None and other.id != user_id:
                raise ConflictError("Email already exists")

    async def create_user(self, data: Union[UserCreate, Mapping[str, Any]]) -> UserRead:
        """Create a user after checking username and email are free."""
        payload = validate_payload(UserCreate, data)
        self._check_unique(payload.username, payload.email)
        user = self._storage.create_user(payload.model_copy(update={"password": hash_password(payload.password)}))
        logger.info("Registered user %s (id=%s, role=%s)", user.username, user.id, user.role)
        return to_public(user)

    async def list_users(self) -> List[UserRead]:
        return [to_public(user) for user in self._storage.list_users()]

    async def get_user(self, user_id: int) -> UserRead:
        user = self._storage.get_user(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return to_public(user)

    async def update_user(self, user_id: int, updates: Union[UserUpdate, Mapping[str, Any]]) -> UserRead:
        """Update profile fields of a user.

        Only username, email, full name, role and avatar can change
        here.  Raises ``NotFoundError`` for an unknown id and
        ``ConflictError`` if the new username or email is taken by
        someone else.
        """
        current = self._storage.get_user(user_id)
        if current is None:
            raise NotFoundError("User not found")
        changes = validate_payload(UserUpdate, updates).model_dump(exclude_unset=True)
        apply_update(current, changes)
        self._check_unique(changes.get("username"), changes.get("email"), user_id=user_id)
        return to_public(self._storage.update_user(user_id, changes))

    async def delete_user(self, user_id: int) -> None:
        if not self._storage.delete_user(user_id):
            raise NotFoundError("User not found")
        logger.info("Deleted user %s", user_id)
