"""
Login and session lookup.

``login`` checks a username/password pair and issues a signed token
carrying ``id``, ``username`` and ``role``.  Unknown usernames and wrong
passwords produce the same error and cost the same hash comparison.
"""

import logging
from typing import Any, Dict

from ..core.errors import NotFoundError, UnauthorizedError
from ..core.security import DUMMY_PASSWORD_HASH, create_access_token, verify_password
from ..schemas.user import LoginResponse, UserRead
from ..storage.interfaces import Storage
from .user_service import to_public


logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    async def login(self, username: str, password: str) -> LoginResponse:
        """Return a token and the public user view, or raise ``UnauthorizedError``."""
        user = self._storage.get_user_by_username(username)
        stored_hash = user.password if user is not None else DUMMY_PASSWORD_HASH
        if not verify_password(password, stored_hash) or user is None:
            logger.warning("Failed login for username %r", username)
            raise UnauthorizedError("Invalid username or password")
        token = create_access_token({"id": user.id, "username": user.username, "role": user.role})
        logger.info("User %s logged in", user.username)
        return LoginResponse(token=token, user=to_public(user))

    async def current_user(self, claims: Dict[str, Any]) -> UserRead:
        """Resolve token claims to the stored user."""
        user = self._storage.get_user(claims.get("id"))
        if user is None:
            raise NotFoundError("User not found")
        return to_public(user)
