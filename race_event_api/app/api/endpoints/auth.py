"""
Authentication endpoints.

``POST /auth/login`` exchanges a username and password for a bearer
token valid for 24 hours; ``GET /auth/me`` returns the account behind
the presented token.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from race_event_api.app.core.security import get_current_user
from race_event_api.app.schemas.user import LoginRequest, LoginResponse, UserRead
from race_event_api.app.services.auth_service import AuthService
from race_event_api.app.storage import Storage, get_storage


router = APIRouter()


def get_auth_service(storage: Storage = Depends(get_storage)) -> AuthService:
    return AuthService(storage)


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest, service: AuthService = Depends(get_auth_service)) -> LoginResponse:
    """Authenticate and return ``{token, user}``.  Wrong credentials give 401."""
    return await service.login(credentials.username, credentials.password)


@router.get("/me", response_model=UserRead)
async def read_current_user(
    current_user: Dict[str, Any] = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
) -> UserRead:
    """Return the authenticated user without the password field.

    404 if the account was deleted after the token was issued.
    """
    return await service.current_user(current_user)
