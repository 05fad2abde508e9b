"""
User endpoints.

Listing and deleting accounts is restricted to the ``admin`` role.
Passwords are accepted on creation only and are never returned.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from race_event_api.app.core.security import require_role
from race_event_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from race_event_api.app.services.user_service import UserService
from race_event_api.app.storage import Storage, get_storage


router = APIRouter()


def get_user_service(storage: Storage = Depends(get_storage)) -> UserService:
    return UserService(storage)


@router.get("", response_model=List[UserRead])
async def list_users(
    current_user: Dict[str, Any] = Depends(require_role("admin")),
    service: UserService = Depends(get_user_service),
) -> List[UserRead]:
    """List all users (admin only)."""
    return await service.list_users()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserRead:
    return await service.get_user(user_id)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(user: UserCreate, service: UserService = Depends(get_user_service)) -> UserRead:
    """Register a new user.

    Responds 400 if the username or email is already taken.
    """
    return await service.create_user(user)


@router.patch("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: int,
    updates: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Update username, email, full name, role or avatar."""
    return await service.update_user(user_id, updates)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    current_user: Dict[str, Any] = Depends(require_role("admin")),
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete a user (admin only).  Records referencing the user are kept."""
    await service.delete_user(user_id)
