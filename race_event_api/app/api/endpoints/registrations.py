"""
Registration endpoints.

Creating a registration goes through the registration policy in
``RegistrationService``: duplicates, closed events and full events are
refused with 400, an unknown event with 404.  Listing requires an
``eventId`` or ``userId`` filter.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from race_event_api.app.core.locks import KeyedLock
from race_event_api.app.schemas.registration import Registration, RegistrationCreate, RegistrationUpdate
from race_event_api.app.services.registration_service import RegistrationService
from race_event_api.app.storage import Storage, get_registration_locks, get_storage


router = APIRouter()


def get_registration_service(
    storage: Storage = Depends(get_storage),
    locks: KeyedLock = Depends(get_registration_locks),
) -> RegistrationService:
    return RegistrationService(storage, locks)


@router.get("", response_model=List[Registration])
async def list_registrations(
    event_id: Optional[int] = Query(None, alias="eventId"),
    user_id: Optional[int] = Query(None, alias="userId"),
    service: RegistrationService = Depends(get_registration_service),
) -> List[Registration]:
    return await service.list_registrations(event_id=event_id, user_id=user_id)


@router.get("/{registration_id}", response_model=Registration)
async def get_registration(
    registration_id: int,
    service: RegistrationService = Depends(get_registration_service),
) -> Registration:
    return await service.get_registration(registration_id)


@router.post("", response_model=Registration, status_code=status.HTTP_201_CREATED)
async def create_registration(
    registration: RegistrationCreate,
    service: RegistrationService = Depends(get_registration_service),
) -> Registration:
    """Register a user for an event."""
    return await service.create_registration(registration)


@router.patch("/{registration_id}", response_model=Registration)
async def update_registration(
    registration_id: int,
    updates: RegistrationUpdate,
    service: RegistrationService = Depends(get_registration_service),
) -> Registration:
    """Change status, bib number, category or additional info."""
    return await service.update_registration(registration_id, updates)


@router.delete("/{registration_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_registration(
    registration_id: int,
    service: RegistrationService = Depends(get_registration_service),
) -> None:
    await service.delete_registration(registration_id)
