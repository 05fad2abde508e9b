"""
Event endpoints.

These routes provide CRUD operations for events.  The list can be
narrowed by organizer and/or status.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from race_event_api.app.schemas.event import Event, EventCreate, EventStatus, EventUpdate
from race_event_api.app.services.event_service import EventService
from race_event_api.app.storage import Storage, get_storage


router = APIRouter()


def get_event_service(storage: Storage = Depends(get_storage)) -> EventService:
    return EventService(storage)


@router.get("", response_model=List[Event])
async def list_events(
    organizer_id: Optional[int] = Query(None, alias="organizerId"),
    event_status: Optional[EventStatus] = Query(None, alias="status"),
    service: EventService = Depends(get_event_service),
) -> List[Event]:
    """List events.

    - **organizerId**: only events run by this user.
    - **status**: only events in this state (`draft`, `published`, `completed`, `cancelled`).
    """
    return await service.list_events(organizer_id=organizer_id, status=event_status)


@router.get("/{event_id}", response_model=Event)
async def get_event(event_id: int, service: EventService = Depends(get_event_service)) -> Event:
    return await service.get_event(event_id)


@router.post("", response_model=Event, status_code=status.HTTP_201_CREATED)
async def create_event(event: EventCreate, service: EventService = Depends(get_event_service)) -> Event:
    return await service.create_event(event)


@router.patch("/{event_id}", response_model=Event)
async def update_event(
    event_id: int,
    updates: EventUpdate,
    service: EventService = Depends(get_event_service),
) -> Event:
    """Update an existing event.  Unspecified fields remain unchanged."""
    return await service.update_event(event_id, updates)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: int, service: EventService = Depends(get_event_service)) -> None:
    """Delete an event.  Its registrations and race packs are not removed."""
    await service.delete_event(event_id)
