"""
Business logic for events.

Events are plain CRUD over the store.  Deleting an event does not
remove its registrations, race packs or checkpoints.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from ..core.errors import EventNotFoundError
from ..schemas.event import Event, EventCreate, EventUpdate
from ..storage.interfaces import Storage
from .base import apply_update, validate_payload


logger = logging.getLogger(__name__)


class EventService:
    """Service for managing events."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    async def create_event(self, data: Union[EventCreate, Mapping[str, Any]]) -> Event:
        payload = validate_payload(EventCreate, data)
        event = self._storage.create_event(payload)
        logger.info("Created event %s '%s' (organizer %s)", event.id, event.title, event.organizer_id)
        return event

    async def list_events(self, organizer_id: Optional[int] = None, status: Optional[str] = None) -> List[Event]:
        """List events, optionally narrowed by organizer and/or status."""
        if organizer_id is not None:
            events = self._storage.list_events_by_organizer(organizer_id)
            if status is not None:
                events = [event for event in events if event.status == status]
            return events
        if status is not None:
            return self._storage.list_events_by_status(status)
        return self._storage.list_events()

    async def get_event(self, event_id: int) -> Event:
        event = self._storage.get_event(event_id)
        if event is None:
            raise EventNotFoundError()
        return event

    async def update_event(self, event_id: int, updates: Union[EventUpdate, Mapping[str, Any]]) -> Event:
        """Apply a partial update; unspecified fields remain unchanged."""
        current = await self.get_event(event_id)
        changes = validate_payload(EventUpdate, updates).model_dump(exclude_unset=True)
        apply_update(current, changes)
        return self._storage.update_event(event_id, changes)

    async def delete_event(self, event_id: int) -> None:
        if not self._storage.delete_event(event_id):
            raise EventNotFoundError()
        logger.info("Deleted event %s", event_id)
