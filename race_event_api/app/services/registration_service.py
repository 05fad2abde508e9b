"""
Business logic for registrations.

``RegistrationService.create_registration`` is the registration policy.
Its checks run in a fixed order and each failure raises its own error:

1. the payload must match ``RegistrationCreate``   -> ValidationError
2. the user must not already be registered         -> DuplicateRegistrationError
3. the event must exist                            -> EventNotFoundError
4. registration must be open                       -> RegistrationClosedError
5. the event must be below its capacity, if any    -> CapacityExceededError

Steps 2-5 and the insert run while holding the lock for the event id,
so two concurrent requests cannot both pass the checks and then both
write.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from ..core.errors import (
    CapacityExceededError,
    DuplicateRegistrationError,
    EventNotFoundError,
    NotFoundError,
    RegistrationClosedError,
    ValidationError,
)
from ..core.locks import KeyedLock
from ..schemas.registration import Registration, RegistrationCreate, RegistrationUpdate
from ..storage.interfaces import Storage
from .base import apply_update, validate_payload


logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for registrations and the rules that gate creating them."""

    def __init__(self, storage: Storage, locks: KeyedLock) -> None:
        self._storage = storage
        self._locks = locks

    async def create_registration(
        self, data: Union[RegistrationCreate, Mapping[str, Any]]
    ) -> Registration:
        """Register a user for an event.

        Accepts a ``RegistrationCreate`` or a raw mapping (validated
        here).  Returns the stored registration.
        """
        payload = validate_payload(RegistrationCreate, data)
        async with self._locks.hold(payload.event_id):
            existing = self._storage.get_registration_by_event_and_user(payload.event_id, payload.user_id)
            if existing is not None:
                logger.warning(
                    "User %s is already registered for event %s", payload.user_id, payload.event_id
                )
                raise DuplicateRegistrationError()

            event = self._storage.get_event(payload.event_id)
            if event is None:
                raise EventNotFoundError()

            if not event.registration_open:
                logger.warning("Registration for event %s is closed", event.id)
                raise RegistrationClosedError()

            if event.capacity is not None:
                registered = len(self._storage.list_registrations_by_event(event.id))
                if registered >= event.capacity:
                    logger.warning("Event %s is full (%s/%s)", event.id, registered, event.capacity)
                    raise CapacityExceededError()

            registration = self._storage.create_registration(payload)
        logger.info(
            "Registered user %s for event %s (registration %s)",
            registration.user_id,
            registration.event_id,
            registration.id,
        )
        return registration

    async def list_registrations(
        self, event_id: Optional[int] = None, user_id: Optional[int] = None
    ) -> List[Registration]:
        """List registrations by event and/or user.

        At least one filter is required; listing every registration is
        refused.
        """
        if event_id is not None:
            registrations = self._storage.list_registrations_by_event(event_id)
            if user_id is not None:
                registrations = [reg for reg in registrations if reg.user_id == user_id]
            return registrations
        if user_id is not None:
            return self._storage.list_registrations_by_user(user_id)
        raise ValidationError("Either eventId or userId query parameter is required")

    async def get_registration(self, registration_id: int) -> Registration:
        registration = self._storage.get_registration(registration_id)
        if registration is None:
            raise NotFoundError("Registration not found")
        return registration

    async def update_registration(
        self, registration_id: int, updates: Union[RegistrationUpdate, Mapping[str, Any]]
    ) -> Registration:
        current = await self.get_registration(registration_id)
        changes = validate_payload(RegistrationUpdate, updates).model_dump(exclude_unset=True)
        apply_update(current, changes)
        return self._storage.update_registration(registration_id, changes)

    async def delete_registration(self, registration_id: int) -> None:
        if not self._storage.delete_registration(registration_id):
            raise NotFoundError("Registration not found")
        logger.info("Deleted registration %s", registration_id)
