"""
Business logic for race-pack inventory.

Every write keeps ``0 <= distributed_quantity <= stock_quantity``.  An
update that would hand out more units than are in stock is rejected
with a ``ValidationError``; nothing is clamped.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from ..core.errors import NotFoundError, ValidationError
from ..schemas.race_pack import RacePack, RacePackCreate, RacePackUpdate
from ..storage.interfaces import Storage
from .base import apply_update, validate_payload


logger = logging.getLogger(__name__)


class RacePackService:
    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    async def create_race_pack(self, data: Union[RacePackCreate, Mapping[str, Any]]) -> RacePack:
        race_pack = self._storage.create_race_pack(validate_payload(RacePackCreate, data))
        logger.info("Created race pack %s (%s) for event %s", race_pack.id, race_pack.sku, race_pack.event_id)
        return race_pack

    async def list_race_packs(self, event_id: Optional[int]) -> List[RacePack]:
        if event_id is None:
            raise ValidationError("eventId query parameter is required")
        return self._storage.list_race_packs_by_event(event_id)

    async def get_race_pack(self, race_pack_id: int) -> RacePack:
        race_pack = self._storage.get_race_pack(race_pack_id)
        if race_pack is None:
            raise NotFoundError("Race pack not found")
        return race_pack

    async def update_race_pack(
        self, race_pack_id: int, updates: Union[RacePackUpdate, Mapping[str, Any]]
    ) -> RacePack:
        current = await self.get_race_pack(race_pack_id)
        changes = validate_payload(RacePackUpdate, updates).model_dump(exclude_unset=True)
        apply_update(current, changes)
        return self._storage.update_race_pack(race_pack_id, changes)

    async def delete_race_pack(self, race_pack_id: int) -> None:
        if not self._storage.delete_race_pack(race_pack_id):
            raise NotFoundError("Race pack not found")
        logger.info("Deleted race pack %s", race_pack_id)
