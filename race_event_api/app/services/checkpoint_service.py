"""Business logic for participant checkpoints (race tracking)."""

from typing import Any, List, Mapping, Optional, Union

from ..core.errors import NotFoundError, ValidationError
from ..schemas.checkpoint import (
    ParticipantCheckpoint,
    ParticipantCheckpointCreate,
    ParticipantCheckpointUpdate,
)
from ..storage.interfaces import Storage
from .base import apply_update, validate_payload


class CheckpointService:
    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    async def create_checkpoint(
        self, data: Union[ParticipantCheckpointCreate, Mapping[str, Any]]
    ) -> ParticipantCheckpoint:
        return self._storage.create_participant_checkpoint(validate_payload(ParticipantCheckpointCreate, data))

    async def list_checkpoints(self, registration_id: Optional[int]) -> List[ParticipantCheckpoint]:
        if registration_id is None:
            raise ValidationError("registrationId query parameter is required")
        return self._storage.list_participant_checkpoints_by_registration(registration_id)

    async def get_checkpoint(self, checkpoint_id: int) -> ParticipantCheckpoint:
        checkpoint = self._storage.get_participant_checkpoint(checkpoint_id)
        if checkpoint is None:
            raise NotFoundError("Checkpoint not found")
        return checkpoint

    async def update_checkpoint(
        self, checkpoint_id: int, updates: Union[ParticipantCheckpointUpdate, Mapping[str, Any]]
    ) -> ParticipantCheckpoint:
        current = await self.get_checkpoint(checkpoint_id)
        changes = validate_payload(ParticipantCheckpointUpdate, updates).model_dump(exclude_unset=True)
        apply_update(current, changes)
        return self._storage.update_participant_checkpoint(checkpoint_id, changes)

    async def delete_checkpoint(self, checkpoint_id: int) -> None:
        if not self._storage.delete_participant_checkpoint(checkpoint_id):
            raise NotFoundError("Checkpoint not found")
