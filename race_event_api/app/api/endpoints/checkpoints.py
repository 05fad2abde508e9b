"""Participant checkpoint endpoints (live race tracking)."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from race_event_api.app.schemas.checkpoint import (
    ParticipantCheckpoint,
    ParticipantCheckpointCreate,
    ParticipantCheckpointUpdate,
)
from race_event_api.app.services.checkpoint_service import CheckpointService
from race_event_api.app.storage import Storage, get_storage


router = APIRouter()


def get_checkpoint_service(storage: Storage = Depends(get_storage)) -> CheckpointService:
    return CheckpointService(storage)


@router.get("", response_model=List[ParticipantCheckpoint])
async def list_checkpoints(
    registration_id: Optional[int] = Query(None, alias="registrationId"),
    service: CheckpointService = Depends(get_checkpoint_service),
) -> List[ParticipantCheckpoint]:
    return await service.list_checkpoints(registration_id)


@router.get("/{checkpoint_id}", response_model=ParticipantCheckpoint)
async def get_checkpoint(
    checkpoint_id: int,
    service: CheckpointService = Depends(get_checkpoint_service),
) -> ParticipantCheckpoint:
    return await service.get_checkpoint(checkpoint_id)


@router.post("", response_model=ParticipantCheckpoint, status_code=status.HTTP_201_CREATED)
async def create_checkpoint(
    checkpoint: ParticipantCheckpointCreate,
    service: CheckpointService = Depends(get_checkpoint_service),
) -> ParticipantCheckpoint:
    return await service.create_checkpoint(checkpoint)


@router.patch("/{checkpoint_id}", response_model=ParticipantCheckpoint)
async def update_checkpoint(
    checkpoint_id: int,
    updates: ParticipantCheckpointUpdate,
    service: CheckpointService = Depends(get_checkpoint_service),
) -> ParticipantCheckpoint:
    return await service.update_checkpoint(checkpoint_id, updates)


@router.delete("/{checkpoint_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_checkpoint(checkpoint_id: int, service: CheckpointService = Depends(get_checkpoint_service)) -> None:
    await service.delete_checkpoint(checkpoint_id)
