"""
Pydantic models for participant checkpoints.

Each record marks a participant (via their registration) passing a
named checkpoint during a race.  ``timestamp`` is optional on input and
defaults to the time the record is stored.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel


CheckpointStatus = Literal["active", "finished", "delayed", "DNF"]


class ParticipantCheckpointBase(CamelModel):
    registration_id: int
    checkpoint_name: str = Field(..., examples=["Checkpoint 1"])
    # Kilometres from the start line.
    checkpoint_distance: Optional[float] = Field(None, ge=0, examples=[7])
    status: CheckpointStatus


class ParticipantCheckpointCreate(ParticipantCheckpointBase):
    timestamp: Optional[datetime] = None


class ParticipantCheckpointUpdate(CamelModel):
    registration_id: Optional[int] = None
    checkpoint_name: Optional[str] = None
    checkpoint_distance: Optional[float] = Field(None, ge=0)
    status: Optional[CheckpointStatus] = None
    timestamp: Optional[datetime] = None


class ParticipantCheckpoint(ParticipantCheckpointBase):
    id: int
    timestamp: datetime
