"""
Pydantic models for event registrations.

A registration links a user to an event.  ``additional_info`` holds
custom form answers (shirt size, emergency contact ...) as a free-form
key/value map; the only requirement is that it can be serialised to
JSON.
"""

import json
from datetime import datetime
from typing import Any, Dict, Literal, Optional

from pydantic import Field, field_validator

from .base import CamelModel


RegistrationStatus = Literal[
    "registered",
    "confirmed",
    "checked_in",
    "completed",
    "cancelled",
    "active",
    "finished",
    "delayed",
]


def _ensure_serializable(value: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if value is None:
        return None
    try:
        json.dumps(value)
    except (TypeError, ValueError) as exc:
        raise ValueError("additionalInfo must be JSON serialisable") from exc
    return value


class RegistrationBase(CamelModel):
    event_id: int
    user_id: int
    status: RegistrationStatus = "registered"
    bib_number: Optional[str] = Field(None, examples=["M-1000"])
    category: Optional[str] = Field(None, examples=["Marathon 42K"])
    additional_info: Optional[Dict[str, Any]] = Field(None, examples=[{"shirtSize": "M"}])

    @field_validator("additional_info")
    @classmethod
    def check_additional_info(cls, v: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        return _ensure_serializable(v)


class RegistrationCreate(RegistrationBase):
    """Schema for creating a registration."""
    pass


class RegistrationUpdate(CamelModel):
    """Schema for updating a registration.

    The event and user of a registration are fixed once created, so a
    PATCH can never produce a second registration for the same pair.
    """

    status: Optional[RegistrationStatus] = None
    bib_number: Optional[str] = None
    category: Optional[str] = None
    additional_info: Optional[Dict[str, Any]] = None

    @field_validator("additional_info")
    @classmethod
    def check_additional_info(cls, v: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        return _ensure_serializable(v)


class Registration(RegistrationBase):
    id: int
    registration_date: datetime
