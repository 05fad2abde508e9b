"""
Pydantic models for event data.

``EventBase`` contains the shared fields; ``EventCreate`` is the
request body for new events, ``EventUpdate`` the partial PATCH body and
``Event`` the stored record returned by the API.  ``capacity`` bounds
the number of registrations when set; ``None`` means unlimited.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel


EventStatus = Literal["draft", "published", "completed", "cancelled"]


class EventBase(CamelModel):
    title: str = Field(..., examples=["Jakarta Marathon 2023"])
    description: str = Field(..., examples=["Join the biggest marathon event in Jakarta"])
    date: datetime = Field(..., examples=["2023-10-15T07:00:00"])
    location: str = Field(..., examples=["Jakarta, Indonesia"])
    category: str = Field(..., examples=["Running"])
    capacity: Optional[int] = Field(None, ge=0, examples=[1000])
    price: Optional[float] = Field(0, ge=0, examples=[75])
    image: Optional[str] = None
    organizer_id: int
    status: EventStatus = "draft"
    registration_open: bool = True


class EventCreate(EventBase):
    """Schema for creating an event."""
    pass


class EventUpdate(CamelModel):
    """Schema for updating an event.

    All fields are optional; only provided fields will be updated.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    location: Optional[str] = None
    category: Optional[str] = None
    capacity: Optional[int] = Field(None, ge=0)
    price: Optional[float] = Field(None, ge=0)
    image: Optional[str] = None
    organizer_id: Optional[int] = None
    status: Optional[EventStatus] = None
    registration_open: Optional[bool] = None


class Event(EventBase):
    """Stored event record."""

    id: int
    created_at: datetime
