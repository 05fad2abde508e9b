"""
Pydantic models for communities and their members.

A community is a group of athletes run by a manager.  Membership is a
plain link record; the same user may be linked to a community more
than once.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class CommunityBase(CamelModel):
    name: str = Field(..., examples=["Jakarta Runners"])
    description: str = Field(..., examples=["Community for running enthusiasts in Jakarta"])
    image: Optional[str] = None
    manager_id: int


class CommunityCreate(CommunityBase):
    pass


class CommunityUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    manager_id: Optional[int] = None


class Community(CommunityBase):
    id: int
    created_at: datetime


class CommunityMemberBase(CamelModel):
    community_id: int
    user_id: int


class CommunityMemberCreate(CommunityMemberBase):
    pass


class CommunityMemberUpdate(CamelModel):
    community_id: Optional[int] = None
    user_id: Optional[int] = None


class CommunityMember(CommunityMemberBase):
    id: int
    join_date: datetime
