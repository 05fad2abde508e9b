"""Business logic for communities and community membership."""

import logging
from typing import Any, List, Mapping, Optional, Union

from ..core.errors import NotFoundError, ValidationError
from ..schemas.community import (
    Community,
    CommunityCreate,
    CommunityMember,
    CommunityMemberCreate,
    CommunityMemberUpdate,
    CommunityUpdate,
)
from ..storage.interfaces import Storage
from .base import apply_update, validate_payload


logger = logging.getLogger(__name__)


class CommunityService:
    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    async def create_community(self, data: Union[CommunityCreate, Mapping[str, Any]]) -> Community:
        community = self._storage.create_community(validate_payload(CommunityCreate, data))
        logger.info("Created community %s '%s'", community.id, community.name)
        return community

    async def list_communities(self, manager_id: Optional[int] = None) -> List[Community]:
        if manager_id is not None:
            return self._storage.list_communities_by_manager(manager_id)
        return self._storage.list_communities()

    async def get_community(self, community_id: int) -> Community:
        community = self._storage.get_community(community_id)
        if community is None:
            raise NotFoundError("Community not found")
        return community

    async def update_community(
        self, community_id: int, updates: Union[CommunityUpdate, Mapping[str, Any]]
    ) -> Community:
        current = await self.get_community(community_id)
        changes = validate_payload(CommunityUpdate, updates).model_dump(exclude_unset=True)
        apply_update(current, changes)
        return self._storage.update_community(community_id, changes)

    async def delete_community(self, community_id: int) -> None:
        if not self._storage.delete_community(community_id):
            raise NotFoundError("Community not found")
        logger.info("Deleted community %s", community_id)


class CommunityMemberService:
    """Membership links.  Joining twice creates two links."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    async def add_member(self, data: Union[CommunityMemberCreate, Mapping[str, Any]]) -> CommunityMember:
        member = self._storage.create_community_member(validate_payload(CommunityMemberCreate, data))
        logger.info("User %s joined community %s", member.user_id, member.community_id)
        return member

    async def list_members(
        self, community_id: Optional[int] = None, user_id: Optional[int] = None
    ) -> List[CommunityMember]:
        if community_id is not None:
            members = self._storage.list_community_members_by_community(community_id)
            if user_id is not None:
                members = [member for member in members if member.user_id == user_id]
            return members
        if user_id is not None:
            return self._storage.list_community_members_by_user(user_id)
        raise ValidationError("Either communityId or userId query parameter is required")

    async def get_member(self, member_id: int) -> CommunityMember:
        member = self._storage.get_community_member(member_id)
        if member is None:
            raise NotFoundError("Community member not found")
        return member

    async def update_member(
        self, member_id: int, updates: Union[CommunityMemberUpdate, Mapping[str, Any]]
    ) -> CommunityMember:
        """Move a membership to another community or user."""
        current = await self.get_member(member_id)
        changes = validate_payload(CommunityMemberUpdate, updates).model_dump(exclude_unset=True)
        apply_update(current, changes)
        return self._storage.update_community_member(member_id, changes)

    async def remove_member(self, member_id: int) -> None:
        if not self._storage.delete_community_member(member_id):
            raise NotFoundError("Community member not found")
