"""Community and community-membership endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from race_event_api.app.schemas.community import (
    Community,
    CommunityCreate,
    CommunityMember,
    CommunityMemberCreate,
    CommunityMemberUpdate,
    CommunityUpdate,
)
from race_event_api.app.services.community_service import CommunityMemberService, CommunityService
from race_event_api.app.storage import Storage, get_storage


router = APIRouter()
members_router = APIRouter()


def get_community_service(storage: Storage = Depends(get_storage)) -> CommunityService:
    return CommunityService(storage)


def get_member_service(storage: Storage = Depends(get_storage)) -> CommunityMemberService:
    return CommunityMemberService(storage)


@router.get("", response_model=List[Community])
async def list_communities(
    manager_id: Optional[int] = Query(None, alias="managerId"),
    service: CommunityService = Depends(get_community_service),
) -> List[Community]:
    return await service.list_communities(manager_id=manager_id)


@router.get("/{community_id}", response_model=Community)
async def get_community(community_id: int, service: CommunityService = Depends(get_community_service)) -> Community:
    return await service.get_community(community_id)


@router.post("", response_model=Community, status_code=status.HTTP_201_CREATED)
async def create_community(
    community: CommunityCreate,
    service: CommunityService = Depends(get_community_service),
) -> Community:
    return await service.create_community(community)


@router.patch("/{community_id}", response_model=Community)
async def update_community(
    community_id: int,
    updates: CommunityUpdate,
    service: CommunityService = Depends(get_community_service),
) -> Community:
    return await service.update_community(community_id, updates)


@router.delete("/{community_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_community(community_id: int, service: CommunityService = Depends(get_community_service)) -> None:
    await service.delete_community(community_id)


@members_router.get("", response_model=List[CommunityMember])
async def list_members(
    community_id: Optional[int] = Query(None, alias="communityId"),
    user_id: Optional[int] = Query(None, alias="userId"),
    service: CommunityMemberService = Depends(get_member_service),
) -> List[CommunityMember]:
    """List memberships of a community or of a user (one filter is required)."""
    return await service.list_members(community_id=community_id, user_id=user_id)


@members_router.get("/{member_id}", response_model=CommunityMember)
async def get_member(member_id: int, service: CommunityMemberService = Depends(get_member_service)) -> CommunityMember:
    return await service.get_member(member_id)


@members_router.post("", response_model=CommunityMember, status_code=status.HTTP_201_CREATED)
async def add_member(
    member: CommunityMemberCreate,
    service: CommunityMemberService = Depends(get_member_service),
) -> CommunityMember:
    return await service.add_member(member)


@members_router.patch("/{member_id}", response_model=CommunityMember)
async def update_member(
    member_id: int,
    updates: CommunityMemberUpdate,
    service: CommunityMemberService = Depends(get_member_service),
) -> CommunityMember:
    return await service.update_member(member_id, updates)


@members_router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_member(member_id: int, service: CommunityMemberService = Depends(get_member_service)) -> None:
    await service.remove_member(member_id)
