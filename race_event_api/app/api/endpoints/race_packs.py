"""
Race-pack inventory endpoints.

Listing requires ``eventId``.  Any write that would leave more units
distributed than in stock is refused with 400.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from race_event_api.app.schemas.race_pack import RacePack, RacePackCreate, RacePackUpdate
from race_event_api.app.services.race_pack_service import RacePackService
from race_event_api.app.storage import Storage, get_storage


router = APIRouter()


def get_race_pack_service(storage: Storage = Depends(get_storage)) -> RacePackService:
    return RacePackService(storage)


@router.get("", response_model=List[RacePack])
async def list_race_packs(
    event_id: Optional[int] = Query(None, alias="eventId"),
    service: RacePackService = Depends(get_race_pack_service),
) -> List[RacePack]:
    return await service.list_race_packs(event_id)


@router.get("/{race_pack_id}", response_model=RacePack)
async def get_race_pack(race_pack_id: int, service: RacePackService = Depends(get_race_pack_service)) -> RacePack:
    return await service.get_race_pack(race_pack_id)


@router.post("", response_model=RacePack, status_code=status.HTTP_201_CREATED)
async def create_race_pack(
    race_pack: RacePackCreate,
    service: RacePackService = Depends(get_race_pack_service),
) -> RacePack:
    return await service.create_race_pack(race_pack)


@router.patch("/{race_pack_id}", response_model=RacePack)
async def update_race_pack(
    race_pack_id: int,
    updates: RacePackUpdate,
    service: RacePackService = Depends(get_race_pack_service),
) -> RacePack:
    return await service.update_race_pack(race_pack_id, updates)


@router.delete("/{race_pack_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_race_pack(race_pack_id: int, service: RacePackService = Depends(get_race_pack_service)) -> None:
    await service.delete_race_pack(race_pack_id)
