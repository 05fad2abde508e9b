"""Dashboard statistics endpoint."""

from fastapi import APIRouter, Depends

from race_event_api.app.schemas.stats import StatsRead
from race_event_api.app.services.statistics_service import StatisticsService
from race_event_api.app.storage import Storage, get_storage


router = APIRouter()


@router.get("", response_model=StatsRead)
async def get_stats(storage: Storage = Depends(get_storage)) -> StatsRead:
    """Return active events, registrations in them, communities and revenue."""
    return await StatisticsService(storage).get_stats()
