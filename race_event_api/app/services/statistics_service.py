"""
Dashboard statistics.

Figures are computed on demand from the store: only published events
count as active, and revenue is each published event's registration
count times its price (a missing price counts as zero).
"""

from ..schemas.stats import StatsRead
from ..storage.interfaces import Storage


class StatisticsService:
    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    async def get_stats(self) -> StatsRead:
        published = self._storage.list_events_by_status("published")
        total_registrations = 0
        revenue = 0.0
        for event in published:
            count = len(self._storage.list_registrations_by_event(event.id))
            total_registrations += count
            revenue += count * (event.price or 0)
        return StatsRead(
            active_events=len(published),
            total_registrations=total_registrations,
            communities=len(self._storage.list_communities()),
            revenue=revenue,
        )
