"""Dashboard statistics payload."""

from .base import CamelModel


class StatsRead(CamelModel):
    active_events: int
    total_registrations: int
    communities: int
    revenue: float
