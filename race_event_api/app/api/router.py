"""
Top‑level API router.

This router aggregates the resource routers under a unified prefix.
When new resources are introduced, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import (
    auth,
    checkpoints,
    communities,
    events,
    race_packs,
    registrations,
    stats,
    users,
)

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(registrations.router, prefix="/registrations", tags=["registrations"])
router.include_router(communities.router, prefix="/communities", tags=["communities"])
router.include_router(communities.members_router, prefix="/community-members", tags=["communities"])
router.include_router(race_packs.router, prefix="/race-packs", tags=["race-packs"])
router.include_router(checkpoints.router, prefix="/participant-checkpoints", tags=["checkpoints"])
router.include_router(stats.router, prefix="/stats", tags=["stats"])
