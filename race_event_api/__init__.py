"""
Top‑level package for the Race Event API.

Organisers create race events, track participant registrations and
manage race-pack inventory through a JSON API.  All functionality
lives in submodules under ``app``.
"""

__all__ = []
