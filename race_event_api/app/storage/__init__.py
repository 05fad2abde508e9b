"""
Storage layer.

``Storage`` is the contract every service depends on; ``MemStorage`` is
the in-memory implementation.  The store used by a running app is
built once by ``create_app`` and kept on ``app.state``; the FastAPI
dependencies below hand it (and the per-event registration locks) to
request handlers.
"""

from fastapi import Request

from ..core.locks import KeyedLock
from .interfaces import Storage
from .memory import MemStorage


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_registration_locks(request: Request) -> KeyedLock:
    return request.app.state.registration_locks


__all__ = ["Storage", "MemStorage", "get_storage", "get_registration_locks"]
