"""Per-key asyncio locks.

The registration policy counts existing registrations and then inserts
a new one.  Running both steps while holding the lock for the event id
keeps concurrent requests for the same event from overshooting its
capacity or creating duplicate registrations.  Requests for different
events never wait on each other.

A key's lock exists only while some task holds or waits for it, so
posting registrations for arbitrary event ids does not grow the map.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Hashable, Tuple


class KeyedLock:
    """A mapping of key -> ``asyncio.Lock``, populated on demand.

    Each entry carries the number of tasks currently holding or waiting
    for the lock; the entry is removed when that number drops to zero.
    """

    def __init__(self) -> None:
        self._locks: Dict[Hashable, Tuple[asyncio.Lock, int]] = {}

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        lock, users = self._locks.get(key, (None, 0))
        if lock is None:
            lock = asyncio.Lock()
        self._locks[key] = (lock, users + 1)
        try:
            async with lock:
                yield
        finally:
            lock, users = self._locks[key]
            if users == 1:
                del self._locks[key]
            else:
                self._locks[key] = (lock, users - 1)

    def __len__(self) -> int:
        return len(self._locks)
