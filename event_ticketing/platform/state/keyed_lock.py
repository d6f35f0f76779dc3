"""
Keyed asyncio lock

Serializes coroutines that touch the same key (e.g. one event's ticket
inventory) while letting different keys proceed in parallel.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Hashable
import weakref

from event_ticketing.platform.logging.loguru_io import Logger


class KeyedLock:
    """
    One asyncio.Lock per key, held weakly.

    A lock stays alive while any coroutine holds or waits on it, and is
    dropped from the registry once nobody references it.
    """

    def __init__(self, *, name: str = 'lock') -> None:
        self.name = name
        self._locks: weakref.WeakValueDictionary[Hashable, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    def _lock_for(self, key: Hashable) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        if self.is_locked(key):
            Logger.base.debug(f'⏳ [{self.name.upper()}] Waiting for key {key}')
        async with self._lock_for(key):
            yield

    def is_locked(self, key: Hashable) -> bool:
        lock = self._locks.get(key)
        return lock is not None and lock.locked()
