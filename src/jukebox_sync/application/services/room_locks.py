"""Per-room asyncio locks that live only while a task holds or awaits them."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class RoomLocks:
    """Hands out one lock per room code and forgets it once nobody needs it."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._holders: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._locks)

    def __contains__(self, room_code: object) -> bool:
        return room_code in self._locks

    @asynccontextmanager
    async def hold(self, room_code: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(room_code, asyncio.Lock())
        self._holders[room_code] = self._holders.get(room_code, 0) + 1
        try:
            async with lock:
                yield
        finally:
            # Counts holders and waiters; the entry goes when the last one leaves.
            self._holders[room_code] -= 1
            if self._holders[room_code] == 0:
                del self._holders[room_code]
                del self._locks[room_code]
