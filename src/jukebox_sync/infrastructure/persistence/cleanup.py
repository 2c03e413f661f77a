"""Periodic cleanup of rooms that have seen no activity for a while."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from pydantic import BaseModel

from jukebox_sync.domain.shared.messages import LogTemplates
from jukebox_sync.domain.shared.types import NonNegativeInt

if TYPE_CHECKING:
    from ...config.settings import CleanupSettings
    from ...domain.room.repository import RoomRepository

logger = logging.getLogger(__name__)


class CleanupJob:
    def __init__(
        self,
        *,
        room_repository: RoomRepository,
        settings: CleanupSettings,
    ) -> None:
        self._room_repo = room_repository
        self._settings = settings
        self._running = False
        self._task: asyncio.Task | None = None

    def start(self) -> None:
        if self._running:
            logger.warning(LogTemplates.CLEANUP_ALREADY_RUNNING)
            return

        self._running = True
        self._task = asyncio.create_task(self._run_loop())
        logger.info(LogTemplates.CLEANUP_STARTED)

    async def stop(self) -> None:
        self._running = False

        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info(LogTemplates.CLEANUP_STOPPED)

    async def _run_loop(self) -> None:
        interval_seconds = self._settings.cleanup_interval_minutes * 60

        while self._running:
            await self.run_cleanup()
            try:
                await asyncio.sleep(interval_seconds)
            except asyncio.CancelledError:
                break

    async def run_cleanup(self) -> CleanupStats:
        stats = CleanupStats()

        logger.debug(LogTemplates.CLEANUP_CYCLE_RUNNING)

        cutoff = datetime.now(tz=UTC) - timedelta(hours=self._settings.stale_room_hours)
        try:
            stats.rooms_cleaned = await self._room_repo.cleanup_stale(cutoff)
        except Exception as e:
            logger.error(LogTemplates.CLEANUP_ROOMS_FAILED, e)

        if stats.rooms_cleaned > 0:
            logger.info(LogTemplates.CLEANUP_COMPLETED, stats.rooms_cleaned)

        return stats

    @property
    def is_running(self) -> bool:
        return self._running


class CleanupStats(BaseModel):
    rooms_cleaned: NonNegativeInt = 0
