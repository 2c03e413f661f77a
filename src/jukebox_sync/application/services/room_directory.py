"""Room Directory - code allocation and room lookup."""

from __future__ import annotations

import asyncio
import logging
from random import Random
from typing import TYPE_CHECKING

from ...domain.room.entities import Room
from ...domain.room.value_objects import RoomCode
from ...domain.shared.constants import RoomConstants
from ...domain.shared.exceptions import RoomNotFoundError, StoreError
from ...domain.shared.messages import ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from ...domain.room.repository import RoomRepository

logger = logging.getLogger(__name__)


class RoomDirectory:
    """Allocates unique room codes and resolves human-entered ones."""

    def __init__(
        self,
        *,
        room_repository: RoomRepository,
        default_skip_threshold: float = RoomConstants.DEFAULT_SKIP_THRESHOLD,
        max_code_attempts: int = RoomConstants.MAX_CODE_ATTEMPTS,
        rng: Random | None = None,
    ) -> None:
        self._room_repo = room_repository
        self._default_skip_threshold = default_skip_threshold
        self._max_code_attempts = max_code_attempts
        self._rng = rng
        # Held from the uniqueness check until the new room is saved.
        self._create_lock = asyncio.Lock()

    @staticmethod
    def normalize(code: str) -> str:
        return code.strip().upper()

    async def create_room(
        self,
        name: str,
        host_name: str,
        *,
        skip_threshold: float | None = None,
    ) -> tuple[Room, str]:
        """Create and persist a room seeded with its host.

        Returns:
            The stored room and the host's freshly minted user id.

        Raises:
            StoreError: If no free code is found or the store fails.
        """
        async with self._create_lock:
            code = await self._allocate_code()
            room, host = Room.create(
                code,
                name,
                host_name,
                skip_threshold=skip_threshold or self._default_skip_threshold,
            )
            await self._room_repo.save(room)

        logger.info(LogTemplates.ROOM_CREATED, room.code, room.name, host.id)
        return room, host.id

    async def resolve(self, code: str) -> Room:
        """Load a room by case-insensitive code.

        Raises:
            RoomNotFoundError: If the code is malformed or unknown.
        """
        try:
            normalized = RoomCode(code).value
        except ValueError as e:
            raise RoomNotFoundError(self.normalize(code)) from e

        room = await self._room_repo.get(normalized)
        if room is None:
            raise RoomNotFoundError(normalized)
        return room

    async def _allocate_code(self) -> RoomCode:
        for _ in range(self._max_code_attempts):
            candidate = RoomCode.generate(self._rng)
            if not await self._room_repo.exists(candidate.value):
                return candidate
            logger.debug(LogTemplates.ROOM_CODE_COLLISION, candidate)
        raise StoreError(ErrorMessages.ROOM_CODE_EXHAUSTED.format(attempts=self._max_code_attempts))
