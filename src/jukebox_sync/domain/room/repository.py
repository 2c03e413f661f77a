"""
Room Domain Repository Interfaces

Abstract base classes defining the contract for room persistence.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from jukebox_sync.domain.room.entities import Room


class RoomRepository(ABC):
    """Abstract repository for room aggregates.

    Implementations do not need to provide locking; callers serialize
    mutations per room. Failures are reported as ``StoreError``.
    """

    @abstractmethod
    async def get(self, code: str) -> Room | None:
        """Retrieve a room by code.

        Args:
            code: The room code, already normalized to upper case.

        Returns:
            The room if found, None otherwise.
        """
        ...

    @abstractmethod
    async def save(self, room: Room) -> None:
        """Persist the whole room atomically.

        Args:
            room: The room to save.
        """
        ...

    @abstractmethod
    async def exists(self, code: str) -> bool:
        """Check whether a room with this code is stored."""
        ...

    @abstractmethod
    async def delete(self, code: str) -> bool:
        """Delete a room by code.

        Returns:
            True if the room was deleted, False if it didn't exist.
        """
        ...

    @abstractmethod
    async def cleanup_stale(self, older_than: datetime) -> int:
        """Delete rooms whose last activity predates ``older_than``.

        Returns:
            Number of rooms deleted.
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored rooms."""
        ...
