"""SQLite repository implementations."""

from jukebox_sync.infrastructure.persistence.repositories.room_repository import (
    SQLiteRoomRepository,
)

__all__ = [
    "SQLiteRoomRepository",
]
