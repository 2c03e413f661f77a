"""Queries for reading room snapshots at the request/response boundary."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from jukebox_sync.domain.shared.types import NonEmptyStr

if TYPE_CHECKING:
    from ..services.room_directory import RoomDirectory


class GetRoomQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    room_code: NonEmptyStr


class GetRoomHandler:
    """Full room snapshot, including members and settings."""

    def __init__(self, *, room_directory: RoomDirectory) -> None:
        self._directory = room_directory

    async def handle(self, query: GetRoomQuery) -> dict[str, Any]:
        room = await self._directory.resolve(query.room_code)
        return room.detail_payload()


class GetQueueHandler:
    """Pending queue plus the current track and its start timestamp."""

    def __init__(self, *, room_directory: RoomDirectory) -> None:
        self._directory = room_directory

    async def handle(self, query: GetRoomQuery) -> dict[str, Any]:
        room = await self._directory.resolve(query.room_code)
        return {
            "queue": room.queue_payload(),
            "currentTrack": room.current_track_payload(),
            "currentTrackStartTs": room.current_track_start_ts,
        }


class GetActiveUsersHandler:

    def __init__(self, *, room_directory: RoomDirectory) -> None:
        self._directory = room_directory

    async def handle(self, query: GetRoomQuery) -> dict[str, Any]:
        room = await self._directory.resolve(query.room_code)
        return {"users": room.users_payload(), "host": room.host}
