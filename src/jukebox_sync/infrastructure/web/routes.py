"""
REST routes for rooms, queue control and song search.

Every room route is served under ``/api/rooms/{code}`` and under the
top-level ``/room/{code}`` alias. Mutations go through the broadcast gateway
so connected Socket.IO sessions see REST changes too.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, status

from jukebox_sync.application.commands import (
    AddSongCommand,
    CreateRoomCommand,
    HostSkipCommand,
    JoinRoomCommand,
    VoteSongCommand,
)
from jukebox_sync.application.queries import GetRoomQuery
from jukebox_sync.domain.room.entities import Room
from jukebox_sync.domain.shared.messages import ErrorMessages

from .schemas import (
    AddSongRequest,
    CreateRoomRequest,
    JoinRoomRequest,
    SearchRequest,
    SkipRequest,
    VoteRequest,
    build_command,
    require,
)

if TYPE_CHECKING:
    from jukebox_sync.config.container import Container

HEALTH_MESSAGE = "JukeboxSync server is running"


def _room_summary(room: Room) -> dict[str, Any]:
    return {"name": room.name, "code": str(room.code), "host": room.host}


def create_router(container: Container) -> APIRouter:
    """
    Create the API router with all routes.

    Args:
        container: Dependency container providing the gateway, query handlers and catalog

    Returns:
        Configured APIRouter
    """
    router = APIRouter()

    # -------------------------------------------------------------------------
    # Health Check
    # -------------------------------------------------------------------------

    @router.get("/api/health")
    async def health_check() -> dict[str, Any]:
        return {"status": "ok", "message": HEALTH_MESSAGE}

    # -------------------------------------------------------------------------
    # Rooms
    # -------------------------------------------------------------------------

    @router.post("/api/rooms", status_code=status.HTTP_201_CREATED)
    @router.post("/create-room", status_code=status.HTTP_201_CREATED)
    async def create_room(body: CreateRoomRequest) -> dict[str, Any]:
        require(body.name, body.host_name, message=ErrorMessages.ROOM_NAME_REQUIRED)
        command = build_command(
            CreateRoomCommand,
            name=body.name,
            host_name=body.host_name,
            skip_threshold=body.skip_threshold,
        )
        result = await container.broadcast_gateway.execute(command)
        return {"success": True, "room": _room_summary(result.room), "userId": result.user_id}

    async def _join(code: str | None, user_name: str | None) -> dict[str, Any]:
        require(user_name, message=ErrorMessages.USER_NAME_REQUIRED)
        command = build_command(JoinRoomCommand, room_code=code, display_name=user_name)
        result = await container.broadcast_gateway.execute(command)
        return {"success": True, "room": _room_summary(result.room), "userId": result.user_id}

    @router.post("/api/rooms/{code}/join")
    async def join_room(code: str, body: JoinRoomRequest) -> dict[str, Any]:
        return await _join(code, body.user_name)

    @router.post("/join-room")
    async def join_room_by_body(body: JoinRoomRequest) -> dict[str, Any]:
        require(body.code, message=ErrorMessages.ROOM_CODE_REQUIRED)
        return await _join(body.code, body.user_name)

    @router.get("/api/rooms/{code}")
    @router.get("/room/{code}")
    async def get_room(code: str) -> dict[str, Any]:
        room = await container.get_room_handler.handle(GetRoomQuery(room_code=code))
        return {"success": True, "room": room}

    # -------------------------------------------------------------------------
    # Queue and Playback
    # -------------------------------------------------------------------------

    @router.post("/api/rooms/{code}/add-song", status_code=status.HTTP_201_CREATED)
    @router.post("/room/{code}/add-song", status_code=status.HTTP_201_CREATED)
    async def add_song(code: str, body: AddSongRequest) -> dict[str, Any]:
        require(body.song, body.user_id, message=ErrorMessages.SONG_AND_USER_REQUIRED)
        command = build_command(
            AddSongCommand, room_code=code, user_id=body.user_id, song=body.song
        )
        result = await container.broadcast_gateway.execute(command)
        room = result.room
        return {
            "success": True,
            "queue": room.queue_payload(),
            "currentTrack": room.current_track_payload(),
            "currentTrackStartTs": room.current_track_start_ts,
        }

    @router.post("/api/rooms/{code}/vote")
    @router.post("/room/{code}/vote")
    async def vote(code: str, body: VoteRequest) -> dict[str, Any]:
        require(body.song_id, body.user_id, body.vote, message=ErrorMessages.VOTE_FIELDS_REQUIRED)
        command = build_command(
            VoteSongCommand,
            room_code=code,
            song_id=body.song_id,
            user_id=body.user_id,
            vote=body.vote,
        )
        result = await container.broadcast_gateway.execute(command)
        return {"success": True, "queue": result.room.queue_payload()}

    @router.post("/api/rooms/{code}/skip")
    @router.post("/room/{code}/skip")
    async def skip(code: str, body: SkipRequest) -> dict[str, Any]:
        require(body.user_id, message=ErrorMessages.USER_ID_REQUIRED)
        command = build_command(HostSkipCommand, room_code=code, user_id=body.user_id)
        result = await container.broadcast_gateway.execute(command)
        room = result.room
        return {
            "success": True,
            "currentTrack": room.current_track_payload(),
            "currentTrackStartTs": room.current_track_start_ts,
            "queue": room.queue_payload(),
        }

    @router.get("/api/rooms/{code}/queue")
    @router.get("/room/{code}/queue")
    async def get_queue(code: str) -> dict[str, Any]:
        queue = await container.get_queue_handler.handle(GetRoomQuery(room_code=code))
        return {"success": True, **queue}

    @router.get("/api/rooms/{code}/active-users")
    @router.get("/room/{code}/active-users")
    async def get_active_users(code: str) -> dict[str, Any]:
        users = await container.get_active_users_handler.handle(GetRoomQuery(room_code=code))
        return {"success": True, **users}

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    @router.post("/api/search")
    async def search(body: SearchRequest) -> dict[str, Any]:
        require(body.query, message=ErrorMessages.SEARCH_QUERY_REQUIRED)
        songs = await container.song_catalog.search(body.query or "")
        results = [song.model_dump(mode="json", by_alias=True, exclude_none=True) for song in songs]
        return {"success": True, "results": results}

    return router
