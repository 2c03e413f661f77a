"""Socket.IO event handlers and the transport adapter the gateway sends through."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

import socketio

from jukebox_sync.application.commands import (
    AddSongCommand,
    HostSkipCommand,
    RequestSkipCommand,
    VoteSongCommand,
)
from jukebox_sync.application.interfaces.session_transport import SessionTransport
from jukebox_sync.domain.shared.exceptions import DomainError
from jukebox_sync.domain.shared.messages import ErrorMessages, LogTemplates

from .schemas import (
    AddSongPayload,
    JoinRoomPayload,
    SkipPayload,
    SyncPingPayload,
    VoteSongPayload,
    build_command,
    parse_payload,
    require,
)

if TYPE_CHECKING:
    from jukebox_sync.application.services.broadcast_gateway import BroadcastGateway
    from jukebox_sync.config.container import Container

logger = logging.getLogger(__name__)

SocketHandler = Callable[[str, Any], Awaitable[None]]


class SocketIOTransport(SessionTransport):
    """Delivers events to a single Socket.IO session id."""

    def __init__(self, sio: socketio.AsyncServer) -> None:
        self._sio = sio

    async def send(self, session_id: str, event: str, payload: dict[str, Any]) -> None:
        await self._sio.emit(event, payload, to=session_id)


def _guarded(gateway: Callable[[], BroadcastGateway], handler: SocketHandler) -> SocketHandler:
    """Report a rejected event to its sender only."""

    async def wrapper(sid: str, data: Any = None) -> None:
        try:
            await handler(sid, data)
        except DomainError as e:
            await gateway().reject(sid, e)

    wrapper.__name__ = handler.__name__
    return wrapper


def register_socket_handlers(sio: socketio.AsyncServer, container: Container) -> None:
    """Bind inbound client events to the broadcast gateway."""

    def gateway() -> BroadcastGateway:
        return container.broadcast_gateway

    async def connect(sid: str, environ: dict[str, Any], auth: Any = None) -> None:
        logger.debug(LogTemplates.SESSION_CONNECTED, sid)

    async def disconnect(sid: str, *args: Any) -> None:
        await gateway().disconnect(sid)

    async def join_room(sid: str, data: Any) -> None:
        payload = parse_payload(JoinRoomPayload, data)
        require(payload.room_code, message=ErrorMessages.ROOM_CODE_REQUIRED)
        await gateway().join_session(
            sid,
            payload.room_code or "",
            user_id=payload.user_id,
            display_name=payload.user_name,
        )

    async def add_song(sid: str, data: Any) -> None:
        payload = parse_payload(AddSongPayload, data)
        require(payload.room_code, message=ErrorMessages.ROOM_CODE_REQUIRED)
        require(payload.song, payload.user_id, message=ErrorMessages.SONG_AND_USER_REQUIRED)
        command = build_command(
            AddSongCommand, room_code=payload.room_code, user_id=payload.user_id, song=payload.song
        )
        await gateway().dispatch(sid, command)

    async def vote_song(sid: str, data: Any) -> None:
        payload = parse_payload(VoteSongPayload, data)
        require(payload.room_code, message=ErrorMessages.ROOM_CODE_REQUIRED)
        require(payload.song_id, payload.user_id, payload.vote, message=ErrorMessages.VOTE_FIELDS_REQUIRED)
        command = build_command(
            VoteSongCommand,
            room_code=payload.room_code,
            song_id=payload.song_id,
            user_id=payload.user_id,
            vote=payload.vote,
        )
        await gateway().dispatch(sid, command)

    async def host_skip(sid: str, data: Any) -> None:
        payload = parse_payload(SkipPayload, data)
        require(payload.room_code, message=ErrorMessages.ROOM_CODE_REQUIRED)
        require(payload.user_id, message=ErrorMessages.USER_ID_REQUIRED)
        command = build_command(
            HostSkipCommand, room_code=payload.room_code, user_id=payload.user_id
        )
        await gateway().dispatch(sid, command)

    async def request_skip(sid: str, data: Any) -> None:
        payload = parse_payload(SkipPayload, data)
        require(payload.room_code, message=ErrorMessages.ROOM_CODE_REQUIRED)
        require(payload.user_id, message=ErrorMessages.USER_ID_REQUIRED)
        command = build_command(
            RequestSkipCommand, room_code=payload.room_code, user_id=payload.user_id
        )
        await gateway().dispatch(sid, command)

    async def player_sync_ping(sid: str, data: Any) -> None:
        payload = parse_payload(SyncPingPayload, data)
        await gateway().player_sync(sid, payload.timestamp)

    sio.on("connect", connect)
    sio.on("disconnect", disconnect)

    guarded_join = _guarded(gateway, join_room)
    sio.on("joinRoom", guarded_join)
    sio.on("join_room", guarded_join)

    guarded_host_skip = _guarded(gateway, host_skip)
    sio.on("hostSkip", guarded_host_skip)
    sio.on("host_skip", guarded_host_skip)

    sio.on("addSong", _guarded(gateway, add_song))
    sio.on("voteSong", _guarded(gateway, vote_song))
    sio.on("requestSkip", _guarded(gateway, request_skip))
    sio.on("playerSyncPing", _guarded(gateway, player_sync_ping))
