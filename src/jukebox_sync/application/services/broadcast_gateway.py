"""Broadcast Gateway - routes session commands to the engine and fans out events."""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ...domain.room.events import RoomEvent, RoomEventName
from ...domain.shared.datetime_utils import UtcDateTime
from ...domain.shared.exceptions import DomainError, MemberNotFoundError, ValidationError
from ...domain.shared.messages import ErrorMessages, LogTemplates
from ..commands import CommandResult, CreateRoomCommand, JoinRoomCommand, LeaveRoomCommand, RoomCommand
from .room_directory import RoomDirectory
from .room_locks import RoomLocks

if TYPE_CHECKING:
    from ..interfaces.session_transport import SessionTransport
    from .room_engine import RoomEngine

logger = logging.getLogger(__name__)

# Older clients listen for snake_case names; both are sent, canonical first.
EVENT_ALIASES: dict[RoomEventName, tuple[str, ...]] = {
    RoomEventName.QUEUE_UPDATED: ("update_queue",),
    RoomEventName.NOW_PLAYING: ("now_playing",),
    RoomEventName.ACTIVE_USERS: ("active_users_update",),
    RoomEventName.SONG_VOTES_UPDATED: ("vote_update",),
}

PLAYER_SYNC_PONG = "playerSyncPong"


def wire_names(name: RoomEventName) -> tuple[str, ...]:
    return (name.value, *EVENT_ALIASES.get(name, ()))


@dataclass(frozen=True)
class SessionBinding:
    room_code: str
    user_id: str | None = None


class BroadcastGateway:
    """Keeps session ↔ room associations and delivers room events to sessions.

    Command execution and fan-out share one lock per room, so every session
    of a room sees events in commit order.
    """

    def __init__(self, *, room_engine: RoomEngine, transport: SessionTransport) -> None:
        self._engine = room_engine
        self._transport = transport
        self._bindings: dict[str, SessionBinding] = {}
        self._room_sessions: dict[str, set[str]] = defaultdict(set)
        self._room_locks = RoomLocks()

    # ---- Session association ----

    @property
    def locks(self) -> RoomLocks:
        return self._room_locks

    def binding_for(self, session_id: str) -> SessionBinding | None:
        return self._bindings.get(session_id)

    def sessions_in(self, room_code: str) -> set[str]:
        return set(self._room_sessions.get(RoomDirectory.normalize(room_code), ()))

    async def join_session(
        self,
        session_id: str,
        room_code: str,
        *,
        user_id: str | None = None,
        display_name: str | None = None,
    ) -> str:
        """Associate a session with a room and broadcast the room state.

        A known ``user_id`` re-attaches to an existing membership; otherwise a
        new member named ``display_name`` is created.

        Returns:
            The user id now bound to the session.
        """
        code = RoomDirectory.normalize(room_code)
        async with self._room_locks.hold(code):
            if user_id:
                room = await self._engine.directory.resolve(code)
                if not room.has_member(user_id):
                    raise MemberNotFoundError(user_id)
                events = [RoomEvent.room_state(room)]
            elif display_name:
                result = await self._engine.apply(
                    JoinRoomCommand(room_code=code, display_name=display_name)
                )
                user_id = result.user_id
                events = result.events
            else:
                raise ValidationError(ErrorMessages.USER_NAME_REQUIRED, field="userName")

            bound_user = str(user_id)
            self._bind(session_id, SessionBinding(room_code=code, user_id=bound_user))
            logger.info(LogTemplates.SESSION_JOINED, session_id, code, bound_user)
            await self._fan_out(code, events)

        return bound_user

    def _bind(self, session_id: str, binding: SessionBinding) -> None:
        # Re-joining moves the session; the old membership is left alone.
        self._unbind(session_id)
        self._bindings[session_id] = binding
        self._room_sessions[binding.room_code].add(session_id)

    def _unbind(self, session_id: str) -> SessionBinding | None:
        binding = self._bindings.pop(session_id, None)
        if binding is not None:
            sessions = self._room_sessions.get(binding.room_code)
            if sessions is not None:
                sessions.discard(session_id)
                if not sessions:
                    del self._room_sessions[binding.room_code]
        return binding

    async def disconnect(self, session_id: str) -> None:
        """Forget a session and synthesize a leave for its recorded membership."""
        binding = self._unbind(session_id)
        logger.info(LogTemplates.SESSION_DISCONNECTED, session_id)
        if binding is None or binding.user_id is None:
            return

        try:
            await self.execute(
                LeaveRoomCommand(room_code=binding.room_code, user_id=binding.user_id)
            )
        except DomainError as e:
            logger.warning(LogTemplates.SESSION_LEAVE_FAILED, session_id, binding.room_code, e.message)

    # ---- Commands ----

    async def execute(self, command: RoomCommand) -> CommandResult:
        """Run a command and broadcast its events; rejections propagate."""
        if isinstance(command, CreateRoomCommand):
            return await self._engine.apply(command)

        code = RoomDirectory.normalize(command.room_code)
        async with self._room_locks.hold(code):
            result = await self._engine.apply(command)
            await self._fan_out(code, result.events)
        return result

    async def dispatch(self, session_id: str, command: RoomCommand) -> CommandResult | None:
        """Run a command for a session; rejections go only to that session."""
        try:
            return await self.execute(command)
        except DomainError as e:
            await self.reject(session_id, e)
            return None

    async def reject(self, session_id: str, error: DomainError) -> None:
        await self._deliver(session_id, [RoomEvent.error(error.message)])

    async def player_sync(self, session_id: str, client_timestamp: Any) -> None:
        """Answer a latency probe with the server clock in epoch milliseconds."""
        payload = {
            "clientTimestamp": client_timestamp,
            "serverTimestamp": UtcDateTime.now().unix_millis,
        }
        try:
            await self._transport.send(session_id, PLAYER_SYNC_PONG, payload)
        except Exception as e:
            logger.warning(LogTemplates.DELIVERY_FAILED, PLAYER_SYNC_PONG, session_id, e)

    # ---- Fan-out ----

    async def _fan_out(self, room_code: str, events: list[RoomEvent]) -> None:
        sessions = self._room_sessions.get(room_code)
        if not events or not sessions:
            return

        logger.debug(LogTemplates.BROADCAST, len(events), len(sessions), room_code)
        async with asyncio.TaskGroup() as tg:
            for session_id in list(sessions):
                tg.create_task(self._deliver(session_id, events))

    async def _deliver(self, session_id: str, events: Iterable[RoomEvent]) -> None:
        for event in events:
            for name in wire_names(event.name):
                try:
                    await self._transport.send(session_id, name, event.payload)
                except Exception as e:
                    logger.warning(LogTemplates.DELIVERY_FAILED, name, session_id, e)
