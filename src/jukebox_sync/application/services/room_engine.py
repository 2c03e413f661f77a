"""Room Engine - the per-room state machine.

Every command runs as one load → mutate → save cycle under the room's lock.
The mutation is applied to a private copy of the stored room, so a rejected
command or a failed save leaves nothing behind.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ...domain.room.entities import Room
from ...domain.room.events import RoomEvent
from ...domain.shared.exceptions import DomainError, NotAuthorizedError, StoreError
from ...domain.shared.messages import LogTemplates
from ..commands import (
    AddSongCommand,
    CommandResult,
    CreateRoomCommand,
    HostSkipCommand,
    JoinRoomCommand,
    LeaveRoomCommand,
    RequestSkipCommand,
    RoomCommand,
    VoteSongCommand,
)
from .room_directory import RoomDirectory
from .room_locks import RoomLocks

if TYPE_CHECKING:
    from ...domain.room.repository import RoomRepository

logger = logging.getLogger(__name__)

Mutation = Callable[[Room, Any], CommandResult]


class RoomEngine:
    """Applies room commands and returns the committed room plus its events."""

    def __init__(
        self,
        *,
        room_repository: RoomRepository,
        room_directory: RoomDirectory,
    ) -> None:
        self._room_repo = room_repository
        self._directory = room_directory
        self._room_locks = RoomLocks()
        self._mutations: dict[type, Mutation] = {
            JoinRoomCommand: self._join,
            LeaveRoomCommand: self._leave,
            AddSongCommand: self._add_song,
            VoteSongCommand: self._vote,
            HostSkipCommand: self._host_skip,
            RequestSkipCommand: self._request_skip,
        }

    @property
    def directory(self) -> RoomDirectory:
        return self._directory

    @property
    def locks(self) -> RoomLocks:
        return self._room_locks

    async def apply(self, command: RoomCommand) -> CommandResult:
        """Apply one command.

        Raises:
            DomainError: Any rejection; the stored room is left unchanged.
        """
        if isinstance(command, CreateRoomCommand):
            room, host_id = await self._directory.create_room(
                command.name, command.host_name, skip_threshold=command.skip_threshold
            )
            return CommandResult(room=room, events=[], user_id=host_id)

        mutation = self._mutations.get(type(command))
        if mutation is None:
            raise TypeError(f"Unsupported command: {type(command).__name__}")

        code = RoomDirectory.normalize(command.room_code)
        command_name = type(command).__name__
        async with self._room_locks.hold(code):
            stored = await self._directory.resolve(code)
            working = stored.model_copy(deep=True)

            try:
                result = mutation(working, command)
            except DomainError as e:
                logger.info(LogTemplates.COMMAND_REJECTED, command_name, code, e.message)
                raise

            try:
                await self._room_repo.save(result.room)
            except StoreError as e:
                logger.error(LogTemplates.COMMAND_STORE_FAILED, command_name, code, e.message)
                raise

        return result

    # ---- Mutations ----

    def _join(self, room: Room, command: JoinRoomCommand) -> CommandResult:
        member = room.add_member(command.display_name)
        logger.info(LogTemplates.MEMBER_JOINED, member.id, member.name, room.code)
        return CommandResult(room=room, events=[RoomEvent.room_state(room)], user_id=member.id)

    def _leave(self, room: Room, command: LeaveRoomCommand) -> CommandResult:
        previous_host = room.host
        new_host = room.remove_member(command.user_id)
        logger.info(LogTemplates.MEMBER_LEFT, command.user_id, room.code)
        if new_host is not None:
            logger.info(LogTemplates.HOST_REASSIGNED, room.code, previous_host, new_host)
        return CommandResult(room=room, events=[RoomEvent.room_state(room)])

    def _add_song(self, room: Room, command: AddSongCommand) -> CommandResult:
        track = command.song.to_track(command.user_id)
        started = room.enqueue(track)
        logger.info(LogTemplates.SONG_ADDED, track.title, room.code, command.user_id)
        if started and room.current_track is not None:
            logger.info(LogTemplates.TRACK_PROMOTED, room.current_track.title, room.code)

        return CommandResult(
            room=room,
            events=[
                RoomEvent.song_added(track),
                RoomEvent.room_state(room),
                RoomEvent.queue_updated(room),
                RoomEvent.now_playing(room),
                RoomEvent.active_users(room),
            ],
        )

    def _vote(self, room: Room, command: VoteSongCommand) -> CommandResult:
        updated = room.vote(command.song_id, command.user_id, command.vote)
        logger.debug(
            LogTemplates.SONG_VOTED,
            command.vote,
            command.user_id,
            command.song_id,
            room.code,
            updated.vote_count,
        )
        return CommandResult(room=room, events=[RoomEvent.song_votes_updated(room, updated)])

    def _host_skip(self, room: Room, command: HostSkipCommand) -> CommandResult:
        if not room.is_host(command.user_id):
            raise NotAuthorizedError(command.user_id)
        logger.info(LogTemplates.HOST_SKIP, command.user_id, room.code)
        return self._skip(room)

    def _request_skip(self, room: Room, command: RequestSkipCommand) -> CommandResult:
        tally = room.add_skip_vote(command.user_id)
        logger.info(
            LogTemplates.SKIP_VOTE_RECORDED, command.user_id, room.code, tally.votes, tally.required
        )
        if tally.result.action_executed:
            return self._skip(room)
        return CommandResult(room=room, events=[RoomEvent.skip_vote_update(tally)])

    def _skip(self, room: Room) -> CommandResult:
        promoted = room.skip()
        if promoted is None:
            logger.info(LogTemplates.QUEUE_EXHAUSTED, room.code)
        else:
            logger.info(LogTemplates.TRACK_PROMOTED, promoted.title, room.code)
        return CommandResult(
            room=room,
            events=[RoomEvent.track_changed(room), RoomEvent.skip_result(True)],
        )
