"""
Application Commands (CQRS Write Side)

Command objects applied by the room engine.
Commands represent intent to change a room's state.
"""

from jukebox_sync.application.commands.add_song import AddSongCommand, SongSubmission
from jukebox_sync.application.commands.create_room import CreateRoomCommand
from jukebox_sync.application.commands.membership import JoinRoomCommand, LeaveRoomCommand
from jukebox_sync.application.commands.result import CommandResult
from jukebox_sync.application.commands.skip import HostSkipCommand, RequestSkipCommand
from jukebox_sync.application.commands.vote_song import VoteSongCommand

RoomCommand = (
    CreateRoomCommand
    | JoinRoomCommand
    | LeaveRoomCommand
    | AddSongCommand
    | VoteSongCommand
    | HostSkipCommand
    | RequestSkipCommand
)

__all__ = [
    # Room
    "CreateRoomCommand",
    # Membership
    "JoinRoomCommand",
    "LeaveRoomCommand",
    # Queue
    "AddSongCommand",
    "SongSubmission",
    "VoteSongCommand",
    # Skip
    "HostSkipCommand",
    "RequestSkipCommand",
    # Result
    "CommandResult",
    "RoomCommand",
]
