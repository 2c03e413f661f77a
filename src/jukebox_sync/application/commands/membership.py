"""
Membership Commands

Commands for joining and leaving a room.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from jukebox_sync.domain.shared.types import DisplayNameStr, NonEmptyStr, UserIdStr


class JoinRoomCommand(BaseModel):
    """Command to add a new member to a room."""

    model_config = ConfigDict(frozen=True)

    room_code: NonEmptyStr
    display_name: DisplayNameStr


class LeaveRoomCommand(BaseModel):
    """Command to remove a member, usually synthesized on disconnect."""

    model_config = ConfigDict(frozen=True)

    room_code: NonEmptyStr
    user_id: UserIdStr
