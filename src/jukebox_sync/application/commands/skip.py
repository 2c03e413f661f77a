"""
Skip Commands

Commands for advancing a room's current track, either by host action or by
collecting enough skip votes.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from jukebox_sync.domain.shared.types import NonEmptyStr, UserIdStr


class HostSkipCommand(BaseModel):
    """Command for the host to skip immediately."""

    model_config = ConfigDict(frozen=True)

    room_code: NonEmptyStr
    user_id: UserIdStr


class RequestSkipCommand(BaseModel):
    """Command to cast a skip vote on the current track."""

    model_config = ConfigDict(frozen=True)

    room_code: NonEmptyStr
    user_id: UserIdStr
