"""Create Room Command"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from jukebox_sync.domain.shared.types import DisplayNameStr, RoomNameStr, SkipThreshold


class CreateRoomCommand(BaseModel):
    """Command to open a new room with its host as the only member."""

    model_config = ConfigDict(frozen=True)

    name: RoomNameStr
    host_name: DisplayNameStr
    skip_threshold: SkipThreshold | None = None
