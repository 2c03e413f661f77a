"""Vote Song Command"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictInt

from jukebox_sync.domain.shared.types import NonEmptyStr, SongIdStr, UserIdStr


class VoteSongCommand(BaseModel):
    """Command to set, change or clear (``vote == 0``) a user's vote on a queued song."""

    model_config = ConfigDict(frozen=True)

    room_code: NonEmptyStr
    song_id: SongIdStr
    user_id: UserIdStr
    vote: StrictInt
