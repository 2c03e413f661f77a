"""
Add Song Command

Command for appending a song to a room's queue.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from jukebox_sync.domain.room.entities import Track
from jukebox_sync.domain.shared.types import (
    DurationSeconds,
    NonEmptyStr,
    SongIdStr,
    TrackTitleStr,
    UserIdStr,
)


class SongSubmission(BaseModel):
    """Caller-supplied song identity; votes always start empty."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: SongIdStr
    title: TrackTitleStr
    artist: NonEmptyStr
    duration: DurationSeconds = 0

    def to_track(self, added_by: str) -> Track:
        return Track(
            id=self.id,
            title=self.title,
            artist=self.artist,
            duration=self.duration,
            added_by=added_by,
        )


class AddSongCommand(BaseModel):
    """Command to queue a song in a room."""

    model_config = ConfigDict(frozen=True)

    room_code: NonEmptyStr
    user_id: UserIdStr
    song: SongSubmission
