"""Domain events for the room bounded context.

Events are emitted by the room engine in a fixed order per command and carry
ready-to-send wire payloads. Each event has exactly one canonical name here;
transport aliases are applied by the broadcast gateway.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from jukebox_sync.domain.shared.datetime_utils import utcnow
from jukebox_sync.domain.shared.types import UtcDatetimeField

if TYPE_CHECKING:
    from jukebox_sync.domain.room.entities import Room, Track
    from jukebox_sync.domain.voting.value_objects import SkipTally


class RoomEventName(str, Enum):
    ROOM_STATE = "roomState"
    SONG_ADDED = "songAdded"
    QUEUE_UPDATED = "queueUpdated"
    NOW_PLAYING = "nowPlaying"
    ACTIVE_USERS = "activeUsers"
    SONG_VOTES_UPDATED = "songVotesUpdated"
    TRACK_CHANGED = "trackChanged"
    SKIP_RESULT = "skipResult"
    SKIP_VOTE_UPDATE = "skipVoteUpdate"
    ERROR = "error"


class RoomEvent(BaseModel):
    """A named outbound event with its payload."""

    model_config = ConfigDict(frozen=True)

    name: RoomEventName
    payload: dict[str, Any] = Field(default_factory=dict)
    event_id: str = Field(default_factory=lambda: uuid4().hex)
    occurred_at: UtcDatetimeField = Field(default_factory=utcnow)

    # ---- Factories ----

    @classmethod
    def room_state(cls, room: Room) -> RoomEvent:
        return cls(name=RoomEventName.ROOM_STATE, payload=room.state_payload())

    @classmethod
    def song_added(cls, track: Track) -> RoomEvent:
        return cls(name=RoomEventName.SONG_ADDED, payload={"song": track.to_payload()})

    @classmethod
    def queue_updated(cls, room: Room) -> RoomEvent:
        return cls(name=RoomEventName.QUEUE_UPDATED, payload={"queue": room.queue_payload()})

    @classmethod
    def now_playing(cls, room: Room) -> RoomEvent:
        return cls(
            name=RoomEventName.NOW_PLAYING,
            payload={
                "currentTrack": room.current_track_payload(),
                "currentTrackStartTs": room.current_track_start_ts,
            },
        )

    @classmethod
    def active_users(cls, room: Room) -> RoomEvent:
        return cls(
            name=RoomEventName.ACTIVE_USERS,
            payload={"users": room.users_payload(), "host": room.host},
        )

    @classmethod
    def song_votes_updated(cls, room: Room, track: Track) -> RoomEvent:
        return cls(
            name=RoomEventName.SONG_VOTES_UPDATED,
            payload={
                "songId": track.id,
                "voteCount": track.vote_count,
                "queue": room.queue_payload(),
            },
        )

    @classmethod
    def track_changed(cls, room: Room) -> RoomEvent:
        return cls(
            name=RoomEventName.TRACK_CHANGED,
            payload={
                "currentTrack": room.current_track_payload(),
                "currentTrackStartTs": room.current_track_start_ts,
                "queue": room.queue_payload(),
            },
        )

    @classmethod
    def skip_result(cls, success: bool) -> RoomEvent:
        return cls(name=RoomEventName.SKIP_RESULT, payload={"success": success})

    @classmethod
    def skip_vote_update(cls, tally: SkipTally) -> RoomEvent:
        return cls(
            name=RoomEventName.SKIP_VOTE_UPDATE,
            payload={"votes": tally.votes, "required": tally.required},
        )

    @classmethod
    def error(cls, message: str) -> RoomEvent:
        return cls(name=RoomEventName.ERROR, payload={"message": message})
