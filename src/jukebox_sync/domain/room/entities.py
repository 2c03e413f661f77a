"""Core domain entities for the room bounded context."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from jukebox_sync.domain.room.value_objects import RoomCodeField
from jukebox_sync.domain.shared.constants import RoomConstants
from jukebox_sync.domain.shared.datetime_utils import to_unix_millis, utcnow
from jukebox_sync.domain.shared.exceptions import MemberNotFoundError, SongNotFoundError
from jukebox_sync.domain.shared.types import (
    DisplayNameStr,
    DurationSeconds,
    NonEmptyStr,
    RoomNameStr,
    SkipThreshold,
    SongIdStr,
    TrackTitleStr,
    UserIdStr,
    UtcDatetimeField,
)
from jukebox_sync.domain.voting.services import VotingDomainService
from jukebox_sync.domain.voting.value_objects import SkipTally

_WIRE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def new_user_id() -> str:
    """Fresh opaque user identifier."""
    return str(uuid4())


class Track(BaseModel):
    """Immutable value object for a queued or playing song."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: SongIdStr
    title: TrackTitleStr
    artist: NonEmptyStr
    duration: DurationSeconds
    added_by: UserIdStr
    votes: dict[str, int] = Field(default_factory=dict)

    @field_validator("votes")
    @classmethod
    def _drop_zero_votes(cls, v: dict[str, int]) -> dict[str, int]:
        return {user_id: vote for user_id, vote in v.items() if vote != 0}

    @computed_field(alias="voteCount")  # type: ignore[prop-decorator]
    @property
    def vote_count(self) -> int:
        return sum(self.votes.values())

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class Member(BaseModel):
    """A user currently in a room."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: UserIdStr
    name: DisplayNameStr
    joined_at: UtcDatetimeField = Field(default_factory=utcnow)


class RoomSettings(BaseModel):
    model_config = _WIRE_CONFIG

    skip_threshold: SkipThreshold = RoomConstants.DEFAULT_SKIP_THRESHOLD


class Room(BaseModel):
    """Aggregate root holding the whole shared state of one jukebox room.

    Playback is implied by ``current_track``: present means playing, absent
    means idle. Skip votes are persisted with the rest of the room.
    """

    model_config = _WIRE_CONFIG

    code: RoomCodeField
    name: RoomNameStr
    host: UserIdStr
    users: list[Member] = Field(default_factory=list)
    queue: list[Track] = Field(default_factory=list)
    current_track: Track | None = None
    current_track_started_at: UtcDatetimeField | None = None
    skip_votes: set[str] = Field(default_factory=set)
    settings: RoomSettings = Field(default_factory=RoomSettings)
    created_at: UtcDatetimeField = Field(default_factory=utcnow)
    updated_at: UtcDatetimeField = Field(default_factory=utcnow)

    @classmethod
    def create(
        cls,
        code: Any,
        name: str,
        host_name: str,
        *,
        skip_threshold: float = RoomConstants.DEFAULT_SKIP_THRESHOLD,
    ) -> tuple[Room, Member]:
        """Create a room with ``host_name`` seeded as its host and sole member."""
        host = Member(id=new_user_id(), name=host_name)
        room = cls(
            code=code,
            name=name,
            host=host.id,
            users=[host],
            settings=RoomSettings(skip_threshold=skip_threshold),
        )
        return room, host

    # ---- Membership ----

    @property
    def member_ids(self) -> list[str]:
        return [member.id for member in self.users]

    @property
    def member_count(self) -> int:
        return len(self.users)

    def has_member(self, user_id: str) -> bool:
        return any(member.id == user_id for member in self.users)

    def is_host(self, user_id: str) -> bool:
        return self.host == user_id

    def get_member(self, user_id: str) -> Member:
        for member in self.users:
            if member.id == user_id:
                return member
        raise MemberNotFoundError(user_id)

    def add_member(self, display_name: str) -> Member:
        """Append a new member with a fresh id."""
        member = Member(id=new_user_id(), name=display_name)
        self.users.append(member)
        self.touch()
        return member

    def remove_member(self, user_id: str) -> str | None:
        """Remove a member, purging their skip vote and handing over host rights.

        Returns:
            The new host id when the host left and others remain, else None.
        """
        self.get_member(user_id)
        self.users = [member for member in self.users if member.id != user_id]
        self.skip_votes.discard(user_id)
        self.touch()

        if self.host == user_id and self.users:
            # Members are kept in join order, so the head joined earliest.
            self.host = self.users[0].id
            return self.host
        return None

    # ---- Queue ----

    def find_queued(self, song_id: str) -> Track:
        for track in self.queue:
            if track.id == song_id:
                return track
        raise SongNotFoundError(song_id)

    def enqueue(self, track: Track) -> bool:
        """Add a track with a clean vote slate; start it if nothing is playing.

        Returns:
            True when the add promoted a track to ``current_track``.
        """
        fresh = track.model_copy(update={"votes": {}})
        self.queue = VotingDomainService.reorder([*self.queue, fresh])
        self.touch()

        if self.current_track is None:
            self.promote_next()
            return True
        return False

    def vote(self, song_id: str, user_id: str, vote: int) -> Track:
        """Apply a vote to a queued track and re-sort the queue."""
        target = self.find_queued(song_id)
        updated = VotingDomainService.apply_vote(target, user_id, vote)
        self.queue = VotingDomainService.reorder(
            updated if track is target else track for track in self.queue
        )
        self.touch()
        return updated

    def promote_next(self, now: datetime | None = None) -> Track | None:
        """Move the front of the queue to ``current_track`` or go idle."""
        if self.queue:
            self.current_track = self.queue.pop(0)
            self.current_track_started_at = now or utcnow()
        else:
            self.current_track = None
            self.current_track_started_at = None
        self.touch()
        return self.current_track

    # ---- Skip votes ----

    def add_skip_vote(self, user_id: str) -> SkipTally:
        """Record a member's skip vote; non-members are rejected."""
        self.get_member(user_id)
        self.skip_votes.add(user_id)
        self.touch()
        return self.skip_tally

    @property
    def skip_tally(self) -> SkipTally:
        return VotingDomainService.evaluate_skip(
            self.skip_votes, self.member_count, self.settings.skip_threshold
        )

    def skip(self) -> Track | None:
        """Advance to the next track and reset skip votes."""
        self.skip_votes.clear()
        return self.promote_next()

    def touch(self) -> None:
        """Update last activity timestamp."""
        self.updated_at = utcnow()

    # ---- Wire payloads ----

    @property
    def current_track_start_ts(self) -> int | None:
        return to_unix_millis(self.current_track_started_at)

    def queue_payload(self) -> list[dict[str, Any]]:
        return [track.to_payload() for track in self.queue]

    def current_track_payload(self) -> dict[str, Any] | None:
        return self.current_track.to_payload() if self.current_track else None

    def users_payload(self) -> list[dict[str, Any]]:
        return [member.model_dump(mode="json", by_alias=True) for member in self.users]

    def state_payload(self) -> dict[str, Any]:
        return {
            "queue": self.queue_payload(),
            "currentTrack": self.current_track_payload(),
            "currentTrackStartTs": self.current_track_start_ts,
            "users": self.users_payload(),
            "host": self.host,
            "settings": self.settings.model_dump(mode="json", by_alias=True),
        }

    def detail_payload(self) -> dict[str, Any]:
        return {
            "code": str(self.code),
            "name": self.name,
            **self.state_payload(),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }
