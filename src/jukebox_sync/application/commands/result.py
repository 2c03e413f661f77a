"""Outcome of a command applied by the room engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from jukebox_sync.domain.room.entities import Room
from jukebox_sync.domain.room.events import RoomEvent


@dataclass(frozen=True)
class CommandResult:
    """Committed room snapshot plus the events to broadcast, in order.

    ``user_id`` is set by commands that mint a member (create and join).
    """

    room: Room
    events: list[RoomEvent] = field(default_factory=list)
    user_id: str | None = None

    @property
    def code(self) -> str:
        return str(self.room.code)
