"""
Room Bounded Context

Domain logic for room membership, the voted queue and track promotion.
"""

from jukebox_sync.domain.room.entities import Member, Room, RoomSettings, Track
from jukebox_sync.domain.room.events import RoomEvent, RoomEventName
from jukebox_sync.domain.room.repository import RoomRepository
from jukebox_sync.domain.room.value_objects import RoomCode

__all__ = [
    # Entities
    "Room",
    "Member",
    "Track",
    "RoomSettings",
    # Value Objects
    "RoomCode",
    # Events
    "RoomEvent",
    "RoomEventName",
    # Repository
    "RoomRepository",
]
