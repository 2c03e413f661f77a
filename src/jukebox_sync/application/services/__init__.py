"""
Application Services

Room directory, room engine and broadcast gateway.
"""

from jukebox_sync.application.services.broadcast_gateway import BroadcastGateway, SessionBinding
from jukebox_sync.application.services.room_directory import RoomDirectory
from jukebox_sync.application.services.room_engine import RoomEngine
from jukebox_sync.application.services.room_locks import RoomLocks

__all__ = [
    "RoomDirectory",
    "RoomEngine",
    "RoomLocks",
    "BroadcastGateway",
    "SessionBinding",
]
