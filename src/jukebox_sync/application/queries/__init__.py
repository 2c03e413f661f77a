"""
Application Queries (CQRS Read Side)

Query objects and handlers for read operations.
Queries never modify state.
"""

from jukebox_sync.application.queries.get_room import (
    GetActiveUsersHandler,
    GetQueueHandler,
    GetRoomHandler,
    GetRoomQuery,
)

__all__ = [
    "GetRoomQuery",
    "GetRoomHandler",
    "GetQueueHandler",
    "GetActiveUsersHandler",
]
