"""
Shared Domain Kernel

Contains exceptions, constrained types and helpers shared across all bounded contexts.
"""

from jukebox_sync.domain.shared.exceptions import (
    DomainError,
    EntityNotFoundError,
    MemberNotFoundError,
    NotAuthorizedError,
    RoomNotFoundError,
    SongNotFoundError,
    StoreError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "EntityNotFoundError",
    "RoomNotFoundError",
    "SongNotFoundError",
    "MemberNotFoundError",
    "NotAuthorizedError",
    "StoreError",
]
