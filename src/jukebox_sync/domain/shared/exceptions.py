"""Base exception classes for domain-level errors."""

from __future__ import annotations

from jukebox_sync.domain.shared.messages import ErrorMessages


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when a command carries missing or malformed fields."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, identifier: str, message: str | None = None) -> None:
        msg = message or f"{entity_type} with id '{identifier}' not found"
        super().__init__(msg, code="ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.identifier = identifier


class RoomNotFoundError(EntityNotFoundError):
    """Raised when a room code does not resolve."""

    def __init__(self, code: str) -> None:
        super().__init__("Room", code, ErrorMessages.ROOM_NOT_FOUND)
        self.code = "ROOM_NOT_FOUND"


class SongNotFoundError(EntityNotFoundError):
    """Raised when a song id is not present in a room's queue."""

    def __init__(self, song_id: str) -> None:
        super().__init__("Song", song_id, ErrorMessages.SONG_NOT_FOUND)
        self.code = "SONG_NOT_FOUND"


class MemberNotFoundError(EntityNotFoundError):
    """Raised when a user id is not a member of the room."""

    def __init__(self, user_id: str) -> None:
        super().__init__("User", user_id, ErrorMessages.MEMBER_NOT_FOUND)
        self.code = "MEMBER_NOT_FOUND"


class NotAuthorizedError(DomainError):
    """Raised when a non-host user attempts a host-only action."""

    def __init__(self, user_id: str, message: str | None = None) -> None:
        super().__init__(message or ErrorMessages.ONLY_HOST_CAN_SKIP, code="NOT_AUTHORIZED")
        self.user_id = user_id


class StoreError(DomainError):
    """Raised when the durable room store fails to read or write."""

    def __init__(self, message: str, room_code: str | None = None) -> None:
        super().__init__(message, code="STORE_ERROR")
        self.room_code = room_code
