"""Immutable value objects for the room bounded context."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from random import Random
from typing import Annotated

from pydantic import PlainSerializer, PlainValidator

from jukebox_sync.domain.shared.constants import RoomConstants
from jukebox_sync.domain.shared.messages import ErrorMessages


@dataclass(frozen=True)
class RoomCode:
    """Short human-shareable room identifier, always stored upper-case."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError(ErrorMessages.EMPTY_ROOM_CODE)

        normalized = self.value.strip().upper()
        if len(normalized) != RoomConstants.CODE_LENGTH:
            raise ValueError(
                ErrorMessages.INVALID_ROOM_CODE_LENGTH.format(length=RoomConstants.CODE_LENGTH)
            )
        if any(ch not in RoomConstants.CODE_ALPHABET for ch in normalized):
            raise ValueError(ErrorMessages.INVALID_ROOM_CODE_CHARS)

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __hash__(self) -> int:
        return hash(self.value)

    @classmethod
    def generate(cls, rng: Random | None = None) -> RoomCode:
        """Sample a fresh code; uniqueness is the directory's job."""
        if rng is not None:
            chars = [rng.choice(RoomConstants.CODE_ALPHABET) for _ in range(RoomConstants.CODE_LENGTH)]
        else:
            chars = [secrets.choice(RoomConstants.CODE_ALPHABET) for _ in range(RoomConstants.CODE_LENGTH)]
        return cls("".join(chars))

    @classmethod
    def parse(cls, value: str | RoomCode) -> RoomCode:
        if isinstance(value, RoomCode):
            return value
        return cls(value)


# Pydantic-compatible type alias for RoomCode fields.
# Serializes as plain string in JSON, stores as RoomCode in the model.
RoomCodeField = Annotated[
    RoomCode,
    PlainValidator(RoomCode.parse),
    PlainSerializer(lambda v: v.value, return_type=str),
]
