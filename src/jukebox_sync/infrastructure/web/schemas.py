"""Request payloads accepted by the REST and Socket.IO boundaries.

Required fields are optional at the type level so a missing field produces
the same human-readable message the clients already expect, rather than a
generic schema error. Type mismatches still fail model validation.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, StrictInt
from pydantic.alias_generators import to_camel

from jukebox_sync.application.commands import SongSubmission
from jukebox_sync.domain.shared.exceptions import ValidationError
from jukebox_sync.domain.shared.messages import ErrorMessages

M = TypeVar("M", bound=BaseModel)


class WirePayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


# ---- REST ----


class CreateRoomRequest(WirePayload):
    name: str | None = None
    host_name: str | None = None
    skip_threshold: float | None = None


class JoinRoomRequest(WirePayload):
    user_name: str | None = None
    code: str | None = None


class AddSongRequest(WirePayload):
    song: SongSubmission | None = None
    user_id: str | None = None


class VoteRequest(WirePayload):
    song_id: str | None = None
    user_id: str | None = None
    vote: StrictInt | None = None


class SkipRequest(WirePayload):
    user_id: str | None = None


class SearchRequest(WirePayload):
    query: str | None = None


# ---- Socket.IO ----


class JoinRoomPayload(WirePayload):
    room_code: str | None = None
    user_id: str | None = None
    user_name: str | None = None


class AddSongPayload(AddSongRequest):
    room_code: str | None = None


class VoteSongPayload(VoteRequest):
    room_code: str | None = None


class SkipPayload(SkipRequest):
    room_code: str | None = None


class SyncPingPayload(WirePayload):
    timestamp: Any = None


# ---- Helpers ----


def describe_errors(errors: Sequence[Any]) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
        for err in errors
    )


def _invalid(error: pydantic.ValidationError) -> ValidationError:
    return ValidationError(
        ErrorMessages.INVALID_PAYLOAD.format(details=describe_errors(error.errors()))
    )


def parse_payload(model: type[M], data: Any) -> M:
    """Validate an inbound payload, raising the domain ``ValidationError``."""
    try:
        return model.model_validate(data if data is not None else {})
    except pydantic.ValidationError as e:
        raise _invalid(e) from e


def build_command(command: type[M], **fields: Any) -> M:
    """Construct a command, mapping constraint failures to ``ValidationError``."""
    try:
        return command(**fields)
    except pydantic.ValidationError as e:
        raise _invalid(e) from e


def require(*values: Any, message: str) -> None:
    """Reject when any value is missing or blank."""
    for value in values:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(message)
