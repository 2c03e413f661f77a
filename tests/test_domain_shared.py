"""
Unit Tests for the Shared Domain Kernel

Tests for:
- UtcDateTime and datetime helpers
- DomainError hierarchy
- Constrained Annotated types
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from jukebox_sync.domain.shared.datetime_utils import UtcDateTime, to_unix_millis, utcnow
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
from jukebox_sync.domain.shared.types import DisplayNameStr, SkipThreshold, UtcDatetimeField

# =============================================================================
# DateTime Tests
# =============================================================================


class TestUtcDateTime:
    """Tests for UtcDateTime."""

    def test_naive_datetime_rejected(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            UtcDateTime(datetime(2024, 1, 15, 12, 0))

    def test_converts_to_utc(self):
        eastern = timezone(timedelta(hours=-5))

        value = UtcDateTime(datetime(2024, 1, 15, 12, 0, tzinfo=eastern))

        assert value.dt.hour == 17
        assert value.dt.tzinfo == UTC

    @pytest.mark.parametrize("text", ["2024-01-15T12:00:00Z", "2024-01-15T12:00:00+00:00"])
    def test_from_iso(self, text):
        assert UtcDateTime.from_iso(text).dt == datetime(2024, 1, 15, 12, 0, tzinfo=UTC)

    def test_iso_roundtrip(self):
        original = UtcDateTime(datetime(2024, 1, 15, 12, 0, 0, 123456, tzinfo=UTC))

        assert UtcDateTime.from_iso(original.iso) == original

    def test_unix_millis(self):
        assert UtcDateTime(datetime(1970, 1, 1, 0, 0, 1, tzinfo=UTC)).unix_millis == 1000

    def test_to_unix_millis_handles_none(self):
        assert to_unix_millis(None) is None
        assert to_unix_millis(datetime(2024, 1, 1, tzinfo=UTC)) == 1704067200000

    def test_utcnow_is_aware(self):
        assert utcnow().tzinfo is not None


# =============================================================================
# Exception Tests
# =============================================================================


class TestDomainErrors:
    """Tests for the DomainError hierarchy."""

    @pytest.mark.parametrize(
        ("error", "message", "code"),
        [
            (RoomNotFoundError("ABC123"), "Room not found", "ROOM_NOT_FOUND"),
            (SongNotFoundError("s1"), "Song not found in queue", "SONG_NOT_FOUND"),
            (MemberNotFoundError("u1"), "User is not a member of this room", "MEMBER_NOT_FOUND"),
            (NotAuthorizedError("u1"), "Only host can skip", "NOT_AUTHORIZED"),
            (StoreError("disk full"), "disk full", "STORE_ERROR"),
            (ValidationError("bad", field="vote"), "bad", "VALIDATION_ERROR"),
        ],
    )
    def test_message_and_code(self, error, message, code):
        assert isinstance(error, DomainError)
        assert error.message == message
        assert str(error) == message
        assert error.code == code

    def test_not_found_errors_share_base(self):
        for error in (RoomNotFoundError("A"), SongNotFoundError("s"), MemberNotFoundError("u")):
            assert isinstance(error, EntityNotFoundError)

    def test_not_found_keeps_identifier(self):
        error = SongNotFoundError("s42")

        assert error.entity_type == "Song"
        assert error.identifier == "s42"

    def test_store_error_keeps_room_code(self):
        assert StoreError("boom", room_code="ABC123").room_code == "ABC123"

    def test_validation_error_keeps_field(self):
        assert ValidationError("bad", field="userName").field == "userName"


# =============================================================================
# Constrained Type Tests
# =============================================================================


class _Sample(BaseModel):
    name: DisplayNameStr
    threshold: SkipThreshold
    at: UtcDatetimeField


class TestConstrainedTypes:
    """Tests for shared Annotated types."""

    def test_valid_values(self):
        sample = _Sample(name="  Bob ", threshold=1.0, at="2024-01-15T12:00:00Z")

        assert sample.name == "Bob"
        assert sample.at == datetime(2024, 1, 15, 12, 0, tzinfo=UTC)

    @pytest.mark.parametrize("name", ["", "   ", "x" * 65])
    def test_display_name_bounds(self, name):
        with pytest.raises(PydanticValidationError):
            _Sample(name=name, threshold=0.5, at=utcnow())

    @pytest.mark.parametrize("threshold", [0, -0.5, 1.01])
    def test_skip_threshold_bounds(self, threshold):
        with pytest.raises(PydanticValidationError):
            TypeAdapter(SkipThreshold).validate_python(threshold)

    def test_naive_datetime_rejected(self):
        with pytest.raises(PydanticValidationError):
            _Sample(name="Bob", threshold=0.5, at=datetime(2024, 1, 15))
