"""
Unit Tests for Application Commands

Tests for command construction and validation.
"""

import pytest
from pydantic import ValidationError

from jukebox_sync.application.commands import (
    AddSongCommand,
    CreateRoomCommand,
    JoinRoomCommand,
    SongSubmission,
    VoteSongCommand,
)


class TestCreateRoomCommand:
    """Tests for CreateRoomCommand."""

    def test_threshold_optional(self):
        command = CreateRoomCommand(name="Party", host_name="Alice")

        assert command.skip_threshold is None

    @pytest.mark.parametrize("field", ["name", "host_name"])
    def test_blank_names_rejected(self, field):
        values = {"name": "Party", "host_name": "Alice", field: "   "}

        with pytest.raises(ValidationError):
            CreateRoomCommand(**values)

    def test_names_are_stripped(self):
        command = CreateRoomCommand(name="  Party ", host_name=" Alice")

        assert command.name == "Party"
        assert command.host_name == "Alice"


class TestJoinRoomCommand:
    """Tests for JoinRoomCommand."""

    def test_display_name_length_limit(self):
        with pytest.raises(ValidationError):
            JoinRoomCommand(room_code="ABC123", display_name="x" * 65)


class TestSongSubmission:
    """Tests for SongSubmission."""

    def test_accepts_client_payload(self):
        song = SongSubmission.model_validate(
            {"id": "s1", "title": "Heroes", "artist": "David Bowie", "votes": {"u1": 5}}
        )

        assert song.duration == 0

    def test_to_track_starts_without_votes(self):
        song = SongSubmission(id="s1", title="Heroes", artist="David Bowie", duration=371)

        track = song.to_track("u9")

        assert track.added_by == "u9"
        assert track.votes == {}
        assert track.duration == 371

    def test_add_song_command_nests_submission(self):
        command = AddSongCommand.model_validate(
            {
                "room_code": "ABC123",
                "user_id": "u1",
                "song": {"id": "s1", "title": "Heroes", "artist": "David Bowie"},
            }
        )

        assert isinstance(command.song, SongSubmission)


class TestVoteSongCommand:
    """Tests for VoteSongCommand."""

    @pytest.mark.parametrize("vote", [-3, 0, 1, 100])
    def test_integer_votes(self, vote):
        assert VoteSongCommand(room_code="ABC123", song_id="s1", user_id="u1", vote=vote).vote == vote

    @pytest.mark.parametrize("vote", ["1", 1.5, True])
    def test_non_integer_votes_rejected(self, vote):
        with pytest.raises(ValidationError):
            VoteSongCommand(room_code="ABC123", song_id="s1", user_id="u1", vote=vote)
