"""
Unit Tests for Domain Voting Layer

Tests for:
- Value Objects: VoteResult, SkipTally
- Services: VotingDomainService (vote tally, queue ordering, skip thresholds)
"""

import pytest

from jukebox_sync.domain.voting.services import VotingDomainService
from jukebox_sync.domain.voting.value_objects import SkipTally, VoteResult

# =============================================================================
# Value Object Tests
# =============================================================================


class TestVoteResult:
    """Unit tests for VoteResult enum value object."""

    def test_action_executed_only_when_threshold_met(self):
        assert VoteResult.THRESHOLD_MET.action_executed is True
        assert VoteResult.VOTE_RECORDED.action_executed is False


class TestSkipTally:
    """Unit tests for SkipTally value object."""

    def test_below_threshold(self):
        tally = SkipTally(votes=1, required=3)

        assert tally.is_threshold_met is False
        assert tally.result == VoteResult.VOTE_RECORDED

    def test_threshold_met_exactly(self):
        tally = SkipTally(votes=3, required=3)

        assert tally.is_threshold_met is True
        assert tally.result == VoteResult.THRESHOLD_MET

    def test_is_immutable(self):
        tally = SkipTally(votes=1, required=2)

        with pytest.raises(Exception):
            tally.votes = 5  # type: ignore[misc]


# =============================================================================
# Vote Tally Tests
# =============================================================================


class TestApplyVote:
    """Tests for VotingDomainService.apply_vote."""

    def test_sets_new_vote(self, make_track):
        track = make_track()

        updated = VotingDomainService.apply_vote(track, "u1", 5)

        assert updated.votes == {"u1": 5}
        assert updated.vote_count == 5

    def test_does_not_mutate_input(self, make_track):
        track = make_track()

        VotingDomainService.apply_vote(track, "u1", 5)

        assert track.votes == {}
        assert track.vote_count == 0

    def test_last_vote_wins_for_same_user(self, make_track):
        track = make_track()

        for value in (3, -2, 7):
            track = VotingDomainService.apply_vote(track, "u1", value)

        assert track.votes == {"u1": 7}
        assert track.vote_count == 7

    def test_zero_vote_removes_entry(self, make_track):
        track = make_track(votes={"u1": 4, "u2": 1})

        updated = VotingDomainService.apply_vote(track, "u1", 0)

        assert "u1" not in updated.votes
        assert updated.vote_count == 1

    def test_zero_vote_without_prior_entry_is_noop(self, make_track):
        track = make_track(votes={"u2": 2})

        updated = VotingDomainService.apply_vote(track, "u1", 0)

        assert updated.votes == {"u2": 2}

    def test_vote_count_equals_sum_after_mixed_changes(self, make_track):
        track = make_track()
        operations = [("u1", 2), ("u2", -1), ("u3", 10), ("u1", 0), ("u2", 4), ("u4", -3)]

        for user_id, value in operations:
            track = VotingDomainService.apply_vote(track, user_id, value)
            assert track.vote_count == sum(track.votes.values())

        assert track.votes == {"u2": 4, "u3": 10, "u4": -3}
        assert track.vote_count == 11

    def test_no_magnitude_bound(self, make_track):
        updated = VotingDomainService.apply_vote(make_track(), "u1", 1_000_000)

        assert updated.vote_count == 1_000_000


class TestReorder:
    """Tests for VotingDomainService.reorder."""

    def test_sorts_by_vote_count_descending(self, make_track):
        low = make_track("low", votes={"u1": 1})
        high = make_track("high", votes={"u1": 9})
        mid = make_track("mid", votes={"u1": 4})

        ordered = VotingDomainService.reorder([low, high, mid])

        assert [t.id for t in ordered] == ["high", "mid", "low"]

    def test_ties_preserve_prior_order(self, make_track):
        a = make_track("a")
        b = make_track("b")
        c = make_track("c", votes={"u1": 1})
        d = make_track("d")

        ordered = VotingDomainService.reorder([a, b, c, d])

        assert [t.id for t in ordered] == ["c", "a", "b", "d"]

    def test_negative_scores_sink(self, make_track):
        down = make_track("down", votes={"u1": -2})
        neutral = make_track("neutral")

        ordered = VotingDomainService.reorder([down, neutral])

        assert [t.id for t in ordered] == ["neutral", "down"]


# =============================================================================
# Skip Threshold Tests
# =============================================================================


class TestSkipThreshold:
    """Tests for required skip vote calculation."""

    @pytest.mark.parametrize(
        ("members", "threshold", "expected"),
        [
            (5, 0.5, 3),
            (4, 0.5, 2),
            (1, 0.5, 1),
            (3, 1.0, 3),
            (10, 0.25, 3),
            (0, 0.5, 0),
        ],
    )
    def test_calculate_required_votes(self, members, threshold, expected):
        assert VotingDomainService.calculate_required_votes(members, threshold) == expected

    def test_evaluate_skip_counts_distinct_voters(self):
        tally = VotingDomainService.evaluate_skip(["u1", "u1", "u2"], 4, 0.5)

        assert tally.votes == 2
        assert tally.required == 2
        assert tally.is_threshold_met is True
