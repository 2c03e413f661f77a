"""
Voting Domain Services

Pure vote-tally rules: per-user song votes, queue ordering and skip thresholds.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

from jukebox_sync.domain.voting.value_objects import SkipTally

if TYPE_CHECKING:
    from ..room.entities import Track


class VotingDomainService:
    """Domain service for voting-related business rules.

    Every method is side-effect free: tracks are returned as new copies and
    queues as new lists.
    """

    @staticmethod
    def apply_vote(track: Track, user_id: str, vote: int) -> Track:
        """Set, overwrite or clear ``user_id``'s vote on ``track``.

        A vote of ``0`` removes the user's entry instead of storing it. The
        track's vote count is derived from the resulting mapping, so it always
        equals the sum of the remaining entries.

        Args:
            track: The queued track being voted on.
            user_id: The voter.
            vote: Signed vote value. No magnitude bound is applied here.

        Returns:
            A copy of ``track`` with the updated votes.
        """
        votes = dict(track.votes)
        if vote == 0:
            votes.pop(user_id, None)
        else:
            votes[user_id] = vote
        return track.model_copy(update={"votes": votes})

    @staticmethod
    def reorder(queue: Iterable[Track]) -> list[Track]:
        """Sort by vote count, highest first; ties keep their prior relative order."""
        return sorted(queue, key=lambda track: -track.vote_count)

    @staticmethod
    def calculate_required_votes(member_count: int, threshold: float) -> int:
        """Number of skip votes needed: ``ceil(member_count * threshold)``.

        Args:
            member_count: Current room membership size (not frozen at creation).
            threshold: Fraction in (0, 1].

        Returns:
            The number of distinct skip votes that forces a skip.
        """
        if member_count <= 0:
            return 0
        return math.ceil(member_count * threshold)

    @classmethod
    def evaluate_skip(
        cls, skip_votes: Iterable[str], member_count: int, threshold: float
    ) -> SkipTally:
        """Tally skip votes against the current membership."""
        return SkipTally(
            votes=len(set(skip_votes)),
            required=cls.calculate_required_votes(member_count, threshold),
        )
