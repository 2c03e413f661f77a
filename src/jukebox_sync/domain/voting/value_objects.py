"""
Voting Domain Value Objects

Immutable value objects for the voting bounded context.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from jukebox_sync.domain.shared.types import NonNegativeInt


class VoteResult(Enum):
    """Outcome of a skip request."""

    VOTE_RECORDED = "vote_recorded"  # Counted, threshold not reached yet
    THRESHOLD_MET = "threshold_met"  # Counted and the skip fires

    @property
    def action_executed(self) -> bool:
        return self == VoteResult.THRESHOLD_MET


class SkipTally(BaseModel):
    """Snapshot of skip-vote progress against the current membership."""

    model_config = ConfigDict(frozen=True)

    votes: NonNegativeInt
    required: NonNegativeInt

    @property
    def is_threshold_met(self) -> bool:
        return self.votes >= self.required

    @property
    def result(self) -> VoteResult:
        return VoteResult.THRESHOLD_MET if self.is_threshold_met else VoteResult.VOTE_RECORDED
