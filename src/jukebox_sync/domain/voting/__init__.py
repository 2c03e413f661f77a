"""
Voting Bounded Context

Vote tally for queued songs and skip-vote thresholds.
"""

from jukebox_sync.domain.voting.services import VotingDomainService
from jukebox_sync.domain.voting.value_objects import SkipTally, VoteResult

__all__ = [
    # Value Objects
    "VoteResult",
    "SkipTally",
    # Services
    "VotingDomainService",
]
