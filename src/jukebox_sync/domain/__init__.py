"""
Domain Layer

Contains pure business logic organized by bounded contexts:
- shared/: Cross-cutting types, messages and exceptions
- room/: Room aggregate, membership, queue and events
- voting/: Vote tally and skip thresholds
"""

from jukebox_sync.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
