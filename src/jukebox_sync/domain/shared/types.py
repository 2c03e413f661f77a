"""Reusable Pydantic Annotated types for domain-wide validation.

Every constrained type used across bounded contexts is defined here once,
so models can simply annotate their fields::

    from jukebox_sync.domain.shared.types import NonEmptyStr, UserIdStr

    class MyModel(BaseModel):
        user_id: UserIdStr
        name: NonEmptyStr
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BeforeValidator, Field, StringConstraints

# ── Numeric constraints ─────────────────────────────────────────────

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""

SkipThreshold = Annotated[float, Field(gt=0.0, le=1.0)]
"""Fraction of members required to force a skip: (0.0, 1.0]."""

DurationSeconds = Annotated[float, Field(ge=0, le=86_400)]
"""Track duration in seconds: 0 … 86 400 (24 hours)."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
"""String with at least one non-blank character."""

UserIdStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=64)]
"""Opaque user identifier."""

SongIdStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=128)]
"""Caller-supplied song identifier."""

DisplayNameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=64)]
"""Member display name: 1-64 characters."""

RoomNameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
"""Room display name: 1-100 characters."""

TrackTitleStr = Annotated[str, StringConstraints(min_length=1, max_length=500)]
"""Track title: 1-500 characters."""


# ── Settings-specific constraints ──────────────────────────────────

BusyTimeoutMs = Annotated[int, Field(ge=1000, le=30000)]
"""Database busy timeout in milliseconds: 1 000 … 30 000."""

ConnectionTimeoutS = Annotated[int, Field(ge=1, le=60)]
"""Database connection timeout in seconds: 1 … 60."""

PortInt = Annotated[int, Field(ge=1, le=65535)]
"""TCP port."""


# ── Datetime constraints ────────────────────────────────────────────

def _ensure_utc(v: datetime) -> datetime:
    """Validate that a datetime is timezone-aware and normalise to UTC."""
    if isinstance(v, str):
        v = datetime.fromisoformat(v.replace("Z", "+00:00"))
    if v.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    return v.astimezone(UTC)


UtcDatetimeField = Annotated[datetime, BeforeValidator(_ensure_utc)]
"""Timezone-aware datetime, normalised to UTC on input."""
