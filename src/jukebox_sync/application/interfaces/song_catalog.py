"""Port interface for the static song catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from jukebox_sync.domain.shared.types import DurationSeconds, NonEmptyStr, SongIdStr


class CatalogSong(BaseModel):
    """A catalog entry, shaped like the song payload clients submit."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    id: SongIdStr
    title: NonEmptyStr
    artist: NonEmptyStr
    duration: DurationSeconds = 0
    album: str | None = None


class SongCatalog(ABC):
    """Interface for searching songs clients may add to a queue."""

    @abstractmethod
    async def search(self, query: str) -> list[CatalogSong]:
        """Return songs whose title or artist contains ``query``, case-insensitively."""
        ...
