"""Song catalog backed by a JSON array file."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from pydantic import TypeAdapter

from jukebox_sync.application.interfaces.song_catalog import CatalogSong, SongCatalog
from jukebox_sync.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

_SONG_LIST = TypeAdapter(list[CatalogSong])


class JsonSongCatalog(SongCatalog):
    """Loads the catalog file once and filters it in memory."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._songs: list[CatalogSong] | None = None
        self._load_lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def search(self, query: str) -> list[CatalogSong]:
        needle = query.strip().lower()
        if not needle:
            return []

        songs = await self._ensure_loaded()
        return [
            song
            for song in songs
            if needle in song.title.lower() or needle in song.artist.lower()
        ]

    async def _ensure_loaded(self) -> list[CatalogSong]:
        if self._songs is not None:
            return self._songs

        async with self._load_lock:
            if self._songs is None:
                self._songs = await asyncio.to_thread(self._read)
        return self._songs

    def _read(self) -> list[CatalogSong]:
        if not self._path.exists():
            logger.warning(LogTemplates.CATALOG_MISSING, self._path)
            return []

        songs = _SONG_LIST.validate_python(json.loads(self._path.read_text(encoding="utf-8")))
        logger.info(LogTemplates.CATALOG_LOADED, len(songs), self._path)
        return songs
