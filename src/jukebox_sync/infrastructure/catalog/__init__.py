"""Static song catalog adapters."""

from jukebox_sync.infrastructure.catalog.json_catalog import JsonSongCatalog

__all__ = ["JsonSongCatalog"]
