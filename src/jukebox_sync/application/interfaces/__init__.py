"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the application
layer and infrastructure adapters. These are the "ports" in
hexagonal architecture.
"""

from jukebox_sync.application.interfaces.session_transport import SessionTransport
from jukebox_sync.application.interfaces.song_catalog import CatalogSong, SongCatalog

__all__ = [
    "SessionTransport",
    "SongCatalog",
    "CatalogSong",
]
