from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

# ============================================================================
# Database Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def in_memory_database():
    """Create an in-memory SQLite database for testing."""
    from jukebox_sync.infrastructure.persistence.database import Database

    db = Database(":memory:")
    await db.initialize()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def room_repository(in_memory_database):
    """Create a room repository with in-memory database."""
    from jukebox_sync.infrastructure.persistence.repositories.room_repository import (
        SQLiteRoomRepository,
    )

    return SQLiteRoomRepository(in_memory_database)


# ============================================================================
# Application Service Fixtures
# ============================================================================


@pytest.fixture
def room_directory(room_repository):
    from jukebox_sync.application.services.room_directory import RoomDirectory

    return RoomDirectory(room_repository=room_repository)


@pytest.fixture
def room_engine(room_repository, room_directory):
    from jukebox_sync.application.services.room_engine import RoomEngine

    return RoomEngine(room_repository=room_repository, room_directory=room_directory)


@pytest.fixture
def transport():
    """A session transport that records every send."""
    from jukebox_sync.application.interfaces.session_transport import SessionTransport

    return AsyncMock(spec=SessionTransport)


@pytest.fixture
def gateway(room_engine, transport):
    from jukebox_sync.application.services.broadcast_gateway import BroadcastGateway

    return BroadcastGateway(room_engine=room_engine, transport=transport)


@pytest_asyncio.fixture
async def party_room(room_directory):
    """Room "Party" hosted by Alice. Returns (room, host_id)."""
    return await room_directory.create_room("Party", "Alice")


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


@pytest.fixture
def make_song():
    """Factory for song submissions with sensible defaults."""
    from jukebox_sync.application.commands import SongSubmission

    def _make(song_id: str = "s1", title: str | None = None, artist: str = "Test Artist"):
        return SongSubmission(
            id=song_id,
            title=title or f"Song {song_id}",
            artist=artist,
            duration=180,
        )

    return _make


@pytest.fixture
def make_track():
    from jukebox_sync.domain.room.entities import Track

    def _make(song_id: str = "s1", votes: dict[str, int] | None = None, added_by: str = "u1"):
        return Track(
            id=song_id,
            title=f"Song {song_id}",
            artist="Test Artist",
            duration=180,
            added_by=added_by,
            votes=votes or {},
        )

    return _make


@pytest.fixture
def sample_room():
    """An in-memory room with Alice as host and Bob and Carol as members."""
    from jukebox_sync.domain.room.entities import Room

    room, _host = Room.create("ABC123", "Party", "Alice")
    room.add_member("Bob")
    room.add_member("Carol")
    return room
