"""Dependency Injection Container

Manages the application's dependency graph, providing lazy initialization
and lifecycle management for repositories, services, adapters, and handlers.
Components are created on-demand and cached for reuse throughout the application.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import ErrorMessages

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.interfaces.session_transport import SessionTransport
    from ..application.interfaces.song_catalog import SongCatalog
    from ..application.queries.get_room import (
        GetActiveUsersHandler,
        GetQueueHandler,
        GetRoomHandler,
    )
    from ..application.services.broadcast_gateway import BroadcastGateway
    from ..application.services.room_directory import RoomDirectory
    from ..application.services.room_engine import RoomEngine
    from ..domain.room.repository import RoomRepository
    from ..infrastructure.persistence.cleanup import CleanupJob
    from ..infrastructure.persistence.database import Database
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    This container manages all application dependencies and their lifecycle.
    Components are lazily initialized when first accessed.
    """

    settings: Settings
    _transport: SessionTransport | None = None

    # Persistence layer
    _database: Database | None = None
    _room_repository: RoomRepository | None = None

    # Infrastructure adapters
    _song_catalog: SongCatalog | None = None

    # Application services
    _room_directory: RoomDirectory | None = None
    _room_engine: RoomEngine | None = None
    _broadcast_gateway: BroadcastGateway | None = None

    # Query handlers
    _get_room_handler: GetRoomHandler | None = None
    _get_queue_handler: GetQueueHandler | None = None
    _get_active_users_handler: GetActiveUsersHandler | None = None

    # Background jobs
    _cleanup_job: CleanupJob | None = None

    def set_transport(self, transport: SessionTransport) -> None:
        """Set the session transport used for fan-out."""
        self._transport = transport

    @property
    def transport(self) -> SessionTransport:
        if self._transport is None:
            raise RuntimeError(ErrorMessages.TRANSPORT_NOT_INITIALIZED)
        return self._transport

    # === Database ===

    @property
    def database(self) -> Database:
        """Get the database connection manager."""
        if self._database is None:
            from ..infrastructure.persistence.database import Database

            self._database = Database(self.settings.database.url, settings=self.settings.database)
        return self._database

    # === Repositories ===

    @property
    def room_repository(self) -> RoomRepository:
        if self._room_repository is None:
            from ..infrastructure.persistence.repositories.room_repository import (
                SQLiteRoomRepository,
            )

            self._room_repository = SQLiteRoomRepository(self.database)
        return self._room_repository

    # === Adapters ===

    @property
    def song_catalog(self) -> SongCatalog:
        if self._song_catalog is None:
            from ..infrastructure.catalog.json_catalog import JsonSongCatalog

            self._song_catalog = JsonSongCatalog(self.settings.catalog.songs_path)
        return self._song_catalog

    # === Application Services ===

    @property
    def room_directory(self) -> RoomDirectory:
        if self._room_directory is None:
            from ..application.services.room_directory import RoomDirectory

            self._room_directory = RoomDirectory(
                room_repository=self.room_repository,
                default_skip_threshold=self.settings.rooms.default_skip_threshold,
                max_code_attempts=self.settings.rooms.max_code_attempts,
            )
        return self._room_directory

    @property
    def room_engine(self) -> RoomEngine:
        if self._room_engine is None:
            from ..application.services.room_engine import RoomEngine

            self._room_engine = RoomEngine(
                room_repository=self.room_repository,
                room_directory=self.room_directory,
            )
        return self._room_engine

    @property
    def broadcast_gateway(self) -> BroadcastGateway:
        if self._broadcast_gateway is None:
            from ..application.services.broadcast_gateway import BroadcastGateway

            self._broadcast_gateway = BroadcastGateway(
                room_engine=self.room_engine,
                transport=self.transport,
            )
        return self._broadcast_gateway

    # === Query Handlers ===

    @property
    def get_room_handler(self) -> GetRoomHandler:
        if self._get_room_handler is None:
            from ..application.queries.get_room import GetRoomHandler

            self._get_room_handler = GetRoomHandler(room_directory=self.room_directory)
        return self._get_room_handler

    @property
    def get_queue_handler(self) -> GetQueueHandler:
        if self._get_queue_handler is None:
            from ..application.queries.get_room import GetQueueHandler

            self._get_queue_handler = GetQueueHandler(room_directory=self.room_directory)
        return self._get_queue_handler

    @property
    def get_active_users_handler(self) -> GetActiveUsersHandler:
        if self._get_active_users_handler is None:
            from ..application.queries.get_room import GetActiveUsersHandler

            self._get_active_users_handler = GetActiveUsersHandler(
                room_directory=self.room_directory
            )
        return self._get_active_users_handler

    # === Background Jobs ===

    @property
    def cleanup_job(self) -> CleanupJob:
        if self._cleanup_job is None:
            from ..infrastructure.persistence.cleanup import CleanupJob

            self._cleanup_job = CleanupJob(
                room_repository=self.room_repository,
                settings=self.settings.cleanup,
            )
        return self._cleanup_job

    # === Lifecycle ===

    async def initialize(self) -> None:
        """Initialize all async resources."""
        await self.database.initialize()

        if self.settings.cleanup.enabled:
            self.cleanup_job.start()

    async def shutdown(self) -> None:
        """Shutdown and cleanup all resources."""
        if self._cleanup_job is not None and self._cleanup_job.is_running:
            await self._cleanup_job.stop()

        if self._database is not None:
            await self._database.close()


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
