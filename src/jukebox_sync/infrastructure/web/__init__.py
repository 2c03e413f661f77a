"""HTTP and Socket.IO boundary."""

from jukebox_sync.infrastructure.web.app import create_app, create_asgi_app

__all__ = ["create_app", "create_asgi_app"]
