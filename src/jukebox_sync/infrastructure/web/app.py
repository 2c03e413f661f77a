"""FastAPI application factory with the Socket.IO server mounted alongside."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import socketio
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jukebox_sync.config.container import Container, create_container
from jukebox_sync.config.settings import Settings, get_settings
from jukebox_sync.domain.shared.exceptions import (
    DomainError,
    EntityNotFoundError,
    NotAuthorizedError,
    StoreError,
)
from jukebox_sync.domain.shared.messages import ErrorMessages, LogTemplates

from .routes import create_router
from .schemas import describe_errors
from .socket_handlers import SocketIOTransport, register_socket_handlers

logger = logging.getLogger(__name__)


def status_for(error: DomainError) -> int:
    """HTTP status for a rejected command."""
    if isinstance(error, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, NotAuthorizedError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(error, StoreError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error(LogTemplates.REQUEST_FAILED, request.method, request.url.path, exc.message)
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = ErrorMessages.INVALID_PAYLOAD.format(details=describe_errors(exc.errors()))
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def create_app(settings: Settings | None = None, container: Container | None = None) -> FastAPI:
    """Build the FastAPI app, its container and the Socket.IO server.

    The Socket.IO server is available as ``app.state.sio``; serve
    ``create_asgi_app()`` to expose both on one port.
    """
    settings = settings or get_settings()
    container = container or create_container(settings)

    origins = settings.server.cors_origin_list
    sio = socketio.AsyncServer(
        async_mode="asgi",
        cors_allowed_origins="*" if origins == ["*"] else origins,
    )
    container.set_transport(SocketIOTransport(sio))
    register_socket_handlers(sio, container)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await container.initialize()
        try:
            yield
        finally:
            await container.shutdown()

    app = FastAPI(
        title="JukeboxSync",
        description="Collaborative jukebox rooms with voted queues and synchronized playback",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container
    app.state.sio = sio

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    _register_exception_handlers(app)
    app.include_router(create_router(container))
    return app


def create_asgi_app(settings: Settings | None = None) -> socketio.ASGIApp:
    """ASGI entry point serving Socket.IO and the REST API together."""
    app = create_app(settings)
    return socketio.ASGIApp(app.state.sio, other_asgi_app=app)
