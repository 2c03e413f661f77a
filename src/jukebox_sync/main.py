#!/usr/bin/env python3
"""Main entry point for the JukeboxSync server."""

from __future__ import annotations

import json
import logging
import logging.config
import sys
from pathlib import Path

from jukebox_sync.domain.shared.messages import LogTemplates

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parent / "logging_config.json"


def setup_logging(log_level: str = "INFO", config_path: Path = _LOGGING_CONFIG_PATH) -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(config_path) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.basicConfig(
            level=resolved_level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        logging.getLogger(__name__).warning(LogTemplates.LOGGING_CONFIG_FALLBACK, config_path)

    logging.getLogger().setLevel(resolved_level)


def main() -> int:
    import uvicorn

    from jukebox_sync.config.settings import get_settings
    from jukebox_sync.infrastructure.web.app import create_asgi_app

    settings = get_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)
    logger.info(
        LogTemplates.SERVER_STARTING.format(
            environment=settings.environment,
            host=settings.server.host,
            port=settings.server.port,
        )
    )

    try:
        uvicorn.run(
            create_asgi_app(settings),
            host=settings.server.host,
            port=settings.server.port,
            log_config=None,
        )
        logger.info(LogTemplates.SERVER_STOPPED)
        return 0
    except KeyboardInterrupt:
        logger.info(LogTemplates.SERVER_KEYBOARD_INTERRUPT)
        return 0
    except Exception as e:
        logger.exception(LogTemplates.SERVER_FATAL_ERROR, e)
        return 1


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
