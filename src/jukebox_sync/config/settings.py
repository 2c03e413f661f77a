"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.constants import RoomConstants
from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import BusyTimeoutMs, ConnectionTimeoutS, PortInt, SkipThreshold

DEFAULT_SONGS_PATH = Path(__file__).resolve().parent.parent / "data" / "songs.json"


class DatabaseSettings(BaseModel):
    """Database configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    url: str = Field(
        default="sqlite:///data/jukebox.db",
        validation_alias=AliasChoices("url", "database_url", "db_url"),
    )
    busy_timeout_ms: BusyTimeoutMs = Field(
        default=5000,
        validation_alias=AliasChoices("busy_timeout_ms", "busy_timeout"),
    )
    connection_timeout_s: ConnectionTimeoutS = Field(
        default=10,
        validation_alias=AliasChoices("connection_timeout_s", "connection_timeout"),
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate database URL format."""
        if not v.startswith("sqlite://"):
            raise ValueError(ErrorMessages.INVALID_DATABASE_URL)
        return v


class ServerSettings(BaseModel):
    """HTTP / Socket.IO server configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    host: str = "0.0.0.0"
    port: PortInt = Field(default=5001, validation_alias=AliasChoices("port", "server_port"))
    # Comma-separated; "*" allows any origin.
    cors_origins: str = Field(
        default="*", validation_alias=AliasChoices("cors_origins", "client_url")
    )

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


class RoomSettingsConfig(BaseModel):
    """Room defaults."""

    model_config = SettingsConfigDict(frozen=True)

    default_skip_threshold: SkipThreshold = RoomConstants.DEFAULT_SKIP_THRESHOLD
    max_code_attempts: int = Field(default=RoomConstants.MAX_CODE_ATTEMPTS, ge=1, le=10_000)


class CatalogSettings(BaseModel):
    """Song catalog configuration."""

    model_config = SettingsConfigDict(frozen=True)

    songs_path: Path = DEFAULT_SONGS_PATH


class CleanupSettings(BaseModel):
    """Stale room cleanup configuration."""

    model_config = SettingsConfigDict(frozen=True)

    enabled: bool = True
    stale_room_hours: int = Field(default=24, ge=1)
    cleanup_interval_minutes: int = Field(default=30, ge=1)


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - DATABASE__URL, SERVER__PORT, ROOMS__DEFAULT_SKIP_THRESHOLD, etc. (nested with "__")
    - SERVER__CORS_ORIGINS (comma-separated origins)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    rooms: RoomSettingsConfig = Field(default_factory=RoomSettingsConfig)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    cleanup: CleanupSettings = Field(default_factory=CleanupSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=sorted(valid_levels))
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
