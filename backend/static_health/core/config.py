"""Application settings and configuration helpers."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 3000


def _default_static_root() -> Path:
    """Return the ``app`` directory under the working directory."""
    return (Path.cwd() / "app").resolve()


class Settings(BaseSettings):
    """Global application settings."""

    app_name: str = "Static Health Server"
    host: str = "0.0.0.0"
    # Plain ``PORT`` is what hosting platforms inject, so it is read unprefixed.
    port: int = Field(
        default=DEFAULT_PORT,
        validation_alias=AliasChoices("PORT", "STATIC_HEALTH_PORT"),
    )
    static_root: Path = Field(default_factory=_default_static_root)
    index_file: str = "index.html"
    serve_dotfiles: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="STATIC_HEALTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("port", mode="before")
    @classmethod
    def _fallback_port(cls, value: object) -> int:
        """Fall back to the default port for empty or unusable values."""
        try:
            port = int(str(value).strip())
        except (TypeError, ValueError):
            return DEFAULT_PORT
        if not 1 <= port <= 65535:
            return DEFAULT_PORT
        return port

    @field_validator("static_root")
    @classmethod
    def _absolute_root(cls, value: Path) -> Path:
        return value.expanduser().resolve()

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


@lru_cache
def get_settings() -> Settings:
    """Cached settings accessor."""
    return Settings()


def reload_settings() -> Settings:
    """Reset cache and create a new settings instance (used in tests)."""
    get_settings.cache_clear()
    return get_settings()


# Convenience alias used across the codebase.
settings = get_settings()
