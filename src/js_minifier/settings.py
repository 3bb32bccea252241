from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import AppConfig, load_config
from .constraint import DEFAULT_CONFIG_PATH, ENV_PREFIX


class Settings(BaseSettings):
    """Application runtime settings sourced from environment variables."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_file=".env", extra="ignore")

    config_path: Path = DEFAULT_CONFIG_PATH
    host: str | None = None
    port: int | None = None


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


def prepare_config(settings: Settings, config_path: Path | None = None) -> AppConfig:
    config = load_config(config_path or settings.config_path)
    if settings.host is not None:
        config.api.host = settings.host
    if settings.port is not None:
        config.api.port = settings.port
    return config


__all__ = ["Settings", "get_settings", "prepare_config"]
