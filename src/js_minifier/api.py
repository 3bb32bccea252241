from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI

from .config import AppConfig
from .core import MinifyService, Transformer
from .engine import transform
from .routers import health, minify
from .settings import get_settings, prepare_config


def create_app(
    config: AppConfig | None = None,
    *,
    config_path: Path | None = None,
    transformer: Transformer = transform,
) -> FastAPI:
    if config is None:
        config = prepare_config(get_settings(), config_path)
    app = FastAPI(title="Local JS Minifier", version="0.1.0")
    app.state.config = config
    app.state.service = MinifyService(config, transformer=transformer)

    app.include_router(health.router)
    app.include_router(minify.router)
    return app


__all__ = ["create_app"]
