"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    zoomtier_env: str = "development"
    zoomtier_log_level: str = "debug"

    # Engine
    zoomtier_debug_mode: bool = False
    zoomtier_cache_capacity: int | None = None  # None keeps every quantized scale
    zoomtier_default_viewport_width: int | None = None

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
