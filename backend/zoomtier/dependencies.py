"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from zoomtier.config import Settings
from zoomtier.engine.manager import ContentLevelManager


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_manager(request: Request) -> ContentLevelManager:
    return request.app.state.manager
