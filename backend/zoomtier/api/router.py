"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from zoomtier.api import cache, device, health, levels, thresholds

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(device.router)
api_router.include_router(levels.router)
api_router.include_router(thresholds.router)
api_router.include_router(cache.router)
