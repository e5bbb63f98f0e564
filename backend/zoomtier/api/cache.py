"""GET /api/cache — resolution cache statistics."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from zoomtier.dependencies import get_manager
from zoomtier.engine.manager import ContentLevelManager
from zoomtier.models.responses import CacheStatsResponse

router = APIRouter()


@router.get("/cache", response_model=CacheStatsResponse)
async def cache_stats(manager: ContentLevelManager = Depends(get_manager)) -> CacheStatsResponse:
    stats = manager.get_cache_stats()
    return CacheStatsResponse(
        size=stats.size,
        keys=stats.keys,
        capacity=stats.capacity,
        hits=stats.hits,
        misses=stats.misses,
    )
