"""Health check."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from zoomtier import __version__
from zoomtier.dependencies import get_manager
from zoomtier.engine.manager import ContentLevelManager
from zoomtier.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(manager: ContentLevelManager = Depends(get_manager)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, initialized=manager.initialized)
