"""/api/thresholds — inspect, override and reset the active thresholds."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from zoomtier.api.convert import thresholds_response
from zoomtier.dependencies import get_manager
from zoomtier.engine.manager import ContentLevelManager
from zoomtier.models.requests import ThresholdsUpdate
from zoomtier.models.responses import ThresholdsResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/thresholds", response_model=ThresholdsResponse)
async def get_thresholds(manager: ContentLevelManager = Depends(get_manager)) -> ThresholdsResponse:
    return thresholds_response(manager)


@router.patch("/thresholds", response_model=ThresholdsResponse)
async def update_thresholds(
    req: ThresholdsUpdate,
    manager: ContentLevelManager = Depends(get_manager),
) -> ThresholdsResponse:
    """Merge overrides. The result is applied even when invalid; check ``validation``."""
    manager.set_custom_thresholds(**req.model_dump(exclude_none=True))
    response = thresholds_response(manager)
    if not response.validation.valid:
        logger.warning("Custom thresholds applied with violations: %s", response.validation.violations)
    return response


@router.delete("/thresholds", response_model=ThresholdsResponse)
async def reset_thresholds(manager: ContentLevelManager = Depends(get_manager)) -> ThresholdsResponse:
    manager.reset_thresholds()
    return thresholds_response(manager)
