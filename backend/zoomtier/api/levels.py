"""POST /api/level — resolve a zoom scale; GET /api/levels/{level} — policy lookup."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from zoomtier.api.convert import policy_model
from zoomtier.dependencies import get_manager
from zoomtier.engine.levels import ContentLevel
from zoomtier.engine.manager import ContentLevelManager
from zoomtier.models.requests import LevelRequest
from zoomtier.models.responses import ConfigurationErrorResponse, LevelResponse, PolicyModel

router = APIRouter()


@router.post(
    "/level",
    response_model=LevelResponse,
    responses={409: {"model": ConfigurationErrorResponse, "description": "Thresholds out of order"}},
)
async def resolve_level(
    req: LevelRequest,
    manager: ContentLevelManager = Depends(get_manager),
) -> LevelResponse:
    device = req.device_type or manager.get_current_device_type()
    if req.responsive:
        scale, level = manager.resolve(req.scale, device)
    else:
        scale, level = req.scale, manager.determine_content_level(req.scale)

    styles = manager.get_progressive_styles(level, req.is_active)
    return LevelResponse(
        raw_scale=req.scale,
        responsive_scale=scale,
        device_type=device,
        level=level.label,
        policy=policy_model(styles.policy),
        styles=styles.as_css(),
    )


@router.get("/levels/{level}", response_model=PolicyModel)
async def get_level_policy(
    level: str,
    manager: ContentLevelManager = Depends(get_manager),
) -> PolicyModel:
    try:
        content_level = ContentLevel.from_label(level)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return policy_model(manager.get_render_policy(content_level))
