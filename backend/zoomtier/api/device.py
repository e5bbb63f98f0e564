"""GET/POST /api/device — device profile and browser-driven re-detection."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from zoomtier.api.convert import device_response
from zoomtier.config import Settings
from zoomtier.dependencies import get_manager, get_settings
from zoomtier.engine.manager import ContentLevelManager
from zoomtier.engine.providers import BrowserHints, ClientHintsProvider
from zoomtier.models.requests import InitializeRequest
from zoomtier.models.responses import DeviceResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/device", response_model=DeviceResponse)
async def get_device(manager: ContentLevelManager = Depends(get_manager)) -> DeviceResponse:
    return device_response(manager)


@router.post("/device", response_model=DeviceResponse)
async def initialize_device(
    req: InitializeRequest,
    manager: ContentLevelManager = Depends(get_manager),
    cfg: Settings = Depends(get_settings),
) -> DeviceResponse:
    """Re-profile the engine from capability hints the browser collected."""
    debug_mode = cfg.zoomtier_debug_mode if req.debug_mode is None else req.debug_mode
    hints = BrowserHints(**req.hints.model_dump())
    profile = manager.initialize(debug_mode=debug_mode, provider=ClientHintsProvider(hints))
    logger.info(
        "Re-profiled from client hints: %dMB, touch=%s (%d probes unknown)",
        profile.approx_memory_mb,
        profile.touch_capable,
        len(profile.unknown_probes),
    )
    return device_response(manager)
