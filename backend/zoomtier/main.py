"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from zoomtier import __version__
from zoomtier.config import Settings, settings
from zoomtier.engine.errors import ConfigurationError
from zoomtier.engine.manager import ContentLevelManager
from zoomtier.engine.providers import DeviceCapabilityProvider, HostCapabilityProvider
from zoomtier.models.responses import ConfigurationErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.zoomtier_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings | None = None,
    provider: DeviceCapabilityProvider | None = None,
) -> FastAPI:
    cfg = app_settings or settings

    app = FastAPI(
        title="zoomtier",
        description="Content level resolution — zoom scale to render detail tier",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # One engine per app; browsers re-profile it through POST /api/device
    manager = ContentLevelManager(cache_capacity=cfg.zoomtier_cache_capacity)
    manager.initialize(
        debug_mode=cfg.zoomtier_debug_mode,
        provider=provider or HostCapabilityProvider(cfg.zoomtier_default_viewport_width),
    )
    app.state.manager = manager
    app.state.settings = cfg

    app.add_exception_handler(ConfigurationError, _configuration_error_handler)

    from zoomtier.api.router import api_router

    app.include_router(api_router)

    logger.info("zoomtier %s ready (%s)", __version__, cfg.zoomtier_env)
    return app


async def _configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.warning("Resolution rejected: %s", exc)
    body = ConfigurationErrorResponse(detail="Invalid threshold configuration", violations=exc.violations)
    return JSONResponse(status_code=409, content=body.model_dump())


app = create_app()
