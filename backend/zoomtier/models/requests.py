"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from zoomtier.engine.levels import DeviceType
from zoomtier.models.device import ClientHints


class InitializeRequest(BaseModel):
    hints: ClientHints = Field(default_factory=ClientHints)
    debug_mode: bool | None = Field(None, description="Overrides the configured debug mode")


class LevelRequest(BaseModel):
    scale: float = Field(..., ge=0, allow_inf_nan=False, description="Raw canvas zoom scale")
    device_type: DeviceType | None = Field(None, description="Defaults to the detected device type")
    responsive: bool = Field(True, description="Apply the device scale multiplier first")
    is_active: bool = False


class ThresholdsUpdate(BaseModel):
    minimal: float | None = Field(None, allow_inf_nan=False)
    compact: float | None = Field(None, allow_inf_nan=False)
    normal: float | None = Field(None, allow_inf_nan=False)
    detailed: float | None = Field(None, allow_inf_nan=False)
    expanded: float | None = Field(None, allow_inf_nan=False)
