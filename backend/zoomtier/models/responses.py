"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from zoomtier.engine.levels import DeviceType
from zoomtier.models.device import DeviceProfileModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    initialized: bool = False


class ThresholdsModel(BaseModel):
    minimal: float
    compact: float
    normal: float
    detailed: float
    expanded: float


class ValidationModel(BaseModel):
    valid: bool
    violations: list[str] = Field(default_factory=list)


class ThresholdsResponse(BaseModel):
    thresholds: ThresholdsModel
    validation: ValidationModel


class DeviceResponse(BaseModel):
    device_type: DeviceType
    profile: DeviceProfileModel | None = None
    thresholds: ThresholdsModel


class PolicyModel(BaseModel):
    level: str
    features: list[str]
    padding: str
    interactive: bool
    performance: str


class LevelResponse(BaseModel):
    raw_scale: float
    responsive_scale: float
    device_type: DeviceType
    level: str
    policy: PolicyModel
    styles: dict[str, str] = Field(default_factory=dict)


class CacheStatsResponse(BaseModel):
    size: int
    keys: list[str] = Field(default_factory=list)
    capacity: int | None = None
    hits: int = 0
    misses: int = 0


class ConfigurationErrorResponse(BaseModel):
    detail: str
    violations: list[str] = Field(default_factory=list)
