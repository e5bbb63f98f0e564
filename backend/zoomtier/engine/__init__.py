"""Content-level resolution engine."""

from zoomtier.engine.errors import ConfigurationError, ProbeUnavailable, ZoomTierError
from zoomtier.engine.levels import ContentLevel, DeviceType
from zoomtier.engine.manager import ContentLevelManager
from zoomtier.engine.thresholds import DEFAULT_THRESHOLDS, ThresholdSet, validate_thresholds

__all__ = [
    "ConfigurationError",
    "ProbeUnavailable",
    "ZoomTierError",
    "ContentLevel",
    "DeviceType",
    "ContentLevelManager",
    "DEFAULT_THRESHOLDS",
    "ThresholdSet",
    "validate_thresholds",
]
