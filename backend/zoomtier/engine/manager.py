"""ContentLevelManager — the public facade over the resolution engine.

Active thresholds are layered: static defaults, then device adjustments from
the last ``initialize()``, then explicit caller overrides. Every change to any
layer clears the resolution cache.

Build one manager per consumer (per app, per test, per viewport); nothing here
is shared at module level.
"""

from __future__ import annotations

import logging
from typing import Any

from zoomtier.engine.adjuster import adjust_thresholds
from zoomtier.engine.cache import CacheStats, ResolutionCache
from zoomtier.engine.config import EngineConfig
from zoomtier.engine.levels import ContentLevel, DeviceType
from zoomtier.engine.policy import ProgressiveStyles, RenderPolicy, progressive_styles, project
from zoomtier.engine.profiler import DeviceProfile, DeviceProfiler
from zoomtier.engine.providers.base import DeviceCapabilityProvider
from zoomtier.engine.resolver import LevelResolver
from zoomtier.engine.thresholds import (
    DEFAULT_THRESHOLDS,
    ThresholdSet,
    ValidationResult,
    validate_thresholds,
)

logger = logging.getLogger(__name__)


class ContentLevelManager:
    def __init__(
        self,
        config: EngineConfig | None = None,
        provider: DeviceCapabilityProvider | None = None,
        cache_capacity: int | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.provider = provider
        self.debug_mode = False
        self.profiler = DeviceProfiler(self.config)
        self.resolver = LevelResolver(
            DEFAULT_THRESHOLDS,
            ResolutionCache(self.config.cache_key_precision, cache_capacity),
        )
        self._device_profile: DeviceProfile | None = None
        self._device_thresholds: ThresholdSet = DEFAULT_THRESHOLDS
        self._overrides: dict[str, float] = {}

    # --- lifecycle ---

    def initialize(
        self,
        debug_mode: bool = False,
        provider: DeviceCapabilityProvider | None = None,
    ) -> DeviceProfile:
        """Profile the device and adapt thresholds to it. Safe to call again to re-detect."""
        if provider is not None:
            self.provider = provider
        self.debug_mode = debug_mode
        self.profiler.debug = debug_mode
        self.resolver.debug = debug_mode

        profile = self.profiler.detect(self.provider)
        self._device_profile = profile
        self._device_thresholds = adjust_thresholds(DEFAULT_THRESHOLDS, profile, self.config)
        self._apply()

        if debug_mode:
            logger.info("Threshold adjustments applied: %s", self._device_thresholds)
        return profile

    @property
    def initialized(self) -> bool:
        return self._device_profile is not None

    @property
    def device_profile(self) -> DeviceProfile | None:
        return self._device_profile

    @property
    def thresholds(self) -> ThresholdSet:
        return self.resolver.thresholds

    # --- device ---

    def get_current_device_type(self) -> DeviceType:
        return self.profiler.device_type(self.provider)

    def calculate_responsive_scale(
        self, raw_scale: float, device_type: DeviceType | None = None
    ) -> float:
        device = DeviceType(device_type) if device_type is not None else self.get_current_device_type()
        return raw_scale * self.config.scale_multipliers[device]

    # --- resolution ---

    def determine_content_level(self, scale: float) -> ContentLevel:
        return self.resolver.resolve(scale)

    def resolve(
        self, raw_scale: float, device_type: DeviceType | None = None
    ) -> tuple[float, ContentLevel]:
        """Apply the device multiplier, then resolve. Returns (responsive_scale, level)."""
        responsive = self.calculate_responsive_scale(raw_scale, device_type)
        return responsive, self.determine_content_level(responsive)

    # --- policy ---

    def get_render_policy(self, level: ContentLevel) -> RenderPolicy:
        return project(level)

    def get_progressive_styles(self, level: ContentLevel, is_active: bool) -> ProgressiveStyles:
        return progressive_styles(level, is_active)

    def get_content_features(self, level: ContentLevel) -> frozenset[str]:
        return project(level).feature_set

    def is_interactivity_enabled(self, level: ContentLevel) -> bool:
        return project(level).interactive

    # --- thresholds ---

    def set_custom_thresholds(self, **partial: Any) -> ThresholdSet:
        """Merge overrides onto the current thresholds. Invalid sets are accepted; see validate_thresholds()."""
        # merge() rejects unknown names and non-finite values before anything changes
        self.thresholds.merge(**partial)
        self._overrides.update({k: float(v) for k, v in partial.items() if v is not None})
        return self._apply()

    def reset_thresholds(self) -> ThresholdSet:
        """Drop overrides and device adjustments, back to the static defaults."""
        self._overrides.clear()
        self._device_thresholds = DEFAULT_THRESHOLDS
        return self._apply()

    def validate_thresholds(self) -> ValidationResult:
        return validate_thresholds(self.thresholds)

    def get_cache_stats(self) -> CacheStats:
        return self.resolver.cache.stats()

    def _apply(self) -> ThresholdSet:
        effective = self._device_thresholds.merge(**self._overrides)
        self.resolver.thresholds = effective
        return effective
