"""LevelResolver — scale → ContentLevel with memoization.

A scale exactly on a cutoff belongs to the cheaper tier:
``scale <= minimal`` is MINIMAL, ``scale <= compact`` is COMPACT, and so on.

Cache keys are the scale rounded to the configured precision, but the
comparison itself uses the exact scale. The first scale seen for a key
decides the level every later scale with that key gets.
"""

from __future__ import annotations

import logging
import math

from zoomtier.engine.cache import ResolutionCache
from zoomtier.engine.errors import ConfigurationError
from zoomtier.engine.levels import ContentLevel
from zoomtier.engine.thresholds import DEFAULT_THRESHOLDS, ThresholdSet, validate_thresholds

logger = logging.getLogger(__name__)


class LevelResolver:
    def __init__(
        self,
        thresholds: ThresholdSet = DEFAULT_THRESHOLDS,
        cache: ResolutionCache | None = None,
        debug: bool = False,
    ) -> None:
        self.cache = cache if cache is not None else ResolutionCache()
        self.debug = debug
        self._thresholds = thresholds
        self._violations = thresholds.ordering_violations()

    @property
    def thresholds(self) -> ThresholdSet:
        return self._thresholds

    @thresholds.setter
    def thresholds(self, value: ThresholdSet) -> None:
        self._thresholds = value
        self._violations = value.ordering_violations()
        self.cache.clear()
        if self._violations:
            logger.warning("Thresholds not strictly increasing: %s", "; ".join(self._violations))
        else:
            result = validate_thresholds(value)
            if not result.valid:
                logger.warning("Thresholds outside recommended range: %s", "; ".join(result.violations))

    def resolve(self, scale: float) -> ContentLevel:
        if not math.isfinite(scale) or scale < 0:
            raise ValueError(f"Scale must be a non-negative finite number, got {scale!r}")
        if self._violations:
            raise ConfigurationError(self._violations)

        key = self.cache.key_for(scale)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        level = self.classify(scale, self._thresholds)
        self.cache.put(key, level)
        if self.debug:
            logger.info("Scale %s → %s", key, level.label)
        return level

    @staticmethod
    def classify(scale: float, thresholds: ThresholdSet) -> ContentLevel:
        if scale <= thresholds.minimal:
            return ContentLevel.MINIMAL
        if scale <= thresholds.compact:
            return ContentLevel.COMPACT
        if scale <= thresholds.normal:
            return ContentLevel.NORMAL
        if scale <= thresholds.detailed:
            return ContentLevel.DETAILED
        return ContentLevel.EXPANDED
