"""ThresholdAdjuster — device-driven corrections to a ThresholdSet.

Corrected cutoffs are always derived from the reference (static default)
values rather than from ``base``, so feeding an adjusted set back in yields
the same set: adjustments never compound.
"""

from __future__ import annotations

import logging

from zoomtier.engine.config import EngineConfig
from zoomtier.engine.profiler import DeviceProfile
from zoomtier.engine.thresholds import DEFAULT_THRESHOLDS, ThresholdSet

logger = logging.getLogger(__name__)


def device_adjustments(
    profile: DeviceProfile,
    config: EngineConfig | None = None,
    reference: ThresholdSet = DEFAULT_THRESHOLDS,
) -> dict[str, float]:
    """Return only the cutoffs the profile changes."""
    cfg = config or EngineConfig()
    changes: dict[str, float] = {}

    if profile.approx_memory_mb < cfg.low_memory_mb:
        changes["detailed"] = reference.detailed * cfg.low_memory_detailed_factor
        changes["expanded"] = reference.expanded * cfg.low_memory_expanded_factor

    if profile.touch_capable:
        changes["minimal"] = reference.minimal * cfg.touch_minimal_factor
        changes["compact"] = reference.compact * cfg.touch_compact_factor

    return changes


def adjust_thresholds(
    base: ThresholdSet,
    profile: DeviceProfile,
    config: EngineConfig | None = None,
    reference: ThresholdSet = DEFAULT_THRESHOLDS,
) -> ThresholdSet:
    changes = device_adjustments(profile, config, reference)
    if changes:
        logger.debug("Threshold adjustments for %s: %s", profile, changes)
    return base.merge(**changes)
