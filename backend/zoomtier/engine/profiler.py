"""DeviceProfiler — best-effort capability snapshot that never raises.

Unknown probes fall back to what a capable desktop would report, so a broken
or exotic environment is never downgraded. Memory is the exception: it falls
back to a per-device-type estimate.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable

from zoomtier.engine.config import EngineConfig
from zoomtier.engine.levels import DeviceType
from zoomtier.engine.providers.base import DeviceCapabilityProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeviceProfile:
    approx_memory_mb: int
    gpu_accelerated: bool = True
    touch_capable: bool = False
    high_density_display: bool = False
    # Names of probes that could not run
    unknown_probes: frozenset[str] = field(default_factory=frozenset)


class DeviceProfiler:
    def __init__(self, config: EngineConfig | None = None, debug: bool = False) -> None:
        self.config = config or EngineConfig()
        self.debug = debug

    def device_type(self, provider: DeviceCapabilityProvider | None) -> DeviceType:
        """Classify by viewport width; desktop when the width is unknown."""
        if provider is None:
            return DeviceType.DESKTOP
        width = self._probe(lambda: _positive(float(provider.viewport_width())), "viewport_width", set())
        if width is None:
            return DeviceType.DESKTOP
        return self.config.device_type_for_width(width)

    def detect(self, provider: DeviceCapabilityProvider | None) -> DeviceProfile:
        unknown: set[str] = set()
        if provider is None:
            fallback = self.config.fallback_memory_mb[DeviceType.DESKTOP]
            return DeviceProfile(
                approx_memory_mb=fallback,
                unknown_probes=frozenset({"memory", "gpu", "touch", "pixel_ratio"}),
            )

        memory = self._probe(lambda: int(_positive(float(provider.memory_mb()))), "memory", unknown)
        if memory is None:
            memory = self.config.fallback_memory_mb[self.device_type(provider)]

        gpu = self._probe(lambda: bool(provider.gpu_accelerated()), "gpu", unknown)
        touch = self._probe(lambda: bool(provider.touch_capable()), "touch", unknown)
        ratio = self._probe(lambda: _positive(float(provider.pixel_ratio())), "pixel_ratio", unknown)

        profile = DeviceProfile(
            approx_memory_mb=memory,
            gpu_accelerated=True if gpu is None else gpu,
            touch_capable=False if touch is None else touch,
            high_density_display=ratio is not None and ratio > self.config.high_density_ratio,
            unknown_probes=frozenset(unknown),
        )
        if self.debug:
            logger.info("Device capabilities detected via %s: %s", provider.name, profile)
        return profile

    def _probe(self, fn: Callable[[], Any], probe: str, unknown: set[str]) -> Any:
        try:
            return fn()
        except Exception as e:
            unknown.add(probe)
            if self.debug:
                logger.info("Probe %s unavailable (%s), using default", probe, e)
            return None


def _positive(value: float) -> float:
    """Reject readings no real device reports (NaN, infinite, zero or negative)."""
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"implausible reading {value!r}")
    return value
