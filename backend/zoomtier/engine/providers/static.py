"""Fixed capability values, for headless runs and tests."""

from __future__ import annotations

from dataclasses import dataclass

from zoomtier.engine.errors import ProbeUnavailable
from zoomtier.engine.providers.base import DeviceCapabilityProvider


def _require(value, probe: str):
    if value is None:
        raise ProbeUnavailable(probe, "not configured")
    return value


@dataclass
class StaticCapabilityProvider(DeviceCapabilityProvider):
    """Every field left as None behaves like a probe that cannot run."""

    memory: int | None = None
    gpu: bool | None = None
    touch: bool | None = None
    ratio: float | None = None
    width: int | None = None

    name = "static"

    def memory_mb(self) -> int:
        return int(_require(self.memory, "memory"))

    def gpu_accelerated(self) -> bool:
        return bool(_require(self.gpu, "gpu"))

    def touch_capable(self) -> bool:
        return bool(_require(self.touch, "touch"))

    def pixel_ratio(self) -> float:
        return float(_require(self.ratio, "pixel_ratio"))

    def viewport_width(self) -> int:
        return int(_require(self.width, "viewport_width"))
