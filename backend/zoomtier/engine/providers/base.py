"""DeviceCapabilityProvider — the port every host environment implements.

Each probe either returns a value or raises ProbeUnavailable. Providers may
raise anything else too; the profiler treats every failure the same way.
"""

from __future__ import annotations

import abc


class DeviceCapabilityProvider(abc.ABC):
    name: str = "provider"

    @abc.abstractmethod
    def memory_mb(self) -> int:
        """Approximate memory ceiling available to the renderer, in MB."""

    @abc.abstractmethod
    def gpu_accelerated(self) -> bool:
        """True when a hardware-accelerated graphics context can be created."""

    @abc.abstractmethod
    def touch_capable(self) -> bool: ...

    @abc.abstractmethod
    def pixel_ratio(self) -> float: ...

    @abc.abstractmethod
    def viewport_width(self) -> int:
        """Current viewport width in CSS pixels."""
