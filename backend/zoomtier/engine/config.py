"""Engine configuration — breakpoints, multipliers and adjustment factors."""

from __future__ import annotations

from dataclasses import dataclass, field

from zoomtier.engine.levels import DeviceType


@dataclass(frozen=True)
class EngineConfig:
    """Tuning constants for device classification and threshold adaptation."""

    # Viewport breakpoints (CSS px, inclusive upper bounds)
    mobile_max_width: int = 768
    tablet_max_width: int = 1024

    # Responsive scale multipliers per device type
    scale_multipliers: dict[DeviceType, float] = field(
        default_factory=lambda: {
            DeviceType.MOBILE: 0.8,
            DeviceType.TABLET: 0.9,
            DeviceType.DESKTOP: 1.0,
        }
    )

    # Memory estimate when the host cannot report one
    fallback_memory_mb: dict[DeviceType, int] = field(
        default_factory=lambda: {
            DeviceType.MOBILE: 1024,
            DeviceType.TABLET: 2048,
            DeviceType.DESKTOP: 4096,
        }
    )

    # Low-memory devices push the expensive tiers further out
    low_memory_mb: int = 2048
    low_memory_detailed_factor: float = 1.2
    low_memory_expanded_factor: float = 1.3

    # Touch devices reveal richer content sooner
    touch_minimal_factor: float = 0.9
    touch_compact_factor: float = 0.95

    # devicePixelRatio above this counts as a high-density display
    high_density_ratio: float = 1.5

    # Decimal digits kept in resolution cache keys
    cache_key_precision: int = 2

    def device_type_for_width(self, width: float) -> DeviceType:
        if width <= self.mobile_max_width:
            return DeviceType.MOBILE
        if width <= self.tablet_max_width:
            return DeviceType.TABLET
        return DeviceType.DESKTOP
