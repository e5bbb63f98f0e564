"""Content levels and device types."""

from __future__ import annotations

import enum


class ContentLevel(enum.IntEnum):
    """Detail tiers, ordered from cheapest to most expensive to render."""

    MINIMAL = 0
    COMPACT = 1
    NORMAL = 2
    DETAILED = 3
    EXPANDED = 4

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> ContentLevel:
        try:
            return cls[label.upper()]
        except KeyError:
            raise ValueError(f"Unknown content level: {label!r}") from None


class DeviceType(str, enum.Enum):
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"
