"""PolicyProjector — fixed render policy per content level."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from zoomtier.engine.levels import ContentLevel

# 160ms athletic ease shared by every tier
TRANSITION = "all 160ms cubic-bezier(0.4, 0, 0.6, 1)"


class PaddingUnit(str, enum.Enum):
    XS = "0.5rem"
    SM = "0.75rem"
    MD = "1rem"
    LG = "1.5rem"
    XL = "2rem"


@dataclass(frozen=True)
class RenderPolicy:
    level: ContentLevel
    features: tuple[str, ...]
    padding: PaddingUnit
    interactive: bool
    performance: str  # relative render cost: highest (cheapest) .. lowest

    @property
    def feature_set(self) -> frozenset[str]:
        return frozenset(self.features)


@dataclass(frozen=True)
class ProgressiveStyles:
    policy: RenderPolicy
    transition: str
    will_change: str
    padding: str
    pointer_events: str

    def as_css(self) -> dict[str, str]:
        return {
            "transition": self.transition,
            "will-change": self.will_change,
            "padding": self.padding,
            "pointer-events": self.pointer_events,
        }


_FEATURE_ORDER = ("title", "subtitle", "content", "metadata", "enhanced")

_POLICIES: dict[ContentLevel, RenderPolicy] = {
    ContentLevel.MINIMAL: RenderPolicy(ContentLevel.MINIMAL, _FEATURE_ORDER[:1], PaddingUnit.XS, False, "highest"),
    ContentLevel.COMPACT: RenderPolicy(ContentLevel.COMPACT, _FEATURE_ORDER[:2], PaddingUnit.SM, True, "high"),
    ContentLevel.NORMAL: RenderPolicy(ContentLevel.NORMAL, _FEATURE_ORDER[:3], PaddingUnit.MD, True, "medium"),
    ContentLevel.DETAILED: RenderPolicy(ContentLevel.DETAILED, _FEATURE_ORDER[:4], PaddingUnit.LG, True, "low"),
    ContentLevel.EXPANDED: RenderPolicy(ContentLevel.EXPANDED, _FEATURE_ORDER, PaddingUnit.XL, True, "lowest"),
}


def project(level: ContentLevel) -> RenderPolicy:
    return _POLICIES[ContentLevel(level)]


def progressive_styles(level: ContentLevel, is_active: bool) -> ProgressiveStyles:
    policy = project(level)
    return ProgressiveStyles(
        policy=policy,
        transition=TRANSITION,
        will_change="transform, opacity" if is_active else "auto",
        padding=policy.padding.value,
        pointer_events="auto" if policy.interactive else "none",
    )
