"""ThresholdSet — five ordered cutoffs on the scale axis, plus the validator.

A scale at or below ``minimal`` is MINIMAL, at or below ``compact`` is
COMPACT, and so on; anything above ``detailed`` is EXPANDED. ``expanded``
marks the top of the meaningful zoom range and is only range-checked.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields, replace
from typing import Any

MINIMAL_RANGE = (0.1, 1.0)
EXPANDED_CEILING = 5.0


@dataclass(frozen=True)
class ThresholdSet:
    minimal: float = 0.6
    compact: float = 0.8
    normal: float = 1.0
    detailed: float = 1.5
    expanded: float = 2.0

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def as_tuple(self) -> tuple[float, ...]:
        return tuple(getattr(self, name) for name in self.field_names())

    def as_dict(self) -> dict[str, float]:
        return asdict(self)

    def merge(self, **partial: Any) -> ThresholdSet:
        """Return a copy with the given cutoffs replaced. ``None`` values are ignored."""
        unknown = set(partial) - set(self.field_names())
        if unknown:
            raise ValueError(f"Unknown threshold field(s): {', '.join(sorted(unknown))}")
        changes = {k: float(v) for k, v in partial.items() if v is not None}
        bad = [k for k, v in changes.items() if not math.isfinite(v)]
        if bad:
            raise ValueError(f"Threshold(s) must be finite: {', '.join(sorted(bad))}")
        return replace(self, **changes)

    def ordering_violations(self) -> list[str]:
        names = self.field_names()
        values = self.as_tuple()
        violations: list[str] = []
        for (lo_name, lo), (hi_name, hi) in zip(zip(names, values), zip(names[1:], values[1:])):
            if lo >= hi:
                violations.append(
                    f"{lo_name.upper()} threshold must be less than {hi_name.upper()} "
                    f"({lo:g} >= {hi:g})"
                )
        return violations

    @property
    def is_ordered(self) -> bool:
        return not self.ordering_violations()


DEFAULT_THRESHOLDS = ThresholdSet()


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    violations: list[str]


def validate_thresholds(thresholds: ThresholdSet) -> ValidationResult:
    """Check every invariant and report all violations, ordering first."""
    violations = thresholds.ordering_violations()

    lo, hi = MINIMAL_RANGE
    if not lo <= thresholds.minimal <= hi:
        violations.append(f"MINIMAL threshold should be between {lo:g} and {hi:g}")
    if thresholds.expanded > EXPANDED_CEILING:
        violations.append(f"EXPANDED threshold should not exceed {EXPANDED_CEILING:g}")

    return ValidationResult(valid=not violations, violations=violations)
