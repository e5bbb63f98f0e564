"""Engine error types."""

from __future__ import annotations


class ZoomTierError(Exception):
    """Base class for engine errors."""


class ConfigurationError(ZoomTierError):
    """Active thresholds violate their ordering invariant."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = list(violations)
        super().__init__("Invalid threshold configuration: " + "; ".join(self.violations))


class ProbeUnavailable(ZoomTierError):
    """A device capability probe cannot run on this host.

    Raised by providers and always absorbed by the profiler.
    """

    def __init__(self, probe: str, reason: str = "") -> None:
        self.probe = probe
        self.reason = reason
        super().__init__(f"{probe} unavailable" + (f": {reason}" if reason else ""))
