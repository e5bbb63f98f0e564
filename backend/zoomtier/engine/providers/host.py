"""Native host provider — measures the machine this process runs on.

Touch and pixel ratio have no meaning for a process without an attached
display, so those probes are reported as unavailable.
"""

from __future__ import annotations

import os
from pathlib import Path

from zoomtier.engine.errors import ProbeUnavailable
from zoomtier.engine.providers.base import DeviceCapabilityProvider

_GPU_NODE_PATTERNS = ("dri/renderD*", "nvidia[0-9]*", "kfd")


class HostCapabilityProvider(DeviceCapabilityProvider):
    name = "host"

    def __init__(self, viewport_width: int | None = None, dev_root: Path | None = None) -> None:
        self._viewport_width = viewport_width
        self.dev_root = dev_root or Path("/dev")

    def memory_mb(self) -> int:
        try:
            page_size = os.sysconf("SC_PAGE_SIZE")
            pages = os.sysconf("SC_PHYS_PAGES")
        except (AttributeError, ValueError, OSError) as e:
            raise ProbeUnavailable("memory", str(e)) from e
        if page_size <= 0 or pages <= 0:
            raise ProbeUnavailable("memory", "sysconf returned no physical pages")
        return (page_size * pages) // (1024 * 1024)

    def gpu_accelerated(self) -> bool:
        if not self.dev_root.is_dir():
            raise ProbeUnavailable("gpu", f"{self.dev_root} not present")
        return any(any(self.dev_root.glob(p)) for p in _GPU_NODE_PATTERNS)

    def touch_capable(self) -> bool:
        raise ProbeUnavailable("touch", "no display attached to host process")

    def pixel_ratio(self) -> float:
        raise ProbeUnavailable("pixel_ratio", "no display attached to host process")

    def viewport_width(self) -> int:
        if self._viewport_width is None:
            raise ProbeUnavailable("viewport_width", "no viewport configured")
        return self._viewport_width
