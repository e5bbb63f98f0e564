"""Browser capability provider — answers probes from reported client hints."""

from __future__ import annotations

from dataclasses import dataclass

from zoomtier.engine.errors import ProbeUnavailable
from zoomtier.engine.providers.base import DeviceCapabilityProvider

_BYTES_PER_MB = 1024 * 1024


@dataclass(frozen=True)
class BrowserHints:
    """Values a browser reported about itself. None means it could not tell."""

    js_heap_size_limit: int | None = None  # bytes
    device_memory_gb: float | None = None
    webgl: bool | None = None
    touch_events: bool | None = None
    device_pixel_ratio: float | None = None
    viewport_width: int | None = None


class ClientHintsProvider(DeviceCapabilityProvider):
    name = "client_hints"

    def __init__(self, hints: BrowserHints) -> None:
        self.hints = hints

    def memory_mb(self) -> int:
        # Heap size limit is the tighter bound when the browser exposes it
        if self.hints.js_heap_size_limit is not None:
            return round(self.hints.js_heap_size_limit / _BYTES_PER_MB)
        if self.hints.device_memory_gb is not None:
            return round(self.hints.device_memory_gb * 1024)
        raise ProbeUnavailable("memory", "no heap limit or device memory reported")

    def gpu_accelerated(self) -> bool:
        if self.hints.webgl is None:
            raise ProbeUnavailable("gpu", "webgl support not reported")
        return self.hints.webgl

    def touch_capable(self) -> bool:
        if self.hints.touch_events is None:
            raise ProbeUnavailable("touch", "touch support not reported")
        return self.hints.touch_events

    def pixel_ratio(self) -> float:
        if self.hints.device_pixel_ratio is None:
            raise ProbeUnavailable("pixel_ratio", "devicePixelRatio not reported")
        return self.hints.device_pixel_ratio

    def viewport_width(self) -> int:
        if self.hints.viewport_width is None:
            raise ProbeUnavailable("viewport_width", "innerWidth not reported")
        return self.hints.viewport_width
