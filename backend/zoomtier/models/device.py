"""Device capability model — what a browser reports about itself."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ClientHints(BaseModel):
    """Capability hints gathered client-side. Missing fields mean the probe was unavailable."""

    js_heap_size_limit: int | None = Field(
        None, ge=0, description="performance.memory.jsHeapSizeLimit, in bytes"
    )
    device_memory_gb: float | None = Field(
        None, ge=0, description="navigator.deviceMemory, in GiB"
    )
    webgl: bool | None = Field(None, description="Whether a WebGL context could be created")
    touch_events: bool | None = Field(None, description="'ontouchstart' in window")
    device_pixel_ratio: float | None = Field(None, gt=0)
    viewport_width: int | None = Field(None, ge=0, description="window.innerWidth")


class DeviceProfileModel(BaseModel):
    approx_memory_mb: int
    gpu_accelerated: bool
    touch_capable: bool
    high_density_display: bool
    unknown_probes: list[str] = Field(default_factory=list)
