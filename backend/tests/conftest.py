"""Shared test fixtures."""

from __future__ import annotations

import pytest

from zoomtier.engine.manager import ContentLevelManager
from zoomtier.engine.profiler import DeviceProfile
from zoomtier.engine.providers import StaticCapabilityProvider

# Scenario from the default threshold table: one scale per tier
DEFAULT_SCENARIO = [
    (0.5, "minimal"),
    (0.7, "compact"),
    (0.9, "normal"),
    (1.2, "detailed"),
    (2.5, "expanded"),
]


def desktop_provider() -> StaticCapabilityProvider:
    return StaticCapabilityProvider(memory=8192, gpu=True, touch=False, ratio=1.0, width=1440)


def touch_phone_provider() -> StaticCapabilityProvider:
    return StaticCapabilityProvider(memory=1024, gpu=True, touch=True, ratio=3.0, width=390)


@pytest.fixture
def manager() -> ContentLevelManager:
    return ContentLevelManager()


@pytest.fixture
def desktop_manager() -> ContentLevelManager:
    m = ContentLevelManager()
    m.initialize(provider=desktop_provider())
    return m


@pytest.fixture
def desktop_profile() -> DeviceProfile:
    return DeviceProfile(approx_memory_mb=8192)


@pytest.fixture
def low_memory_touch_profile() -> DeviceProfile:
    return DeviceProfile(approx_memory_mb=1024, touch_capable=True, high_density_display=True)
