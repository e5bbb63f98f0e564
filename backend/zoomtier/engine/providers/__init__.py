"""Device capability providers, one per host environment."""

from zoomtier.engine.providers.base import DeviceCapabilityProvider
from zoomtier.engine.providers.client_hints import BrowserHints, ClientHintsProvider
from zoomtier.engine.providers.host import HostCapabilityProvider
from zoomtier.engine.providers.static import StaticCapabilityProvider

__all__ = [
    "BrowserHints",
    "DeviceCapabilityProvider",
    "ClientHintsProvider",
    "HostCapabilityProvider",
    "StaticCapabilityProvider",
]
