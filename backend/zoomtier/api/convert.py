"""Engine value → response model conversion shared by the routers."""

from __future__ import annotations

from zoomtier.engine.manager import ContentLevelManager
from zoomtier.engine.policy import RenderPolicy
from zoomtier.engine.profiler import DeviceProfile
from zoomtier.engine.thresholds import ThresholdSet
from zoomtier.models.device import DeviceProfileModel
from zoomtier.models.responses import (
    DeviceResponse,
    PolicyModel,
    ThresholdsModel,
    ThresholdsResponse,
    ValidationModel,
)


def thresholds_model(thresholds: ThresholdSet) -> ThresholdsModel:
    return ThresholdsModel(**thresholds.as_dict())


def profile_model(profile: DeviceProfile | None) -> DeviceProfileModel | None:
    if profile is None:
        return None
    return DeviceProfileModel(
        approx_memory_mb=profile.approx_memory_mb,
        gpu_accelerated=profile.gpu_accelerated,
        touch_capable=profile.touch_capable,
        high_density_display=profile.high_density_display,
        unknown_probes=sorted(profile.unknown_probes),
    )


def policy_model(policy: RenderPolicy) -> PolicyModel:
    return PolicyModel(
        level=policy.level.label,
        features=list(policy.features),
        padding=policy.padding.value,
        interactive=policy.interactive,
        performance=policy.performance,
    )


def thresholds_response(manager: ContentLevelManager) -> ThresholdsResponse:
    result = manager.validate_thresholds()
    return ThresholdsResponse(
        thresholds=thresholds_model(manager.thresholds),
        validation=ValidationModel(valid=result.valid, violations=result.violations),
    )


def device_response(manager: ContentLevelManager) -> DeviceResponse:
    return DeviceResponse(
        device_type=manager.get_current_device_type(),
        profile=profile_model(manager.device_profile),
        thresholds=thresholds_model(manager.thresholds),
    )
