"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from zoomtier.config import Settings
from zoomtier.main import create_app
from tests.conftest import desktop_provider


@pytest.fixture
def client() -> TestClient:
    app = create_app(
        Settings(zoomtier_log_level="warning", zoomtier_debug_mode=False),
        provider=desktop_provider(),
    )
    return TestClient(app)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["initialized"] is True


def test_device_profile(client):
    data = client.get("/api/device").json()
    assert data["device_type"] == "desktop"
    assert data["profile"]["approx_memory_mb"] == 8192
    assert data["thresholds"]["minimal"] == 0.6


def test_resolve_level_with_device_override(client):
    response = client.post("/api/level", json={"scale": 1.5, "device_type": "mobile"})
    assert response.status_code == 200
    data = response.json()
    assert data["responsive_scale"] == pytest.approx(1.2)
    assert data["device_type"] == "mobile"
    assert data["level"] == "detailed"
    assert data["policy"]["features"] == ["title", "subtitle", "content", "metadata"]
    assert data["styles"]["will-change"] == "auto"


def test_resolve_level_raw(client):
    data = client.post("/api/level", json={"scale": 0.5, "responsive": False, "is_active": True}).json()
    assert data["responsive_scale"] == 0.5
    assert data["level"] == "minimal"
    assert data["policy"]["interactive"] is False
    assert data["styles"]["pointer-events"] == "none"


@pytest.mark.parametrize("payload", [{"scale": -1}, {"scale": 1.0, "device_type": "watch"}, {}])
def test_resolve_level_rejects_bad_input(client, payload):
    assert client.post("/api/level", json=payload).status_code == 422


def test_level_policy_lookup(client):
    data = client.get("/api/levels/compact").json()
    assert data["padding"] == "0.75rem"
    assert data["interactive"] is True
    assert client.get("/api/levels/huge").status_code == 404


def test_custom_thresholds_roundtrip(client):
    for scale in (0.5, 0.7, 0.9):
        client.post("/api/level", json={"scale": scale})
    assert client.get("/api/cache").json()["size"] == 3

    data = client.patch("/api/thresholds", json={"minimal": 0.4}).json()
    assert data["thresholds"]["minimal"] == 0.4
    assert data["validation"]["valid"] is True
    assert client.get("/api/cache").json()["size"] == 0

    data = client.delete("/api/thresholds").json()
    assert data["thresholds"]["minimal"] == 0.6


def test_invalid_thresholds_conflict_on_resolve(client):
    data = client.patch("/api/thresholds", json={"compact": 0.5}).json()
    assert data["validation"]["valid"] is False

    response = client.post("/api/level", json={"scale": 1.0})
    assert response.status_code == 409
    body = response.json()
    assert body["detail"] == "Invalid threshold configuration"
    assert body["violations"]

    client.delete("/api/thresholds")
    assert client.post("/api/level", json={"scale": 1.0}).status_code == 200


def test_conflict_response_is_documented(client):
    responses = client.get("/openapi.json").json()["paths"]["/api/level"]["post"]["responses"]
    schema = responses["409"]["content"]["application/json"]["schema"]
    assert schema["$ref"].endswith("/ConfigurationErrorResponse")


def test_cache_stats(client):
    client.post("/api/level", json={"scale": 1.0, "responsive": False})
    client.post("/api/level", json={"scale": 1.0, "responsive": False})
    data = client.get("/api/cache").json()
    assert data["size"] == 1
    assert data["keys"] == ["1.00"]
    assert data["hits"] == 1
    assert data["capacity"] is None


def test_reprofile_from_client_hints(client):
    response = client.post(
        "/api/device",
        json={
            "hints": {
                "device_memory_gb": 1,
                "webgl": True,
                "touch_events": True,
                "device_pixel_ratio": 3,
                "viewport_width": 390,
            }
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["device_type"] == "mobile"
    assert data["profile"]["touch_capable"] is True
    assert data["profile"]["high_density_display"] is True
    assert data["thresholds"]["minimal"] == pytest.approx(0.54)
    assert data["thresholds"]["expanded"] == pytest.approx(2.6)

    level = client.post("/api/level", json={"scale": 0.7}).json()
    # 0.7 * 0.8 = 0.56, just above the touch-adjusted minimal cutoff
    assert level["responsive_scale"] == pytest.approx(0.56)
    assert level["level"] == "compact"


def test_reprofile_with_no_hints_falls_back(client):
    data = client.post("/api/device", json={}).json()
    assert data["device_type"] == "desktop"
    assert data["profile"]["approx_memory_mb"] == 4096
    assert set(data["profile"]["unknown_probes"]) == {"memory", "gpu", "touch", "pixel_ratio"}


def test_cache_capacity_setting():
    app = create_app(Settings(zoomtier_cache_capacity=2), provider=desktop_provider())
    client = TestClient(app)
    for scale in (0.5, 0.7, 0.9):
        client.post("/api/level", json={"scale": scale})
    data = client.get("/api/cache").json()
    assert data["size"] == 2
    assert data["capacity"] == 2
