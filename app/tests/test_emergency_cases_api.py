from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from app.bootstrap import create_app
from app.core.config import settings
from app.repositories.memory_repo import MemoryEmergencyCaseRepository
from app.tests.payloads import BURNS_PAYLOAD

BASE = "/api/emergency-cases"


def post_case(client, **overrides):
    payload = dict(BURNS_PAYLOAD)
    payload.update(overrides)
    return client.post(BASE, json=payload)


class BrokenRepository(MemoryEmergencyCaseRepository):
    def list_cases(self):
        raise RuntimeError("disk on fire")

    def get_case(self, case_id):
        raise RuntimeError("disk on fire")

    def create_case(self, data):
        raise RuntimeError("disk on fire")

    def update_case_status(self, case_id, status):
        raise RuntimeError("disk on fire")


@pytest.fixture
def broken_client():
    with TestClient(create_app(case_repo=BrokenRepository())) as c:
        yield c


# =================================================
# Create
# =================================================

def test_create_case_on_fresh_store(client):
    res = post_case(client)

    assert res.status_code == 201
    body = res.json()
    assert body["id"] == 1
    assert body["status"] == "pending"
    assert body["type"] == "Burns"
    assert body["reporterName"] == "A"
    assert body["reporterPhone"] == "123"
    assert body["latitude"] == "1.0"
    assert body["longitude"] == "2.0"
    assert body["severity"] == "medium"
    datetime.fromisoformat(body["createdAt"].replace("Z", "+00:00"))


def test_create_with_explicit_status(client):
    res = post_case(client, status="dispatched")

    assert res.status_code == 201
    assert res.json()["status"] == "dispatched"


def test_create_missing_description_is_400(client):
    payload = dict(BURNS_PAYLOAD)
    del payload["description"]

    res = client.post(BASE, json=payload)

    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "Invalid data"
    assert isinstance(body["errors"], list)
    assert any(err["loc"][-1] == "description" for err in body["errors"])


def test_create_invalid_severity_is_400(client):
    res = post_case(client, severity="apocalyptic")

    assert res.status_code == 400
    assert any(err["loc"][-1] == "severity" for err in res.json()["errors"])


@pytest.mark.parametrize(
    "latitude",
    ["north", "123.5", "1.123456789", "NaN", "1_0", " 1.0 ", "1e1", "+1.0", "1.", ".5", ""],
)
def test_create_rejects_bad_latitude(client, latitude):
    res = post_case(client, latitude=latitude)

    assert res.status_code == 400
    assert any(err["loc"][-1] == "latitude" for err in res.json()["errors"])


def test_create_rejects_numeric_coordinates(client):
    res = post_case(client, longitude=2.0)

    assert res.status_code == 400


def test_validation_failure_does_not_touch_store(client, repo):
    post_case(client, severity="apocalyptic")

    assert repo.count() == 0


# =================================================
# Read
# =================================================

def test_list_empty(client):
    res = client.get(BASE)

    assert res.status_code == 200
    assert res.json() == []


def test_list_returns_created_cases(client):
    post_case(client, type="Burns")
    post_case(client, type="Choking")

    res = client.get(BASE)

    assert res.status_code == 200
    assert [c["type"] for c in res.json()] == ["Burns", "Choking"]


def test_get_round_trip(client):
    created = post_case(client).json()

    res = client.get(f"{BASE}/{created['id']}")

    assert res.status_code == 200
    assert res.json() == created


def test_get_unknown_id_is_404(client):
    res = client.get(f"{BASE}/999")

    assert res.status_code == 404
    assert res.json() == {"message": "Emergency case not found"}


def test_get_non_numeric_id_is_404(client):
    post_case(client)

    res = client.get(f"{BASE}/abc")

    assert res.status_code == 404


@pytest.mark.parametrize("raw_id", ["1_0", "1abc", " 1", "+1"])
def test_get_uses_leading_integer_of_id(client, raw_id):
    for _ in range(10):
        post_case(client)

    res = client.get(f"{BASE}/{raw_id}")

    assert res.status_code == 200
    assert res.json()["id"] == 1


def test_get_non_ascii_digits_is_404(client):
    post_case(client)

    res = client.get(f"{BASE}/\u0661")

    assert res.status_code == 404


# =================================================
# Update status
# =================================================

def test_patch_status(client):
    created = post_case(client).json()

    res = client.patch(f"{BASE}/1/status", json={"status": "dispatched"})

    assert res.status_code == 200
    body = res.json()
    assert body["id"] == 1
    assert body["status"] == "dispatched"
    assert body["createdAt"] == created["createdAt"]


def test_patch_status_workflow(client):
    created = post_case(client).json()

    client.patch(f"{BASE}/1/status", json={"status": "dispatched"})
    res = client.patch(f"{BASE}/1/status", json={"status": "resolved"})

    body = res.json()
    assert body["status"] == "resolved"
    created.pop("status")
    body.pop("status")
    assert body == created


@pytest.mark.parametrize("payload", [{}, {"status": ""}, {"status": None}])
def test_patch_without_status_is_400(client, payload):
    post_case(client)

    res = client.patch(f"{BASE}/1/status", json=payload)

    assert res.status_code == 400
    assert res.json() == {"message": "Status is required"}


def test_patch_without_body_is_400(client):
    post_case(client)

    res = client.patch(f"{BASE}/1/status")

    assert res.status_code == 400


def test_patch_unknown_id_is_404(client, repo):
    post_case(client)

    res = client.patch(f"{BASE}/999/status", json={"status": "dispatched"})

    assert res.status_code == 404
    assert repo.count() == 1


def test_patch_accepts_unlisted_status_by_default(client):
    post_case(client)

    res = client.patch(f"{BASE}/1/status", json={"status": "en-route"})

    assert res.status_code == 200
    assert res.json()["status"] == "en-route"


def test_strict_status_rejects_unlisted_values(client, monkeypatch):
    monkeypatch.setattr(settings, "strict_status", True)
    post_case(client)

    patch = client.patch(f"{BASE}/1/status", json={"status": "en-route"})
    create = post_case(client, status="en-route")

    assert patch.status_code == 400
    assert "errors" not in patch.json()
    assert create.status_code == 400
    assert create.json()["message"] == "Invalid data"
    assert any(err["loc"][-1] == "status" for err in create.json()["errors"])
    assert client.get(f"{BASE}/1").json()["status"] == "pending"


# =================================================
# Dashboard read models
# =================================================

def test_stats(client):
    post_case(client, severity="critical")
    post_case(client, severity="low")
    post_case(client, severity="high")
    client.patch(f"{BASE}/2/status", json={"status": "dispatched"})
    client.patch(f"{BASE}/3/status", json={"status": "resolved"})

    res = client.get(f"{BASE}/stats")

    assert res.status_code == 200
    assert res.json() == {
        "total": 3,
        "pending": 1,
        "dispatched": 1,
        "resolved": 1,
        "critical": 1,
        "active": 2,
    }


def test_active_queue_orders_by_severity(client):
    post_case(client, severity="low")
    post_case(client, severity="critical")
    post_case(client, severity="medium")
    post_case(client, severity="high")
    client.patch(f"{BASE}/4/status", json={"status": "resolved"})

    res = client.get(f"{BASE}/active")

    assert res.status_code == 200
    assert [c["severity"] for c in res.json()] == ["critical", "medium", "low"]


# =================================================
# Unexpected failures
# =================================================

@pytest.mark.parametrize(
    "method, path, kwargs, message",
    [
        ("get", BASE, {}, "Failed to fetch emergency cases"),
        ("get", f"{BASE}/1", {}, "Failed to fetch emergency case"),
        ("post", BASE, {"json": BURNS_PAYLOAD}, "Failed to create emergency case"),
        ("patch", f"{BASE}/1/status", {"json": {"status": "resolved"}}, "Failed to update emergency case status"),
    ],
)
def test_internal_errors_are_500_without_detail(broken_client, method, path, kwargs, message):
    res = getattr(broken_client, method)(path, **kwargs)

    assert res.status_code == 500
    assert res.json() == {"message": message}
    assert "disk on fire" not in res.text
