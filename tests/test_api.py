from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from worldclock.data import store as store_module
from worldclock.data.store import TimezoneStore
from worldclock.web.api import deps
from worldclock.web.main import app


@pytest.fixture
def store(tmp_path: Path) -> TimezoneStore:
    return TimezoneStore(tmp_path / "timezones.json")


@pytest.fixture
def client(store: TimezoneStore):
    app.dependency_overrides[deps.get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_empty_list(client: TestClient, store: TimezoneStore):
    response = client.get("/api/timezones")
    assert response.status_code == 200
    body = response.json()
    assert body["rows"] == []
    assert body["sort"] == "chronological"
    assert body["adjusted"] is False
    assert store.path.read_text(encoding="utf-8") == "[]"


def test_add_list_and_remove(client: TestClient):
    response = client.post("/api/timezones", json={"identifier": "America/New_York"})
    assert response.status_code == 201
    assert response.json() == {"timezones": ["America/New_York"]}

    client.post("/api/timezones", json={"identifier": "Europe/London"})
    rows = client.get("/api/timezones", params={"sort": "alphabetical"}).json()["rows"]
    assert [row["label"] for row in rows] == ["London", "New York"]
    assert all(row["time"] and row["error"] is None for row in rows)

    manual = client.get("/api/timezones", params={"sort": "manual"}).json()["rows"]
    assert [row["identifier"] for row in manual] == ["America/New_York", "Europe/London"]

    response = client.delete("/api/timezones/America/New_York")
    assert response.status_code == 200
    assert response.json() == {"timezones": ["Europe/London"]}


def test_add_rejects_invalid_and_duplicate(client: TestClient, store: TimezoneStore):
    assert client.post("/api/timezones", json={"identifier": "Not/AZone"}).status_code == 400
    client.post("/api/timezones", json={"identifier": "Asia/Tokyo"})
    response = client.post("/api/timezones", json={"identifier": "Asia/Tokyo"})
    assert response.status_code == 409
    assert "already exists" in response.json()["detail"]
    assert store.path.read_text(encoding="utf-8") == '["Asia/Tokyo"]'


def test_remove_absent_is_ok(client: TestClient):
    client.post("/api/timezones", json={"identifier": "Asia/Tokyo"})
    response = client.delete("/api/timezones/Europe/London")
    assert response.status_code == 200
    assert response.json() == {"timezones": ["Asia/Tokyo"]}


def test_adjusted_time(client: TestClient):
    client.post("/api/timezones", json={"identifier": "Asia/Tokyo"})
    body = client.get("/api/timezones", params={"time": "09:30"}).json()
    assert body["adjusted"] is True
    # Local zone is UTC in tests, Tokyo is UTC+9 all year
    assert body["rows"][0]["time"].endswith("6:30:00 PM")

    fallback = client.get("/api/timezones", params={"time": "9:30"}).json()
    assert fallback["adjusted"] is False


def test_unknown_sort_order_is_rejected(client: TestClient):
    assert client.get("/api/timezones", params={"sort": "random"}).status_code == 422


def test_corrupt_identifier_only_affects_its_row(client: TestClient, store: TimezoneStore):
    store.path.write_text('["Not/AZone", "Europe/London"]', encoding="utf-8")
    response = client.get("/api/timezones", params={"sort": "manual"})
    assert response.status_code == 200
    rows = response.json()["rows"]
    assert rows[0]["error"] == "unavailable"
    assert rows[0]["time"] is None
    assert rows[1]["time"] is not None


def test_corrupt_file_is_reported(client: TestClient, store: TimezoneStore):
    store.path.write_text("{oops", encoding="utf-8")
    response = client.get("/api/timezones")
    assert response.status_code == 500
    assert "Corrupt timezone file" in response.json()["detail"]
    assert client.get("/health").json()["status"] == "degraded"


def test_write_failure_is_not_reported_as_success(client: TestClient, store: TimezoneStore, monkeypatch):
    client.post("/api/timezones", json={"identifier": "Europe/London"})

    def _refuse(src, dst):
        raise OSError(30, "Read-only file system")

    monkeypatch.setattr(store_module.os, "replace", _refuse)
    response = client.post("/api/timezones", json={"identifier": "Asia/Tokyo"})
    assert response.status_code == 500
    assert "Could not write" in response.json()["detail"]
    monkeypatch.undo()
    assert store.path.read_text(encoding="utf-8") == '["Europe/London"]'


def test_options(client: TestClient):
    client.post("/api/timezones", json={"identifier": "Europe/London"})
    body = client.get("/api/meta/options").json()
    assert body["sort_orders"] == ["alphabetical", "chronological", "manual"]
    assert body["default_sort_order"] == "chronological"
    assert body["local_timezone"] == "UTC"
    london = next(item for item in body["suggestions"] if item["value"] == "Europe/London")
    assert london == {"value": "Europe/London", "label": "London", "stored": True}


def test_health_and_logs(client: TestClient):
    client.delete("/api/logs")
    client.post("/api/timezones", json={"identifier": "Europe/London"})
    health = client.get("/health").json()
    assert health["status"] == "ok"
    assert health["store"]["count"] == 1
    assert health["clock"]["running"] is True

    logs = client.get("/api/logs", params={"limit": 50}).json()
    assert any("Added timezone Europe/London" in entry["message"] for entry in logs["entries"])


def test_logs_filter_by_level(client: TestClient):
    client.delete("/api/logs")
    client.post("/api/timezones", json={"identifier": "Europe/London"})
    client.get("/api/timezones")
    assert client.get("/api/logs", params={"level": "warning"}).json()["entries"] == []
    assert client.get("/api/logs", params={"level": "nonsense"}).status_code == 400


def test_undecodable_file_is_reported(client: TestClient, store: TimezoneStore):
    store.path.write_bytes(b'["Europe/Z\xfcrich"]')
    response = client.get("/api/timezones")
    assert response.status_code == 500
    assert "not valid UTF-8" in response.json()["detail"]
    assert client.post("/api/timezones", json={"identifier": "Asia/Tokyo"}).status_code == 500

    health = client.get("/health").json()
    assert health["status"] == "degraded"
    assert health["store"]["ok"] is False
    assert store.path.read_bytes() == b'["Europe/Z\xfcrich"]'
