"""Tests for the HTTP front end."""

import pytest
from fastapi.testclient import TestClient

from bankqueue.errors import InvalidParameter, ResourceExhausted
from bankqueue.report import NO_STATISTICS
from bankqueue_api.main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    def test_ok(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestSimulateEndpoint:
    def test_basic_run(self, client):
        resp = client.post("/simulate", json={"arrival_rate": 1.0, "tellers": 2, "seed": 42})
        assert resp.status_code == 200
        body = resp.json()
        assert body["seed"] == 42
        assert body["total_arrived"] == body["total_served"] + body["remaining_in_queue"]
        assert len(body["wait_times"]) == body["total_served"]
        assert body["statistics"] is not None
        assert body["note"] is None
        assert len(body["services"]) == body["total_served"]
        assert body["timeline"] == []

    def test_timeline_on_request(self, client):
        resp = client.post("/simulate", json={
            "arrival_rate": 1.0, "tellers": 2, "horizon": 30, "seed": 1, "include_timeline": True
        })
        assert resp.status_code == 200
        timeline = resp.json()["timeline"]
        assert [t["minute"] for t in timeline] == list(range(30))

    def test_seeded_runs_match(self, client):
        payload = {"arrival_rate": 0.8, "tellers": 1, "horizon": 60, "seed": 5}
        assert client.post("/simulate", json=payload).json() == client.post("/simulate", json=payload).json()

    def test_no_statistics_when_nobody_served(self, client):
        resp = client.post("/simulate", json={"arrival_rate": 1e-12, "tellers": 1, "horizon": 5, "seed": 0})
        body = resp.json()
        assert body["total_served"] == 0
        assert body["statistics"] is None
        assert body["note"] == NO_STATISTICS

    @pytest.mark.parametrize("payload", [
        {"arrival_rate": 0, "tellers": 1},
        {"arrival_rate": -2, "tellers": 1},
        {"arrival_rate": 1.0, "tellers": 0},
        {"arrival_rate": 1.0, "tellers": 1, "min_service": 4, "max_service": 3},
        {"tellers": 1},
    ])
    def test_rejects_invalid_payload(self, client, payload):
        assert client.post("/simulate", json=payload).status_code == 422


class TestErrorMapping:
    def test_resource_exhausted_is_503(self, client, monkeypatch):
        def _no_memory(req):
            raise ResourceExhausted("cannot grow wait-time storage past 100 samples")

        monkeypatch.setattr("bankqueue_api.main.simulate", _no_memory)
        resp = client.post("/simulate", json={"arrival_rate": 1.0, "tellers": 1})
        assert resp.status_code == 503
        assert resp.json() == {"detail": "cannot grow wait-time storage past 100 samples"}

    def test_invalid_parameter_is_422(self, client, monkeypatch):
        def _reject(req):
            raise InvalidParameter("arrival_rate must be finite")

        monkeypatch.setattr("bankqueue_api.main.simulate", _reject)
        resp = client.post("/simulate", json={"arrival_rate": 1.0, "tellers": 1})
        assert resp.status_code == 422
        assert resp.json() == {"detail": "arrival_rate must be finite"}
