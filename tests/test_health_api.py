# =============================================================================
# tests/test_health_api.py - Health, Readiness & Metrics Tests
# =============================================================================
# Tests for app/routers/health.py, the request counter middleware and the
# readiness check registry.
#
# Run with: pytest tests/test_health_api.py -v
# =============================================================================

import time
from datetime import datetime

from fastapi.testclient import TestClient

from app.main import create_app
from core.services import ProcessStats, ReadinessService


class TestLiveness:
    """GET /health"""

    def test_health_is_up(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "UP"
        assert body["service"] == "age-calculator-backend"
        datetime.fromisoformat(body["timestamp"])

    def test_health_ignores_store_contents(self, client, sample_person_payload):
        client.post("/api/persons", json=sample_person_payload)
        assert client.get("/health").status_code == 200
        client.delete("/api/persons")
        assert client.get("/health").status_code == 200


class TestReadiness:
    """GET /ready"""

    def test_ready_reports_person_count(self, client, store, sample_person_payload):
        for _ in range(2):
            client.post("/api/persons", json=sample_person_payload)

        response = client.get("/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "READY"
        assert body["service"] == "age-calculator-backend"
        assert body["personsCount"] == len(store.list()) == 2

    def test_failing_check_returns_503_with_same_envelope(self, client, backend_app):
        backend_app.state.readiness.register("database", lambda: False)

        response = client.get("/ready")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "NOT_READY"
        assert set(body) == {"status", "service", "personsCount", "timestamp"}


class TestReadinessService:
    """Tests for the readiness check registry."""

    def test_no_checks_is_ready(self):
        assert ReadinessService().run().ready

    def test_raising_check_counts_as_failed(self):
        readiness = ReadinessService()
        readiness.register("ok", lambda: True)
        readiness.register("broken", lambda: 1 / 0)

        result = readiness.run()

        assert not result.ready
        assert result.failed == ["broken"]
        assert result.checks == {"ok": True, "broken": False}


class TestMetrics:
    """GET /metrics and the request counter."""

    def test_metrics_body(self, client, sample_person_payload):
        client.post("/api/persons", json=sample_person_payload)

        response = client.get("/metrics")

        assert response.status_code == 200
        body = response.json()
        assert body["totalPersons"] == 1
        assert body["uptime"] >= 0
        assert body["memory"]["rss"] > 0
        assert body["memory"]["vms"] > 0
        assert "timestamp" in body

    def test_every_request_is_counted(self, client):
        client.get("/health")
        client.get("/ready")
        client.get("/api/persons")
        client.get("/api/persons/unknown-id")

        # The metrics request itself is the fifth
        assert client.get("/metrics").json()["totalRequests"] == 5

    def test_counter_is_per_app(self, client, settings):
        client.get("/health")
        other = TestClient(create_app(settings))

        assert other.get("/metrics").json()["totalRequests"] == 1


class _FakeProcess:
    """Stands in for psutil.Process with a fixed start time."""

    def __init__(self, created: float):
        self.created = created

    def create_time(self) -> float:
        return self.created


class TestProcessStats:

    def test_uptime_counts_from_process_start(self):
        stats = ProcessStats(_FakeProcess(time.time() - 100))

        assert 100 <= stats.uptime() < 160

    def test_uptime_ignores_when_stats_were_created(self):
        stats = ProcessStats(_FakeProcess(time.time() - 3600))

        # A fresh ProcessStats for an old process still reports the old start
        assert stats.uptime() >= 3600

    def test_uptime_never_negative(self):
        stats = ProcessStats(_FakeProcess(time.time() + 60))

        assert stats.uptime() == 0.0

    def test_memory_from_current_process(self):
        memory = ProcessStats().memory()

        assert memory.rss > 0
        assert memory.vms > 0


class TestRoot:
    def test_root_returns_api_info(self, client):
        body = client.get("/").json()
        assert body["name"] == "Age Calculator API"
        assert body["health"] == "/health"
