# tests/test_health.py
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

import src.database as database
from src.config import settings


def test_health_reports_healthy(client: TestClient, set_probe) -> None:
    set_probe(True)
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["status"] == "healthy"
    assert data["timestamp"].endswith("Z")
    assert data["uptime"] >= 0
    assert data["responseTime"].endswith("ms")
    assert data["services"] == {
        "database": "up",
        "fileParser": "up",
        "nlpService": "up",
        "scoringService": "up",
    }


def test_health_configuration_defaults(client: TestClient, set_probe, monkeypatch: pytest.MonkeyPatch) -> None:
    set_probe(True)
    for name in ("MAX_FILE_SIZE", "CORS_ORIGIN", "RATE_LIMIT_WINDOW_MS", "RATE_LIMIT_MAX_REQUESTS", "JWT_SECRET", "DATABASE_URL"):
        monkeypatch.setattr(settings, name, None)
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")

    data = client.get("/api/health").json()["data"]

    assert data["configuration"] == {
        "maxFileSize": "5242880",
        "corsOrigin": "http://localhost:5173",
        "rateLimitWindow": "900000",
        "rateLimitMax": "100",
    }
    assert data["environment"] == {
        "hasJwtSecret": False,
        "hasDatabaseUrl": False,
        "nodeEnv": "development",
    }


def test_health_reflects_configured_values(client: TestClient, set_probe, monkeypatch: pytest.MonkeyPatch) -> None:
    set_probe(True)
    monkeypatch.setattr(settings, "JWT_SECRET", "secret")
    monkeypatch.setattr(settings, "CORS_ORIGIN", "https://example.org")
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")

    data = client.get("/api/health").json()["data"]

    assert data["environment"]["hasJwtSecret"] is True
    assert data["environment"]["nodeEnv"] == "production"
    assert data["configuration"]["corsOrigin"] == "https://example.org"


def test_health_unhealthy_database_returns_503(client: TestClient, set_probe) -> None:
    set_probe(False)
    response = client.get("/api/health")

    assert response.status_code == 503
    body = response.json()
    assert body["success"] is False
    assert body["data"]["status"] == "unhealthy"
    assert body["data"]["services"]["database"] == "down"


def test_health_probe_error_is_reported(client: TestClient, set_probe) -> None:
    set_probe(RuntimeError("connection reset"))
    response = client.get("/api/health")

    assert response.status_code == 503
    body = response.json()
    assert body["success"] is False
    assert body["data"]["status"] == "unhealthy"
    assert body["data"]["error"] == "connection reset"
    assert "responseTime" in body["data"]


def test_detailed_health(client: TestClient, set_probe) -> None:
    set_probe(True)
    response = client.get("/api/health/detailed")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["services"]["database"]["status"] == "up"
    assert data["services"]["api"]["status"] == "up"
    assert data["system"]["pid"] > 0
    assert data["system"]["uptime"].endswith("s")
    assert set(data["system"]["cpuUsage"]) == {"user", "system"}
    assert data["memory"]["rss"].endswith("MB")
    assert set(data["environment"]["hasRequiredEnvVars"]) == {"JWT_SECRET", "DATABASE_URL", "CORS_ORIGIN"}


def test_detailed_health_unhealthy(client: TestClient, set_probe) -> None:
    set_probe(False)
    response = client.get("/api/health/detailed")

    assert response.status_code == 503
    assert response.json()["data"]["services"]["database"]["status"] == "down"


def test_detailed_health_probe_error(client: TestClient, set_probe) -> None:
    set_probe(ValueError("boom"))
    response = client.get("/api/health/detailed")

    assert response.status_code == 503
    assert response.json()["data"]["error"] == "boom"


def test_ready(client: TestClient, set_probe) -> None:
    set_probe(True)
    response = client.get("/api/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


def test_not_ready_when_database_down(client: TestClient, set_probe) -> None:
    set_probe(False)
    response = client.get("/api/health/ready")

    assert response.status_code == 503
    assert response.json() == {"status": "not ready", "reason": "database unavailable"}


def test_not_ready_when_probe_raises(client: TestClient, set_probe) -> None:
    set_probe(RuntimeError("timeout"))
    response = client.get("/api/health/ready")

    assert response.status_code == 503
    assert response.json() == {"status": "not ready", "reason": "timeout"}


@pytest.mark.parametrize("outcome", [True, False, RuntimeError("db exploded")])
def test_live_ignores_database(client: TestClient, set_probe, outcome) -> None:
    set_probe(outcome)
    response = client.get("/api/health/live")

    assert response.status_code == 200
    assert response.json() == {"status": "alive"}


class _FakeConnection:
    def __init__(self, error: Exception | None):
        self.error = error
        self.executed = []

    async def __aenter__(self):
        if self.error:
            raise self.error
        return self

    async def __aexit__(self, *exc):
        return False

    async def execute(self, statement):
        self.executed.append(str(statement))


class _FakeEngine:
    def __init__(self, error: Exception | None = None):
        self.conn = _FakeConnection(error)

    def connect(self):
        return self.conn


@pytest.mark.anyio
async def test_check_database_health_ok(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _FakeEngine()
    monkeypatch.setattr(database, "engine", fake)

    assert await database.check_database_health() is True
    assert fake.conn.executed == ["SELECT 1"]


@pytest.mark.anyio
async def test_check_database_health_swallows_db_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    error = OperationalError("SELECT 1", {}, Exception("refused"))
    monkeypatch.setattr(database, "engine", _FakeEngine(error))

    assert await database.check_database_health() is False
