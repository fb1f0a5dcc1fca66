"""
Tests for health check endpoints.
"""
from fastapi import status
from fastapi.testclient import TestClient

from simple_nat.core.table_state import get_translation_table
from simple_nat.main import app
from simple_nat.services.translation_service import TranslationTable


def test_root_endpoint(client):
    response = client.get("/")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["message"] == "Simple NAT API"


def test_liveness_endpoint(client):
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_health_endpoint_reports_loaded_rules(client, loaded_table):
    """Test that /api/v1/health reports the table size."""
    response = client.get("/api/v1/health")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["ok"] is True
    assert data["rules_loaded"] == len(loaded_table)
    assert "environment" in data


def test_health_endpoint_with_empty_table():
    app.dependency_overrides[get_translation_table] = lambda: TranslationTable()

    try:
        response = TestClient(app).get("/api/v1/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["rules_loaded"] == 0
    finally:
        app.dependency_overrides.clear()


def test_health_endpoint_trace_id_header(client):
    """Test that health endpoint includes trace_id in response headers."""
    response = client.get("/api/v1/health")

    # RequestLoggingMiddleware should add X-Trace-ID header
    assert "X-Trace-ID" in response.headers
    assert len(response.headers["X-Trace-ID"]) > 0


def test_lifespan_loads_rule_file(tmp_path, monkeypatch):
    rules_path = tmp_path / "NAT"
    rules_path.write_text("10.0.1.1:8080,192.168.0.1:80\nbad rule\n", encoding="utf-8")
    monkeypatch.setattr("simple_nat.core.config.settings.RULES_FILE", str(rules_path))

    with TestClient(app) as client:
        assert client.get("/api/v1/health").json()["rules_loaded"] == 1
        response = client.post("/api/v1/translate", json={"query": "10.0.1.1:8080"})
        assert response.json()["destination"] == "192.168.0.1:80"


def test_lifespan_without_rule_file_starts_empty(tmp_path, monkeypatch):
    monkeypatch.setattr("simple_nat.core.config.settings.RULES_FILE", str(tmp_path / "missing"))

    with TestClient(app) as client:
        assert client.get("/api/v1/health").json()["rules_loaded"] == 0


def test_requests_before_startup_do_not_load_rules(tmp_path, monkeypatch):
    rules_path = tmp_path / "NAT"
    rules_path.write_text("10.0.1.1:8080,192.168.0.1:80\n", encoding="utf-8")
    monkeypatch.setattr("simple_nat.core.config.settings.RULES_FILE", str(rules_path))
    monkeypatch.delattr(app.state, "translation_table", raising=False)

    # No context manager, so the lifespan hook never runs
    response = TestClient(app).post("/api/v1/translate", json={"query": "10.0.1.1:8080"})

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert getattr(app.state, "translation_table", None) is None


def test_inbound_trace_id_is_echoed(client):
    response = client.get("/api/v1/health", headers={"X-Trace-ID": "batch-42"})

    assert response.headers["X-Trace-ID"] == "batch-42"


def test_oversized_inbound_trace_id_is_replaced(client):
    response = client.get("/api/v1/health", headers={"X-Trace-ID": "x" * 200})

    assert response.headers["X-Trace-ID"] != "x" * 200
    assert len(response.headers["X-Trace-ID"]) == 36


def test_request_log_level_follows_status(client, caplog):
    with caplog.at_level("INFO", logger="simple_nat.middleware.request_logging"):
        client.get("/api/v1/health")
        client.post("/api/v1/translate", json={})

    levels = [record.levelname for record in caplog.records if record.name == "simple_nat.middleware.request_logging"]
    assert levels == ["INFO", "WARNING"]
