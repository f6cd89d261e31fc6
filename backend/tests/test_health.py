"""Tests for the health endpoint."""
from afterwork.errors import StoreError
from afterwork.models.health import HealthCheck


def test_health_writes_heartbeat(client, ctx):
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert data["service"] == "AfterWork Buddy"
    assert data["timestamp"].startswith("2026-10-19T10:30:00")

    with ctx.store._session_factory() as db:
        checks = db.query(HealthCheck).all()
    assert len(checks) == 1
    assert checks[0].check_id == "check"


def test_repeated_checks_overwrite_one_row(client, ctx):
    client.get("/health")
    client.get("/health")
    with ctx.store._session_factory() as db:
        assert db.query(HealthCheck).count() == 1


def test_health_unhealthy_when_store_fails(client, ctx, monkeypatch):
    def _boom(timestamp):
        raise StoreError("read-only database")

    monkeypatch.setattr(ctx.store, "write_heartbeat", _boom)
    resp = client.get("/health")
    assert resp.status_code == 500
    assert resp.json() == {"status": "unhealthy", "error": "read-only database"}
