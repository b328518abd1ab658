"""Integration tests for classification run endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from fulfillment_runtime.app import main
from fulfillment_runtime.settings import Settings

REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Create a test client whose runs use the in-memory demo set."""
    settings = Settings(
        output_dir=str(tmp_path),
        pack_config_path=str(REPO_ROOT / "config" / "pack-config.json"),
    )
    monkeypatch.setattr(main, "get_settings", lambda: settings)
    return TestClient(main.app)


def test_run_sync_returns_summary(client):
    response = client.post("/run/sync", json={"correlation_id": "sync-1"})

    assert response.status_code == 200
    summary = response.json()
    assert summary["correlation_id"] == "sync-1"
    assert summary["order_count"] == 6
    assert summary["optimal_pack_counts"]["pack2"] == 3


def test_background_run_completes(client):
    response = client.post("/run", json={"correlation_id": "bg-1"})
    assert response.json()["status"] == "started"

    # TestClient runs background tasks before returning
    status = client.get("/status/bg-1").json()
    assert status["status"] == "completed"
    assert status["result"]["category_counts"]["unique"] == 1


def test_unknown_job_status_and_cancel(client):
    assert client.get("/status/missing").status_code == 404
    assert client.post("/cancel/missing").status_code == 404


def test_finished_job_cannot_be_cancelled(client):
    client.post("/run", json={"correlation_id": "bg-2"})

    assert client.post("/cancel/bg-2").status_code == 404


def test_run_with_a_running_id_is_409(client):
    main.job_manager.register_job("busy-1")
    try:
        response = client.post("/run", json={"correlation_id": "busy-1"})

        assert response.status_code == 409
        assert main.job_manager.get_job_status("busy-1").status == "running"
    finally:
        main.job_manager.cancel_job("busy-1")


def test_starting_a_run_drops_old_finished_jobs(client):
    main.job_manager.register_job("stale-1")
    main.job_manager.fail_job("stale-1", "boom")
    main.job_manager.get_job_status("stale-1").completed_at = datetime.now(timezone.utc) - timedelta(days=3)

    client.post("/run", json={"correlation_id": "fresh-1"})

    assert main.job_manager.get_job_status("stale-1") is None
    assert client.get("/status/stale-1").status_code == 404
