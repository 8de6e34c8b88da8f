"""Tests for the FastAPI application."""

import pytest
from fastapi.testclient import TestClient

from config.settings import FORECAST_SETTINGS, STAGE_DEFINITIONS, YIELD_HEURISTICS
from harvest_forecast.application.services.harvest_forecast_service import HarvestForecastService
from harvest_forecast.domain.entities.grow_stage import GrowStage
from harvest_forecast.presentation.api.main import app, get_service

from conftest import InMemorySnapshotRepository

NOW = "2026-10-19T09:00:00"


@pytest.fixture
def client(make_batch):
    batches = [
        make_batch(id="fru", stage=GrowStage.FRUITING, days_in_stage=2, substrate_weight=1000),
        make_batch(id="old", stage=GrowStage.COLONIZATION, spawned_days_ago=40),
    ]
    service = HarvestForecastService(
        snapshot_repo=InMemorySnapshotRepository(batches),
        stage_definitions=STAGE_DEFINITIONS,
        yield_heuristics=YIELD_HEURISTICS,
        forecast_settings=FORECAST_SETTINGS,
    )
    app.dependency_overrides[get_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    """Test health endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_forecast(client):
    """Test the full forecast payload."""
    response = client.get("/forecast", params={"now": NOW})
    assert response.status_code == 200

    body = response.json()
    assert len(body["daily_forecast"]) == 14
    assert body["daily_forecast"][0]["date"] == "2026-10-19"
    assert body["daily_forecast"][0]["expected_harvest_grams"] == 300
    assert body["daily_forecast"][3]["expected_harvest_grams"] == 500
    assert body["summary"]["overdue_grows"] == 1
    assert body["summary"]["peak_day"] == {"date": "2026-10-22", "amount": 500}
    assert [p["grow_id"] for p in body["predictions"]] == ["old", "fru"]


def test_overdue_predictions(client):
    """Test filtering predictions to overdue grows."""
    response = client.get("/predictions", params={"now": NOW, "overdue_only": True})
    assert response.status_code == 200
    assert [p["grow_id"] for p in response.json()] == ["old"]
    assert response.json()[0]["current_stage"] == "colonization"


def test_timeline(client):
    """Test the timeline endpoint."""
    response = client.get("/timeline", params={"now": NOW})
    assert response.status_code == 200
    body = response.json()
    assert body[0]["is_today"] is True
    assert body[0]["predictions"][0]["grow_id"] == "old"


def test_calendar_week(client):
    """Test week paging and its bounds."""
    response = client.get("/calendar/week/1", params={"now": NOW})
    assert response.status_code == 200
    assert len(response.json()) == 7
    assert response.json()[0]["date"] == "2026-10-26"

    assert client.get("/calendar/week/2", params={"now": NOW}).status_code == 400


def test_forecast_with_utc_offset(client):
    """Test a reference time with a Z suffix."""
    response = client.get("/forecast", params={"now": "2026-10-19T09:00:00Z"})
    assert response.status_code == 200
    body = response.json()
    assert body["daily_forecast"][0]["date"] == "2026-10-19"
    assert body["summary"]["overdue_grows"] == 1


class BrokenSnapshotRepository(InMemorySnapshotRepository):
    def get_batches(self):
        raise ValueError("Unknown stage 'pinning' for batch 1")


def test_invalid_snapshot_is_bad_request():
    """Test snapshot validation errors map to 400."""
    service = HarvestForecastService(
        snapshot_repo=BrokenSnapshotRepository([]),
        stage_definitions=STAGE_DEFINITIONS,
    )
    app.dependency_overrides[get_service] = lambda: service
    try:
        response = TestClient(app).get("/forecast", params={"now": NOW})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 400
    assert "pinning" in response.json()["detail"]
