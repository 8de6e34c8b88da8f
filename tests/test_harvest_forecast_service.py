"""Tests for HarvestForecastService."""

from datetime import timedelta, timezone

import pandas as pd
import pytest

from config.settings import FORECAST_SETTINGS, STAGE_DEFINITIONS, YIELD_HEURISTICS
from harvest_forecast.application.services.harvest_forecast_service import HarvestForecastService
from harvest_forecast.domain.entities.day_range import DayRange
from harvest_forecast.domain.entities.grow_stage import GrowStage
from harvest_forecast.domain.entities.strain import Strain

from conftest import InMemorySnapshotRepository


@pytest.fixture
def batches(make_batch):
    return [
        make_batch(id="col", stage=GrowStage.COLONIZATION, days_in_stage=10, strain_id="s-1"),
        make_batch(id="fru", stage=GrowStage.FRUITING, days_in_stage=2, substrate_weight=1000),
        make_batch(id="har", stage=GrowStage.HARVESTING, days_in_stage=1, substrate_weight=2000),
        make_batch(id="old", stage=GrowStage.COLONIZATION, spawned_days_ago=40),
        make_batch(id="done", stage=GrowStage.COMPLETED, substrate_weight=9000),
    ]


@pytest.fixture
def service(batches):
    strains = [Strain(id="s-1", name="Blue Oyster", colonization_days=DayRange(10, 14))]
    return HarvestForecastService(
        snapshot_repo=InMemorySnapshotRepository(batches, strains),
        stage_definitions=STAGE_DEFINITIONS,
        yield_heuristics=YIELD_HEURISTICS,
        forecast_settings=FORECAST_SETTINGS,
    )


def test_forecast_pipeline(service, now):
    """Test the full pipeline over a mixed snapshot."""
    forecast = service.forecast(now=now)

    assert forecast.generated_at == now
    assert {p.grow_id for p in forecast.predictions} == {"col", "fru", "har", "old"}
    assert len(forecast.daily_forecast) == 14

    # fruiting 1000 g (300 until day 3, then 500) + harvesting 2000 g (300 daily)
    amounts = [d.expected_harvest_grams for d in forecast.daily_forecast]
    assert amounts[:4] == [600, 600, 600, 800]
    assert forecast.summary.total_expected_harvest == 600 * 3 + 800 * 4
    assert forecast.summary.peak_day.amount == 800
    assert forecast.summary.peak_day.date == forecast.daily_forecast[3].date

    by_id = {p.grow_id: p for p in forecast.predictions}
    assert by_id["col"].strain_name == "Blue Oyster"
    assert by_id["col"].expected_days_remaining == 2
    assert by_id["old"].is_overdue
    assert forecast.summary.overdue_grows == 1
    assert [p.grow_id for p in forecast.overdue] == ["old"]
    assert forecast.summary.upcoming_transitions == 4


def test_forecast_is_deterministic(service, now):
    """Test identical snapshots and times produce identical forecasts."""
    assert service.forecast(now=now) == service.forecast(now=now)


def test_week_paging(service, now):
    """Test the calendar is browsed one week at a time."""
    forecast = service.forecast(now=now)

    assert service.week_count == 2
    first, second = service.week(forecast, 0), service.week(forecast, 1)
    assert len(first) == len(second) == 7
    assert first[0].date == forecast.daily_forecast[0].date
    assert second[0].date == first[0].date + timedelta(days=7)

    with pytest.raises(ValueError):
        service.week(forecast, 2)
    with pytest.raises(ValueError):
        service.week(forecast, -1)


def test_partial_last_week(batches, now):
    """Test a horizon that is not a multiple of seven."""
    service = HarvestForecastService(
        snapshot_repo=InMemorySnapshotRepository(batches),
        stage_definitions=STAGE_DEFINITIONS,
        forecast_settings={"horizon_days": 10},
    )
    forecast = service.forecast(now=now)
    assert len(forecast.daily_forecast) == 10
    assert len(service.week(forecast, 1)) == 3


def test_invalid_horizon(batches):
    """Test non-positive horizons are rejected."""
    with pytest.raises(ValueError):
        HarvestForecastService(
            snapshot_repo=InMemorySnapshotRepository(batches),
            stage_definitions=STAGE_DEFINITIONS,
            forecast_settings={"horizon_days": 0},
        )


def test_empty_snapshot(now):
    """Test an empty snapshot yields zero results, not errors."""
    service = HarvestForecastService(
        snapshot_repo=InMemorySnapshotRepository([]),
        stage_definitions=STAGE_DEFINITIONS,
    )
    forecast = service.forecast(now=now)

    assert forecast.predictions == []
    assert len(forecast.daily_forecast) == 14
    assert forecast.summary.total_expected_harvest == 0
    assert forecast.summary.peak_day is None
    assert service.timeline(forecast) == []


def test_timeline_and_labels(service, now):
    """Test timeline grouping through the service."""
    forecast = service.forecast(now=now)
    timeline = service.timeline(forecast)

    assert timeline[0].is_today
    assert sum(len(e.predictions) for e in timeline) == len(forecast.predictions)
    assert service.stage_label(GrowStage.COLONIZATION) == "Colonization"
    assert service.stage_label(None) == "-"


def test_export(service, now, tmp_path):
    """Test predictions and calendar are written to CSV."""
    forecast = service.forecast(now=now)
    files = service.export(forecast, tmp_path / "exports")

    predictions = pd.read_csv(files["predictions"])
    daily = pd.read_csv(files["daily_forecast"])

    assert len(predictions) == 4
    assert list(predictions["grow_id"]) == [p.grow_id for p in forecast.predictions]
    assert len(daily) == 14
    assert list(daily["expected_harvest_grams"]) == [
        d.expected_harvest_grams for d in forecast.daily_forecast
    ]


def test_aware_now_is_converted_to_utc(service, now):
    """Test timezone-aware reference times compare with naive snapshot dates."""
    aware = service.forecast(now=now.replace(tzinfo=timezone.utc))
    naive = service.forecast(now=now)

    assert aware.generated_at == now
    assert aware == naive

    offset = timezone(timedelta(hours=2))
    shifted = service.forecast(now=(now + timedelta(hours=2)).replace(tzinfo=offset))
    assert shifted == naive
