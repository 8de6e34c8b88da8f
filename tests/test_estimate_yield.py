"""Tests for EstimateYieldUseCase."""

import pytest

from harvest_forecast.domain.entities.grow_stage import GrowStage
from harvest_forecast.domain.entities.yield_heuristics import YieldHeuristics
from harvest_forecast.domain.use_cases.estimate_yield import EstimateYieldUseCase


@pytest.mark.parametrize("offset", [0, 1, 7, 13])
def test_harvesting_is_flat(make_batch, now, offset):
    """Test harvesting grows yield 15% of substrate every day."""
    batch = make_batch(stage=GrowStage.HARVESTING, days_in_stage=2, substrate_weight=1000)
    assert EstimateYieldUseCase().execute(batch, offset, now) == pytest.approx(150)


@pytest.mark.parametrize("offset, grams", [(0, 300), (1, 300), (2, 300), (3, 500), (4, 500)])
def test_fruiting_step(make_batch, now, offset, grams):
    """Test fruiting switches to the near-harvest fraction at day 5."""
    batch = make_batch(stage=GrowStage.FRUITING, days_in_stage=2, substrate_weight=1000)
    assert EstimateYieldUseCase().execute(batch, offset, now) == pytest.approx(grams)


def test_fruiting_without_start_uses_spawn_date(make_batch, now):
    """Test fruiting age falls back to the spawn date."""
    batch = make_batch(stage=GrowStage.FRUITING, spawned_days_ago=20, substrate_weight=1000)
    assert EstimateYieldUseCase().execute(batch, 0, now) == pytest.approx(500)


@pytest.mark.parametrize(
    "stage",
    [GrowStage.SPAWNING, GrowStage.COLONIZATION, GrowStage.COMPLETED, GrowStage.CONTAMINATED],
)
def test_other_stages_yield_nothing(make_batch, now, stage):
    """Test non-fruiting stages contribute zero."""
    batch = make_batch(stage=stage, substrate_weight=1000)
    assert EstimateYieldUseCase().execute(batch, 3, now) == 0


def test_custom_heuristics(make_batch, now):
    """Test heuristics are configurable."""
    heuristics = YieldHeuristics(harvesting=0.2, fruiting_ready_day=10)
    use_case = EstimateYieldUseCase(heuristics)
    harvesting = make_batch(stage=GrowStage.HARVESTING, substrate_weight=1000)
    fruiting = make_batch(stage=GrowStage.FRUITING, days_in_stage=2, substrate_weight=1000)

    assert use_case.execute(harvesting, 0, now) == pytest.approx(200)
    assert use_case.execute(fruiting, 4, now) == pytest.approx(300)
    assert use_case.execute(fruiting, 8, now) == pytest.approx(500)
