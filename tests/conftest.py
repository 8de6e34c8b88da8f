"""Shared fixtures."""

from datetime import datetime, timedelta
from typing import Dict, List

import pytest

from config.settings import STAGE_DEFINITIONS
from harvest_forecast.domain.entities.batch import Batch
from harvest_forecast.domain.entities.grow_stage import GrowStage
from harvest_forecast.domain.entities.stage_config import StageConfig
from harvest_forecast.domain.entities.strain import Strain
from harvest_forecast.domain.repositories.grow_snapshot_repository import GrowSnapshotRepository

NOW = datetime(2026, 10, 19, 9, 0)


class InMemorySnapshotRepository(GrowSnapshotRepository):
    """Snapshot repository holding records in memory."""

    def __init__(self, batches: List[Batch], strains: List[Strain] = None):
        self.batches = batches
        self.strains = strains or []

    def get_batches(self) -> List[Batch]:
        return list(self.batches)

    def get_strains(self) -> List[Strain]:
        return list(self.strains)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def stage_configs() -> Dict[GrowStage, StageConfig]:
    return {
        GrowStage(name): StageConfig.from_dict(name, definition)
        for name, definition in STAGE_DEFINITIONS.items()
    }


@pytest.fixture
def make_batch():
    """Factory for batches anchored relative to NOW."""

    def _make(
        id="g-1",
        stage=GrowStage.COLONIZATION,
        days_in_stage=None,
        spawned_days_ago=30,
        substrate_weight=1000.0,
        **kwargs,
    ) -> Batch:
        if days_in_stage is not None:
            field = {
                GrowStage.COLONIZATION: "colonization_started_at",
                GrowStage.FRUITING: "fruiting_started_at",
                GrowStage.HARVESTING: "first_harvest_at",
            }.get(stage)
            if field:
                kwargs.setdefault(field, NOW - timedelta(days=days_in_stage))
            else:
                spawned_days_ago = days_in_stage
        return Batch(
            id=id,
            name=kwargs.pop("name", f"Grow {id}"),
            current_stage=stage,
            spawned_at=NOW - timedelta(days=spawned_days_ago),
            substrate_weight=substrate_weight,
            **kwargs,
        )

    return _make
