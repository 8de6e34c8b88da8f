"""Use case for estimating daily harvest weight of a batch."""

from datetime import datetime
from typing import Optional

from ..calendar import days_elapsed
from ..entities.batch import Batch
from ..entities.grow_stage import GrowStage
from ..entities.yield_heuristics import YieldHeuristics


class EstimateYieldUseCase:
    """Step-function estimate of the fresh weight a batch yields on a given day."""

    def __init__(self, heuristics: Optional[YieldHeuristics] = None):
        self.heuristics = heuristics or YieldHeuristics()

    def execute(self, batch: Batch, day_offset: int, now: datetime) -> float:
        """
        Execute estimation.

        Args:
            batch: Batch to estimate
            day_offset: Days ahead of today (0 = today)
            now: Reference time

        Returns:
            Expected grams harvested on that day
        """
        h = self.heuristics

        if batch.current_stage == GrowStage.HARVESTING:
            return batch.substrate_weight * h.harvesting

        if batch.current_stage == GrowStage.FRUITING:
            days_in_fruiting = days_elapsed(batch.stage_started_at(GrowStage.FRUITING), now)
            if days_in_fruiting + day_offset >= h.fruiting_ready_day:
                return batch.substrate_weight * h.fruiting_near
            return batch.substrate_weight * h.fruiting_early

        return 0.0
