"""Use case for building the day-by-day harvest calendar."""

import logging
from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from ..calendar import midnight, round_half_up
from ..entities.batch import Batch
from ..entities.confidence import Confidence
from ..entities.day_forecast import DayForecast
from ..entities.grow_stage import GrowStage
from ..entities.stage_prediction import StagePrediction
from .estimate_yield import EstimateYieldUseCase

logger = logging.getLogger(__name__)

HARVEST_ELIGIBLE_STAGES = (GrowStage.FRUITING, GrowStage.HARVESTING)


class BuildDailyForecastUseCase:
    """Combine stage predictions and yield estimates into daily buckets."""

    def __init__(
        self,
        estimator: Optional[EstimateYieldUseCase] = None,
        horizon_days: int = 14,
        confidence_decay_after_day: int = 7,
    ):
        """
        Initialize use case.

        Args:
            estimator: Per-batch daily yield estimator
            horizon_days: Number of days to forecast
            confidence_decay_after_day: Days beyond this index lose one confidence level
        """
        self.estimator = estimator or EstimateYieldUseCase()
        self.horizon_days = horizon_days
        self.confidence_decay_after_day = confidence_decay_after_day

    def _day_confidence(self, transitions: List[StagePrediction], day_index: int) -> Confidence:
        confidence = Confidence.HIGH
        if transitions:
            low = sum(1 for t in transitions if t.confidence == Confidence.LOW)
            medium = sum(1 for t in transitions if t.confidence == Confidence.MEDIUM)
            if low > medium:
                confidence = Confidence.LOW
            elif medium > 0:
                confidence = Confidence.MEDIUM
        if day_index > self.confidence_decay_after_day:
            confidence = confidence.degrade()
        return confidence

    def execute(
        self,
        predictions: Sequence[StagePrediction],
        batches: Sequence[Batch],
        now: datetime,
    ) -> List[DayForecast]:
        """
        Execute calendar aggregation.

        Args:
            predictions: Stage predictions of the active batches
            batches: Snapshot of batches
            now: Reference time

        Returns:
            Exactly ``horizon_days`` DayForecast entries, starting today
        """
        today = midnight(now)
        harvesting = [
            b for b in batches if b.is_active and b.current_stage in HARVEST_ELIGIBLE_STAGES
        ]

        forecast = []
        for i in range(self.horizon_days):
            day = today + timedelta(days=i)
            transitions = [
                p for p in predictions if midnight(p.predicted_transition_date) == day
            ]
            expected = sum(self.estimator.execute(b, i, now) for b in harvesting)

            forecast.append(
                DayForecast(
                    date=day,
                    expected_harvest_grams=round_half_up(expected),
                    grows_harvesting=len(harvesting),
                    stage_transitions=transitions,
                    confidence=self._day_confidence(transitions, i),
                )
            )

        logger.info(
            f"Built {len(forecast)}-day forecast from {len(harvesting)} harvest-eligible grows"
        )
        return forecast
