"""Use case for predicting the next stage transition of each active batch."""

import logging
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional

from ..calendar import days_elapsed
from ..entities.batch import Batch
from ..entities.grow_stage import GrowStage
from ..entities.stage_config import StageConfig
from ..entities.stage_prediction import StagePrediction, UNKNOWN_STRAIN
from ..entities.strain import Strain
from .classify_confidence import ClassifyConfidenceUseCase
from .resolve_stage_timing import ResolveStageTimingUseCase

logger = logging.getLogger(__name__)


class PredictStageTransitionsUseCase:
    """Use case to predict when active batches leave their current stage."""

    def __init__(
        self,
        stage_configs: Dict[GrowStage, StageConfig],
        timing: Optional[ResolveStageTimingUseCase] = None,
        classifier: Optional[ClassifyConfidenceUseCase] = None,
    ):
        """
        Initialize use case.

        Args:
            stage_configs: Static configuration for every grow stage
            timing: Stage timing resolver (built from stage_configs if omitted)
            classifier: Confidence classifier
        """
        self.stage_configs = stage_configs
        self.timing = timing or ResolveStageTimingUseCase(stage_configs)
        self.classifier = classifier or ClassifyConfidenceUseCase()

    @staticmethod
    def is_predictable(batch: Batch) -> bool:
        return batch.is_active and not batch.current_stage.is_terminal

    def predict(self, batch: Batch, strain: Optional[Strain], now: datetime) -> StagePrediction:
        """Build the prediction for a single batch."""
        stage = batch.current_stage
        days_in_stage = days_elapsed(batch.stage_started_at(stage), now)
        expected = self.timing.execute(stage, strain)

        remaining = max(0, expected.typical - days_in_stage)
        config = self.stage_configs.get(stage)

        return StagePrediction(
            grow_id=batch.id,
            grow_name=batch.name,
            strain_name=strain.name if strain else UNKNOWN_STRAIN,
            current_stage=stage,
            predicted_next_stage=config.next_stage if config else None,
            days_in_current_stage=days_in_stage,
            expected_days_remaining=remaining,
            predicted_transition_date=now + timedelta(days=remaining),
            confidence=self.classifier.execute(days_in_stage, expected.day_range),
            is_overdue=days_in_stage > expected.max,
        )

    def execute(
        self,
        batches: Iterable[Batch],
        strains: Dict[str, Strain],
        now: datetime,
    ) -> List[StagePrediction]:
        """
        Execute prediction.

        Args:
            batches: Snapshot of batches
            strains: Strains keyed by id
            now: Reference time

        Returns:
            Predictions sorted by predicted transition date
        """
        predictions = []
        for batch in batches:
            if not self.is_predictable(batch):
                continue

            strain = strains.get(batch.strain_id) if batch.strain_id else None
            if batch.strain_id and strain is None:
                logger.warning(
                    f"Strain {batch.strain_id} not found for grow {batch.id}, using defaults"
                )
            predictions.append(self.predict(batch, strain, now))

        predictions.sort(key=lambda p: p.predicted_transition_date)
        logger.info(f"Predicted stage transitions for {len(predictions)} active grows")
        return predictions
