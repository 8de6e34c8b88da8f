"""Use case for resolving the expected duration of a grow stage."""

import logging
from typing import Dict, Optional

from ..calendar import round_half_up
from ..entities.day_range import DayRange, ExpectedDays
from ..entities.grow_stage import GrowStage
from ..entities.stage_config import StageConfig
from ..entities.strain import Strain

logger = logging.getLogger(__name__)


class ResolveStageTimingUseCase:
    """Resolve min/max/typical stage days, preferring strain-specific ranges."""

    def __init__(self, stage_configs: Dict[GrowStage, StageConfig]):
        """
        Initialize use case.

        Args:
            stage_configs: Static configuration for every grow stage
        """
        self.stage_configs = stage_configs

    def _strain_range(self, stage: GrowStage, strain: Optional[Strain]) -> Optional[DayRange]:
        if strain is None:
            return None
        if stage == GrowStage.COLONIZATION:
            return strain.colonization_days
        if stage == GrowStage.FRUITING:
            return strain.fruiting_days
        return None

    def _default_range(self, stage: GrowStage) -> DayRange:
        config = self.stage_configs.get(stage)
        if config is None:
            return DayRange(min=0, max=0)
        return config.default_range

    def execute(self, stage: GrowStage, strain: Optional[Strain] = None) -> ExpectedDays:
        """
        Execute stage timing resolution.

        Args:
            stage: Stage to resolve
            strain: Linked strain, if any

        Returns:
            ExpectedDays with the typical value at the rounded midpoint
        """
        day_range = self._strain_range(stage, strain) or self._default_range(stage)

        if day_range.is_malformed:
            logger.warning(
                f"Malformed {stage.value} range {day_range.bounds}"
                f"{f' for strain {strain.name}' if strain else ''}, normalizing"
            )
            day_range = day_range.normalized()

        return ExpectedDays(
            min=day_range.min,
            max=day_range.max,
            typical=round_half_up((day_range.min + day_range.max) / 2),
        )
