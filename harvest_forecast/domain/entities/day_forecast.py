"""Day forecast entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from .confidence import Confidence
from .stage_prediction import StagePrediction


@dataclass(frozen=True)
class DayForecast:
    """Expected harvest and stage transitions for one calendar day."""

    date: datetime  # midnight
    expected_harvest_grams: int
    grows_harvesting: int
    stage_transitions: List[StagePrediction] = field(default_factory=list)
    confidence: Confidence = Confidence.HIGH

    @property
    def has_transitions(self) -> bool:
        return len(self.stage_transitions) > 0

    @property
    def has_harvest(self) -> bool:
        return self.expected_harvest_grams > 0
