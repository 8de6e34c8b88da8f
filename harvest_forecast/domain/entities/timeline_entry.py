"""Timeline entry entity."""

from dataclasses import dataclass
from datetime import date
from typing import List

from .stage_prediction import StagePrediction


@dataclass(frozen=True)
class TimelineEntry:
    """Stage transitions predicted for the same calendar date."""

    date: date
    is_today: bool
    predictions: List[StagePrediction]
