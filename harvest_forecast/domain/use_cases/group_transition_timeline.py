"""Use case for grouping stage predictions into a dated timeline."""

from datetime import date, datetime
from typing import Dict, List, Sequence

from ..entities.stage_prediction import StagePrediction
from ..entities.timeline_entry import TimelineEntry


class GroupTransitionTimelineUseCase:
    """Group predictions by the calendar date of their predicted transition."""

    def __init__(self, max_dates: int = 10):
        """
        Initialize use case.

        Args:
            max_dates: Maximum number of dates to keep
        """
        self.max_dates = max_dates

    def execute(self, predictions: Sequence[StagePrediction], now: datetime) -> List[TimelineEntry]:
        groups: Dict[date, List[StagePrediction]] = {}
        for prediction in predictions:
            groups.setdefault(prediction.predicted_transition_date.date(), []).append(prediction)

        today = now.date()
        return [
            TimelineEntry(date=day, is_today=day == today, predictions=items)
            for day, items in sorted(groups.items())[: self.max_dates]
        ]
