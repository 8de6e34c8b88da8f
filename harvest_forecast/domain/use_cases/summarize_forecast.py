"""Use case for summarizing a daily forecast."""

from typing import Sequence

import numpy as np

from ..entities.day_forecast import DayForecast
from ..entities.forecast_summary import ForecastSummary, PeakDay
from ..entities.stage_prediction import StagePrediction


class SummarizeForecastUseCase:
    """Reduce the daily forecast and predictions to headline statistics."""

    def __init__(self, window_days: int = 7, upcoming_transition_days: int = 7):
        self.window_days = window_days
        self.upcoming_transition_days = upcoming_transition_days

    def execute(
        self,
        daily_forecast: Sequence[DayForecast],
        predictions: Sequence[StagePrediction],
    ) -> ForecastSummary:
        amounts = np.array([d.expected_harvest_grams for d in daily_forecast], dtype=np.int64)

        peak_day = None
        if amounts.size and amounts.max() > 0:
            # argmax returns the first index on ties
            peak = int(np.argmax(amounts))
            peak_day = PeakDay(date=daily_forecast[peak].date, amount=int(amounts[peak]))

        return ForecastSummary(
            total_expected_harvest=int(amounts[: self.window_days].sum()),
            peak_day=peak_day,
            upcoming_transitions=sum(
                1
                for p in predictions
                if p.expected_days_remaining <= self.upcoming_transition_days
                and p.predicted_next_stage is not None
            ),
            overdue_grows=sum(1 for p in predictions if p.is_overdue),
        )
