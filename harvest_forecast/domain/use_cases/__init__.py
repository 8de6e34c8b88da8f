"""Use cases - core forecasting operations."""

from .resolve_stage_timing import ResolveStageTimingUseCase
from .classify_confidence import ClassifyConfidenceUseCase
from .predict_stage_transitions import PredictStageTransitionsUseCase
from .estimate_yield import EstimateYieldUseCase
from .build_daily_forecast import BuildDailyForecastUseCase
from .summarize_forecast import SummarizeForecastUseCase
from .group_transition_timeline import GroupTransitionTimelineUseCase

__all__ = [
    "ResolveStageTimingUseCase",
    "ClassifyConfidenceUseCase",
    "PredictStageTransitionsUseCase",
    "EstimateYieldUseCase",
    "BuildDailyForecastUseCase",
    "SummarizeForecastUseCase",
    "GroupTransitionTimelineUseCase",
]
