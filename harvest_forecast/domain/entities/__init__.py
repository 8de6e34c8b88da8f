"""Domain entities."""

from .grow_stage import GrowStage
from .confidence import Confidence
from .day_range import DayRange, ExpectedDays
from .stage_config import StageConfig
from .strain import Strain
from .batch import Batch, ACTIVE_STATUS, STAGE_START_FIELDS
from .stage_prediction import StagePrediction, UNKNOWN_STRAIN
from .day_forecast import DayForecast
from .forecast_summary import ForecastSummary, PeakDay
from .timeline_entry import TimelineEntry
from .yield_heuristics import YieldHeuristics

__all__ = [
    "GrowStage",
    "Confidence",
    "DayRange",
    "ExpectedDays",
    "StageConfig",
    "Strain",
    "Batch",
    "ACTIVE_STATUS",
    "STAGE_START_FIELDS",
    "StagePrediction",
    "UNKNOWN_STRAIN",
    "DayForecast",
    "ForecastSummary",
    "PeakDay",
    "TimelineEntry",
    "YieldHeuristics",
]
