"""Service orchestrating the harvest forecasting pipeline."""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from ...domain.calendar import naive_utc
from ...domain.entities.day_forecast import DayForecast
from ...domain.entities.forecast_summary import ForecastSummary
from ...domain.entities.grow_stage import GrowStage
from ...domain.entities.stage_config import StageConfig
from ...domain.entities.stage_prediction import StagePrediction
from ...domain.entities.timeline_entry import TimelineEntry
from ...domain.entities.yield_heuristics import YieldHeuristics
from ...domain.repositories.grow_snapshot_repository import GrowSnapshotRepository

# Use cases
from ...domain.use_cases.resolve_stage_timing import ResolveStageTimingUseCase
from ...domain.use_cases.predict_stage_transitions import PredictStageTransitionsUseCase
from ...domain.use_cases.estimate_yield import EstimateYieldUseCase
from ...domain.use_cases.build_daily_forecast import BuildDailyForecastUseCase
from ...domain.use_cases.summarize_forecast import SummarizeForecastUseCase
from ...domain.use_cases.group_transition_timeline import GroupTransitionTimelineUseCase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HarvestForecast:
    """The three read results of one forecast run."""

    generated_at: datetime
    predictions: List[StagePrediction]
    daily_forecast: List[DayForecast]
    summary: ForecastSummary

    @property
    def overdue(self) -> List[StagePrediction]:
        return [p for p in self.predictions if p.is_overdue]


class HarvestForecastService:
    """Builds stage predictions, a daily harvest calendar and summary from a snapshot."""

    def __init__(
        self,
        snapshot_repo: GrowSnapshotRepository,
        stage_definitions: Dict[str, Dict[str, Any]],
        yield_heuristics: Optional[Dict[str, Any]] = None,
        forecast_settings: Optional[Dict[str, Any]] = None,
    ):
        self.snapshot_repo = snapshot_repo
        settings = forecast_settings or {}

        self.horizon_days = settings.get("horizon_days", 14)
        self.days_per_week = settings.get("days_per_week", 7)
        if self.horizon_days <= 0:
            raise ValueError(f"Forecast horizon must be positive, got {self.horizon_days}")

        # Convert definitions to domain entities
        self.stage_configs = {
            GrowStage(name): StageConfig.from_dict(name, definition)
            for name, definition in stage_definitions.items()
        }
        self.heuristics = YieldHeuristics.from_dict(yield_heuristics or {})

        # Use cases
        self.timing_uc = ResolveStageTimingUseCase(self.stage_configs)
        self.predict_uc = PredictStageTransitionsUseCase(self.stage_configs, timing=self.timing_uc)
        self.build_forecast_uc = BuildDailyForecastUseCase(
            estimator=EstimateYieldUseCase(self.heuristics),
            horizon_days=self.horizon_days,
            confidence_decay_after_day=settings.get("confidence_decay_after_day", 7),
        )
        self.summarize_uc = SummarizeForecastUseCase(
            window_days=settings.get("summary_window_days", 7),
            upcoming_transition_days=settings.get("upcoming_transition_days", 7),
        )
        self.timeline_uc = GroupTransitionTimelineUseCase(
            max_dates=settings.get("timeline_max_dates", 10)
        )

    def stage_label(self, stage: Optional[GrowStage]) -> str:
        if stage is None:
            return "-"
        config = self.stage_configs.get(stage)
        return config.label if config else stage.label()

    def forecast(self, now: Optional[datetime] = None) -> HarvestForecast:
        """Run the full pipeline against the current snapshot."""
        now = naive_utc(now) if now else datetime.now()
        logger.info(f"=== Building harvest forecast as of {now.isoformat()} ===")

        batches = self.snapshot_repo.get_batches()
        strains = self.snapshot_repo.get_strain_index()

        predictions = self.predict_uc.execute(batches, strains, now)
        daily_forecast = self.build_forecast_uc.execute(predictions, batches, now)
        summary = self.summarize_uc.execute(daily_forecast, predictions)

        logger.info(
            f"Forecast ready: {summary.total_expected_harvest}g over the next week, "
            f"{summary.upcoming_transitions} upcoming transitions, "
            f"{summary.overdue_grows} overdue grows"
        )
        return HarvestForecast(
            generated_at=now,
            predictions=predictions,
            daily_forecast=daily_forecast,
            summary=summary,
        )

    @property
    def week_count(self) -> int:
        return -(-self.horizon_days // self.days_per_week)

    def week(self, forecast: HarvestForecast, week_offset: int) -> List[DayForecast]:
        """Days of the calendar shown for one week page."""
        if not 0 <= week_offset < self.week_count:
            raise ValueError(
                f"Week offset must be between 0 and {self.week_count - 1}, got {week_offset}"
            )
        start = week_offset * self.days_per_week
        return forecast.daily_forecast[start : start + self.days_per_week]

    def timeline(self, forecast: HarvestForecast) -> List[TimelineEntry]:
        """Predictions grouped by transition date."""
        return self.timeline_uc.execute(forecast.predictions, forecast.generated_at)

    def export(self, forecast: HarvestForecast, export_dir: Path) -> Dict[str, Path]:
        """Write predictions and the daily calendar to CSV files."""
        export_dir = Path(export_dir)
        export_dir.mkdir(parents=True, exist_ok=True)

        predictions_file = export_dir / "stage_predictions.csv"
        forecast_file = export_dir / "daily_forecast.csv"

        pd.DataFrame(
            [p.to_dict() for p in forecast.predictions],
            columns=[
                "grow_id",
                "grow_name",
                "strain_name",
                "current_stage",
                "predicted_next_stage",
                "days_in_current_stage",
                "expected_days_remaining",
                "predicted_transition_date",
                "confidence",
                "is_overdue",
            ],
        ).to_csv(predictions_file, index=False)

        pd.DataFrame(
            [
                {
                    "date": d.date.date().isoformat(),
                    "expected_harvest_grams": d.expected_harvest_grams,
                    "grows_harvesting": d.grows_harvesting,
                    "stage_transitions": len(d.stage_transitions),
                    "transition_grow_ids": ";".join(t.grow_id for t in d.stage_transitions),
                    "confidence": d.confidence.value,
                }
                for d in forecast.daily_forecast
            ]
        ).to_csv(forecast_file, index=False)

        logger.info(f"Exported forecast to {export_dir}")
        return {"predictions": predictions_file, "daily_forecast": forecast_file}
