"""Example usage of the harvest forecast."""

import logging
from datetime import datetime

from harvest_forecast.application.services.harvest_forecast_service import HarvestForecastService
from harvest_forecast.infrastructure.repositories.file_grow_snapshot_repository import (
    FileGrowSnapshotRepository,
)
from config.settings import (
    BATCHES_FILE,
    STRAINS_FILE,
    EXPORT_DIR,
    STAGE_DEFINITIONS,
    YIELD_HEURISTICS,
    FORECAST_SETTINGS,
)

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    repo = FileGrowSnapshotRepository(str(BATCHES_FILE), str(STRAINS_FILE))
    service = HarvestForecastService(
        snapshot_repo=repo,
        stage_definitions=STAGE_DEFINITIONS,
        yield_heuristics=YIELD_HEURISTICS,
        forecast_settings=FORECAST_SETTINGS,
    )

    # Example 1: Forecast as of a fixed time
    print("=" * 60)
    print("Example 1: Stage predictions")
    print("=" * 60)
    forecast = service.forecast(now=datetime(2026, 10, 19, 9, 0))
    for p in forecast.predictions:
        print(
            f"{p.grow_name:<24} {p.current_stage.value:<13} "
            f"-> {p.predicted_transition_date:%Y-%m-%d} ({p.confidence.value})"
        )

    # Example 2: Daily calendar
    print("\n" + "=" * 60)
    print("Example 2: 14-day harvest calendar")
    print("=" * 60)
    for day in forecast.daily_forecast:
        print(
            f"{day.date:%a %Y-%m-%d}  {day.expected_harvest_grams:>6} g  "
            f"{len(day.stage_transitions)} transitions  {day.confidence.value}"
        )

    # Example 3: Summary
    print("\n" + "=" * 60)
    print("Example 3: Summary")
    print("=" * 60)
    summary = forecast.summary
    print(f"Next 7 days:          {summary.total_expected_harvest} g")
    if summary.peak_day:
        print(f"Peak day:             {summary.peak_day.date:%Y-%m-%d} ({summary.peak_day.amount} g)")
    print(f"Upcoming transitions: {summary.upcoming_transitions}")
    print(f"Overdue grows:        {summary.overdue_grows}")

    # Example 4: Export
    files = service.export(forecast, EXPORT_DIR)
    logger.info(f"Exported: {', '.join(str(p) for p in files.values())}")


if __name__ == "__main__":
    main()
