"""CLI interface for the harvest forecast."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ...application.services.harvest_forecast_service import (
    HarvestForecast,
    HarvestForecastService,
)
from ...domain.calendar import round_half_up
from ...domain.entities.stage_prediction import StagePrediction
from ...infrastructure.repositories.file_grow_snapshot_repository import (
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

logger = logging.getLogger(__name__)


def format_grams(grams: float) -> str:
    """Render a weight as grams, or kilograms from 1000 g up."""
    grams = round_half_up(grams)
    if grams >= 1000:
        return f"{grams / 1000:.1f}kg"
    return f"{grams}g"


def _prediction_line(service: HarvestForecastService, p: StagePrediction) -> str:
    flag = " OVERDUE" if p.is_overdue else ""
    return (
        f"  {p.grow_name} ({p.strain_name}): "
        f"{service.stage_label(p.current_stage)} -> {service.stage_label(p.predicted_next_stage)} "
        f"| day {p.days_in_current_stage}, ~{p.expected_days_remaining}d left "
        f"| {p.confidence.value}{flag}"
    )


def print_forecast(service: HarvestForecastService, forecast: HarvestForecast, week: int) -> None:
    summary = forecast.summary

    print("\n" + "=" * 60)
    print(" HARVEST FORECAST ")
    print("=" * 60)
    print(f" 7-day harvest:        {format_grams(summary.total_expected_harvest)}")
    if summary.peak_day:
        print(
            f" Peak day:             {summary.peak_day.date:%a %b %d} "
            f"({format_grams(summary.peak_day.amount)})"
        )
    else:
        print(" Peak day:             -")
    print(f" Upcoming transitions: {summary.upcoming_transitions}")
    print(f" Overdue grows:        {summary.overdue_grows}")
    print("-" * 60)

    today = forecast.daily_forecast[0].date
    for day in service.week(forecast, week):
        label = "Today" if day.date == today else f"{day.date:%a %d}"
        print(
            f" {label:<7} {format_grams(day.expected_harvest_grams):>8} "
            f"| {day.grows_harvesting} harvesting "
            f"| {len(day.stage_transitions)} transitions | {day.confidence.value}"
        )
        for p in day.stage_transitions:
            print("  " + _prediction_line(service, p))
    print("=" * 60)


def print_timeline(service: HarvestForecastService, forecast: HarvestForecast) -> None:
    entries = service.timeline(forecast)
    if not entries:
        print("No active grows to forecast")
        return
    for entry in entries:
        print("Today" if entry.is_today else f"{entry.date:%a %b %d}")
        for p in entry.predictions:
            print(_prediction_line(service, p))


def print_overdue(service: HarvestForecastService, forecast: HarvestForecast) -> None:
    overdue = forecast.overdue
    if not overdue:
        print("No overdue grows")
        return
    print(f"{len(overdue)} grows past their expected stage duration:")
    for p in overdue:
        print(_prediction_line(service, p))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Harvest forecast for active mushroom grows")
    parser.add_argument("--batches", type=str, default=str(BATCHES_FILE), help="Batch snapshot file")
    parser.add_argument("--strains", type=str, default=str(STRAINS_FILE), help="Strain snapshot file")
    parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="Reference time in ISO format (default: current time)",
    )
    parser.add_argument(
        "--horizon",
        type=int,
        default=FORECAST_SETTINGS["horizon_days"],
        help="Number of days to forecast",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    forecast_parser = subparsers.add_parser("forecast", help="Summary and calendar week")
    forecast_parser.add_argument("--week", type=int, default=0, help="Calendar week page (0 = this week)")

    subparsers.add_parser("timeline", help="Stage transitions grouped by date")
    subparsers.add_parser("overdue", help="Grows past their expected stage duration")

    export_parser = subparsers.add_parser("export", help="Write predictions and calendar to CSV")
    export_parser.add_argument("--output-dir", type=str, default=str(EXPORT_DIR))

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    args = build_parser().parse_args(argv)

    # === Initialize repository and service ===
    try:
        strains_file = args.strains if Path(args.strains).exists() else None
        if strains_file is None:
            logger.warning(f"No strain file at {args.strains}, using default stage durations")
        repo = FileGrowSnapshotRepository(args.batches, strains_file)
        service = HarvestForecastService(
            snapshot_repo=repo,
            stage_definitions=STAGE_DEFINITIONS,
            yield_heuristics=YIELD_HEURISTICS,
            forecast_settings={**FORECAST_SETTINGS, "horizon_days": args.horizon},
        )
    except Exception as e:
        logger.error(f"Failed to initialize service: {e}")
        return 1

    try:
        forecast = service.forecast(now=args.now)

        if args.command == "forecast":
            print_forecast(service, forecast, args.week)
        elif args.command == "timeline":
            print_timeline(service, forecast)
        elif args.command == "overdue":
            print_overdue(service, forecast)
        elif args.command == "export":
            files = service.export(forecast, Path(args.output_dir))
            for name, path in files.items():
                print(f"{name}: {path.resolve()}")
    except Exception as e:
        logger.error(f"Forecast failed: {e}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
