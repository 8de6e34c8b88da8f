"""FastAPI main application."""

import logging
from datetime import date as Date, datetime
from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from ...application.services.harvest_forecast_service import (
    HarvestForecast,
    HarvestForecastService,
)
from ...domain.entities.day_forecast import DayForecast
from ...domain.entities.stage_prediction import StagePrediction
from ...infrastructure.repositories.file_grow_snapshot_repository import (
    FileGrowSnapshotRepository,
)
from config.settings import (
    BATCHES_FILE,
    STRAINS_FILE,
    STAGE_DEFINITIONS,
    YIELD_HEURISTICS,
    FORECAST_SETTINGS,
    API_SETTINGS,
)

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)


@lru_cache(maxsize=1)
def get_service() -> HarvestForecastService:
    """Service backed by the configured snapshot files."""
    repo = FileGrowSnapshotRepository(
        str(BATCHES_FILE), str(STRAINS_FILE) if STRAINS_FILE.exists() else None
    )
    return HarvestForecastService(
        snapshot_repo=repo,
        stage_definitions=STAGE_DEFINITIONS,
        yield_heuristics=YIELD_HEURISTICS,
        forecast_settings=FORECAST_SETTINGS,
    )


# Response models
class PredictionResponse(BaseModel):
    """A predicted stage transition."""

    grow_id: str
    grow_name: str
    strain_name: str
    current_stage: str
    predicted_next_stage: Optional[str] = None
    days_in_current_stage: int
    expected_days_remaining: int
    predicted_transition_date: datetime
    confidence: str
    is_overdue: bool


class DayForecastResponse(BaseModel):
    """One day of the harvest calendar."""

    date: Date
    expected_harvest_grams: int
    grows_harvesting: int
    stage_transitions: List[PredictionResponse] = Field(default_factory=list)
    confidence: str


class PeakDayResponse(BaseModel):
    date: Date
    amount: int


class SummaryResponse(BaseModel):
    """Headline forecast statistics."""

    total_expected_harvest: int = Field(..., description="Grams expected over the next 7 days")
    peak_day: Optional[PeakDayResponse] = None
    upcoming_transitions: int
    overdue_grows: int


class ForecastResponse(BaseModel):
    generated_at: datetime
    predictions: List[PredictionResponse]
    daily_forecast: List[DayForecastResponse]
    summary: SummaryResponse


class TimelineEntryResponse(BaseModel):
    date: Date
    is_today: bool
    predictions: List[PredictionResponse]


def _prediction(p: StagePrediction) -> PredictionResponse:
    return PredictionResponse(**p.to_dict())


def _day(d: DayForecast) -> DayForecastResponse:
    return DayForecastResponse(
        date=d.date.date(),
        expected_harvest_grams=d.expected_harvest_grams,
        grows_harvesting=d.grows_harvesting,
        stage_transitions=[_prediction(p) for p in d.stage_transitions],
        confidence=d.confidence.value,
    )


def _run_forecast(service: HarvestForecastService, now: Optional[datetime]) -> HarvestForecast:
    try:
        return service.forecast(now=now)
    except ValueError as e:
        logger.error(f"Invalid snapshot or request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Forecast error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Harvest Forecast API",
        "version": API_SETTINGS["version"],
        "endpoints": {
            "forecast": "/forecast",
            "predictions": "/predictions",
            "timeline": "/timeline",
            "calendar": "/calendar/week/{week}",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/forecast", response_model=ForecastResponse)
def forecast(
    now: Optional[datetime] = None,
    service: HarvestForecastService = Depends(get_service),
) -> ForecastResponse:
    """
    Full forecast: predictions, daily calendar and summary.

    Args:
        now: Reference time (defaults to the current time)
    """
    result = _run_forecast(service, now)
    summary = result.summary
    return ForecastResponse(
        generated_at=result.generated_at,
        predictions=[_prediction(p) for p in result.predictions],
        daily_forecast=[_day(d) for d in result.daily_forecast],
        summary=SummaryResponse(
            total_expected_harvest=summary.total_expected_harvest,
            peak_day=(
                PeakDayResponse(date=summary.peak_day.date.date(), amount=summary.peak_day.amount)
                if summary.peak_day
                else None
            ),
            upcoming_transitions=summary.upcoming_transitions,
            overdue_grows=summary.overdue_grows,
        ),
    )


@app.get("/predictions", response_model=List[PredictionResponse])
def predictions(
    now: Optional[datetime] = None,
    overdue_only: bool = False,
    service: HarvestForecastService = Depends(get_service),
) -> List[PredictionResponse]:
    """Stage predictions sorted by transition date."""
    result = _run_forecast(service, now)
    items = result.overdue if overdue_only else result.predictions
    return [_prediction(p) for p in items]


@app.get("/timeline", response_model=List[TimelineEntryResponse])
def timeline(
    now: Optional[datetime] = None,
    service: HarvestForecastService = Depends(get_service),
) -> List[TimelineEntryResponse]:
    """Stage transitions grouped by date."""
    result = _run_forecast(service, now)
    return [
        TimelineEntryResponse(
            date=entry.date,
            is_today=entry.is_today,
            predictions=[_prediction(p) for p in entry.predictions],
        )
        for entry in service.timeline(result)
    ]


@app.get("/calendar/week/{week}", response_model=List[DayForecastResponse])
def calendar_week(
    week: int,
    now: Optional[datetime] = None,
    service: HarvestForecastService = Depends(get_service),
) -> List[DayForecastResponse]:
    """One week page of the daily calendar."""
    result = _run_forecast(service, now)
    try:
        days = service.week(result, week)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [_day(d) for d in days]


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
