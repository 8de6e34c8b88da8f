"""Application services."""

from .harvest_forecast_service import HarvestForecast, HarvestForecastService

__all__ = [
    "HarvestForecast",
    "HarvestForecastService",
]
