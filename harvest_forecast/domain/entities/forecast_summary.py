"""Forecast summary entities."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class PeakDay:
    """Day with the largest expected harvest."""

    date: datetime
    amount: int


@dataclass(frozen=True)
class ForecastSummary:
    """Headline statistics of a forecast."""

    total_expected_harvest: int  # grams over the summary window
    peak_day: Optional[PeakDay]
    upcoming_transitions: int
    overdue_grows: int
