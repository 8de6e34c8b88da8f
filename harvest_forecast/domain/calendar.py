"""Date arithmetic shared by the forecasting use cases."""

import math
from datetime import datetime, timedelta, timezone

ONE_DAY = timedelta(days=1)


def naive_utc(moment: datetime) -> datetime:
    """Aware times converted to naive UTC; naive times pass through."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def midnight(moment: datetime) -> datetime:
    """Start of the day containing ``moment``."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def days_elapsed(start: datetime, now: datetime) -> int:
    """Whole days from ``start`` to ``now``; future starts count as 0."""
    return max(0, math.floor((now - start) / ONE_DAY))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -round_half_up(-value)
    return int(math.floor(value + 0.5))
