"""Strain entity."""

from dataclasses import dataclass
from typing import Optional

from .day_range import DayRange


@dataclass(frozen=True)
class Strain:
    """Genetic line that may carry its own stage duration ranges."""

    id: str
    name: str
    species: Optional[str] = None
    colonization_days: Optional[DayRange] = None
    fruiting_days: Optional[DayRange] = None

    def __str__(self) -> str:
        return self.name
