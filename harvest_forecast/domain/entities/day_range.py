"""Stage duration ranges."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class DayRange:
    """Minimum and maximum number of days a stage is expected to last."""

    min: float
    max: float

    @classmethod
    def from_dict(cls, definition: Optional[Dict[str, Any]]) -> Optional["DayRange"]:
        """Create DayRange from a ``{"min": .., "max": ..}`` mapping."""
        if not definition:
            return None
        if definition.get("min") is None or definition.get("max") is None:
            return None
        return cls(min=float(definition["min"]), max=float(definition["max"]))

    @property
    def is_malformed(self) -> bool:
        return self.min > self.max or self.min < 0 or self.max < 0

    def normalized(self) -> "DayRange":
        """Range with negative bounds clamped to 0 and bounds in order."""
        low, high = max(0.0, self.min), max(0.0, self.max)
        if low > high:
            low, high = high, low
        return DayRange(min=low, max=high)

    @property
    def bounds(self) -> Tuple[float, float]:
        return (self.min, self.max)


@dataclass(frozen=True)
class ExpectedDays:
    """Resolved expected duration of a stage."""

    min: float
    max: float
    typical: int

    @property
    def day_range(self) -> DayRange:
        return DayRange(min=self.min, max=self.max)
