"""Yield heuristic constants."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class YieldHeuristics:
    """
    Fractions of substrate weight expected as fresh harvest per day.

    These approximate biological efficiency (fresh weight over substrate
    weight) for a step-function estimate; they are not fitted values.
    """

    harvesting: float = 0.15
    fruiting_near: float = 0.50
    fruiting_early: float = 0.30
    fruiting_ready_day: int = 5  # days into fruiting when flushes are near

    @classmethod
    def from_dict(cls, definition: Dict[str, Any]) -> "YieldHeuristics":
        """Create YieldHeuristics from a settings dictionary."""
        defaults = cls()
        return cls(
            harvesting=definition.get("harvesting", defaults.harvesting),
            fruiting_near=definition.get("fruiting_near", defaults.fruiting_near),
            fruiting_early=definition.get("fruiting_early", defaults.fruiting_early),
            fruiting_ready_day=definition.get("fruiting_ready_day", defaults.fruiting_ready_day),
        )
