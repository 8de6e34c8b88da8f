"""Static per-stage configuration."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .day_range import DayRange
from .grow_stage import GrowStage


@dataclass(frozen=True)
class StageConfig:
    """Successor stage and default duration range for one grow stage."""

    stage: GrowStage
    label: str
    next_stage: Optional[GrowStage]
    typical_days_min: int
    typical_days_max: int

    @classmethod
    def from_dict(cls, name: str, definition: Dict[str, Any]) -> "StageConfig":
        """Create StageConfig from a settings dictionary entry."""
        stage = GrowStage(name)
        next_stage = definition.get("next_stage")
        return cls(
            stage=stage,
            label=definition.get("label", stage.label()),
            next_stage=GrowStage(next_stage) if next_stage else None,
            typical_days_min=definition.get("typical_days_min", 0),
            typical_days_max=definition.get("typical_days_max", 0),
        )

    @property
    def default_range(self) -> DayRange:
        return DayRange(min=self.typical_days_min, max=self.typical_days_max)

    def __str__(self) -> str:
        return self.label
