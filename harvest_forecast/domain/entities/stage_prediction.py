"""Stage prediction entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from .confidence import Confidence
from .grow_stage import GrowStage

UNKNOWN_STRAIN = "Unknown Strain"


@dataclass(frozen=True)
class StagePrediction:
    """Predicted next stage transition for one active batch."""

    grow_id: str
    grow_name: str
    strain_name: str
    current_stage: GrowStage
    predicted_next_stage: Optional[GrowStage]
    days_in_current_stage: int
    expected_days_remaining: int
    predicted_transition_date: datetime
    confidence: Confidence
    is_overdue: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grow_id": self.grow_id,
            "grow_name": self.grow_name,
            "strain_name": self.strain_name,
            "current_stage": self.current_stage.value,
            "predicted_next_stage": (
                self.predicted_next_stage.value if self.predicted_next_stage else None
            ),
            "days_in_current_stage": self.days_in_current_stage,
            "expected_days_remaining": self.expected_days_remaining,
            "predicted_transition_date": self.predicted_transition_date,
            "confidence": self.confidence.value,
            "is_overdue": self.is_overdue,
        }
