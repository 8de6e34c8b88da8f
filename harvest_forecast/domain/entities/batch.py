"""Batch ("grow") entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from .grow_stage import GrowStage

ACTIVE_STATUS = "active"

# Stage -> attribute holding the date the batch entered that stage.
STAGE_START_FIELDS: Dict[GrowStage, str] = {
    GrowStage.SPAWNING: "spawned_at",
    GrowStage.COLONIZATION: "colonization_started_at",
    GrowStage.FRUITING: "fruiting_started_at",
    GrowStage.HARVESTING: "first_harvest_at",
}


@dataclass(frozen=True)
class Batch:
    """One cultivation run tracked from spawning to harvest or failure."""

    id: str
    name: str
    current_stage: GrowStage
    spawned_at: datetime
    substrate_weight: float  # grams
    strain_id: Optional[str] = None
    status: str = ACTIVE_STATUS
    colonization_started_at: Optional[datetime] = None
    fruiting_started_at: Optional[datetime] = None
    first_harvest_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE_STATUS

    def stage_started_at(self, stage: Optional[GrowStage] = None) -> datetime:
        """
        Date the batch entered ``stage`` (defaults to the current stage).

        Falls back to ``spawned_at`` when the stage start was never recorded.
        """
        stage = stage or self.current_stage
        field = STAGE_START_FIELDS.get(stage)
        started = getattr(self, field) if field else None
        return started if started is not None else self.spawned_at

    def __str__(self) -> str:
        return self.name
