"""Grow stage enumeration."""

from enum import Enum


class GrowStage(str, Enum):
    """Lifecycle stage of a cultivation batch."""

    SPAWNING = "spawning"
    COLONIZATION = "colonization"
    FRUITING = "fruiting"
    HARVESTING = "harvesting"
    COMPLETED = "completed"
    CONTAMINATED = "contaminated"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        """Whether the stage ends the grow."""
        return self in (GrowStage.COMPLETED, GrowStage.CONTAMINATED, GrowStage.ABORTED)

    def label(self) -> str:
        """Human readable label."""
        return self.value.capitalize()
