"""Confidence tier enumeration."""

from enum import Enum


class Confidence(str, Enum):
    """Qualitative trust in a stage transition prediction."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    def degrade(self) -> "Confidence":
        """One level less confident."""
        return Confidence.MEDIUM if self is Confidence.HIGH else Confidence.LOW
