"""Use case for classifying prediction confidence."""

from ..entities.confidence import Confidence
from ..entities.day_range import DayRange

HIGH_BAND = (0.8, 1.2)
MEDIUM_BAND = (0.5, 1.5)


class ClassifyConfidenceUseCase:
    """Map elapsed stage days against the expected range to a confidence tier."""

    def execute(self, days_elapsed: float, expected: DayRange) -> Confidence:
        """
        Execute classification.

        Args:
            days_elapsed: Days spent in the stage so far
            expected: Expected duration range of the stage

        Returns:
            HIGH inside the widened range, MEDIUM inside the wider one, else LOW
        """
        expected = expected.normalized()

        if expected.min * HIGH_BAND[0] <= days_elapsed <= expected.max * HIGH_BAND[1]:
            return Confidence.HIGH
        if expected.min * MEDIUM_BAND[0] <= days_elapsed <= expected.max * MEDIUM_BAND[1]:
            return Confidence.MEDIUM
        return Confidence.LOW
