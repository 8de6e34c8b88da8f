"""Grow snapshot repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List

from ..entities.batch import Batch
from ..entities.strain import Strain


class GrowSnapshotRepository(ABC):
    """Abstract read-only source of batch and strain records."""

    @abstractmethod
    def get_batches(self) -> List[Batch]:
        """
        Retrieve every batch in the snapshot.

        Returns:
            List of Batch entities, active or not
        """
        pass

    @abstractmethod
    def get_strains(self) -> List[Strain]:
        """
        Retrieve strain reference records.

        Returns:
            List of Strain entities
        """
        pass

    def get_strain_index(self) -> Dict[str, Strain]:
        """Strains keyed by id."""
        return {strain.id: strain for strain in self.get_strains()}
