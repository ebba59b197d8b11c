"""Interface for geometric metrics computed over an atom collection."""

from abc import ABC, abstractmethod
from typing import Any

from ..models.atom import AtomCollection


class GeometryMetric(ABC):
    """Abstract base class for metrics over atom coordinates."""

    name: str = "metric"

    @abstractmethod
    def calculate(self, atoms: AtomCollection) -> Any:
        """
        Compute the metric.

        Args:
            atoms: Non-empty atom collection

        Returns:
            The metric value

        Raises:
            EmptyFileError: If the collection holds no atoms
        """
        pass
