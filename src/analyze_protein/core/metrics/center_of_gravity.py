import numpy as np

from ..domain.exceptions import EmptyFileError
from ..domain.interfaces.geometry_metric import GeometryMetric
from ..domain.models.atom import AtomCollection, AtomCoordinate


class CenterOfGravity(GeometryMetric):
    """Arithmetic mean of each axis over all atoms."""

    name = "center_of_gravity"

    def calculate(self, atoms: AtomCollection) -> AtomCoordinate:
        if atoms.is_empty():
            raise EmptyFileError(
                f"Error - 0 atoms were found in the file {atoms.source}",
                path=atoms.source,
            )
        x, y, z = atoms.as_array().mean(axis=0)
        return AtomCoordinate(float(x), float(y), float(z))
