import math
from typing import Optional

from ..domain.exceptions import EmptyFileError
from ..domain.interfaces.geometry_metric import GeometryMetric
from ..domain.models.atom import AtomCollection, AtomCoordinate
from .center_of_gravity import CenterOfGravity
from .distances import squared_distances_to


class RadiusOfGyration(GeometryMetric):
    """Root-mean-square distance of atoms from the center of gravity."""

    name = "radius_of_gyration"

    def calculate(
        self, atoms: AtomCollection, center: Optional[AtomCoordinate] = None
    ) -> float:
        """
        Compute Rg.

        Args:
            atoms: Non-empty atom collection
            center: Center of gravity already computed for ``atoms``; computed
                here when omitted

        Returns:
            Radius of gyration in the units of the input coordinates
        """
        if atoms.is_empty():
            raise EmptyFileError(
                f"Error - 0 atoms were found in the file {atoms.source}",
                path=atoms.source,
            )
        if center is None:
            center = CenterOfGravity().calculate(atoms)

        mean_square = squared_distances_to(atoms.as_array(), center).mean()
        return math.sqrt(float(mean_square))
