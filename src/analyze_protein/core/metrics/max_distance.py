"""Maximum pairwise distance (Dmax) between atoms."""

import logging
import math

from ..domain.exceptions import EmptyFileError
from ..domain.interfaces.geometry_metric import GeometryMetric
from ..domain.models.atom import AtomCollection
from .distances import squared_distances_to

logger = logging.getLogger(__name__)

CANONICAL_SCAN = "canonical"
LEGACY_SCAN = "legacy"
PAIR_SCANS = (CANONICAL_SCAN, LEGACY_SCAN)


class MaxDistance(GeometryMetric):
    """Largest Euclidean distance between any two atoms.

    Two enumerations of atom pairs are supported. ``canonical`` compares each
    atom ``i`` with atoms ``j > i``. ``legacy`` compares each atom
    ``i < n - 1`` with every atom ``j >= 1``, which visits some pairs twice
    and a few atoms against themselves. Both return the same maximum; with a
    single atom no pair is compared and the result is 0.
    """

    name = "max_distance"

    def __init__(self, pair_scan: str = CANONICAL_SCAN):
        if pair_scan not in PAIR_SCANS:
            raise ValueError(
                f"Unknown pair scan {pair_scan!r}, expected one of {PAIR_SCANS}"
            )
        self.pair_scan = pair_scan

    def calculate(self, atoms: AtomCollection) -> float:
        if atoms.is_empty():
            raise EmptyFileError(
                f"Error - 0 atoms were found in the file {atoms.source}",
                path=atoms.source,
            )

        coords = atoms.as_array()
        n_atoms = len(coords)
        max_squared = 0.0

        for i in range(n_atoms - 1):
            start = i + 1 if self.pair_scan == CANONICAL_SCAN else 1
            row_max = float(squared_distances_to(coords[start:], coords[i]).max())
            if row_max > max_squared:
                max_squared = row_max

        logger.debug(
            f"Scanned {n_atoms} atoms with {self.pair_scan} pair enumeration"
        )
        return math.sqrt(max_squared)
