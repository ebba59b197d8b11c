"""Service turning atom records into geometric statistics."""

import logging
from typing import Iterable, Optional

from ..domain.exceptions import EmptyFileError
from ..domain.models.atom import AtomCollection
from ..domain.models.geometry_statistics import GeometryStatistics
from ..metrics.center_of_gravity import CenterOfGravity
from ..metrics.max_distance import CANONICAL_SCAN, MaxDistance
from ..metrics.radius_of_gyration import RadiusOfGyration
from ..utils.benchmarking import PerformanceStats, timer
from ...infrastructure.readers.pdb_atom_reader import PDBAtomReader, read_atom_records

logger = logging.getLogger(__name__)


class AtomRecordProcessor:
    """
    Computes Cg, Rg and Dmax for one structure file at a time.

    No state is kept between files; each call builds a fresh atom collection.
    """

    def __init__(
        self,
        reader: Optional[PDBAtomReader] = None,
        pair_scan: str = CANONICAL_SCAN,
        max_atoms: Optional[int] = None,
        stats: Optional[PerformanceStats] = None,
    ):
        """
        Initialize processor.

        Args:
            reader: Reader used by ``analyze_file``; built from ``max_atoms``
                when omitted
            pair_scan: Pair enumeration for Dmax, ``canonical`` or ``legacy``
            max_atoms: Optional upper bound on atom records per file; give
                it to the reader instead when passing ``reader``
            stats: Optional collector for per-stage timings

        Raises:
            ValueError: If both ``reader`` and ``max_atoms`` are given
        """
        if reader is not None and max_atoms is not None:
            raise ValueError(
                "Pass max_atoms to the reader, not alongside an explicit reader"
            )
        self.reader = reader or PDBAtomReader(max_atoms=max_atoms)
        self.max_atoms = self.reader.max_atoms
        self.stats = stats
        self.center_of_gravity = CenterOfGravity()
        self.radius_of_gyration = RadiusOfGyration()
        self.max_distance = MaxDistance(pair_scan)

    def analyze_file(self, filepath: str) -> GeometryStatistics:
        """
        Read a structure file and compute its statistics.

        Raises:
            FileOpenError, EmptyFileError, MalformedRecordError,
            CoordinateParseError
        """
        logger.info(f"Processing {filepath}")
        with timer("read", self.stats):
            atoms = self.reader.read(filepath)
        return self.analyze_collection(atoms)

    def analyze_lines(
        self, lines: Iterable[str], source: Optional[str] = None
    ) -> GeometryStatistics:
        """Compute statistics for lines already read by the caller."""
        with timer("read", self.stats):
            atoms = read_atom_records(lines, source=source, max_atoms=self.max_atoms)
        return self.analyze_collection(atoms)

    def analyze_collection(self, atoms: AtomCollection) -> GeometryStatistics:
        """
        Compute statistics for a loaded atom collection.

        Raises:
            EmptyFileError: If the collection holds no atoms
        """
        if atoms.is_empty():
            raise EmptyFileError(
                f"Error - 0 atoms were found in the file {atoms.source}",
                path=atoms.source,
            )

        n_atoms = len(atoms)
        with timer(self.center_of_gravity.name, self.stats, n_atoms):
            center = self.center_of_gravity.calculate(atoms)
        with timer(self.radius_of_gyration.name, self.stats, n_atoms):
            rg = self.radius_of_gyration.calculate(atoms, center)
        with timer(self.max_distance.name, self.stats, n_atoms):
            dmax = self.max_distance.calculate(atoms)

        logger.debug(f"{atoms.source}: Cg={tuple(center)}, Rg={rg}, Dmax={dmax}")

        return GeometryStatistics(
            atom_count=n_atoms,
            center_of_gravity=center,
            radius_of_gyration=rg,
            max_distance=dmax,
            source=atoms.source,
        )
