"""Center of gravity, radius of gyration and Dmax of PDB structure files."""

from .core.services.atom_record_processor import AtomRecordProcessor
from .core.domain.models import AtomCoordinate, AtomCollection, GeometryStatistics

__version__ = "0.1.0"

__all__ = [
    "AtomRecordProcessor",
    "AtomCoordinate",
    "AtomCollection",
    "GeometryStatistics",
]
