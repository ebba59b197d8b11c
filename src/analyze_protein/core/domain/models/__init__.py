"""Domain model classes."""

from .atom import AtomCoordinate, AtomCollection
from .geometry_statistics import GeometryStatistics

__all__ = [
    "AtomCoordinate",
    "AtomCollection",
    "GeometryStatistics",
]
