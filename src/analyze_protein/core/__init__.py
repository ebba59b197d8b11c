"""Core domain models and metrics for structure geometry analysis."""

from .domain.models.atom import AtomCoordinate, AtomCollection
from .domain.models.geometry_statistics import GeometryStatistics
from .domain.interfaces.geometry_metric import GeometryMetric
from .metrics import CenterOfGravity, RadiusOfGyration, MaxDistance

__all__ = [
    "AtomCoordinate",
    "AtomCollection",
    "GeometryStatistics",
    "GeometryMetric",
    "CenterOfGravity",
    "RadiusOfGyration",
    "MaxDistance",
]
