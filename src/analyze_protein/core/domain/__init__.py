"""Core domain models and interfaces."""

from .models.atom import AtomCoordinate, AtomCollection
from .models.geometry_statistics import GeometryStatistics
from .interfaces.geometry_metric import GeometryMetric
from .exceptions import (
    AnalysisError,
    MissingArgumentsError,
    FileOpenError,
    MalformedRecordError,
    CoordinateParseError,
    EmptyFileError,
)

__all__ = [
    "AtomCoordinate",
    "AtomCollection",
    "GeometryStatistics",
    "GeometryMetric",
    "AnalysisError",
    "MissingArgumentsError",
    "FileOpenError",
    "MalformedRecordError",
    "CoordinateParseError",
    "EmptyFileError",
]
