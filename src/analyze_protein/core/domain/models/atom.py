#!/usr/bin/env python3
# src/analyze_protein/core/domain/models/atom.py

"""
Domain models for atom coordinates read from a structure file.
"""

from typing import Iterable, Iterator, List, NamedTuple, Optional

import numpy as np


class AtomCoordinate(NamedTuple):
    """Position of a single atom, in the units of the input file."""

    x: float
    y: float
    z: float


class AtomCollection:
    """Ordered atom coordinates of one structure file."""

    def __init__(
        self,
        coordinates: Optional[Iterable[AtomCoordinate]] = None,
        source: Optional[str] = None,
    ):
        """
        Initialize collection.

        Args:
            coordinates: Initial coordinates, kept in the given order
            source: Path of the file the atoms were read from
        """
        self.source = source
        self._coordinates: List[AtomCoordinate] = list(coordinates or [])

    def append(self, coordinate: AtomCoordinate) -> None:
        self._coordinates.append(coordinate)

    def __len__(self) -> int:
        return len(self._coordinates)

    def __iter__(self) -> Iterator[AtomCoordinate]:
        return iter(self._coordinates)

    def __getitem__(self, index: int) -> AtomCoordinate:
        return self._coordinates[index]

    def is_empty(self) -> bool:
        return not self._coordinates

    def as_array(self) -> np.ndarray:
        """Return coordinates as a float64 array of shape (n, 3)."""
        if not self._coordinates:
            return np.empty((0, 3), dtype=np.float64)
        return np.asarray(self._coordinates, dtype=np.float64)

    def __repr__(self) -> str:
        return f"AtomCollection(source={self.source!r}, atoms={len(self)})"
