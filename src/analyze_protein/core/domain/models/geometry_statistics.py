"""Domain model for the geometric statistics of one structure file."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .atom import AtomCoordinate


@dataclass
class GeometryStatistics:
    """Contains Cg, Rg and Dmax computed for one atom collection."""

    atom_count: int
    center_of_gravity: AtomCoordinate
    radius_of_gyration: float
    max_distance: float
    source: Optional[str] = None

    def summary_line(self) -> str:
        return f"PDB file {self.source}, {self.atom_count} atoms were read"

    def center_of_gravity_line(self) -> str:
        x, y, z = self.center_of_gravity
        return f"Cg = {x:.3f} {y:.3f} {z:.3f}"

    def radius_of_gyration_line(self) -> str:
        return f"Rg = {self.radius_of_gyration:.3f}"

    def max_distance_line(self) -> str:
        return f"Dmax = {self.max_distance:.3f}"

    def report_lines(self) -> List[str]:
        """Lines printed for one file, in output order."""
        return [
            self.summary_line(),
            self.center_of_gravity_line(),
            self.radius_of_gyration_line(),
            self.max_distance_line(),
        ]

    def as_row(self) -> Dict[str, str]:
        """Flatten into a CSV row with 3-decimal values."""
        x, y, z = self.center_of_gravity
        return {
            "file": self.source or "",
            "atoms": str(self.atom_count),
            "cg_x": f"{x:.3f}",
            "cg_y": f"{y:.3f}",
            "cg_z": f"{z:.3f}",
            "rg": f"{self.radius_of_gyration:.3f}",
            "dmax": f"{self.max_distance:.3f}",
        }
