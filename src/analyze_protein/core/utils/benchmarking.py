# src/analyze_protein/core/utils/benchmarking.py

import time
import logging
from typing import Dict, Optional, List
from contextlib import contextmanager
from dataclasses import dataclass, field
from statistics import mean, median

logger = logging.getLogger(__name__)


@dataclass
class TimingStats:
    """Timings of one analysis stage across all files."""

    name: str
    times: List[float] = field(default_factory=list)
    atoms_processed: int = 0

    def add_timing(self, elapsed: float, atoms: int = 0) -> None:
        """Add a timing measurement.

        Args:
            elapsed: Time taken in seconds
            atoms: Number of atoms handled by the stage (optional)
        """
        self.times.append(elapsed)
        self.atoms_processed += atoms

    @property
    def count(self) -> int:
        return len(self.times)

    @property
    def total_time(self) -> float:
        return sum(self.times)

    @property
    def avg_time(self) -> float:
        return mean(self.times) if self.times else 0.0

    @property
    def median_time(self) -> float:
        return median(self.times) if self.times else 0.0

    def __str__(self) -> str:
        if not self.times:
            return f"{self.name}: No timing data"

        stats = [
            f"Total: {self.total_time:.4f}s",
            f"Count: {self.count}",
            f"Avg: {self.avg_time:.4f}s",
            f"Median: {self.median_time:.4f}s",
            f"Max: {max(self.times):.4f}s",
        ]
        if self.atoms_processed:
            stats.append(f"Atoms: {self.atoms_processed}")

        return f"{self.name}: " + ", ".join(stats)


class PerformanceStats:
    """Collect and report per-stage timings."""

    def __init__(self) -> None:
        self.stats: Dict[str, TimingStats] = {}

    def get_stats(self, name: str) -> TimingStats:
        """Get or create stats for a stage."""
        if name not in self.stats:
            self.stats[name] = TimingStats(name=name)
        return self.stats[name]

    def add_timing(self, name: str, elapsed: float, atoms: int = 0) -> None:
        self.get_stats(name).add_timing(elapsed, atoms)

    def report(self) -> str:
        """Generate a performance report, stages in first-seen order."""
        if not self.stats:
            return "No performance data collected"

        lines = []
        total_time = sum(s.total_time for s in self.stats.values())

        for stats in self.stats.values():
            pct = (stats.total_time / total_time) * 100 if total_time > 0 else 0
            lines.append(f"{stats} ({pct:.1f}%)")

        return "\n".join(lines)


@contextmanager
def timer(name: str, stats: Optional[PerformanceStats] = None, atoms: int = 0):
    """Context manager timing a block with optional stats collection.

    Args:
        name: Name of the stage being timed
        stats: Optional PerformanceStats object to collect metrics
        atoms: Number of atoms handled by the block (optional)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        if stats:
            stats.add_timing(name, elapsed, atoms)
        logger.debug(f"{name} took {elapsed:.4f}s")
