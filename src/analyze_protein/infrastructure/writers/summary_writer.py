"""CSV export of per-file geometry statistics."""

import csv
import logging
import os
from typing import Iterable

from ...core.domain.models.geometry_statistics import GeometryStatistics

logger = logging.getLogger(__name__)

FIELDNAMES = ["file", "atoms", "cg_x", "cg_y", "cg_z", "rg", "dmax"]


def save_statistics_to_csv(results: Iterable[GeometryStatistics], csv_file: str) -> int:
    """Save statistics to a CSV file.

    Args:
        results: Statistics in processing order
        csv_file: Path to CSV file to save

    Returns:
        Number of rows written
    """
    os.makedirs(os.path.dirname(os.path.abspath(csv_file)), exist_ok=True)

    rows = 0
    with open(csv_file, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        for result in results:
            writer.writerow(result.as_row())
            rows += 1

    logger.info(f"Saved statistics for {rows} files to {csv_file}")
    return rows
