"""Squared Euclidean distance helper shared by Rg and Dmax."""

from typing import Sequence

import numpy as np


def squared_distances_to(coords: np.ndarray, point: Sequence[float]) -> np.ndarray:
    """
    Squared distances from every row of an (n, 3) array to one point.

    No square root is taken; callers apply it where a true distance is needed.

    Args:
        coords: Array of shape (n, 3)
        point: Reference position

    Returns:
        Array of shape (n,)
    """
    diff = coords - np.asarray(point, dtype=np.float64)
    return (diff**2).sum(axis=1)
