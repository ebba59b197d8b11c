from .center_of_gravity import CenterOfGravity
from .radius_of_gyration import RadiusOfGyration
from .max_distance import MaxDistance, PAIR_SCANS, CANONICAL_SCAN, LEGACY_SCAN
from .distances import squared_distances_to

__all__ = [
    'CenterOfGravity',
    'RadiusOfGyration',
    'MaxDistance',
    'PAIR_SCANS',
    'CANONICAL_SCAN',
    'LEGACY_SCAN',
    'squared_distances_to',
]
