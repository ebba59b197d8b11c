"""Domain interfaces."""

from .geometry_metric import GeometryMetric

__all__ = ["GeometryMetric"]
