"""Geometry module for 2D primitives and intersection algorithms.

Components:
    primitives: Point2D, Circle and Segment value types
    circle: Circle outline sampling (polyline and vertex array)
    segment: Perimeter-sum segment membership test
    intersection: Circle / line-segment intersection solver
    batch: Taichi kernel intersecting one circle with many segments

All functions here are pure and can be used without the construction engine.
"""

from .circle import circle_vertices, sample_circle
from .intersection import IntersectionResult, IntersectionStatus, intersect_circle_line
from .primitives import Circle, Point2D, PointLike, Segment, as_point, distance
from .segment import is_point_on_segment

# Note: batch is NOT imported here so that the pure-Python geometry does not
# start the Taichi runtime. Import it directly from circline.geometry.batch.

__all__ = [
    "Point2D",
    "PointLike",
    "Circle",
    "Segment",
    "as_point",
    "distance",
    "sample_circle",
    "circle_vertices",
    "is_point_on_segment",
    "intersect_circle_line",
    "IntersectionResult",
    "IntersectionStatus",
]
