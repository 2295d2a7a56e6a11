"""Segment membership testing.

The membership test is a perimeter-sum check: a point P lies on segment AB
when ``|PA| + |PB| == |AB|``. It only makes sense for points already known
to lie on the infinite line through A and B (such as roots of the circle-line
quadratic); it does not verify colinearity by itself, although points far
off the line fail it anyway because ``|PA| + |PB|`` grows with the offset.
"""

import math

from circline.config import DEFAULT_EPSILON
from circline.geometry.primitives import Point2D, Segment


def is_point_on_segment(
    segment: Segment, point: Point2D, epsilon: float = DEFAULT_EPSILON
) -> bool:
    """Check whether a point on the segment's line lies within the segment.

    Args:
        segment: The finite segment.
        point: A point known to lie on the infinite line through the segment.
        epsilon: Tolerance on ``|d1 + d2 - length|`` (default 1e-4). Points
            within this slack of an endpoint are accepted.

    Returns:
        True if ``|d1 + d2 - length| < epsilon``. With epsilon == 0 nothing
        is accepted, because the comparison is strict.

    Raises:
        ValueError: If epsilon is negative.
    """
    if epsilon < 0.0:
        raise ValueError(f"epsilon must be >= 0, got {epsilon}")

    d1 = _dist(point, segment.start)
    d2 = _dist(point, segment.end)
    length = _dist(segment.start, segment.end)

    return abs(d1 + d2 - length) < epsilon


def _dist(a: Point2D, b: Point2D) -> float:
    # Plain sqrt of squares, the same rounding as the batch kernel
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)
