"""Circle outline sampling.

A circle is drawn as a closed polyline of ``segment_count + 1`` points,
parameterized by ``t = i / segment_count`` with angle ``2 * pi * t``. The
last point is pinned to the first so the loop closes exactly, even though
``cos(2 * pi)`` and ``sin(2 * pi)`` are not bit-identical to
``cos(0)`` and ``sin(0)``.

Example:
    >>> from circline.geometry.circle import sample_circle
    >>> from circline.geometry.primitives import Circle, Point2D
    >>> points = sample_circle(Circle(Point2D(0.0, 0.0), 1.0), segment_count=4)
    >>> len(points)
    5
"""

import math

import numpy as np
import numpy.typing as npt

from circline.config import DEFAULT_SEGMENT_COUNT
from circline.geometry.primitives import Circle, Point2D


def _check_segment_count(segment_count: int) -> None:
    if not isinstance(segment_count, int) or segment_count < 1:
        raise ValueError(f"segment_count must be a positive integer, got {segment_count}")


def sample_circle(
    circle: Circle, segment_count: int = DEFAULT_SEGMENT_COUNT
) -> list[Point2D]:
    """Sample a circle into a closed polyline.

    Args:
        circle: The circle to sample.
        segment_count: Number of polyline segments (default 100).

    Returns:
        ``segment_count + 1`` points; the first and last point are equal.

    Raises:
        ValueError: If segment_count is not an integer of at least 1.
    """
    _check_segment_count(segment_count)

    cx, cy = circle.center.x, circle.center.y
    points = []
    for i in range(segment_count):
        angle = (i / segment_count) * 2.0 * math.pi
        points.append(
            Point2D(cx + circle.radius * math.cos(angle), cy + circle.radius * math.sin(angle))
        )

    # Close the loop
    points.append(points[0])
    return points


def circle_vertices(
    circle: Circle, segment_count: int = DEFAULT_SEGMENT_COUNT
) -> npt.NDArray[np.float32]:
    """Sample a circle into a vertex array ready for a line-strip buffer.

    Same samples as sample_circle(), packed as float32 for upload to a
    vertex buffer.

    Args:
        circle: The circle to sample.
        segment_count: Number of polyline segments (default 100).

    Returns:
        Array of shape (segment_count + 1, 2) with dtype float32.

    Raises:
        ValueError: If segment_count is not an integer of at least 1.
    """
    _check_segment_count(segment_count)

    angles = np.arange(segment_count, dtype=np.float64) / segment_count * 2.0 * np.pi
    vertices = np.empty((segment_count + 1, 2), dtype=np.float64)
    vertices[:-1, 0] = circle.center.x + circle.radius * np.cos(angles)
    vertices[:-1, 1] = circle.center.y + circle.radius * np.sin(angles)
    vertices[-1] = vertices[0]

    return vertices.astype(np.float32)
