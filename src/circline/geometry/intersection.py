"""Circle / line-segment intersection.

The infinite line through the segment is written in slope-intercept form
``v = m * u + b`` and substituted into the circle equation
``(u - cu)^2 + (v - cv)^2 = r^2``, giving the quadratic:

    A*u^2 + B*u + C = 0

where:
    A = 1 + m^2
    B = 2 * (m*b - m*cv - cu)
    C = cu^2 + (b - cv)^2 - r^2

For shallow segments ``(u, v) = (x, y)``. For steep segments
(``|dy| > |dx|``) the axes are swapped, ``(u, v) = (y, x)``, so the slope
never exceeds 1 in magnitude and a vertical segment reduces to ``x = x1``
solved directly against the circle. The real roots are then filtered to
those lying on the finite segment with the perimeter-sum membership test.

Result ordering follows the ``+sqrt(disc)`` root first in x, i.e. the point
with the larger x comes first. For an exactly vertical segment both points
share x and the ``+sqrt(disc)`` root (larger y) comes first.

Example:
    >>> from circline.geometry.intersection import intersect_circle_line
    >>> from circline.geometry.primitives import Circle, Point2D, Segment
    >>> circle = Circle(Point2D(0.0, 0.0), 2.0)
    >>> result = intersect_circle_line(circle, Segment(Point2D(-5.0, 0.0), Point2D(5.0, 0.0)))
    >>> [p.as_tuple() for p in result]
    [(2.0, 0.0), (-2.0, 0.0)]
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import overload

import numpy as np
import numpy.typing as npt

from circline.config import DEFAULT_DEGENERATE_TOLERANCE, DEFAULT_EPSILON
from circline.geometry.primitives import Circle, Point2D, Segment
from circline.geometry.segment import is_point_on_segment

# Relative round-off band below zero in which the discriminant counts as zero
DISCRIMINANT_RTOL = 1e-12


class IntersectionStatus(IntEnum):
    """Diagnostic outcome of a circle-line intersection query."""

    HIT = 0
    MISS = 1
    DEGENERATE_CIRCLE = 2
    DEGENERATE_SEGMENT = 3


@dataclass(frozen=True)
class IntersectionResult(Sequence[Point2D]):
    """Ordered intersection points of a circle with a finite segment.

    Behaves as a read-only sequence of 0, 1 or 2 points.

    Attributes:
        points: The accepted intersection points, larger x first.
        status: HIT when at least one point was accepted, MISS when the
            line misses the circle or every root falls off the segment, or
            one of the DEGENERATE_* values when the solver never ran.
        discriminant: The discriminant of the solved quadratic, or None when
            the input was degenerate or the quadratic overflowed.
    """

    points: tuple[Point2D, ...] = ()
    status: IntersectionStatus = IntersectionStatus.MISS
    discriminant: float | None = None

    @overload
    def __getitem__(self, index: int) -> Point2D: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Point2D, ...]: ...

    def __getitem__(self, index):
        return self.points[index]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point2D]:
        return iter(self.points)

    @property
    def is_degenerate(self) -> bool:
        return self.status in (
            IntersectionStatus.DEGENERATE_CIRCLE,
            IntersectionStatus.DEGENERATE_SEGMENT,
        )

    def as_array(self) -> npt.NDArray[np.float64]:
        """Return the points as an array of shape (n, 2)."""
        return np.array([p.as_tuple() for p in self.points], dtype=np.float64).reshape(
            -1, 2
        )


def _solve_line_quadratic(
    u1: float, v1: float, u2: float, v2: float, cu: float, cv: float, radius: float
) -> tuple[float, list[tuple[float, float]]]:
    """Intersect the line through (u1, v1)-(u2, v2) with a circle.

    Requires ``u1 != u2``. Returns the discriminant and the real roots as
    (u, v) pairs, ``+sqrt(disc)`` root first. A zero discriminant yields a
    single root; a negative one yields none.

    A negative discriminant within round-off of zero, relative to the size
    of the terms that cancel in it, is snapped to zero so tangent lines off
    the origin still report their touching point. Overflowing input yields
    no roots.
    """
    m = (v2 - v1) / (u2 - u1)
    b = v1 - m * u1

    a_coef = 1.0 + m * m
    b_coef = 2.0 * (m * b - m * cv - cu)
    c_coef = cu * cu + (b - cv) * (b - cv) - radius * radius

    disc = b_coef * b_coef - 4.0 * a_coef * c_coef
    scale = b_coef * b_coef + 4.0 * a_coef * (
        cu * cu + (b - cv) * (b - cv) + radius * radius
    )
    if not (math.isfinite(disc) and math.isfinite(scale)):
        return disc, []
    if -DISCRIMINANT_RTOL * scale <= disc < 0.0:
        disc = 0.0
    if disc < 0.0:
        return disc, []

    sqrt_d = math.sqrt(disc)
    u_plus = (-b_coef + sqrt_d) / (2.0 * a_coef)
    roots = [(u_plus, m * u_plus + b)]
    if disc > 0.0:
        u_minus = (-b_coef - sqrt_d) / (2.0 * a_coef)
        roots.append((u_minus, m * u_minus + b))

    return disc, [(u, v) for u, v in roots if math.isfinite(u) and math.isfinite(v)]


def intersect_circle_line(
    circle: Circle,
    segment: Segment,
    epsilon: float = DEFAULT_EPSILON,
    degenerate_tolerance: float = DEFAULT_DEGENERATE_TOLERANCE,
) -> IntersectionResult:
    """Intersect a circle with a finite line segment.

    Args:
        circle: The circle.
        segment: The segment. Vertical and steep segments are supported.
        epsilon: Segment membership tolerance (default 1e-4).
        degenerate_tolerance: Radius / segment length at or below which the
            input is degenerate and yields an empty result (default 1e-12).

    Returns:
        An IntersectionResult with up to two distinct points, larger x first.
        Tangent lines report a single point.

    Raises:
        ValueError: If epsilon is negative.
    """
    if epsilon < 0.0:
        raise ValueError(f"epsilon must be >= 0, got {epsilon}")

    if circle.radius <= degenerate_tolerance:
        return IntersectionResult(status=IntersectionStatus.DEGENERATE_CIRCLE)
    if segment.length <= degenerate_tolerance:
        return IntersectionResult(status=IntersectionStatus.DEGENERATE_SEGMENT)

    x1, y1 = segment.start.x, segment.start.y
    x2, y2 = segment.end.x, segment.end.y
    cx, cy = circle.center.x, circle.center.y

    steep = abs(y2 - y1) > abs(x2 - x1)
    if steep:
        disc, roots = _solve_line_quadratic(y1, x1, y2, x2, cy, cx, circle.radius)
        candidates = [Point2D(x, y) for y, x in roots]
        # Restore larger-x-first ordering; a vertical segment keeps larger y first
        if len(candidates) == 2 and candidates[0].x < candidates[1].x:
            candidates.reverse()
    else:
        disc, roots = _solve_line_quadratic(x1, y1, x2, y2, cx, cy, circle.radius)
        candidates = [Point2D(x, y) for x, y in roots]

    accepted: list[Point2D] = []
    for point in candidates:
        if is_point_on_segment(segment, point, epsilon) and point not in accepted:
            accepted.append(point)

    status = IntersectionStatus.HIT if accepted else IntersectionStatus.MISS
    return IntersectionResult(
        points=tuple(accepted),
        status=status,
        discriminant=disc if math.isfinite(disc) else None,
    )
