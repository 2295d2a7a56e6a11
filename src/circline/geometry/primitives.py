"""2D value types: points, circles and line segments.

All types are immutable. Points and circles validate their coordinates on
construction so that NaN or infinite values never enter the intersection
solver.

Example:
    >>> from circline.geometry.primitives import Circle, Point2D, Segment
    >>> circle = Circle.from_drag(Point2D(0.0, 0.0), Point2D(3.0, 4.0))
    >>> circle.radius
    5.0
    >>> Segment(Point2D(0.0, 0.0), Point2D(1.0, 0.0)).length
    1.0
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Point2D:
    """A point in the engine's 2D coordinate space.

    Attributes:
        x: Horizontal coordinate (finite float).
        y: Vertical coordinate (finite float).
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Point coordinates must be finite, got ({self.x}, {self.y})")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


# Anything a host may hand the engine as a point
PointLike = Union[Point2D, Sequence[float]]


def as_point(value: PointLike) -> Point2D:
    """Coerce an ``(x, y)`` pair or a Point2D into a Point2D.

    Raises:
        ValueError: If the value does not hold exactly two finite numbers.
    """
    if isinstance(value, Point2D):
        return value
    coords = tuple(value)
    if len(coords) != 2:
        raise ValueError(f"Expected an (x, y) pair, got {value!r}")
    return Point2D(float(coords[0]), float(coords[1]))


def distance(a: Point2D, b: Point2D) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


@dataclass(frozen=True)
class Circle:
    """A circle defined by center point and radius.

    Attributes:
        center: The center point of the circle.
        radius: The radius of the circle (finite, >= 0). A zero radius is
            allowed but such a circle never intersects anything.
    """

    center: Point2D
    radius: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius) or self.radius < 0.0:
            raise ValueError(f"Circle radius must be finite and >= 0, got {self.radius}")

    @classmethod
    def from_drag(cls, center: Point2D, rim: Point2D) -> Circle:
        """Build the circle drawn by dragging from ``center`` to ``rim``."""
        return cls(center=center, radius=distance(center, rim))


@dataclass(frozen=True)
class Segment:
    """A finite line segment between two points.

    The segment may be degenerate (start == end), in which case it has zero
    length and no direction.

    Attributes:
        start: The point where the drag started.
        end: The point where the drag ended.
    """

    start: Point2D
    end: Point2D

    @property
    def length(self) -> float:
        return distance(self.start, self.end)

    def reversed(self) -> Segment:
        return Segment(start=self.end, end=self.start)
