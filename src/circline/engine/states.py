"""Construction states of the interactive circle / segment engine.

Each state is an immutable snapshot. The engine replaces its current state
on every accepted pointer event, so a host holding a snapshot never sees it
change underneath it.

Phases, in order:

    IDLE -> DRAWING_CIRCLE -> CIRCLE_READY -> DRAWING_SEGMENT -> COMPLETE

``outline`` holds the sampled circle polyline the host draws; it is empty
until the first pointer move (or release) sizes the circle.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Union

from circline.geometry.intersection import IntersectionResult
from circline.geometry.primitives import Circle, Point2D, Segment


class ConstructionPhase(IntEnum):
    """Enumeration of construction phases."""

    IDLE = 0
    DRAWING_CIRCLE = 1
    CIRCLE_READY = 2
    DRAWING_SEGMENT = 3
    COMPLETE = 4


@dataclass(frozen=True)
class Idle:
    """Nothing drawn yet."""

    phase: ClassVar[ConstructionPhase] = ConstructionPhase.IDLE


@dataclass(frozen=True)
class DrawingCircle:
    """The circle is being dragged out from its center.

    Attributes:
        center: Where the drag started.
        radius: Distance from center to the latest pointer position.
        outline: Sampled preview outline at the current radius.
    """

    phase: ClassVar[ConstructionPhase] = ConstructionPhase.DRAWING_CIRCLE

    center: Point2D
    radius: float = 0.0
    outline: tuple[Point2D, ...] = ()


@dataclass(frozen=True)
class CircleReady:
    """The circle is committed; waiting for the segment drag."""

    phase: ClassVar[ConstructionPhase] = ConstructionPhase.CIRCLE_READY

    circle: Circle
    outline: tuple[Point2D, ...]


@dataclass(frozen=True)
class DrawingSegment:
    """The segment is being dragged out.

    Attributes:
        circle: The committed circle.
        outline: The committed circle's outline.
        start: Where the segment drag started.
        temp_end: Latest pointer position, or None before the first move.
    """

    phase: ClassVar[ConstructionPhase] = ConstructionPhase.DRAWING_SEGMENT

    circle: Circle
    outline: tuple[Point2D, ...]
    start: Point2D
    temp_end: Point2D | None = None


@dataclass(frozen=True)
class Complete:
    """Circle and segment committed, intersections computed."""

    phase: ClassVar[ConstructionPhase] = ConstructionPhase.COMPLETE

    circle: Circle
    outline: tuple[Point2D, ...]
    segment: Segment
    intersections: IntersectionResult


ConstructionState = Union[Idle, DrawingCircle, CircleReady, DrawingSegment, Complete]
