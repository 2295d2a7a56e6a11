"""Interactive construction engine.

Components:
    states: Immutable ConstructionState snapshots and ConstructionPhase
    engine: GeometryEngine pointer-event state machine
    status: Status text for the committed circle, segment and intersections
"""

from .engine import GeometryEngine, StateListener
from .states import (
    CircleReady,
    Complete,
    ConstructionPhase,
    ConstructionState,
    DrawingCircle,
    DrawingSegment,
    Idle,
)
from .status import (
    describe_circle,
    describe_intersections,
    describe_segment,
    status_lines,
)

__all__ = [
    "GeometryEngine",
    "StateListener",
    "ConstructionPhase",
    "ConstructionState",
    "Idle",
    "DrawingCircle",
    "CircleReady",
    "DrawingSegment",
    "Complete",
    "describe_circle",
    "describe_segment",
    "describe_intersections",
    "status_lines",
]
