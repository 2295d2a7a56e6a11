"""Interactive circle / segment construction engine.

The GeometryEngine turns a stream of pointer events into a committed circle,
a committed segment and their intersection points:

| State          | Event        | Next state     |
|----------------|--------------|----------------|
| Idle           | pointer down | DrawingCircle  |
| DrawingCircle  | pointer move | DrawingCircle  |
| DrawingCircle  | pointer up   | CircleReady    |
| CircleReady    | pointer down | DrawingSegment |
| DrawingSegment | pointer move | DrawingSegment |
| DrawingSegment | pointer up   | Complete       |

Any other event is ignored and leaves the state untouched. The engine never
resets itself; the host calls reset() to start over.

The engine is synchronous and not thread safe. The host must deliver events
in ``down -> (move)* -> up`` order per gesture from a single thread.

Example:
    >>> from circline.engine import GeometryEngine
    >>> engine = GeometryEngine()
    >>> engine.on_pointer_down((0.0, 0.0))
    True
    >>> engine.on_pointer_up((0.5, 0.0))
    True
    >>> engine.on_pointer_down((-1.0, 0.0))
    True
    >>> engine.on_pointer_up((1.0, 0.0))
    True
    >>> [p.as_tuple() for p in engine.intersections]
    [(0.5, 0.0), (-0.5, 0.0)]
"""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from circline.config import EngineConfig
from circline.engine.states import (
    CircleReady,
    Complete,
    ConstructionPhase,
    ConstructionState,
    DrawingCircle,
    DrawingSegment,
    Idle,
)
from circline.geometry.circle import sample_circle
from circline.geometry.intersection import IntersectionResult, intersect_circle_line
from circline.geometry.primitives import (
    Circle,
    PointLike,
    Segment,
    as_point,
    distance,
)

# Callback receives the new state after every accepted transition
StateListener = Callable[[ConstructionState], None]


class GeometryEngine:
    """State machine for interactive circle and segment construction.

    Attributes:
        config: The EngineConfig controlling tolerances and outline resolution.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        """Initialize the engine in the Idle state.

        Args:
            config: Engine configuration (default: EngineConfig()).
        """
        self.config = config if config is not None else EngineConfig()
        self._state: ConstructionState = Idle()
        self._listeners: list[StateListener] = []

    # =========================================================================
    # State access
    # =========================================================================

    def current_state(self) -> ConstructionState:
        """Return the current (immutable) state snapshot."""
        return self._state

    @property
    def phase(self) -> ConstructionPhase:
        return self._state.phase

    @property
    def circle(self) -> Circle | None:
        """The committed circle, or None before the first pointer up."""
        return getattr(self._state, "circle", None)

    @property
    def segment(self) -> Segment | None:
        return getattr(self._state, "segment", None)

    @property
    def intersections(self) -> IntersectionResult | None:
        return getattr(self._state, "intersections", None)

    # =========================================================================
    # Listeners
    # =========================================================================

    def add_listener(self, listener: StateListener) -> None:
        """Register a callback invoked with the new state after each transition."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        """Unregister a callback.

        Raises:
            ValueError: If the listener was never registered.
        """
        self._listeners.remove(listener)

    def _transition(self, state: ConstructionState) -> bool:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
        return True

    def _ignore(self, event: str) -> bool:
        message = f"[Engine] {event} ignored in phase {self._state.phase.name}"
        if self.config.strict:
            logger.warning(message)
        else:
            logger.debug(message)
        return False

    # =========================================================================
    # Pointer events
    # =========================================================================

    def on_pointer_down(self, point: PointLike) -> bool:
        """Start a circle (from Idle) or a segment (from CircleReady).

        Args:
            point: Pointer position in engine coordinates.

        Returns:
            True if the event caused a transition, False if it was ignored.
        """
        p = as_point(point)
        state = self._state

        if isinstance(state, Idle):
            return self._transition(DrawingCircle(center=p))
        if isinstance(state, CircleReady):
            return self._transition(
                DrawingSegment(circle=state.circle, outline=state.outline, start=p)
            )
        return self._ignore("pointer down")

    def on_pointer_move(self, point: PointLike) -> bool:
        """Resize the circle being drawn, or move the free end of the segment.

        Returns:
            True if the event updated the state, False outside a drag.
        """
        p = as_point(point)
        state = self._state

        if isinstance(state, DrawingCircle):
            radius = distance(state.center, p)
            outline = sample_circle(Circle(state.center, radius), self.config.segment_count)
            return self._transition(
                DrawingCircle(center=state.center, radius=radius, outline=tuple(outline))
            )
        if isinstance(state, DrawingSegment):
            return self._transition(
                DrawingSegment(
                    circle=state.circle,
                    outline=state.outline,
                    start=state.start,
                    temp_end=p,
                )
            )
        return False

    def on_pointer_up(self, point: PointLike) -> bool:
        """Commit the circle or the segment being drawn.

        Committing the segment computes the intersections.

        Returns:
            True if the event committed a shape, False if it was ignored.
        """
        p = as_point(point)
        state = self._state

        if isinstance(state, DrawingCircle):
            circle = Circle.from_drag(state.center, p)
            if circle.radius <= self.config.degenerate_tolerance:
                self._log_degenerate(f"zero-radius circle at {state.center.as_tuple()}")
            outline = sample_circle(circle, self.config.segment_count)
            logger.debug(
                f"[Engine] Circle committed: center {circle.center.as_tuple()}, "
                f"radius {circle.radius:.6g}"
            )
            return self._transition(CircleReady(circle=circle, outline=tuple(outline)))

        if isinstance(state, DrawingSegment):
            segment = Segment(start=state.start, end=p)
            if segment.length <= self.config.degenerate_tolerance:
                self._log_degenerate(f"zero-length segment at {segment.start.as_tuple()}")
            result = intersect_circle_line(
                state.circle,
                segment,
                epsilon=self.config.epsilon,
                degenerate_tolerance=self.config.degenerate_tolerance,
            )
            logger.debug(
                f"[Engine] Segment committed: {segment.start.as_tuple()} -> "
                f"{segment.end.as_tuple()}, {len(result)} intersection(s) ({result.status.name})"
            )
            return self._transition(
                Complete(
                    circle=state.circle,
                    outline=state.outline,
                    segment=segment,
                    intersections=result,
                )
            )

        return self._ignore("pointer up")

    def reset(self) -> None:
        """Return to Idle, discarding the circle, segment and intersections."""
        logger.debug("[Engine] Reset")
        self._transition(Idle())

    def _log_degenerate(self, what: str) -> None:
        message = f"[Engine] Degenerate geometry: {what}"
        if self.config.strict:
            logger.warning(message)
        else:
            logger.debug(message)
