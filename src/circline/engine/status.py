"""Human-readable status lines for a construction.

These are the three overlay lines of the interactive demo: the committed
circle, the committed segment and the intersection summary. Values are
printed with two decimals.
"""

from circline.engine.states import CircleReady, Complete, ConstructionState, DrawingSegment
from circline.geometry.intersection import IntersectionResult
from circline.geometry.primitives import Circle, Point2D, Segment


def _fmt(point: Point2D) -> str:
    return f"({point.x:.2f}, {point.y:.2f})"


def describe_circle(circle: Circle) -> str:
    return f"Circle: center {_fmt(circle.center)} radius = {circle.radius:.2f}"


def describe_segment(segment: Segment) -> str:
    return f"Line: {_fmt(segment.start)} ~ {_fmt(segment.end)}"


def describe_intersections(result: IntersectionResult) -> str:
    """Summarize an intersection result, e.g. ``Intersection Points: 1 Point 1: (0.00, 1.00)``."""
    if len(result) == 0:
        return "No intersection"
    parts = [f"Intersection Points: {len(result)}"]
    parts.extend(f"Point {i}: {_fmt(p)}" for i, p in enumerate(result, start=1))
    return " ".join(parts)


def status_lines(state: ConstructionState) -> list[str]:
    """Return the status lines that apply to a state (possibly none)."""
    lines = []
    if isinstance(state, (CircleReady, DrawingSegment, Complete)):
        lines.append(describe_circle(state.circle))
    if isinstance(state, Complete):
        lines.append(describe_segment(state.segment))
        lines.append(describe_intersections(state.intersections))
    return lines
