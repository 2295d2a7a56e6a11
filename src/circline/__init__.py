"""Interactive circle / line-segment construction and intersection engine.

This package provides the 2D geometry behind a "draw a circle, draw a line,
see where they cross" interaction:
- Pointer-driven construction state machine
- Circle outline sampling
- Tolerant segment membership testing
- Circle / line-segment intersection with vertical and tangent handling
- Batched intersection on the Taichi runtime

Subpackages:
    geometry: Value types and pure intersection algorithms
    engine: GeometryEngine state machine and status text
    preview: Matplotlib inspection of construction states

Logging goes through loguru and is disabled by default; call
``logger.enable("circline")`` to see it.
"""

from loguru import logger

from circline.config import EngineConfig
from circline.engine import ConstructionPhase, GeometryEngine
from circline.geometry import (
    Circle,
    IntersectionResult,
    IntersectionStatus,
    Point2D,
    Segment,
    intersect_circle_line,
    is_point_on_segment,
    sample_circle,
)

__version__ = "0.1.0"

logger.disable("circline")

__all__ = [
    "EngineConfig",
    "GeometryEngine",
    "ConstructionPhase",
    "Point2D",
    "Circle",
    "Segment",
    "IntersectionResult",
    "IntersectionStatus",
    "sample_circle",
    "is_point_on_segment",
    "intersect_circle_line",
]
