"""Engine configuration and numerical tolerances.

The defaults reproduce the behavior of the interactive demo: a 1e-4
segment-membership tolerance and a 100-segment circle outline. Both depend
on the scale of the coordinate space (the demo works in NDC, [-1, 1]), so
hosts working in larger world units should scale them accordingly.

Example:
    >>> from circline.config import EngineConfig
    >>> config = EngineConfig(epsilon=1e-3, strict=True)
    >>> config.segment_count
    100
"""

import math
from dataclasses import dataclass

# Tolerance of the perimeter-sum segment membership test
DEFAULT_EPSILON = 1e-4

# Number of polyline segments used to outline a circle
DEFAULT_SEGMENT_COUNT = 100

# Radius / segment length at or below which geometry counts as degenerate
DEFAULT_DEGENERATE_TOLERANCE = 1e-12


@dataclass(frozen=True)
class EngineConfig:
    """Tunable parameters for the geometry engine.

    Attributes:
        epsilon: Tolerance of the segment membership test. Roots that land
            within this distance of a segment endpoint are still accepted.
            Default is 1e-4.
        segment_count: Number of polyline segments in a sampled circle
            outline. Default is 100.
        degenerate_tolerance: Circles with a radius, and segments with a
            length, at or below this value are treated as degenerate and
            never intersect. Default is 1e-12.
        strict: When True, ignored pointer events and degenerate commits are
            logged as warnings instead of debug messages. Default is False.

    Raises:
        ValueError: If a tolerance is negative or not finite, or if
            segment_count is not an integer of at least 1.
    """

    epsilon: float = DEFAULT_EPSILON
    segment_count: int = DEFAULT_SEGMENT_COUNT
    degenerate_tolerance: float = DEFAULT_DEGENERATE_TOLERANCE
    strict: bool = False

    def __post_init__(self) -> None:
        if not math.isfinite(self.epsilon) or self.epsilon < 0.0:
            raise ValueError(f"epsilon must be finite and >= 0, got {self.epsilon}")
        if not isinstance(self.segment_count, int) or self.segment_count < 1:
            raise ValueError(
                f"segment_count must be a positive integer, got {self.segment_count}"
            )
        if (
            not math.isfinite(self.degenerate_tolerance)
            or self.degenerate_tolerance < 0.0
        ):
            raise ValueError(
                "degenerate_tolerance must be finite and >= 0, "
                f"got {self.degenerate_tolerance}"
            )
