"""Matplotlib-based preview of a construction state.

A debugging view of what the engine holds: the committed circle, the
committed segment, the intersection points, and the in-progress circle or
segment in gray. Colors follow the interactive demo. Hosts draw the state
themselves; this module is for inspection and test artifacts.

Example:
    >>> from circline.engine import GeometryEngine
    >>> from circline.preview.display import save_construction
    >>>
    >>> engine = GeometryEngine()
    >>> engine.on_pointer_down((0.0, 0.0))
    True
    >>> engine.on_pointer_up((0.5, 0.0))
    True
    >>> save_construction(engine.current_state(), "construction.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from circline.engine.states import (
    CircleReady,
    Complete,
    ConstructionState,
    DrawingCircle,
    DrawingSegment,
)
from circline.engine.status import status_lines

if TYPE_CHECKING:
    from matplotlib.axes import Axes

    from circline.geometry.primitives import Point2D


# RGB colors of the interactive demo
BACKGROUND_COLOR = (0.1, 0.2, 0.3)
CIRCLE_COLOR = (0.6, 0.0, 0.4)
SEGMENT_COLOR = (0.0, 0.5, 0.5)
INTERSECTION_COLOR = (1.0, 1.0, 0.0)
TEMP_COLOR = (0.5, 0.5, 0.5)

# Default view: the NDC square
DEFAULT_LIMITS = (-1.0, 1.0)


def _xy(points: tuple[Point2D, ...] | list[Point2D]) -> tuple[np.ndarray, np.ndarray]:
    coords = np.array([p.as_tuple() for p in points], dtype=np.float64).reshape(-1, 2)
    return coords[:, 0], coords[:, 1]


def plot_construction(
    state: ConstructionState,
    ax: Axes | None = None,
    *,
    limits: tuple[float, float] = DEFAULT_LIMITS,
    title: str | None = None,
) -> Axes:
    """Draw a construction state on a Matplotlib axes.

    Args:
        state: The state snapshot to draw.
        ax: Axes to draw on (default: a new figure).
        limits: Axis range used for both x and y.
        title: Custom title (default: the state's status lines).

    Returns:
        The axes that were drawn on.
    """
    if ax is None:
        import matplotlib.pyplot as plt

        _, ax = plt.subplots(1, 1, figsize=(6, 6))

    ax.set_facecolor(BACKGROUND_COLOR)
    ax.set_xlim(*limits)
    ax.set_ylim(*limits)
    ax.set_aspect("equal")

    # Axes through the origin
    ax.axhline(0.0, color="white", linewidth=0.5, alpha=0.5)
    ax.axvline(0.0, color="white", linewidth=0.5, alpha=0.5)

    if isinstance(state, DrawingCircle) and state.outline:
        ax.plot(*_xy(state.outline), color=TEMP_COLOR, label="circle (drawing)")

    if isinstance(state, (CircleReady, DrawingSegment, Complete)):
        ax.plot(*_xy(state.outline), color=CIRCLE_COLOR, label="circle")

    if isinstance(state, DrawingSegment) and state.temp_end is not None:
        ax.plot(*_xy([state.start, state.temp_end]), color=TEMP_COLOR, label="segment (drawing)")

    if isinstance(state, Complete):
        ax.plot(
            *_xy([state.segment.start, state.segment.end]),
            color=SEGMENT_COLOR,
            label="segment",
        )
        if len(state.intersections) > 0:
            ax.scatter(
                *_xy(state.intersections.points),
                color=INTERSECTION_COLOR,
                zorder=3,
                label="intersections",
            )

    if title is None:
        title = "\n".join(status_lines(state)) or state.phase.name.replace("_", " ").title()
    ax.set_title(title, fontsize=9)

    return ax


def save_construction(
    state: ConstructionState,
    filepath: str | Path,
    *,
    limits: tuple[float, float] = DEFAULT_LIMITS,
    dpi: int = 100,
) -> None:
    """Save a construction state as a PNG image.

    Args:
        state: The state snapshot to draw.
        filepath: Output file path (should end in .png).
        limits: Axis range used for both x and y.
        dpi: Output resolution.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=(6, 6))
    try:
        plot_construction(state, ax, limits=limits)
        fig.savefig(filepath, dpi=dpi, format="png")
    finally:
        plt.close(fig)


def show_construction(
    state: ConstructionState,
    *,
    limits: tuple[float, float] = DEFAULT_LIMITS,
    block: bool = True,
) -> None:
    """Display a construction state in a Matplotlib window.

    Args:
        state: The state snapshot to draw.
        limits: Axis range used for both x and y.
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    plot_construction(state, limits=limits)
    plt.tight_layout()
    plt.show(block=block)
