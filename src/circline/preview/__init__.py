"""Preview module for inspecting construction states.

Components:
    display: Matplotlib figure of a state (show, save as PNG)

Example:
    >>> from circline.preview import save_construction
    >>> save_construction(engine.current_state(), "construction.png")
"""

from circline.preview.display import (
    BACKGROUND_COLOR,
    CIRCLE_COLOR,
    INTERSECTION_COLOR,
    SEGMENT_COLOR,
    TEMP_COLOR,
    plot_construction,
    save_construction,
    show_construction,
)

__all__ = [
    "plot_construction",
    "save_construction",
    "show_construction",
    "BACKGROUND_COLOR",
    "CIRCLE_COLOR",
    "SEGMENT_COLOR",
    "INTERSECTION_COLOR",
    "TEMP_COLOR",
]
