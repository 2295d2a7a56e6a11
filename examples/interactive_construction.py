#!/usr/bin/env python3
"""Interactive circle / segment construction in a Matplotlib window.

Drag once to draw a circle (press at the center, release on the rim), drag
again to draw a segment. The intersection points are marked when the segment
is released.

Usage:
    python examples/interactive_construction.py [--strict]

Controls:
    - Mouse drag: draw the circle, then the segment
    - r: reset the construction
    - q: close the window
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure the src directory is in the Python path for direct execution
_src_root = Path(__file__).parent.parent / "src"
if str(_src_root) not in sys.path:
    sys.path.insert(0, str(_src_root))

import matplotlib.pyplot as plt  # noqa: E402
from loguru import logger  # noqa: E402

from circline.config import EngineConfig  # noqa: E402
from circline.engine import GeometryEngine  # noqa: E402
from circline.preview import plot_construction  # noqa: E402


def main() -> int:
    """Main entry point for the interactive construction demo.

    Returns:
        Exit code (0 for success).
    """
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--strict", action="store_true", help="log ignored events as warnings"
    )
    args = parser.parse_args()

    logger.enable("circline")
    engine = GeometryEngine(EngineConfig(strict=args.strict))

    fig, ax = plt.subplots(1, 1, figsize=(7, 7))

    def redraw(state) -> None:
        ax.clear()
        plot_construction(state, ax)
        fig.canvas.draw_idle()

    engine.add_listener(redraw)

    def on_press(event) -> None:
        if event.inaxes is ax and event.button == 1:
            engine.on_pointer_down((event.xdata, event.ydata))

    def on_motion(event) -> None:
        if event.inaxes is ax:
            engine.on_pointer_move((event.xdata, event.ydata))

    def on_release(event) -> None:
        if event.inaxes is ax and event.button == 1:
            engine.on_pointer_up((event.xdata, event.ydata))

    def on_key(event) -> None:
        if event.key == "r":
            engine.reset()

    fig.canvas.mpl_connect("button_press_event", on_press)
    fig.canvas.mpl_connect("motion_notify_event", on_motion)
    fig.canvas.mpl_connect("button_release_event", on_release)
    fig.canvas.mpl_connect("key_press_event", on_key)

    redraw(engine.current_state())

    print("Drag to draw a circle, then drag to draw a segment.")
    print("  - Press 'r' to reset")
    print("  - Close the window to exit")

    try:
        plt.show()
    except KeyboardInterrupt:
        print("\nInterrupted by user.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
