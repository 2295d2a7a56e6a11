"""Batched circle / segment intersection on the Taichi runtime.

Intersects one circle with many segments in a single data-parallel kernel.
The per-segment math mirrors intersect_circle_line() exactly, including the
swapped-axis branch for steep segments, the tangent collapse and the result
ordering, and runs in float64 so both paths agree up to rounding.

Taichi must be initialized before the kernel is first called; init_taichi()
does so with float64 as the default float type.

Example:
    >>> import numpy as np
    >>> from circline.geometry.batch import init_taichi, intersect_circle_segments
    >>> from circline.geometry.primitives import Circle, Point2D
    >>> init_taichi()
    >>> segments = np.array([[-5.0, 0.0, 5.0, 0.0], [5.0, 5.0, 6.0, 6.0]])
    >>> counts, points = intersect_circle_segments(Circle(Point2D(0.0, 0.0), 2.0), segments)
    >>> counts.tolist()
    [2, 0]
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from circline.config import DEFAULT_DEGENERATE_TOLERANCE, DEFAULT_EPSILON
from circline.geometry.intersection import DISCRIMINANT_RTOL
from circline.geometry.primitives import Circle


def init_taichi(arch=None) -> None:
    """Initialize Taichi for batched geometry.

    Args:
        arch: Taichi backend (default ti.cpu). GPU backends without float64
            support are not suitable.
    """
    ti.init(arch=ti.cpu if arch is None else arch, default_fp=ti.f64, fast_math=False)


@ti.func
def _on_segment(
    px: ti.f64, py: ti.f64, x1: ti.f64, y1: ti.f64, x2: ti.f64, y2: ti.f64, eps: ti.f64
) -> ti.i32:
    """Perimeter-sum membership test (see geometry.segment)."""
    d1 = ti.sqrt((px - x1) * (px - x1) + (py - y1) * (py - y1))
    d2 = ti.sqrt((px - x2) * (px - x2) + (py - y2) * (py - y2))
    length = ti.sqrt((x2 - x1) * (x2 - x1) + (y2 - y1) * (y2 - y1))
    return ti.select(ti.abs(d1 + d2 - length) < eps, 1, 0)


@ti.func
def _is_finite(value: ti.f64) -> ti.i32:
    return ti.select(value - value == 0.0, 1, 0)


@ti.kernel
def _intersect_kernel(
    cx: ti.f64,
    cy: ti.f64,
    radius: ti.f64,
    eps: ti.f64,
    degenerate_tol: ti.f64,
    discriminant_rtol: ti.f64,
    segments: ti.types.ndarray(dtype=ti.f64, ndim=2),
    counts: ti.types.ndarray(dtype=ti.i32, ndim=1),
    points: ti.types.ndarray(dtype=ti.f64, ndim=3),
):
    for i in range(segments.shape[0]):
        x1 = segments[i, 0]
        y1 = segments[i, 1]
        x2 = segments[i, 2]
        y2 = segments[i, 3]

        count = 0
        dx = x2 - x1
        dy = y2 - y1
        length = ti.sqrt(dx * dx + dy * dy)

        if radius > degenerate_tol and length > degenerate_tol:
            # Steep segments are solved in (y, x) so |slope| <= 1
            steep = ti.abs(dy) > ti.abs(dx)
            u1 = ti.select(steep, y1, x1)
            v1 = ti.select(steep, x1, y1)
            u2 = ti.select(steep, y2, x2)
            v2 = ti.select(steep, x2, y2)
            cu = ti.select(steep, cy, cx)
            cv = ti.select(steep, cx, cy)

            m = (v2 - v1) / (u2 - u1)
            b = v1 - m * u1
            a_coef = 1.0 + m * m
            b_coef = 2.0 * (m * b - m * cv - cu)
            c_coef = cu * cu + (b - cv) * (b - cv) - radius * radius
            disc = b_coef * b_coef - 4.0 * a_coef * c_coef
            scale = b_coef * b_coef + 4.0 * a_coef * (
                cu * cu + (b - cv) * (b - cv) + radius * radius
            )
            finite = _is_finite(disc) == 1 and _is_finite(scale) == 1
            if finite and -discriminant_rtol * scale <= disc and disc < 0.0:
                disc = 0.0

            if finite and disc >= 0.0:
                sqrt_d = ti.sqrt(disc)
                ua = (-b_coef + sqrt_d) / (2.0 * a_coef)
                va = m * ua + b
                ub = (-b_coef - sqrt_d) / (2.0 * a_coef)
                vb = m * ub + b

                xa = ti.select(steep, va, ua)
                ya = ti.select(steep, ua, va)
                xb = ti.select(steep, vb, ub)
                yb = ti.select(steep, ub, vb)

                # Larger x first; a vertical segment keeps the +sqrt root first
                if steep and xa < xb:
                    tmp_x = xa
                    tmp_y = ya
                    xa = xb
                    ya = yb
                    xb = tmp_x
                    yb = tmp_y

                if _on_segment(xa, ya, x1, y1, x2, y2, eps) == 1:
                    points[i, count, 0] = xa
                    points[i, count, 1] = ya
                    count += 1

                distinct = disc > 0.0 and not (xa == xb and ya == yb)
                if distinct and _on_segment(xb, yb, x1, y1, x2, y2, eps) == 1:
                    points[i, count, 0] = xb
                    points[i, count, 1] = yb
                    count += 1

        counts[i] = count


def intersect_circle_segments(
    circle: Circle,
    segments: npt.ArrayLike,
    epsilon: float = DEFAULT_EPSILON,
    degenerate_tolerance: float = DEFAULT_DEGENERATE_TOLERANCE,
) -> tuple[npt.NDArray[np.int32], npt.NDArray[np.float64]]:
    """Intersect one circle with many segments.

    Args:
        circle: The circle.
        segments: Array-like of shape (n, 4), one ``x1, y1, x2, y2`` row per
            segment.
        epsilon: Segment membership tolerance (default 1e-4).
        degenerate_tolerance: Radius / length at or below which a pair is
            skipped (default 1e-12).

    Returns:
        Tuple of (counts, points). counts has shape (n,) and dtype int32;
        points has shape (n, 2, 2) and dtype float64, and row i holds
        counts[i] valid points followed by zeros.

    Raises:
        ValueError: If segments is not an (n, 4) array of finite values, or
            if epsilon is negative.
    """
    if epsilon < 0.0:
        raise ValueError(f"epsilon must be >= 0, got {epsilon}")

    seg_array = np.ascontiguousarray(np.asarray(segments, dtype=np.float64))
    if seg_array.ndim != 2 or seg_array.shape[1] != 4:
        raise ValueError(f"segments must have shape (n, 4), got {seg_array.shape}")
    if not np.all(np.isfinite(seg_array)):
        raise ValueError("segments must contain only finite coordinates")

    n = seg_array.shape[0]
    counts = np.zeros(n, dtype=np.int32)
    points = np.zeros((n, 2, 2), dtype=np.float64)
    if n == 0:
        return counts, points

    _intersect_kernel(
        circle.center.x,
        circle.center.y,
        circle.radius,
        epsilon,
        degenerate_tolerance,
        DISCRIMINANT_RTOL,
        seg_array,
        counts,
        points,
    )
    return counts, points
