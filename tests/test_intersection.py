"""Unit tests for circle / line-segment intersection.

Tests cover:
- Missed circles and segments that stop short of the circle
- Lines through the center (two symmetric points, larger x first)
- Tangent lines (single point)
- Roots exactly at a segment endpoint
- Vertical and steep segments
- Degenerate circles and segments
- IntersectionResult sequence behavior
"""

import math

import numpy as np
import pytest


def _circle(cx, cy, r):
    from circline.geometry.primitives import Circle, Point2D

    return Circle(Point2D(cx, cy), r)


def _segment(x1, y1, x2, y2):
    from circline.geometry.primitives import Point2D, Segment

    return Segment(Point2D(x1, y1), Point2D(x2, y2))


class TestNoIntersection:
    """Tests for results with no points."""

    def test_segment_far_from_circle(self):
        """Test a segment entirely outside the circle."""
        from circline.geometry.intersection import IntersectionStatus, intersect_circle_line

        result = intersect_circle_line(_circle(0.0, 0.0, 1.0), _segment(5.0, 5.0, 6.0, 6.0))
        assert len(result) == 0
        assert result.status == IntersectionStatus.MISS

    def test_line_misses_circle(self):
        """Test a negative discriminant."""
        from circline.geometry.intersection import IntersectionStatus, intersect_circle_line

        result = intersect_circle_line(_circle(0.0, 0.0, 1.0), _segment(-5.0, 2.0, 5.0, 2.0))
        assert len(result) == 0
        assert result.status == IntersectionStatus.MISS
        assert result.discriminant < 0.0

    def test_segment_inside_circle(self):
        """Test a segment whose line crosses the circle but stops short of it."""
        from circline.geometry.intersection import intersect_circle_line

        result = intersect_circle_line(_circle(0.0, 0.0, 1.0), _segment(-0.5, 0.0, 0.5, 0.0))
        assert len(result) == 0
        assert result.discriminant > 0.0


class TestTwoIntersections:
    """Tests for secant segments."""

    def test_through_center(self):
        """Test a horizontal line through the center of a radius-2 circle."""
        from circline.geometry.intersection import IntersectionStatus, intersect_circle_line
        from circline.geometry.primitives import Point2D

        result = intersect_circle_line(_circle(0.0, 0.0, 2.0), _segment(-5.0, 0.0, 5.0, 0.0))
        assert result.status == IntersectionStatus.HIT
        assert list(result) == [Point2D(2.0, 0.0), Point2D(-2.0, 0.0)]

    def test_symmetric_about_center(self):
        """Test that a diagonal through the center yields points mirrored in the center."""
        from circline.geometry.intersection import intersect_circle_line

        circle = _circle(0.5, -0.5, 1.0)
        result = intersect_circle_line(circle, _segment(-2.0, -3.0, 3.0, 2.0))
        assert len(result) == 2
        a, b = result
        assert (a.x + b.x) / 2.0 == pytest.approx(0.5)
        assert (a.y + b.y) / 2.0 == pytest.approx(-0.5)
        assert a.x > b.x

    def test_points_on_circle_and_segment(self):
        """Test that reported points lie on both shapes."""
        from circline.geometry.intersection import intersect_circle_line
        from circline.geometry.primitives import distance
        from circline.geometry.segment import is_point_on_segment

        circle = _circle(0.1, 0.2, 0.6)
        segment = _segment(-0.9, -0.3, 0.8, 0.7)
        result = intersect_circle_line(circle, segment)
        assert len(result) == 2
        for p in result:
            assert distance(p, circle.center) == pytest.approx(circle.radius, rel=1e-9)
            assert is_point_on_segment(segment, p)

    def test_order_independent_of_direction(self):
        """Test that reversing the segment keeps the larger-x-first order."""
        from circline.geometry.intersection import intersect_circle_line

        circle = _circle(0.0, 0.0, 1.0)
        forward = intersect_circle_line(circle, _segment(-2.0, -0.5, 2.0, 0.5))
        backward = intersect_circle_line(circle, _segment(2.0, 0.5, -2.0, -0.5))
        assert len(forward) == 2
        assert forward[0].x > forward[1].x
        for p, q in zip(forward, backward):
            assert p.x == pytest.approx(q.x)
            assert p.y == pytest.approx(q.y)

    def test_one_end_inside(self):
        """Test a segment starting inside the circle crosses once."""
        from circline.geometry.intersection import intersect_circle_line

        result = intersect_circle_line(_circle(0.0, 0.0, 1.0), _segment(0.0, 0.0, 3.0, 0.0))
        assert len(result) == 1
        assert result[0].x == pytest.approx(1.0)
        assert result[0].y == pytest.approx(0.0)


class TestTangent:
    """Tests for tangent lines."""

    def test_tangent_reports_single_point(self):
        """Test that coinciding roots collapse to one point."""
        from circline.geometry.intersection import IntersectionStatus, intersect_circle_line
        from circline.geometry.primitives import Point2D

        result = intersect_circle_line(_circle(0.0, 0.0, 1.0), _segment(-5.0, 1.0, 5.0, 1.0))
        assert result.discriminant == 0.0
        assert result.status == IntersectionStatus.HIT
        assert list(result) == [Point2D(0.0, 1.0)]

    def test_vertical_tangent(self):
        """Test a vertical tangent line."""
        from circline.geometry.intersection import intersect_circle_line
        from circline.geometry.primitives import Point2D

        result = intersect_circle_line(_circle(0.0, 0.0, 1.0), _segment(1.0, -5.0, 1.0, 5.0))
        assert list(result) == [Point2D(1.0, 0.0)]

    def test_off_center_tangent(self):
        """Test a tangent whose discriminant only cancels to zero up to round-off."""
        from circline.geometry.intersection import IntersectionStatus, intersect_circle_line

        result = intersect_circle_line(_circle(0.1, 0.2, 0.3), _segment(-1.0, 0.5, 1.0, 0.5))
        assert result.status == IntersectionStatus.HIT
        assert result.discriminant == 0.0
        assert len(result) == 1
        assert result[0].x == pytest.approx(0.1)
        assert result[0].y == pytest.approx(0.5)

    def test_near_miss_stays_empty(self):
        """Test that a line just outside the circle is not snapped onto it."""
        from circline.geometry.intersection import IntersectionStatus, intersect_circle_line

        result = intersect_circle_line(
            _circle(0.1, 0.2, 0.3), _segment(-1.0, 0.500001, 1.0, 0.500001)
        )
        assert len(result) == 0
        assert result.status == IntersectionStatus.MISS
        assert result.discriminant < 0.0


class TestEndpointBoundary:
    """Tests for roots landing on a segment endpoint."""

    def test_root_at_start(self):
        """Test that a root exactly at the start point is accepted."""
        from circline.geometry.intersection import intersect_circle_line
        from circline.geometry.primitives import Point2D

        result = intersect_circle_line(_circle(0.0, 0.0, 1.0), _segment(1.0, 0.0, 3.0, 0.0))
        assert list(result) == [Point2D(1.0, 0.0)]

    def test_root_at_end(self):
        """Test that a root exactly at the end point is accepted."""
        from circline.geometry.intersection import intersect_circle_line
        from circline.geometry.primitives import Point2D

        result = intersect_circle_line(_circle(0.0, 0.0, 1.0), _segment(-3.0, 0.0, -1.0, 0.0))
        assert list(result) == [Point2D(-1.0, 0.0)]

    def test_near_miss_within_epsilon(self):
        """Test a segment ending just short of the circle by less than epsilon."""
        from circline.geometry.intersection import intersect_circle_line

        result = intersect_circle_line(
            _circle(0.0, 0.0, 1.0), _segment(1.00001, 0.0, 3.0, 0.0)
        )
        assert len(result) == 1
        assert result[0].x == pytest.approx(1.0)

    def test_near_miss_with_zero_epsilon(self):
        """Test that a strict tolerance rejects the same near miss."""
        from circline.geometry.intersection import intersect_circle_line

        result = intersect_circle_line(
            _circle(0.0, 0.0, 1.0), _segment(1.00001, 0.0, 3.0, 0.0), epsilon=0.0
        )
        assert len(result) == 0


class TestSteepSegments:
    """Tests for vertical and near-vertical segments."""

    def test_vertical_through_center(self):
        """Test x = 0 against the unit circle."""
        from circline.geometry.intersection import intersect_circle_line
        from circline.geometry.primitives import Point2D

        result = intersect_circle_line(_circle(0.0, 0.0, 1.0), _segment(0.0, -5.0, 0.0, 5.0))
        assert set(result) == {Point2D(0.0, -1.0), Point2D(0.0, 1.0)}
        # +sqrt root (larger y) first
        assert result[0] == Point2D(0.0, 1.0)

    def test_vertical_offset(self):
        """Test a vertical line off the center."""
        from circline.geometry.intersection import intersect_circle_line

        result = intersect_circle_line(_circle(1.0, 2.0, 2.0), _segment(2.0, -10.0, 2.0, 10.0))
        assert len(result) == 2
        ys = sorted(p.y for p in result)
        assert ys[0] == pytest.approx(2.0 - math.sqrt(3.0))
        assert ys[1] == pytest.approx(2.0 + math.sqrt(3.0))
        assert all(p.x == 2.0 for p in result)

    def test_vertical_miss(self):
        """Test a vertical line outside the circle."""
        from circline.geometry.intersection import intersect_circle_line

        result = intersect_circle_line(_circle(0.0, 0.0, 1.0), _segment(1.5, -5.0, 1.5, 5.0))
        assert len(result) == 0

    def test_nearly_vertical_is_finite(self):
        """Test that a tiny x offset does not blow up the slope."""
        from circline.geometry.intersection import intersect_circle_line

        result = intersect_circle_line(
            _circle(0.0, 0.0, 1.0), _segment(0.0, -5.0, 1e-13, 5.0)
        )
        assert len(result) == 2
        for p in result:
            assert math.isfinite(p.x) and math.isfinite(p.y)
            assert abs(p.y) == pytest.approx(1.0)

    def test_steep_keeps_larger_x_first(self):
        """Test ordering for a steep line with negative slope."""
        from circline.geometry.intersection import intersect_circle_line

        result = intersect_circle_line(_circle(0.0, 0.0, 1.0), _segment(0.5, -3.0, -0.5, 3.0))
        assert len(result) == 2
        assert result[0].x > result[1].x
        assert result[0].y < result[1].y


class TestDegenerate:
    """Tests for degenerate inputs."""

    def test_zero_radius(self):
        """Test that a zero-radius circle never intersects."""
        from circline.geometry.intersection import IntersectionStatus, intersect_circle_line

        result = intersect_circle_line(_circle(0.0, 0.0, 0.0), _segment(-1.0, 0.0, 1.0, 0.0))
        assert len(result) == 0
        assert result.status == IntersectionStatus.DEGENERATE_CIRCLE
        assert result.discriminant is None
        assert result.is_degenerate

    def test_near_zero_radius(self):
        """Test that a radius below the degenerate tolerance never intersects."""
        from circline.geometry.intersection import IntersectionStatus, intersect_circle_line

        result = intersect_circle_line(_circle(0.0, 0.0, 1e-13), _segment(-1.0, 0.0, 1.0, 0.0))
        assert result.status == IntersectionStatus.DEGENERATE_CIRCLE

    def test_zero_length_segment(self):
        """Test that a point-like segment never intersects, even on the circle."""
        from circline.geometry.intersection import IntersectionStatus, intersect_circle_line

        result = intersect_circle_line(_circle(0.0, 0.0, 1.0), _segment(1.0, 0.0, 1.0, 0.0))
        assert len(result) == 0
        assert result.status == IntersectionStatus.DEGENERATE_SEGMENT

    def test_negative_epsilon(self):
        """Test that a negative epsilon raises ValueError."""
        from circline.geometry.intersection import intersect_circle_line

        with pytest.raises(ValueError):
            intersect_circle_line(
                _circle(0.0, 0.0, 1.0), _segment(-1.0, 0.0, 1.0, 0.0), epsilon=-1.0
            )


class TestLargeInput:
    """Tests for finite input whose quadratic overflows."""

    @pytest.mark.parametrize(
        "circle_args",
        [
            (0.0, 0.0, 1e200),
            (1e200, 0.0, 1.0),
            (0.0, 0.0, 1e155),
        ],
    )
    def test_overflow_gives_empty_result(self, circle_args):
        """Test that an overflowing discriminant yields an empty miss, not an error."""
        from circline.geometry.intersection import IntersectionStatus, intersect_circle_line

        result = intersect_circle_line(_circle(*circle_args), _segment(-1.0, 0.0, 1.0, 0.0))
        assert len(result) == 0
        assert result.status == IntersectionStatus.MISS
        assert result.discriminant is None

    def test_steep_overflow(self):
        """Test the swapped-axis branch with an overflowing radius."""
        from circline.geometry.intersection import intersect_circle_line

        result = intersect_circle_line(_circle(0.0, 0.0, 1e200), _segment(0.0, -1.0, 0.0, 1.0))
        assert len(result) == 0
        assert result.discriminant is None


class TestIntersectionResult:
    """Tests for IntersectionResult sequence behavior."""

    def test_sequence_protocol(self):
        """Test len, indexing, slicing and membership."""
        from circline.geometry.intersection import intersect_circle_line
        from circline.geometry.primitives import Point2D

        result = intersect_circle_line(_circle(0.0, 0.0, 2.0), _segment(-5.0, 0.0, 5.0, 0.0))
        assert len(result) == 2
        assert result[0] == Point2D(2.0, 0.0)
        assert result[-1] == Point2D(-2.0, 0.0)
        assert result[:1] == (Point2D(2.0, 0.0),)
        assert Point2D(-2.0, 0.0) in result

    def test_as_array(self):
        """Test the (n, 2) array view."""
        from circline.geometry.intersection import intersect_circle_line

        result = intersect_circle_line(_circle(0.0, 0.0, 2.0), _segment(-5.0, 0.0, 5.0, 0.0))
        array = result.as_array()
        assert array.shape == (2, 2)
        assert np.array_equal(array, [[2.0, 0.0], [-2.0, 0.0]])

    def test_empty_as_array(self):
        """Test that an empty result gives a (0, 2) array."""
        from circline.geometry.intersection import IntersectionResult

        assert IntersectionResult().as_array().shape == (0, 2)
