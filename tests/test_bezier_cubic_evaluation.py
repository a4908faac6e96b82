"""Test module for evaluation and derivatives of BezierCubic2D

The tests are run using pytest.
These tests ensure that points, derivatives, curvature and the combined
fast paths of the cubic curve remain working correctly after refactoring.
"""

import math

import numpy as np
import pytest

from bezier2d.bezier import BezierCubic2D
from bezier2d.consts import Axis
from bezier2d.vector import Vec2


def arch_curve() -> BezierCubic2D:
    """Curve rising from (0, 0) to the top (0.5, 0.75) and back down to (1, 0)."""
    return BezierCubic2D(Vec2(0.0, 0.0), Vec2(0.0, 1.0), Vec2(1.0, 1.0), Vec2(1.0, 0.0))


def wavy_curve() -> BezierCubic2D:
    """Curve with non-trivial coordinates."""
    return BezierCubic2D((0.1, -0.3), (1.7, 2.9), (-0.6, 1.3), (2.2, -0.7))


###############################################################################
# Construction & control points
###############################################################################


class TestControlPoints:
    """Construction, indexing and equality."""

    def test_coerces_sequences(self):
        """Control points given as tuples become Vec2."""
        curve = BezierCubic2D((0, 0), [1, 2], (3, 4), Vec2(5.0, 6.0))

        assert curve.p1 == Vec2(1.0, 2.0)
        assert all(isinstance(p, Vec2) for p in curve.control_points)

    def test_from_points(self):
        """Create from a list or an array of four points."""
        points = [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)]

        assert BezierCubic2D.from_points(points) == arch_curve()
        assert BezierCubic2D.from_points(np.array(points)) == arch_curve()

    def test_from_points_wrong_count(self):
        """Exactly four points are required."""
        with pytest.raises(ValueError):
            BezierCubic2D.from_points([(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)])

    def test_to_array(self):
        """Control points as (4, 2) array."""
        array = arch_curve().to_array()

        assert array.shape == (4, 2)
        assert array.dtype == np.float64
        assert np.array_equal(array, [[0.0, 0.0], [0.0, 1.0], [1.0, 1.0], [1.0, 0.0]])

    def test_indexing(self):
        """Get and set control points by index 0..3."""
        curve = arch_curve()
        assert curve[0] == Vec2(0.0, 0.0)
        assert curve[3] == Vec2(1.0, 0.0)

        curve[2] = (2.0, 2.0)
        assert curve.p2 == Vec2(2.0, 2.0)

    def test_index_out_of_range(self):
        """Invalid indices fail fast, nothing is clamped."""
        curve = arch_curve()
        with pytest.raises(IndexError):
            _ = curve[4]
        with pytest.raises(IndexError):
            _ = curve[-1]
        with pytest.raises(IndexError):
            curve[5] = (0.0, 0.0)

    def test_index_must_be_an_integer(self):
        """Floats and bools are rejected even when they compare equal to a valid index."""
        curve = arch_curve()
        with pytest.raises(IndexError):
            _ = curve[1.0]
        with pytest.raises(IndexError):
            _ = curve[True]
        with pytest.raises(IndexError):
            curve[2.0] = (0.0, 0.0)
        assert curve[np.int64(3)] == curve.p3

    def test_queries_follow_mutation(self):
        """Queries always use the current control points."""
        curve = arch_curve()
        assert curve.point(1.0) == Vec2(1.0, 0.0)

        curve.p3 = (4.0, 2.0)
        assert curve.point(1.0) == Vec2(4.0, 2.0)

    def test_exact_equality(self):
        """Equality has no tolerance."""
        assert arch_curve() == arch_curve()
        shifted = arch_curve()
        shifted.p1 = Vec2(0.0, 1.0 + 1e-12)
        assert arch_curve() != shifted

    def test_str(self):
        """String lists all control points."""
        assert str(arch_curve()) == "(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)"


###############################################################################
# Points
###############################################################################


class TestPoint:
    """Point evaluation."""

    def test_arch_points(self):
        """Known points of the arch curve."""
        curve = arch_curve()

        assert curve.point(0.0) == Vec2(0.0, 0.0)
        assert curve.point(0.5) == Vec2(0.5, 0.75)
        assert curve.point(1.0) == Vec2(1.0, 0.0)

    def test_end_points_exact(self):
        """t=0 and t=1 hit the end points exactly for arbitrary coordinates."""
        curve = wavy_curve()

        assert curve.point(0.0) == curve.p0
        assert curve.point(1.0) == curve.p3

    def test_matches_bernstein_form(self):
        """de Casteljau agrees with the explicit Bernstein polynomial."""
        curve = wavy_curve()
        for t in (0.1, 0.33, 0.5, 0.8, -0.4, 1.3):
            omt = 1.0 - t
            weights = (omt**3, 3 * omt**2 * t, 3 * omt * t**2, t**3)
            x = sum(w * p.x for w, p in zip(weights, curve.control_points))
            y = sum(w * p.y for w, p in zip(weights, curve.control_points))
            pt = curve.point(t)
            assert pt.x == pytest.approx(x, abs=1e-12)
            assert pt.y == pytest.approx(y, abs=1e-12)

    def test_point_components(self):
        """Single coordinates equal the point coordinates."""
        curve = wavy_curve()
        for t in (0.0, 0.2, 0.7, 1.0):
            pt = curve.point(t)
            assert curve.point_x(t) == pt.x
            assert curve.point_y(t) == pt.y
            assert curve.point_component(0, t) == pt.x
            assert curve.point_component(Axis.Y, t) == pt.y

    def test_point_component_invalid_axis(self):
        """Axis must be 0 or 1."""
        with pytest.raises(IndexError):
            wavy_curve().point_component(2, 0.5)
        with pytest.raises(IndexError):
            wavy_curve().point_component(0.0, 0.5)

    def test_point_array(self):
        """Vectorized evaluation matches the scalar one."""
        curve = wavy_curve()
        t_values = np.linspace(-0.5, 1.5, 21)

        points = curve.point_array(t_values)

        assert points.shape == (21, 2)
        for t, row in zip(t_values, points):
            assert np.allclose(row, curve.point(float(t)).to_tuple(), atol=1e-12)


###############################################################################
# Derivatives
###############################################################################


class TestDerivatives:
    """Derivatives and the combined fast paths."""

    def test_derivative_at_end_points(self):
        """B'(0) = 3 (p1 - p0), B'(1) = 3 (p3 - p2)."""
        curve = arch_curve()

        assert curve.derivative(0.0) == Vec2(0.0, 3.0)
        assert curve.derivative(1.0) == Vec2(0.0, -3.0)
        assert curve.derivative(0.5) == Vec2(1.5, 0.0)

    def test_second_derivative(self):
        """B''(0) = 6 (p0 - 2 p1 + p2)."""
        curve = arch_curve()

        assert curve.second_derivative(0.0) == Vec2(6.0, -6.0)
        assert curve.second_derivative(0.5) == Vec2(0.0, -6.0)

    def test_third_derivative(self):
        """B''' = 6 (3 (p1 - p2) + p3 - p0) straight from the control points."""
        curve = wavy_curve()
        p0, p1, p2, p3 = curve.control_points
        expected = (3.0 * (p1 - p2) + p3 - p0) * 6.0

        third = curve.third_derivative()

        assert third.x == pytest.approx(expected.x)
        assert third.y == pytest.approx(expected.y)
        assert arch_curve().third_derivative() == Vec2(-12.0, 0.0)

    def test_third_derivative_is_second_derivative_slope(self):
        """The constant third derivative is the slope of the linear second derivative."""
        curve = wavy_curve()
        slope = curve.second_derivative(1.0) - curve.second_derivative(0.0)
        third = curve.third_derivative()

        assert slope.x == pytest.approx(third.x)
        assert slope.y == pytest.approx(third.y)

    def test_derivative_matches_finite_difference(self):
        """Derivative agrees with a central difference of the points."""
        curve = wavy_curve()
        h = 1e-6
        for t in (0.1, 0.5, 0.9):
            diff = (curve.point(t + h) - curve.point(t - h)) / (2 * h)
            d1 = curve.derivative(t)
            assert d1.x == pytest.approx(diff.x, rel=1e-5)
            assert d1.y == pytest.approx(diff.y, rel=1e-5)

    def test_combined_accessors_identical(self):
        """Fast paths return exactly the single-purpose values."""
        curve = wavy_curve()
        for t in (0.0, 0.25, 0.6, 1.0, 1.4):
            point = curve.point(t)
            d1 = curve.derivative(t)
            d2 = curve.second_derivative(t)
            d3 = curve.third_derivative()
            tangent = curve.tangent(t)

            assert curve.point_and_tangent(t) == (point, tangent)
            assert curve.point_and_derivative(t) == (point, d1)
            assert curve.first_two_derivatives(t) == (d1, d2)
            assert curve.all_three_derivatives(t) == (d1, d2, d3)
            assert curve.point_and_first_two_derivatives(t) == (point, d1, d2)

    def test_tangent_is_unit_length(self):
        """Tangents are normalized derivatives."""
        curve = wavy_curve()
        tangent = curve.tangent(0.3)

        assert tangent.magnitude == pytest.approx(1.0)
        assert tangent.determinant(curve.derivative(0.3)) == pytest.approx(0.0, abs=1e-12)

    def test_tangent_at_cusp_is_nan(self):
        """Coinciding p0 and p1 give a zero derivative at t=0 and an undefined tangent."""
        curve = BezierCubic2D((0.0, 0.0), (0.0, 0.0), (1.0, 1.0), (2.0, 0.0))

        tangent = curve.tangent(0.0)

        assert curve.derivative(0.0) == Vec2(0.0, 0.0)
        assert math.isnan(tangent.x)
        assert math.isnan(tangent.y)

    def test_derivative_factors(self):
        """B'(t) = a t^2 + b t + c per component."""
        curve = wavy_curve()
        a, b, c = curve.derivative_factors()
        for t in (0.0, 0.4, 1.0):
            d1 = curve.derivative(t)
            assert a.x * t * t + b.x * t + c.x == pytest.approx(d1.x)
            assert a.y * t * t + b.y * t + c.y == pytest.approx(d1.y)

    def test_second_derivative_factors(self):
        """B''(t) = a t + b per component."""
        curve = wavy_curve()
        a, b = curve.second_derivative_factors()
        for t in (0.0, 0.4, 1.0):
            d2 = curve.second_derivative(t)
            assert a.x * t + b.x == pytest.approx(d2.x)
            assert a.y * t + b.y == pytest.approx(d2.y)


###############################################################################
# Curvature, normal & angle
###############################################################################


class TestCurvature:
    """Curvature, osculating circle, normal and angle."""

    def test_curvature_at_top(self):
        """At the top of the arch the curve turns clockwise: det((1.5, 0), (0, -6)) / 1.5^3."""
        assert arch_curve().curvature(0.5) == pytest.approx(-9.0 / 3.375)

    def test_curvature_sign(self):
        """Counter-clockwise turning is positive."""
        mirrored = BezierCubic2D((0.0, 0.0), (0.0, -1.0), (1.0, -1.0), (1.0, 0.0))

        assert mirrored.curvature(0.5) == pytest.approx(9.0 / 3.375)

    def test_curvature_of_straight_line_is_zero(self):
        """A straight curve does not turn."""
        line = BezierCubic2D((0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0))

        assert line.curvature(0.3) == 0.0

    def test_curvature_at_cusp_is_nan(self):
        """Zero velocity leaves the curvature undefined, without raising."""
        curve = BezierCubic2D((0.0, 0.0), (0.0, 0.0), (1.0, 1.0), (2.0, 0.0))

        assert math.isnan(curve.curvature(0.0))

    def test_osculating_circle(self):
        """Circle at the top of the arch lies below the curve."""
        circle = arch_curve().osculating_circle(0.5)

        assert circle.radius == pytest.approx(0.375)
        assert circle.center.x == pytest.approx(0.5)
        assert circle.center.y == pytest.approx(0.375)
        assert circle.is_finite

    def test_osculating_circle_radius_matches_curvature(self):
        """Radius is the reciprocal absolute curvature; the center is one radius away."""
        curve = wavy_curve()
        t = 0.35
        circle = curve.osculating_circle(t)

        assert circle.radius == pytest.approx(1.0 / abs(curve.curvature(t)))
        assert (circle.center - curve.point(t)).magnitude == pytest.approx(circle.radius)

    def test_osculating_circle_at_inflection(self):
        """Zero curvature gives an infinite radius instead of an error."""
        line = BezierCubic2D((0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0))

        circle = line.osculating_circle(0.5)

        assert circle.radius == math.inf
        assert not circle.is_finite

    def test_normal(self):
        """Normal is the tangent rotated counter-clockwise."""
        curve = arch_curve()

        assert curve.normal(0.5) == Vec2(0.0, 1.0)
        assert curve.normal(0.0) == Vec2(-1.0, 0.0)

    def test_angle(self):
        """Angle of the direction of travel in radians."""
        curve = arch_curve()

        assert curve.angle(0.0) == pytest.approx(math.pi / 2)
        assert curve.angle(0.5) == pytest.approx(0.0)
        assert curve.angle(1.0) == pytest.approx(-math.pi / 2)
