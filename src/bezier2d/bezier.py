"""Cubic Bezier curves in 2D: evaluation, derivatives, curvature and geometric queries.

Bezier math reference: https://pomax.github.io/bezierinfo/
"""

from __future__ import annotations

import logging
import math
import operator
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from bezier2d.config import DEFAULT_SETTINGS, QuerySettings
from bezier2d.consts import POLYGONIZE_NUMPY_THRESHOLD, POLYNOMIAL_EPSILON, Axis
from bezier2d.geom import Box2D, Circle2D, GeomMath, Line2D, LineSegment2D, Ray2D
from bezier2d.polynomial import Polynomial
from bezier2d.results import ResultsMax2, ResultsMax3
from bezier2d.vector import Vec2, Vec2Like, float_div, sign_as_int

logger = logging.getLogger(__name__)

_CONTROL_POINT_NAMES = ("p0", "p1", "p2", "p3")

LineProbe = Union[Line2D, Ray2D, LineSegment2D]


###############################################################################
# Result types
###############################################################################
class Projection(NamedTuple):
    """Closest point on a curve together with its t-value."""

    point: Vec2
    t: float


class RaycastHit(NamedTuple):
    """Outcome of a raycast. point and t are None if the ray missed."""

    hit: bool
    point: Optional[Vec2]
    t: Optional[float]


class _ProjectSample(NamedTuple):
    t: float
    f: Vec2  # curve point relative to the query point
    fp: Vec2  # derivative
    dist_delta_sq: float  # dot(f, fp), half the derivative of the squared distance


###############################################################################
# BezierCubic2D
###############################################################################
@dataclass
class BezierCubic2D:
    """
    A 2D cubic Bezier curve defined by 4 control points.

        B(t) = (1-t)^3*P0 + 3*(1-t)^2*t*P1 + 3*(1-t)*t^2*P2 + t^3*P3

    The t-value is usually in [0, 1], values outside extrapolate the curve.
    Control points may be reassigned; every query is computed from the current
    control points. Equality is exact per coordinate.

    Attributes:
        p0 (Vec2): The starting point of the curve.
        p1 (Vec2): The second control point, sometimes called the start tangent point.
        p2 (Vec2): The third control point, sometimes called the end tangent point.
        p3 (Vec2): The end point of the curve.
    """

    p0: Vec2
    p1: Vec2
    p2: Vec2
    p3: Vec2

    def __setattr__(self, name: str, value) -> None:
        if name in _CONTROL_POINT_NAMES:
            value = Vec2.of(value)
        super().__setattr__(name, value)

    @classmethod
    def from_points(cls, points: Union[Sequence[Vec2Like], NDArray[np.float64]]) -> BezierCubic2D:
        """
        Create a curve from a sequence or array of 4 (x, y) points.

        Raises:
            ValueError: If not exactly 4 points are given.
        """
        if len(points) != 4:
            raise ValueError(f"A cubic Bezier curve needs exactly 4 control points, got {len(points)}")
        return cls(points[0], points[1], points[2], points[3])

    # Control points -------------------------------------------------------------

    def __getitem__(self, index: int) -> Vec2:
        return getattr(self, _CONTROL_POINT_NAMES[_checked_index(index, 4, "Control point index")])

    def __setitem__(self, index: int, value: Vec2Like) -> None:
        setattr(self, _CONTROL_POINT_NAMES[_checked_index(index, 4, "Control point index")], value)

    @property
    def control_points(self) -> Tuple[Vec2, Vec2, Vec2, Vec2]:
        """The control points as Tuple (p0, p1, p2, p3)."""
        return (self.p0, self.p1, self.p2, self.p3)

    def to_array(self) -> NDArray[np.float64]:
        """The control points as array of shape (4, 2)."""
        return np.array([p.to_tuple() for p in self.control_points], dtype=np.float64)

    def __str__(self) -> str:
        return f"{self.p0}, {self.p1}, {self.p2}, {self.p3}"

    # Point ----------------------------------------------------------------------

    def _casteljau(self, t: float) -> Tuple[float, float, float, float, float, float, float, float, float, float]:
        """
        Shared de Casteljau intermediate terms at t.

        Returns the first level (a, b, c) and second level (d, e) interpolated
        points as flat floats (ax, ay, bx, by, cx, cy, dx, dy, ex, ey).
        Point, derivatives and splitting are all composed from these terms.
        The lerp form u*(1-t) + v*t hits u and v exactly at t=0 and t=1.
        """
        p0, p1, p2, p3 = self.p0, self.p1, self.p2, self.p3
        s = 1.0 - t
        ax = p0.x * s + p1.x * t  # a = lerp(p0, p1, t)
        ay = p0.y * s + p1.y * t
        bx = p1.x * s + p2.x * t  # b = lerp(p1, p2, t)
        by = p1.y * s + p2.y * t
        cx = p2.x * s + p3.x * t  # c = lerp(p2, p3, t)
        cy = p2.y * s + p3.y * t
        dx = ax * s + bx * t  # d = lerp(a, b, t)
        dy = ay * s + by * t
        ex = bx * s + cx * t  # e = lerp(b, c, t)
        ey = by * s + cy * t
        return ax, ay, bx, by, cx, cy, dx, dy, ex, ey

    def _evaluate(
        self, t: float, point: bool = True, first: bool = False, second: bool = False
    ) -> Tuple[Optional[Vec2], Optional[Vec2], Optional[Vec2]]:
        """Evaluate the requested orders at t in one pass. Orders not requested are None."""
        ax, ay, bx, by, cx, cy, dx, dy, ex, ey = self._casteljau(t)
        s = 1.0 - t
        pt = Vec2(dx * s + ex * t, dy * s + ey * t) if point else None
        d1 = Vec2(3.0 * (ex - dx), 3.0 * (ey - dy)) if first else None
        d2 = Vec2(6.0 * (ax - 2.0 * bx + cx), 6.0 * (ay - 2.0 * by + cy)) if second else None
        return pt, d1, d2

    def point(self, t: float) -> Vec2:
        """
        Return the point at the given t-value on the curve.

        Args:
            t (float): The t-value along the curve to sample

        Returns:
            Vec2: the curve point B(t)
        """
        return self._evaluate(t)[0]

    def point_x(self, t: float) -> float:
        """Return the x-coordinate at the given t-value on the curve."""
        return _casteljau_component(self.p0.x, self.p1.x, self.p2.x, self.p3.x, t)

    def point_y(self, t: float) -> float:
        """Return the y-coordinate at the given t-value on the curve."""
        return _casteljau_component(self.p0.y, self.p1.y, self.p2.y, self.p3.y, t)

    def point_component(self, axis: int, t: float) -> float:
        """
        Return one coordinate of the point at the given t-value on the curve.

        Args:
            axis (Axis or int): Axis.X (0) or Axis.Y (1)
            t (float): The t-value along the curve to sample

        Raises:
            IndexError: If axis is neither 0 nor 1.
        """
        axis = _check_axis(axis)
        return self.point_x(t) if axis == Axis.X else self.point_y(t)

    def point_array(self, t_values: ArrayLike) -> NDArray[np.float64]:
        """
        Evaluate the curve at many t-values at once using vectorized de Casteljau.

        Args:
            t_values: 1D sequence or array of t-values

        Returns:
            NDArray[np.float64] of shape (n, 2) containing the curve points (x, y)
        """
        t = np.asarray(t_values, dtype=np.float64).reshape(-1, 1)
        s = 1.0 - t
        ctrl = self.to_array()
        a = ctrl[0] * s + ctrl[1] * t
        b = ctrl[1] * s + ctrl[2] * t
        c = ctrl[2] * s + ctrl[3] * t
        d = a * s + b * t
        e = b * s + c * t
        return d * s + e * t

    # Derivatives ----------------------------------------------------------------

    def derivative(self, t: float) -> Vec2:
        """Return the derivative ("velocity") at the given t-value on the curve."""
        return self._evaluate(t, point=False, first=True)[1]

    def second_derivative(self, t: float) -> Vec2:
        """Return the second derivative ("acceleration") at the given t-value on the curve."""
        return self._evaluate(t, point=False, second=True)[2]

    def third_derivative(self) -> Vec2:
        """Return the third derivative ("jerk"), which is constant for a cubic curve."""
        p0, p1, p2, p3 = self.p0, self.p1, self.p2, self.p3
        return Vec2(
            6.0 * (3.0 * (p1.x - p2.x) + p3.x - p0.x),
            6.0 * (3.0 * (p1.y - p2.y) + p3.y - p0.y),
        )

    def tangent(self, t: float) -> Vec2:
        """
        Return the normalized tangent direction at the given t-value on the curve.

        At a cusp the derivative is the zero vector and the tangent is Vec2(nan, nan).
        """
        return self.derivative(t).normalized()

    # Combined fast paths ----------------------------------------------------------

    def point_and_tangent(self, t: float) -> Tuple[Vec2, Vec2]:
        """Return point and tangent at t, sharing the de Casteljau terms."""
        pt, d1, _ = self._evaluate(t, first=True)
        return pt, d1.normalized()

    def point_and_derivative(self, t: float) -> Tuple[Vec2, Vec2]:
        """Return point and derivative at t, sharing the de Casteljau terms."""
        pt, d1, _ = self._evaluate(t, first=True)
        return pt, d1

    def first_two_derivatives(self, t: float) -> Tuple[Vec2, Vec2]:
        """Return first and second derivative at t."""
        _, d1, d2 = self._evaluate(t, point=False, first=True, second=True)
        return d1, d2

    def all_three_derivatives(self, t: float) -> Tuple[Vec2, Vec2, Vec2]:
        """Return first, second and third derivative at t."""
        _, d1, d2 = self._evaluate(t, point=False, first=True, second=True)
        return d1, d2, self.third_derivative()

    def point_and_first_two_derivatives(self, t: float) -> Tuple[Vec2, Vec2, Vec2]:
        """Return point, first and second derivative at t."""
        pt, d1, d2 = self._evaluate(t, first=True, second=True)
        return pt, d1, d2

    # Curvature, normal & angle ----------------------------------------------------

    def curvature(self, t: float) -> float:
        """
        Return the signed curvature at the given t-value on the curve.

        The curvature is measured in radians per distance unit, positive values turn
        counter-clockwise. It equals the reciprocal radius of the osculating circle.
        Where the velocity is zero the result is nan or infinite.

        Args:
            t (float): The t-value along the curve to sample

        Returns:
            float: det(B'(t), B''(t)) / |B'(t)|^3
        """
        vel, acc = self.first_two_derivatives(t)
        d_mag = vel.magnitude
        return float_div(vel.determinant(acc), d_mag * d_mag * d_mag)

    def osculating_circle(self, t: float) -> Circle2D:
        """
        Return the osculating circle at the given t-value on the curve.

        Osculating circles are defined everywhere except on inflection points,
        where the curvature is 0. There the radius is infinite and the center is
        not finite; callers check Circle2D.is_finite.

        Args:
            t (float): The t-value along the curve to sample

        Returns:
            Circle2D: the circle best approximating the curve at t
        """
        point, delta, delta_delta = self.point_and_first_two_derivatives(t)
        d_mag = delta.magnitude
        curvature = float_div(delta.determinant(delta_delta), d_mag * d_mag * d_mag)
        normal = delta.normalized().rotate90ccw()
        signed_radius = float_div(1.0, curvature)
        return Circle2D(center=point + normal * signed_radius, radius=abs(signed_radius))

    def normal(self, t: float) -> Vec2:
        """Return the normal direction at t, pointing to the left of the direction of travel."""
        return self.tangent(t).rotate90ccw()

    def angle(self, t: float) -> float:
        """Return the angle of the curve direction at t, in radians."""
        d1 = self.derivative(t)
        return math.atan2(d1.y, d1.x)

    # Splitting ----------------------------------------------------------------------

    def split(self, t: float) -> Tuple[BezierCubic2D, BezierCubic2D]:
        """
        Split this curve at the given t-value into two curves of the exact same shape.

        Args:
            t (float): The t-value to split at

        Returns:
            Tuple[BezierCubic2D, BezierCubic2D]: the curves covering [0, t] and [t, 1]
        """
        ax, ay, bx, by, cx, cy, dx, dy, ex, ey = self._casteljau(t)
        s = 1.0 - t
        p = Vec2(dx * s + ex * t, dy * s + ey * t)
        pre = BezierCubic2D(self.p0, Vec2(ax, ay), Vec2(dx, dy), p)
        post = BezierCubic2D(p, Vec2(ex, ey), Vec2(cx, cy), self.p3)
        return pre, post

    # Polynomial factors & extrema -------------------------------------------------

    def _component_values(self, axis: Axis) -> Tuple[float, float, float, float]:
        if axis == Axis.X:
            return self.p0.x, self.p1.x, self.p2.x, self.p3.x
        return self.p0.y, self.p1.y, self.p2.y, self.p3.y

    def derivative_factors(self) -> Tuple[Vec2, Vec2, Vec2]:
        """Return the factors (a, b, c) of the derivative per component, in the form a*t^2 + b*t + c."""
        px = Polynomial.from_cubic_bezier_derivative(*self._component_values(Axis.X))
        py = Polynomial.from_cubic_bezier_derivative(*self._component_values(Axis.Y))
        return (
            Vec2(px.quadratic, py.quadratic),
            Vec2(px.linear, py.linear),
            Vec2(px.constant, py.constant),
        )

    def second_derivative_factors(self) -> Tuple[Vec2, Vec2]:
        """Return the factors (a, b) of the second derivative per component, in the form a*t + b."""
        px = Polynomial.from_cubic_bezier_second_derivative(*self._component_values(Axis.X))
        py = Polynomial.from_cubic_bezier_second_derivative(*self._component_values(Axis.Y))
        return Vec2(px.linear, py.linear), Vec2(px.constant, py.constant)

    def local_extrema(self, axis: int) -> ResultsMax2[float]:
        """
        Return the t-values of the local minima/maxima on one axis, in the 0 < t < 1 range.

        Args:
            axis (Axis or int): Axis.X (0) or Axis.Y (1)

        Returns:
            ResultsMax2[float]: zero to two t-values

        Raises:
            IndexError: If axis is neither 0 nor 1.
        """
        axis = _check_axis(axis)
        polynom = Polynomial.from_cubic_bezier_derivative(*self._component_values(axis))
        extrema: ResultsMax2[float] = ResultsMax2()
        for t in polynom.roots:
            if 0.0 < t < 1.0:
                extrema.append(t)
        return extrema

    def local_extrema_points(self, axis: int) -> ResultsMax2[float]:
        """Return the axis coordinate at each local extremum of that axis (0 < t < 1)."""
        return ResultsMax2(self.point_component(axis, t) for t in self.local_extrema(axis))

    # Bounds & length ----------------------------------------------------------------

    def bounds(self) -> Box2D:
        """
        Return the tight axis-aligned bounding box of the curve.

        The end points are always on the curve; the interior extrema of each axis
        are the only other candidates for the box border.
        """
        points = [self.p0, self.p3]
        for axis in Axis:
            points.extend(self.point(t) for t in self.local_extrema(axis))
        return Box2D.from_points(points)

    def length(self, accuracy: Optional[int] = None, settings: Optional[QuerySettings] = None) -> float:
        """
        Return the approximate length of the curve.

        The curve is sampled at `accuracy` evenly spaced t-values and the lengths of
        the resulting polyline segments are summed up. For accuracy <= 2 the
        straight distance between the end points is returned.

        Args:
            accuracy (int): Number of samples. Defaults to settings.length_accuracy
            settings (QuerySettings): Source of the default accuracy

        Returns:
            float: the polyline length
        """
        if accuracy is None:
            accuracy = (settings or DEFAULT_SETTINGS).length_accuracy
        if accuracy <= 2:
            return (self.p0 - self.p3).magnitude

        t_values = np.arange(accuracy, dtype=np.float64) / (accuracy - 1.0)
        deltas = np.diff(self.point_array(t_values), axis=0)
        return float(np.sum(np.hypot(deltas[:, 0], deltas[:, 1])))

    # Polygonize ---------------------------------------------------------------------

    def polygonize(self, steps: int) -> NDArray[np.float64]:
        """
        Polygonize the curve into `steps` line segments of equal t-spacing.
        Uses pure Python for small step counts, NumPy for larger ones.

        Args:
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 2) containing the points (x, y)

        Raises:
            ValueError: If steps < 1.
        """
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")
        if steps < POLYGONIZE_NUMPY_THRESHOLD:
            return self._polygonize_python(steps)
        return self.point_array(np.linspace(0.0, 1.0, steps + 1, dtype=np.float64))

    def _polygonize_python(self, steps: int) -> NDArray[np.float64]:
        """
        Polygonize using forward differencing, O(1) per point.
        The differences are derived from actual curve points B(0), B(h), B(2h), B(3h).
        """
        h = 1.0 / steps
        b0 = self.p0
        b1 = self.point(h)
        b2 = self.point(2.0 * h)
        b3 = self.point(3.0 * h)

        # First differences: delta_B = B(h) - B(0)
        dx_first = b1.x - b0.x
        dy_first = b1.y - b0.y

        # Second differences: delta2_B = B(2h) - 2*B(h) + B(0)
        dx_second = b2.x - 2.0 * b1.x + b0.x
        dy_second = b2.y - 2.0 * b1.y + b0.y

        # Third differences: delta3_B = B(3h) - 3*B(2h) + 3*B(h) - B(0) (constant for cubic)
        dx_third = b3.x - 3.0 * b2.x + 3.0 * b1.x - b0.x
        dy_third = b3.y - 3.0 * b2.y + 3.0 * b1.y - b0.y

        result = np.empty((steps + 1, 2), dtype=np.float64)
        x, y = b0.x, b0.y
        result[0, 0] = x
        result[0, 1] = y
        for i in range(1, steps + 1):
            x += dx_first
            y += dy_first

            dx_first += dx_second
            dy_first += dy_second
            dx_second += dx_third
            dy_second += dy_third

            result[i, 0] = x
            result[i, 1] = y
        return result

    # Transformation -----------------------------------------------------------------

    def transform_affine(self, affine_trafo: Sequence[Union[int, float]]) -> BezierCubic2D:
        """
        Return this curve transformed by the affine transformation [a00, a01, a10, a11, b0, b1].

        Bezier curves are affine invariant, transforming the control points
        transforms every curve point exactly.
        """
        return BezierCubic2D(*(GeomMath.transform_point(affine_trafo, p) for p in self.control_points))

    # Point projection ---------------------------------------------------------------

    def project_point(
        self,
        point: Vec2Like,
        initial_subdivisions: Optional[int] = None,
        refinement_iterations: Optional[int] = None,
        settings: Optional[QuerySettings] = None,
    ) -> Projection:
        """
        Return the (approximate) point on the curve closest to the given point.

        The derivative of the squared distance changes sign at every local
        distance minimum. The curve is sampled to find up to three such sign
        changes, each candidate is refined with Newton-Raphson iterations, and
        the closest of the candidates and the two end points wins.

        Args:
            point: The point to project onto the curve
            initial_subdivisions: Recommended range [8-32]. Number of samples used
                to find candidates. Complex curves may need around 16, simple curves
                work with around 8. Defaults to settings.project_subdivisions
            refinement_iterations: Recommended range [3-6]. Newton steps per
                candidate, converges rapidly. Defaults to settings.project_iterations
            settings: Source of the default parameters

        Returns:
            Projection: the closest point and its (unclamped) t-value
        """
        settings = settings or DEFAULT_SETTINGS
        if initial_subdivisions is None:
            initial_subdivisions = settings.project_subdivisions
        if refinement_iterations is None:
            refinement_iterations = settings.project_iterations

        point = Vec2.of(point)
        # curve relative to the query point, the query point is the origin
        bez = BezierCubic2D(self.p0 - point, self.p1 - point, self.p2 - point, self.p3 - point)

        def sample(t: float) -> _ProjectSample:
            f, fp = bez.point_and_derivative(t)
            return _ProjectSample(t, f, fp, f.dot(fp))

        # find initial candidates
        candidates: List[_ProjectSample] = []
        prev = sample(0.0)
        for i in range(1, initial_subdivisions):
            smp = sample(i / (initial_subdivisions - 1.0))
            if sign_as_int(smp.dist_delta_sq) != sign_as_int(prev.dist_delta_sq):
                candidates.append(sample((prev.t + smp.t) / 2.0))
                if len(candidates) == 3:
                    break  # the polynomial degree allows no more than three
            prev = smp

        if not candidates:
            logger.debug("No interior closest point candidates for %s, comparing end points only", point)

        # refine each candidate with Newton-Raphson iterations
        for idx, smp in enumerate(candidates):
            for _ in range(refinement_iterations):
                fpp = bez.second_derivative(smp.t)
                step = float_div(smp.f.dot(smp.fp), smp.f.dot(fpp) + smp.fp.dot(smp.fp))
                smp = sample(smp.t - step)
            candidates[idx] = smp

        # end points first
        sq_dist0 = bez.p0.sqr_magnitude
        sq_dist1 = bez.p3.sqr_magnitude
        first_closest = sq_dist0 < sq_dist1
        t_closest = 0.0 if first_closest else 1.0
        pt_closest = self.p0 if first_closest else self.p3
        dist_sq_closest = sq_dist0 if first_closest else sq_dist1

        # then the refined interior candidates
        for smp in candidates:
            sq_mag = smp.f.sqr_magnitude
            if sq_mag < dist_sq_closest:
                dist_sq_closest = sq_mag
                t_closest = smp.t
                pt_closest = smp.f + point

        return Projection(pt_closest, t_closest)

    # Intersections ------------------------------------------------------------------

    def _intersect(
        self,
        origin: Vec2,
        direction: Vec2,
        range_limited: bool = False,
        min_param: float = math.nan,
        max_param: float = math.nan,
    ) -> ResultsMax3[float]:
        """
        Return the t-values in [0, 1] where the curve crosses the line through origin along direction.

        The control points are expressed in line space: the determinant against
        the direction gives the signed perpendicular offset, the dot product the
        position along the line (scaled by the direction's length). Roots of the
        perpendicular polynomial are the crossings. If range_limited, crossings
        whose along-line position lies outside [min_param, max_param] are dropped.

        A curve lying completely on the line has no isolated crossings; its end
        points t=0 and t=1 are reported instead. The tolerance for that test
        scales with the size of the control polygon, so it does not depend on
        where the origin sits on the line. A zero direction describes no line
        and yields no crossings.
        """
        rel = [p - origin for p in self.control_points]
        offsets = [r.determinant(direction) for r in rel]

        direction_length = direction.magnitude
        extent = max((p - self.p0).magnitude for p in self.control_points)
        if direction_length > 0.0 and max(abs(v) for v in offsets) <= POLYNOMIAL_EPSILON * extent * direction_length:
            logger.debug("Curve %s lies on the line through %s along %s, reporting end points", self, origin, direction)
            roots = ResultsMax3([0.0, 1.0])
        else:
            roots = Polynomial.from_cubic_bezier(*offsets).roots

        polynom_along: Optional[Polynomial] = None
        if range_limited:
            polynom_along = Polynomial.from_cubic_bezier(*(r.dot(direction) for r in rel))

        result: ResultsMax3[float] = ResultsMax3()
        for t in roots:
            if not 0.0 <= t <= 1.0:
                continue
            if polynom_along is not None and not min_param <= polynom_along.sample(t) <= max_param:
                continue
            result.append(t)
        return result

    def intersect(self, probe: LineProbe) -> ResultsMax3[float]:
        """
        Return the t-values at which the given line, ray or line segment intersects the curve.

        Args:
            probe: A Line2D (unbounded), Ray2D (forward only) or LineSegment2D

        Returns:
            ResultsMax3[float]: zero to three t-values in [0, 1]

        Raises:
            TypeError: If probe is none of the supported line types.
        """
        if isinstance(probe, Line2D):
            return self._intersect(probe.origin, probe.direction)
        if isinstance(probe, Ray2D):
            return self._intersect(probe.origin, probe.direction, True, 0.0, math.inf)
        if isinstance(probe, LineSegment2D):
            # direction is unnormalized, so the range is in squared length units
            return self._intersect(probe.start, probe.direction, True, 0.0, probe.length_squared)
        raise TypeError(f"Cannot intersect a cubic Bezier curve with {type(probe).__name__}")

    def intersection_points(self, probe: LineProbe) -> ResultsMax3[Vec2]:
        """Return the points at which the given line, ray or line segment intersects the curve."""
        return ResultsMax3(self.point(t) for t in self.intersect(probe))

    def raycast(self, ray: Ray2D, max_dist: float = math.inf) -> RaycastHit:
        """
        Raycast against the curve and return the closest hit.

        Args:
            ray (Ray2D): The ray to cast
            max_dist (float): Maximum distance along the ray, measured as
                dot(ray.direction, hit - ray.origin)

        Returns:
            RaycastHit: hit flag, hit point and t-value on the curve
        """
        closest_dist = math.inf
        hit = RaycastHit(False, None, None)
        for t in self.intersect(ray):
            pt = self.point(t)
            dist = ray.direction.dot(pt - ray.origin)
            if dist < closest_dist and dist <= max_dist:
                closest_dist = dist
                hit = RaycastHit(True, pt, t)
        return hit


###############################################################################
# Helpers
###############################################################################


def _casteljau_component(p0: float, p1: float, p2: float, p3: float, t: float) -> float:
    """One coordinate of B(t), same interpolation order as BezierCubic2D._casteljau."""
    s = 1.0 - t
    a = p0 * s + p1 * t
    b = p1 * s + p2 * t
    c = p2 * s + p3 * t
    d = a * s + b * t
    e = b * s + c * t
    return d * s + e * t


def _checked_index(value: int, count: int, name: str) -> int:
    """
    Return value as int if it is an integer in the 0 to count-1 range.

    Raises:
        IndexError: If value is not an integer (bool included) or out of range.
    """
    try:
        index = operator.index(value)
    except TypeError:
        raise IndexError(f"{name} has to be an integer, got {value!r}") from None
    if isinstance(value, bool) or not 0 <= index < count:
        raise IndexError(f"{name} has to be in the 0 to {count - 1} range, got {value!r}")
    return index


def _check_axis(axis: int) -> Axis:
    return Axis(_checked_index(axis, 2, "axis (0 for x, 1 for y)"))
