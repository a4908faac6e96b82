"""Handling of the simple geometries the curve queries consume and produce"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

from bezier2d.vector import Vec2, Vec2Like


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to geometry handling."""

    @staticmethod
    def transform_point(affine_trafo: Sequence[Union[int, float]], point: Vec2Like) -> Vec2:
        """
        Perform an affine transformation on the given 2D point.

        The given _affine_trafo_ is a list of 6 floats, performing an affine transformation.
        The transformation is defined as:
            | x' | = | a00 a01 b0 |   | x |
            | y' | = | a10 a11 b1 | * | y |
            | 1  | = |  0   0  1  |   | 1 |
        with
            affine_trafo = [a00, a01, a10, a11, b0, b1]

        Args:
            affine_trafo (Tuple/List[float]): Affine transformation - [a00, a01, a10, a11, b0, b1]
            point (Vec2 or Tuple/List[float]): 2D point - (x, y)

        Returns:
            Vec2: the transformed point
        """
        if len(affine_trafo) != 6:
            raise ValueError(f"Affine transformation needs 6 values, got {len(affine_trafo)}")
        x_new = float(affine_trafo[0] * point[0] + affine_trafo[1] * point[1] + affine_trafo[4])
        y_new = float(affine_trafo[2] * point[0] + affine_trafo[3] * point[1] + affine_trafo[5])
        return Vec2(x_new, y_new)


###############################################################################
# Box2D
###############################################################################
@dataclass
class Box2D:
    """
    Axis-aligned rectangle.

    Attributes:
        xmin (float): The minimum x-coordinate.
        ymin (float): The minimum y-coordinate.
        xmax (float): The maximum x-coordinate.
        ymax (float): The maximum y-coordinate.
    """

    _xmin: float
    _ymin: float
    _xmax: float
    _ymax: float

    def __init__(self, xmin: float, ymin: float, xmax: float, ymax: float):
        """Initialize Box2D with coordinates.

        Args:
            xmin: The minimum x-coordinate
            ymin: The minimum y-coordinate
            xmax: The maximum x-coordinate
            ymax: The maximum y-coordinate
        """
        self._xmin = xmin
        self._ymin = ymin
        self._xmax = xmax
        self._ymax = ymax

        # Normalize coordinates to ensure xmin <= xmax and ymin <= ymax
        if self._xmin > self._xmax:
            self._xmin, self._xmax = self._xmax, self._xmin
        if self._ymin > self._ymax:
            self._ymin, self._ymax = self._ymax, self._ymin

    @classmethod
    def from_points(cls, points: Iterable[Vec2Like]) -> Box2D:
        """Smallest box containing all given points.

        Raises:
            ValueError: If no points are given.
        """
        xs = []
        ys = []
        for point in points:
            xs.append(float(point[0]))
            ys.append(float(point[1]))
        if not xs:
            raise ValueError("Cannot create a Box2D from an empty point set")
        return cls(xmin=min(xs), ymin=min(ys), xmax=max(xs), ymax=max(ys))

    @property
    def xmin(self) -> float:
        """float: The minimum x-coordinate."""
        return self._xmin

    @property
    def ymin(self) -> float:
        """float: The minimum y-coordinate."""
        return self._ymin

    @property
    def xmax(self) -> float:
        """float: The maximum x-coordinate."""
        return self._xmax

    @property
    def ymax(self) -> float:
        """float: The maximum y-coordinate."""
        return self._ymax

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """The extent of the box as Tuple (xmin, ymin, xmax, ymax)."""
        return self._xmin, self._ymin, self._xmax, self._ymax

    @property
    def min(self) -> Vec2:
        """Vec2: The corner with the minimum coordinates."""
        return Vec2(self._xmin, self._ymin)

    @property
    def max(self) -> Vec2:
        """Vec2: The corner with the maximum coordinates."""
        return Vec2(self._xmax, self._ymax)

    def contains(self, point: Vec2Like, tolerance: float = 0.0) -> bool:
        """
        Check whether the point lies inside the box or on its border.

        Args:
            point (Vec2 or Tuple/List[float]): 2D point - (x, y)
            tolerance (float): Distance the point may lie outside the box

        Returns:
            bool: True if the point is inside the (grown) box
        """
        return (
            self._xmin - tolerance <= point[0] <= self._xmax + tolerance
            and self._ymin - tolerance <= point[1] <= self._ymax + tolerance
        )


###############################################################################
# Circle2D
###############################################################################
@dataclass(frozen=True)
class Circle2D:
    """
    Circle given by center and radius.

    An osculating circle at an inflection point has an infinite radius and
    a non-finite center.
    """

    center: Vec2
    radius: float

    @property
    def is_finite(self) -> bool:
        """bool: True if center and radius are finite numbers."""
        return self.center.is_finite() and math.isfinite(self.radius)


###############################################################################
# Lines
###############################################################################
@dataclass(frozen=True)
class Line2D:
    """Infinite line through origin along direction (direction need not be normalized)."""

    origin: Vec2
    direction: Vec2

    def __init__(self, origin: Vec2Like, direction: Vec2Like):
        object.__setattr__(self, "origin", Vec2.of(origin))
        object.__setattr__(self, "direction", Vec2.of(direction))


@dataclass(frozen=True)
class Ray2D:
    """Half-line starting at origin, extending forward along direction."""

    origin: Vec2
    direction: Vec2

    def __init__(self, origin: Vec2Like, direction: Vec2Like):
        object.__setattr__(self, "origin", Vec2.of(origin))
        object.__setattr__(self, "direction", Vec2.of(direction))


@dataclass(frozen=True)
class LineSegment2D:
    """Straight segment between start and end."""

    start: Vec2
    end: Vec2

    def __init__(self, start: Vec2Like, end: Vec2Like):
        object.__setattr__(self, "start", Vec2.of(start))
        object.__setattr__(self, "end", Vec2.of(end))

    @property
    def direction(self) -> Vec2:
        """Vec2: The unnormalized direction end - start."""
        return self.end - self.start

    @property
    def length_squared(self) -> float:
        """float: The squared length of the segment."""
        return (self.end - self.start).sqr_magnitude

    @property
    def length(self) -> float:
        """float: The length of the segment."""
        return (self.end - self.start).magnitude
