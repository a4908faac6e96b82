"""2D vector type and scalar helpers used by the curve algebra."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union

Vec2Like = Union["Vec2", Sequence[float]]


###############################################################################
# Scalar helpers
###############################################################################


def float_div(numerator: float, denominator: float) -> float:
    """
    Divide two floats with IEEE 754 semantics instead of raising ZeroDivisionError.

    Division by zero returns a signed infinity, or NaN for 0/0 and NaN inputs.
    Degenerate curve configurations (cusps, inflections) rely on this to
    propagate inf/nan through the formulas instead of failing.

    Args:
        numerator (float): dividend
        denominator (float): divisor

    Returns:
        float: the quotient
    """
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def sign_as_int(value: float) -> int:
    """Return -1, 0 or 1 depending on the sign of value."""
    if value > 0.0:
        return 1
    if value < 0.0:
        return -1
    return 0


###############################################################################
# Vec2
###############################################################################


@dataclass(frozen=True)
class Vec2:
    """
    Immutable 2D vector.

    Equality is exact per coordinate, there is no tolerance.

    Attributes:
        x (float): The x-coordinate.
        y (float): The y-coordinate.
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def of(cls, value: Vec2Like) -> Vec2:
        """Create a Vec2 from a Vec2 or any (x, y) sequence."""
        if isinstance(value, Vec2):
            return value
        if len(value) != 2:
            raise ValueError(f"A 2D point needs exactly 2 coordinates, got {len(value)}")
        return cls(float(value[0]), float(value[1]))

    # Sequence protocol --------------------------------------------------------

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, axis: int) -> float:
        if axis == 0:
            return self.x
        if axis == 1:
            return self.y
        raise IndexError(f"Vec2 axis has to be either 0 or 1, got {axis}")

    def to_tuple(self) -> Tuple[float, float]:
        """The vector as Tuple (x, y)."""
        return (self.x, self.y)

    # Arithmetic ---------------------------------------------------------------

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(float_div(self.x, scalar), float_div(self.y, scalar))

    def dot(self, other: Vec2) -> float:
        """Dot product with other."""
        return self.x * other.x + self.y * other.y

    def determinant(self, other: Vec2) -> float:
        """2D cross product (self.x * other.y - self.y * other.x)."""
        return self.x * other.y - self.y * other.x

    @property
    def sqr_magnitude(self) -> float:
        """float: The squared length of the vector."""
        return self.x * self.x + self.y * self.y

    @property
    def magnitude(self) -> float:
        """float: The Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Vec2:
        """
        Return the unit vector in the direction of this vector.

        The zero vector has no direction, the result is then Vec2(nan, nan).
        """
        mag = self.magnitude
        return Vec2(float_div(self.x, mag), float_div(self.y, mag))

    def rotate90ccw(self) -> Vec2:
        """Rotate by 90 degrees counter-clockwise: (x, y) -> (-y, x)."""
        return Vec2(-self.y, self.x)

    def is_finite(self) -> bool:
        """True if both coordinates are finite."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
