"""Polynomials of degree three or lower and their real roots.

Cubic Bezier control values are Bernstein coefficients. Root finding needs
the power basis, so this module also provides the fixed basis change
    c0 = p0
    c1 = 3 (p1 - p0)
    c2 = 3 p0 - 6 p1 + 3 p2
    c3 = -p0 + 3 p1 - 3 p2 + p3
and the derivatives of the resulting polynomial.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from bezier2d.consts import POLYNOMIAL_EPSILON
from bezier2d.results import ResultsMax3


def _cbrt(value: float) -> float:
    """Real cube root, keeping the sign."""
    return math.copysign(abs(value) ** (1.0 / 3.0), value)


###############################################################################
# Polynomial
###############################################################################
@dataclass(frozen=True)
class Polynomial:
    """
    Polynomial f(t) = constant + linear*t + quadratic*t^2 + cubic*t^3.

    Attributes:
        constant (float): Coefficient of t^0.
        linear (float): Coefficient of t^1.
        quadratic (float): Coefficient of t^2.
        cubic (float): Coefficient of t^3.
    """

    constant: float = 0.0
    linear: float = 0.0
    quadratic: float = 0.0
    cubic: float = 0.0

    @classmethod
    def from_cubic_bezier(cls, p0: float, p1: float, p2: float, p3: float) -> Polynomial:
        """Convert the four Bernstein values of one cubic Bezier component to the power basis."""
        return cls(
            constant=p0,
            linear=3.0 * (p1 - p0),
            quadratic=3.0 * p0 - 6.0 * p1 + 3.0 * p2,
            cubic=-p0 + 3.0 * p1 - 3.0 * p2 + p3,
        )

    @classmethod
    def from_cubic_bezier_derivative(cls, p0: float, p1: float, p2: float, p3: float) -> Polynomial:
        """Derivative polynomial of one cubic Bezier component (degree <= 2)."""
        return cls.from_cubic_bezier(p0, p1, p2, p3).derivative()

    @classmethod
    def from_cubic_bezier_second_derivative(cls, p0: float, p1: float, p2: float, p3: float) -> Polynomial:
        """Second derivative polynomial of one cubic Bezier component (degree <= 1)."""
        return cls.from_cubic_bezier(p0, p1, p2, p3).derivative().derivative()

    def sample(self, t: float) -> float:
        """Evaluate the polynomial at t (Horner scheme)."""
        return self.constant + t * (self.linear + t * (self.quadratic + t * self.cubic))

    def derivative(self) -> Polynomial:
        """The first derivative as a new Polynomial."""
        return Polynomial(
            constant=self.linear,
            linear=2.0 * self.quadratic,
            quadratic=3.0 * self.cubic,
        )

    @property
    def roots(self) -> ResultsMax3[float]:
        """
        All real roots, in no particular order.

        A leading coefficient that is negligible relative to the largest
        coefficient is treated as zero, so an almost-quadratic cubic does not
        produce a spurious root far outside any useful range. Constant
        polynomials (including the zero polynomial) have no isolated roots
        and return an empty result.

        Returns:
            ResultsMax3[float]: zero to three real roots
        """
        scale = max(abs(self.constant), abs(self.linear), abs(self.quadratic), abs(self.cubic))
        if scale == 0.0 or not math.isfinite(scale):
            return ResultsMax3()
        eps = POLYNOMIAL_EPSILON * scale

        if abs(self.cubic) > eps:
            return self._cubic_roots()
        if abs(self.quadratic) > eps:
            return self._quadratic_roots(self.quadratic, self.linear, self.constant)
        if abs(self.linear) > eps:
            return ResultsMax3([-self.constant / self.linear])
        return ResultsMax3()

    @staticmethod
    def _quadratic_roots(a: float, b: float, c: float) -> ResultsMax3[float]:
        """Real roots of a*t^2 + b*t + c with a != 0."""
        disc = b * b - 4.0 * a * c
        if abs(disc) <= POLYNOMIAL_EPSILON * b * b:
            return ResultsMax3([-b / (2.0 * a)])
        if disc < 0.0:
            return ResultsMax3()
        # numerically stable variant, avoids cancellation between -b and sqrt(disc)
        q = -0.5 * (b + math.copysign(math.sqrt(disc), b))
        if q == 0.0:
            return ResultsMax3([0.0])
        return ResultsMax3([q / a, c / q])

    def _cubic_roots(self) -> ResultsMax3[float]:
        """Real roots of the full cubic via the depressed form t = x - a/3."""
        a = self.quadratic / self.cubic
        b = self.linear / self.cubic
        c = self.constant / self.cubic

        shift = a / 3.0
        p = b - a * a / 3.0
        q = 2.0 * a * a * a / 27.0 - a * b / 3.0 + c

        half_q = q / 2.0
        third_p = p / 3.0
        disc = half_q * half_q + third_p * third_p * third_p
        disc_tol = POLYNOMIAL_EPSILON * (half_q * half_q + abs(third_p * third_p * third_p))

        if abs(disc) <= disc_tol:
            if p == 0.0:
                # triple root
                return ResultsMax3([-shift])
            # one simple and one double root
            return ResultsMax3([3.0 * q / p - shift, -1.5 * q / p - shift])

        if disc > 0.0:
            sqrt_disc = math.sqrt(disc)
            x = _cbrt(-half_q + sqrt_disc) + _cbrt(-half_q - sqrt_disc)
            return ResultsMax3([x - shift])

        # three distinct real roots, trigonometric form (p < 0 here)
        r = 2.0 * math.sqrt(-third_p)
        cos_arg = max(-1.0, min(1.0, (3.0 * q) / (2.0 * p) * math.sqrt(-3.0 / p)))
        phi = math.acos(cos_arg) / 3.0
        return ResultsMax3([r * math.cos(phi - 2.0 * math.pi * k / 3.0) - shift for k in range(3)])
