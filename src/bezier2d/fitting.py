"""Least-squares fitting of a cubic Bezier curve to sampled points."""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from bezier2d.bezier import BezierCubic2D
from bezier2d.vector import Vec2

logger = logging.getLogger(__name__)

# Fits with a squared error below this are not improved any further
_FIT_ERROR_EPS: float = 1.0e-14

# From this many samples on a chord-length parameterization is tried as well
_CHORD_LENGTH_MIN_POINTS: int = 11


def fit_cubic(points: Union[Sequence[Tuple[float, float]], NDArray[np.float64]]) -> BezierCubic2D:
    """Fit a cubic Bezier curve to sampled curve points.

    The first and last sample become the end points of the curve. The two inner
    control points are the least-squares solution for the remaining samples,
    first with uniformly spaced t-values. Longer inputs additionally try
    t-values proportional to the accumulated chord length and keep whichever
    fit has the smaller squared error.

    Args:
        points: Sampled points as (x, y) pairs, extra columns are ignored.

    Returns:
        BezierCubic2D: the fitted curve

    Raises:
        ValueError: If the input is not a list of (x, y) points, has fewer than
            four points, or no parameterization yields a solvable system.
    """
    points_array = np.asarray(points, dtype=np.float64)
    if points_array.ndim != 2 or points_array.shape[1] < 2:
        raise ValueError("Cubic fitting requires (x, y) formatted points.")

    num_points = points_array.shape[0]
    if num_points < 4:
        raise ValueError(f"At least four points are required to fit a cubic curve, got {num_points}.")

    xy_points = points_array[:, :2]
    start = Vec2(float(xy_points[0, 0]), float(xy_points[0, 1]))
    end = Vec2(float(xy_points[-1, 0]), float(xy_points[-1, 1]))

    best: Optional[BezierCubic2D] = None
    best_error = math.inf

    params_uniform = np.arange(num_points, dtype=np.float64) / float(num_points - 1)
    controls = _solve_controls(params_uniform, xy_points, start, end)
    if controls is not None:
        best = BezierCubic2D(start, controls[0], controls[1], end)
        best_error = _fit_error(best, params_uniform, xy_points)
        if best_error <= _FIT_ERROR_EPS:
            return best

    if num_points >= _CHORD_LENGTH_MIN_POINTS:
        deltas = np.diff(xy_points, axis=0)
        diffs = np.hypot(deltas[:, 0], deltas[:, 1])
        total_length = float(np.sum(diffs))
        if total_length > 0.0 and math.isfinite(total_length):
            params_chord = np.empty(num_points, dtype=np.float64)
            params_chord[0] = 0.0
            params_chord[1:] = np.cumsum(diffs) / total_length
            controls = _solve_controls(params_chord, xy_points, start, end)
            if controls is not None:
                candidate = BezierCubic2D(start, controls[0], controls[1], end)
                error = _fit_error(candidate, params_chord, xy_points)
                if error < best_error:
                    logger.debug("Chord-length fit improved squared error from %g to %g", best_error, error)
                    best, best_error = candidate, error

    if best is None:
        raise ValueError("Unable to fit cubic control points to the provided samples.")
    return best


def _solve_controls(
    params: NDArray[np.float64], xy_points: NDArray[np.float64], start: Vec2, end: Vec2
) -> Optional[Tuple[Vec2, Vec2]]:
    """Solve the 2x2 normal equations for the inner control points of one parameterization."""
    t = params[1:-1]
    if len(t) < 2:
        return None

    omt = 1.0 - t
    w1 = 3.0 * omt * omt * t
    w2 = 3.0 * omt * t * t

    s11 = float(np.dot(w1, w1))
    s12 = float(np.dot(w1, w2))
    s22 = float(np.dot(w2, w2))
    det = s11 * s22 - s12 * s12
    if det <= 0.0 or not math.isfinite(det):
        return None

    # samples minus the contribution of the fixed end points, shape (n, 2)
    base = np.outer(omt**3, start.to_tuple()) + np.outer(t**3, end.to_tuple())
    residual = xy_points[1:-1] - base
    r1 = w1 @ residual
    r2 = w2 @ residual

    ctrl1 = (r1 * s22 - r2 * s12) / det
    ctrl2 = (r2 * s11 - r1 * s12) / det
    if not (np.all(np.isfinite(ctrl1)) and np.all(np.isfinite(ctrl2))):
        return None
    return Vec2(float(ctrl1[0]), float(ctrl1[1])), Vec2(float(ctrl2[0]), float(ctrl2[1]))


def _fit_error(curve: BezierCubic2D, params: NDArray[np.float64], xy_points: NDArray[np.float64]) -> float:
    """Sum of squared distances between the samples and the curve at their t-values."""
    residual = xy_points - curve.point_array(params)
    return float(np.sum(residual * residual))
