"""Central module containing constants and definitions for cubic Bezier geometry."""

from __future__ import annotations

from enum import IntEnum

###############################################################################
# Enums
###############################################################################


class Axis(IntEnum):
    """Enum to address a coordinate axis of a 2D point."""

    X = 0
    Y = 1


###############################################################################
# Defaults for approximating queries
###############################################################################

# Number of samples used by BezierCubic2D.length()
DEFAULT_LENGTH_ACCURACY: int = 8

# Recommended range [8-32]: samples used to find closest point candidates
DEFAULT_PROJECT_SUBDIVISIONS: int = 16

# Recommended range [3-6]: Newton-Raphson steps per closest point candidate
DEFAULT_PROJECT_ITERATIONS: int = 4

###############################################################################
# Numerics
###############################################################################

# Relative magnitude below which a leading polynomial coefficient counts as zero
POLYNOMIAL_EPSILON: float = 1.0e-12

# Step count from which polygonizing switches from pure Python to NumPy
POLYGONIZE_NUMPY_THRESHOLD: int = 70

# Capacities of the bounded result containers
MAX_EXTREMA_PER_AXIS: int = 2
MAX_CUBIC_ROOTS: int = 3
