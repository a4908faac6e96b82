"""Settings bundling the parameters of the approximating curve queries."""

from __future__ import annotations

from dataclasses import dataclass

from bezier2d.consts import (
    DEFAULT_LENGTH_ACCURACY,
    DEFAULT_PROJECT_ITERATIONS,
    DEFAULT_PROJECT_SUBDIVISIONS,
)


###############################################################################
# QuerySettings
###############################################################################
@dataclass(frozen=True)
class QuerySettings:
    """Quality parameters for approximating queries on a BezierCubic2D.

    Attributes:
        length_accuracy: Number of samples used to approximate the arc length.
            Values <= 2 measure the straight distance between the end points.
        project_subdivisions: Number of samples used to find closest point candidates.
        project_iterations: Newton-Raphson refinement steps per candidate.
    """

    length_accuracy: int = DEFAULT_LENGTH_ACCURACY
    project_subdivisions: int = DEFAULT_PROJECT_SUBDIVISIONS
    project_iterations: int = DEFAULT_PROJECT_ITERATIONS

    def __post_init__(self) -> None:
        for name in ("length_accuracy", "project_subdivisions", "project_iterations"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")

    def to_dict(self) -> dict:
        """Convert settings to a dictionary."""
        return {
            "length_accuracy": self.length_accuracy,
            "project_subdivisions": self.project_subdivisions,
            "project_iterations": self.project_iterations,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QuerySettings":
        """Create QuerySettings from a dictionary, missing keys use the defaults."""
        return cls(
            length_accuracy=data.get("length_accuracy", DEFAULT_LENGTH_ACCURACY),
            project_subdivisions=data.get("project_subdivisions", DEFAULT_PROJECT_SUBDIVISIONS),
            project_iterations=data.get("project_iterations", DEFAULT_PROJECT_ITERATIONS),
        )


DEFAULT_SETTINGS = QuerySettings()
