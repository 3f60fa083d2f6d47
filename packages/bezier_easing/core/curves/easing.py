"""Cubic Bézier easing functions.

`create_easing` validates a pair of control points and returns a callable
`BezierEasing` that maps progress x in [0, 1] to eased output y, matching
CSS `cubic-bezier(x1, y1, x2, y2)` timing functions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bezier_easing.core.config.models import DEFAULT_SOLVER_CONFIG, SolverConfig
from bezier_easing.core.curves.errors import InvalidControlPoint
from bezier_easing.core.curves.polynomial import evaluate
from bezier_easing.core.curves.sampling import build_sample_table
from bezier_easing.core.curves.solver import solve_t_for_x

logger = logging.getLogger(__name__)


def linear(x: float) -> float:
    """Identity easing."""
    return x


def _validate_x(axis: str, value: float) -> None:
    # NaN fails the range check too
    if not 0.0 <= value <= 1.0:
        raise InvalidControlPoint(axis, value)


@dataclass(frozen=True)
class BezierEasing:
    """Easing function for a cubic Bézier from (0, 0) to (1, 1).

    Instances are immutable and hold no mutable state, so one instance can
    be shared and called from many threads at once.

    Attributes:
        x1: First control point x, in [0, 1].
        y1: First control point y (unconstrained; may overshoot).
        x2: Second control point x, in [0, 1].
        y2: Second control point y (unconstrained; may overshoot).
        config: Solver tuning constants.

    Raises:
        InvalidControlPoint: If x1 or x2 is outside [0, 1].

    Example:
        >>> ease = BezierEasing(0.0, 0.0, 1.0, 0.5)
        >>> ease(0.5)
        0.3125
    """

    x1: float
    y1: float
    x2: float
    y2: float
    config: SolverConfig = field(default=DEFAULT_SOLVER_CONFIG, repr=False)
    _samples: tuple[float, ...] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        _validate_x("x1", self.x1)
        _validate_x("x2", self.x2)
        if self.config.cache_sample_table:
            samples = build_sample_table(self.x1, self.x2, self.config.sample_table_size)
            object.__setattr__(self, "_samples", samples)

    @property
    def control_points(self) -> tuple[float, float, float, float]:
        """Control points as (x1, y1, x2, y2)."""
        return self.x1, self.y1, self.x2, self.y2

    @property
    def is_linear(self) -> bool:
        """True when both control points lie on the identity line."""
        return self.x1 == self.y1 and self.x2 == self.y2

    def solve(self, x: float) -> float:
        """Return the curve parameter t where x(t) == x."""
        return solve_t_for_x(x, self.x1, self.x2, self._samples, self.config)

    def __call__(self, x: float) -> float:
        if self.is_linear:
            return linear(x)
        # Endpoints are exact; skip the solver to avoid rounding error
        if x == 0.0 or x == 1.0:
            return x
        return evaluate(self.solve(x), self.y1, self.y2)


def create_easing(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    config: SolverConfig | None = None,
) -> BezierEasing:
    """Create an easing function from cubic Bézier control points.

    Args:
        x1: First control point x, must be in [0, 1].
        y1: First control point y.
        x2: Second control point x, must be in [0, 1].
        y2: Second control point y.
        config: Solver tuning constants. Defaults reproduce CSS behavior.

    Returns:
        A callable BezierEasing mapping x to eased y.

    Raises:
        InvalidControlPoint: If x1 or x2 is outside [0, 1].

    Example:
        >>> ease = create_easing(0.42, 0.0, 0.58, 1.0)
        >>> ease(0.0), ease(1.0)
        (0.0, 1.0)
    """
    easing = BezierEasing(x1, y1, x2, y2, config or DEFAULT_SOLVER_CONFIG)
    logger.debug("Created cubic-bezier easing %s", easing.control_points)
    return easing
