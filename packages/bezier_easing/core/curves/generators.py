"""Sampled representations of cubic-bezier easing curves."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from bezier_easing.core.curves.easing import create_easing
from bezier_easing.core.curves.models import CurvePoint
from bezier_easing.core.curves.sampling import sample_uniform_grid


def sample_easing(ease: Callable[[float], float], n_samples: int) -> np.ndarray:
    """Evaluate an easing function on an evenly-spaced grid over [0, 1].

    Args:
        ease: Easing function mapping x to y.
        n_samples: Number of samples (must be >= 2). The grid includes
            both 0.0 and 1.0.

    Returns:
        Float64 array of n_samples eased values.

    Raises:
        ValueError: If n_samples < 2.

    Example:
        >>> sample_easing(lambda x: x, 3)
        array([0. , 0.5, 1. ])
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")

    return np.fromiter(
        (ease(x) for x in sample_uniform_grid(n_samples)),
        dtype=np.float64,
        count=n_samples,
    )


def generate_cubic_bezier(
    n_samples: int,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
) -> list[CurvePoint]:
    """Generate curve points for a cubic-bezier easing.

    Args:
        n_samples: Number of samples to generate (must be >= 2).
        x1: First control point x, in [0, 1].
        y1: First control point y.
        x2: Second control point x, in [0, 1].
        y2: Second control point y.

    Returns:
        List of CurvePoints from t=0.0 to t=1.0 inclusive.

    Raises:
        ValueError: If n_samples < 2.
        InvalidControlPoint: If x1 or x2 is outside [0, 1].

    Example:
        >>> points = generate_cubic_bezier(3, 0.0, 0.0, 1.0, 0.5)
        >>> [p.v for p in points]
        [0.0, 0.3125, 1.0]
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")

    ease = create_easing(x1, y1, x2, y2)
    t_grid = sample_uniform_grid(n_samples)
    values = sample_easing(ease, n_samples)
    return [CurvePoint(t=t, v=float(v)) for t, v in zip(t_grid, values, strict=True)]
