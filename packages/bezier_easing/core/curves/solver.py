"""Inverting x(t) for a cubic Bézier easing curve.

Given a progress value x and the x control values (x1, x2), find the curve
parameter t with x(t) == x. The search runs in two stages:

1. A coarse sample table brackets x between two adjacent table entries and
   linear interpolation inside that bracket gives an initial guess for t.
2. The guess is refined. The local slope of x(t) at the guess picks the
   strategy: Newton-Raphson for healthy slopes, bisection over the bracket
   when the slope is too shallow for Newton to be stable, and no refinement
   at all when the slope is exactly zero.

Every call does a bounded amount of work and never raises.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from bezier_easing.core.config.models import DEFAULT_SOLVER_CONFIG, SolverConfig
from bezier_easing.core.curves.polynomial import evaluate, slope
from bezier_easing.core.curves.sampling import build_sample_table, sample_step

logger = logging.getLogger(__name__)

NEWTON_ITERATIONS = DEFAULT_SOLVER_CONFIG.newton_iterations
NEWTON_MIN_SLOPE = DEFAULT_SOLVER_CONFIG.newton_min_slope
SUBDIVISION_PRECISION = DEFAULT_SOLVER_CONFIG.subdivision_precision
SUBDIVISION_MAX_ITERATIONS = DEFAULT_SOLVER_CONFIG.subdivision_max_iterations


class RefineStrategy(str, Enum):
    """How an initial t guess is refined."""

    NEWTON = "newton"  # Newton-Raphson from the guess
    EXACT = "exact"  # Zero slope: keep the guess as is
    BISECT = "bisect"  # Shallow slope: bisect the bracketing interval


def refine_newton(
    target_x: float,
    guess_t: float,
    a1: float,
    a2: float,
    iterations: int = NEWTON_ITERATIONS,
) -> float:
    """Refine t with a fixed number of Newton-Raphson steps.

    There is no convergence test; the step count is fixed. If the slope
    is exactly zero at any step the current t is returned as is.

    Args:
        target_x: The x value being inverted.
        guess_t: Starting parameter.
        a1: First control value of the axis being inverted.
        a2: Second control value of the axis being inverted.
        iterations: Number of Newton steps.

    Returns:
        Refined t.
    """
    t = guess_t
    for _ in range(iterations):
        current_slope = slope(t, a1, a2)
        if current_slope == 0.0:
            return t
        current_x = evaluate(t, a1, a2) - target_x
        t -= current_x / current_slope
    return t


def refine_subdivide(
    target_x: float,
    lo_t: float,
    hi_t: float,
    a1: float,
    a2: float,
    precision: float = SUBDIVISION_PRECISION,
    max_iterations: int = SUBDIVISION_MAX_ITERATIONS,
) -> float:
    """Refine t by bisecting [lo_t, hi_t].

    Stops after max_iterations midpoints, or as soon as a midpoint lands
    within precision of target_x.

    Args:
        target_x: The x value being inverted.
        lo_t: Lower end of the bracketing interval.
        hi_t: Upper end of the bracketing interval.
        a1: First control value of the axis being inverted.
        a2: Second control value of the axis being inverted.
        precision: Early-exit tolerance on |x(t) - target_x|.
        max_iterations: Maximum number of midpoints evaluated.

    Returns:
        The last midpoint evaluated.
    """
    current_t = lo_t
    for _ in range(max_iterations):
        current_t = lo_t + (hi_t - lo_t) / 2.0
        current_x = evaluate(current_t, a1, a2) - target_x
        if current_x > 0.0:
            hi_t = current_t
        else:
            lo_t = current_t
        if abs(current_x) < precision:
            break
    return current_t


def select_strategy(
    initial_slope: float, min_slope: float = NEWTON_MIN_SLOPE
) -> RefineStrategy:
    """Pick the refinement strategy from the slope at the initial guess.

    Example:
        >>> select_strategy(0.5)
        <RefineStrategy.NEWTON: 'newton'>
        >>> select_strategy(0.0)
        <RefineStrategy.EXACT: 'exact'>
        >>> select_strategy(0.0005)
        <RefineStrategy.BISECT: 'bisect'>
    """
    if initial_slope >= min_slope:
        return RefineStrategy.NEWTON
    if initial_slope == 0.0:
        return RefineStrategy.EXACT
    return RefineStrategy.BISECT


def bracket(x: float, samples: Sequence[float]) -> tuple[float, float]:
    """Locate x in the sample table and interpolate an initial t guess.

    Scans forward from entry 1 while the entry is <= x, stopping at the
    last entry. An x equal to a sample value therefore starts its
    interval at that sample.

    If the two samples bounding the interval are equal the interpolation
    is undefined; the guess falls back to the interval start.

    Args:
        x: The x value being inverted.
        samples: Non-decreasing x(t) table over evenly-spaced t.

    Returns:
        Tuple of (interval_start, guess_t).

    Example:
        >>> bracket(0.5, [0.0, 0.25, 0.5, 0.75, 1.0])
        (0.5, 0.5)
    """
    step = sample_step(len(samples))
    last_sample = len(samples) - 1

    interval_start = 0.0
    current_sample = 1
    while current_sample != last_sample and samples[current_sample] <= x:
        interval_start += step
        current_sample += 1
    current_sample -= 1

    sample_low = samples[current_sample]
    sample_high = samples[current_sample + 1]
    if sample_high == sample_low:
        logger.debug(
            "Flat sample segment at t=%s (x=%s); using interval start", interval_start, x
        )
        return interval_start, interval_start

    dist = (x - sample_low) / (sample_high - sample_low)
    return interval_start, interval_start + dist * step


def solve_t_for_x(
    x: float,
    x1: float,
    x2: float,
    samples: Sequence[float] | None = None,
    config: SolverConfig = DEFAULT_SOLVER_CONFIG,
) -> float:
    """Find the curve parameter t where x(t) == x.

    Args:
        x: Progress value, normally in [0, 1]. Values outside the range are
            extrapolated from the nearest table interval.
        x1: First x control value, in [0, 1].
        x2: Second x control value, in [0, 1].
        samples: Prebuilt sample table for (x1, x2). Built on the spot when
            None; passing a cached table gives identical results.
        config: Solver tuning constants.

    Returns:
        The solved curve parameter t.

    Example:
        >>> solve_t_for_x(0.5, 0.0, 1.0)
        0.5
    """
    if samples is None:
        samples = build_sample_table(x1, x2, config.sample_table_size)

    interval_start, guess_t = bracket(x, samples)
    strategy = select_strategy(slope(guess_t, x1, x2), config.newton_min_slope)

    if strategy is RefineStrategy.NEWTON:
        return refine_newton(x, guess_t, x1, x2, config.newton_iterations)
    if strategy is RefineStrategy.EXACT:
        return guess_t
    return refine_subdivide(
        x,
        interval_start,
        interval_start + sample_step(len(samples)),
        x1,
        x2,
        config.subdivision_precision,
        config.subdivision_max_iterations,
    )
