"""Tests for the t-for-x solver and its refiners."""

from __future__ import annotations

import logging
import math

import pytest

from bezier_easing.core.config.models import SolverConfig
from bezier_easing.core.curves.polynomial import evaluate, slope
from bezier_easing.core.curves.sampling import build_sample_table
from bezier_easing.core.curves.solver import (
    RefineStrategy,
    bracket,
    refine_newton,
    refine_subdivide,
    select_strategy,
    solve_t_for_x,
)

# Just past the zero-slope point of the (1, 0) inflection curve
NEAR_INFLECTION_X = 0.5000001


class TestRefineNewton:
    """Tests for refine_newton function."""

    def test_converges_from_nearby_guess(self) -> None:
        """Four steps from a close guess land on the root."""
        t = refine_newton(0.3, 0.35, 0.0, 1.0)
        assert evaluate(t, 0.0, 1.0) == pytest.approx(0.3, abs=1e-9)

    def test_exact_guess_is_kept(self) -> None:
        """A guess that already solves x(t) == x does not move."""
        assert refine_newton(0.5, 0.5, 0.0, 1.0) == 0.5

    def test_zero_slope_returns_guess(self) -> None:
        """Zero slope returns the current t instead of dividing by zero."""
        assert refine_newton(0.7, 0.5, 1.0, 0.0) == 0.5

    def test_zero_iterations_returns_guess(self) -> None:
        """Iteration count is fixed by the caller."""
        assert refine_newton(0.3, 0.42, 0.0, 1.0, iterations=0) == 0.42


class TestRefineSubdivide:
    """Tests for refine_subdivide function."""

    def test_stops_once_within_precision(self) -> None:
        """Bisection exits at the first midpoint within 1e-7 of x."""
        t = refine_subdivide(NEAR_INFLECTION_X, 0.5, 0.6, 1.0, 0.0)
        assert t == pytest.approx(0.503125)
        assert abs(evaluate(t, 1.0, 0.0) - NEAR_INFLECTION_X) < 1e-7

    def test_stops_at_max_iterations(self) -> None:
        """Returns the last midpoint when precision is never reached."""
        t = refine_subdivide(
            NEAR_INFLECTION_X, 0.5, 0.6, 1.0, 0.0, precision=1e-30, max_iterations=3
        )
        assert t == pytest.approx(0.5125)

    def test_result_stays_in_interval(self) -> None:
        """Midpoints never leave [lo_t, hi_t]."""
        t = refine_subdivide(0.42, 0.3, 0.4, 0.25, 0.25)
        assert 0.3 <= t <= 0.4


class TestSelectStrategy:
    """Tests for select_strategy function."""

    def test_threshold_is_inclusive_for_newton(self) -> None:
        """Slope exactly at the threshold uses Newton."""
        assert select_strategy(0.001) is RefineStrategy.NEWTON

    def test_steep_slope_uses_newton(self) -> None:
        """Healthy slopes use Newton."""
        assert select_strategy(1.5) is RefineStrategy.NEWTON

    def test_zero_slope_is_exact(self) -> None:
        """Exactly zero slope keeps the guess."""
        assert select_strategy(0.0) is RefineStrategy.EXACT

    def test_shallow_slope_bisects(self) -> None:
        """Slopes under the threshold bisect."""
        assert select_strategy(0.000999) is RefineStrategy.BISECT

    def test_negative_slope_bisects(self) -> None:
        """Negative slopes (only reachable by extrapolation) bisect."""
        assert select_strategy(-0.5) is RefineStrategy.BISECT

    def test_custom_threshold(self) -> None:
        """Threshold can be tuned."""
        assert select_strategy(0.05, min_slope=0.1) is RefineStrategy.BISECT


class TestBracket:
    """Tests for bracket function."""

    def test_exact_sample_starts_interval_at_that_sample(self) -> None:
        """x equal to a sample advances past it."""
        assert bracket(0.5, [0.0, 0.25, 0.5, 0.75, 1.0]) == (0.5, 0.5)

    def test_interpolates_inside_interval(self) -> None:
        """Guess is linearly interpolated between bracketing samples."""
        start, guess = bracket(0.6, [0.0, 0.25, 0.5, 0.75, 1.0])
        assert start == 0.5
        assert guess == pytest.approx(0.6)

    def test_below_first_interval(self) -> None:
        """x under the second sample brackets the first interval."""
        start, guess = bracket(0.1, [0.0, 0.25, 0.5, 0.75, 1.0])
        assert start == 0.0
        assert guess == pytest.approx(0.1)

    def test_scan_stops_at_last_interval(self) -> None:
        """x past the table extrapolates from the last interval."""
        start, guess = bracket(1.5, [0.0, 0.25, 0.5, 0.75, 1.0])
        assert start == 0.75
        assert guess == pytest.approx(1.5)

    def test_flat_segment_falls_back_to_interval_start(self) -> None:
        """Equal bracketing samples return the interval start, no division."""
        start, guess = bracket(1.0, [0.0, 0.5, 1.0, 1.0])
        assert start == pytest.approx(2 / 3)
        assert guess == start

    def test_all_equal_samples(self) -> None:
        """A fully flat table still produces a guess."""
        assert bracket(0.0, [0.0, 0.0, 0.0]) == (0.5, 0.5)

    def test_flat_segment_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """The flat-segment fallback emits a DEBUG record."""
        with caplog.at_level(logging.DEBUG, logger="bezier_easing.core.curves.solver"):
            bracket(1.0, [0.0, 0.5, 1.0, 1.0])
        assert "Flat sample segment" in caplog.text


class TestSolveTForX:
    """Tests for solve_t_for_x function."""

    def test_reference_midpoint(self) -> None:
        """Symmetric x controls map x=0.5 to t=0.5."""
        assert solve_t_for_x(0.5, 0.0, 1.0) == 0.5

    def test_inverts_x_of_t(
        self, smooth_curve: tuple[float, float, float, float], progress_grid: list[float]
    ) -> None:
        """x(solve(x)) reproduces x across the interior."""
        x1, _, x2, _ = smooth_curve
        for x in progress_grid:
            t = solve_t_for_x(x, x1, x2)
            assert evaluate(t, x1, x2) == pytest.approx(x, abs=1e-5)

    def test_t_is_non_decreasing_in_x(
        self, smooth_curve: tuple[float, float, float, float], progress_grid: list[float]
    ) -> None:
        """Solved t never decreases as x increases."""
        x1, _, x2, _ = smooth_curve
        ts = [solve_t_for_x(x, x1, x2) for x in progress_grid]
        assert all(a <= b for a, b in zip(ts, ts[1:]))

    def test_zero_slope_guess_returned_unrefined(self) -> None:
        """A guess sitting on a zero slope is returned as is."""
        assert slope(0.5, 1.0, 0.0) == 0.0
        assert solve_t_for_x(0.5, 1.0, 0.0) == 0.5

    def test_shallow_slope_routes_to_bisection(self) -> None:
        """Near the inflection the initial slope is under the Newton threshold."""
        samples = build_sample_table(1.0, 0.0)
        _, guess = bracket(NEAR_INFLECTION_X, samples)
        initial_slope = slope(guess, 1.0, 0.0)
        assert 0.0 < initial_slope < 0.001
        assert select_strategy(initial_slope) is RefineStrategy.BISECT

    def test_bisection_converges_within_precision(self) -> None:
        """The bisection branch lands within 1e-7 of the target x."""
        t = solve_t_for_x(NEAR_INFLECTION_X, 1.0, 0.0)
        assert abs(evaluate(t, 1.0, 0.0) - NEAR_INFLECTION_X) < 1e-7

    def test_near_linear_controls_route_to_bisection(self) -> None:
        """x1 = 0, x2 = 1 is flat at t = 0, so tiny x starts on a shallow slope."""
        samples = build_sample_table(0.0, 1.0)
        _, guess = bracket(1e-8, samples)
        initial_slope = slope(guess, 0.0, 1.0)
        assert 0.0 < initial_slope < 0.001
        assert select_strategy(initial_slope) is RefineStrategy.BISECT

    def test_near_linear_controls_bisection_converges(self) -> None:
        """Bisection near t = 0 lands within 1e-7 of the target x."""
        t = solve_t_for_x(1e-8, 0.0, 1.0)
        assert 0.0 <= t <= 0.1
        assert abs(evaluate(t, 0.0, 1.0) - 1e-8) < 1e-7

    def test_flat_table_segment_still_refines(self) -> None:
        """A guess from a flat table pair goes through refinement and stays finite."""
        samples = (0.0, 0.5, 1.0, 1.0)
        _, guess = bracket(1.0, samples)
        assert select_strategy(slope(guess, 0.25, 0.25)) is RefineStrategy.NEWTON

        t = solve_t_for_x(1.0, 0.25, 0.25, samples)
        assert math.isfinite(t)
        assert evaluate(t, 0.25, 0.25) == pytest.approx(1.0, abs=1e-5)

    def test_prebuilt_table_matches_fresh_table(self, progress_grid: list[float]) -> None:
        """Passing a cached sample table does not change results."""
        samples = build_sample_table(0.25, 0.25)
        for x in progress_grid:
            assert solve_t_for_x(x, 0.25, 0.25, samples) == solve_t_for_x(x, 0.25, 0.25)

    def test_custom_table_size(self) -> None:
        """A finer table still solves accurately."""
        config = SolverConfig(sample_table_size=21)
        t = solve_t_for_x(0.37, 0.42, 0.58, config=config)
        assert evaluate(t, 0.42, 0.58) == pytest.approx(0.37, abs=1e-6)

    def test_out_of_range_x_does_not_raise(self) -> None:
        """x outside [0, 1] extrapolates instead of failing."""
        assert isinstance(solve_t_for_x(1.2, 0.25, 0.25), float)
        assert isinstance(solve_t_for_x(-0.2, 0.25, 0.25), float)
