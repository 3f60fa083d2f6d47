"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from bezier_easing.core.curves.easing import BezierEasing, create_easing

# (x1, y1, x2, y2) for curves with well-behaved x(t)
SMOOTH_CURVES: list[tuple[float, float, float, float]] = [
    (0.25, 0.1, 0.25, 1.0),  # CSS ease
    (0.42, 0.0, 1.0, 1.0),  # CSS ease-in
    (0.0, 0.0, 0.58, 1.0),  # CSS ease-out
    (0.42, 0.0, 0.58, 1.0),  # CSS ease-in-out
    (0.0, 0.0, 1.0, 0.5),
    (0.68, -0.55, 0.265, 1.55),  # back in-out, overshoots in y
]


@pytest.fixture
def reference_easing() -> BezierEasing:
    """Smoothstep x(t) with a flattened y(t)."""
    return create_easing(0.0, 0.0, 1.0, 0.5)


@pytest.fixture
def back_easing() -> BezierEasing:
    """Curve whose output undershoots 0 and overshoots 1."""
    return create_easing(0.68, -0.55, 0.265, 1.55)


@pytest.fixture
def inflection_easing() -> BezierEasing:
    """x1=1, x2=0: x'(t) touches zero at t=0.5 where x(t)=0.5."""
    return create_easing(1.0, 0.0, 0.0, 1.0)


@pytest.fixture(params=SMOOTH_CURVES, ids=lambda p: "cubic-bezier({}, {}, {}, {})".format(*p))
def smooth_curve(request: pytest.FixtureRequest) -> tuple[float, float, float, float]:
    """Parametrized control points for well-behaved curves."""
    return request.param


@pytest.fixture
def progress_grid() -> list[float]:
    """Interior progress values 0.01 .. 0.99."""
    return [i / 100 for i in range(1, 100)]
