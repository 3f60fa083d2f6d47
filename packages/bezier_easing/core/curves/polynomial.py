"""Cubic Bézier coordinate polynomial.

A single coordinate of a cubic Bézier with fixed endpoints 0 and 1 and
interior control values (a1, a2) can be written in power form:

    f(t) = ((A*t + B)*t + C)*t

with A = 1 - 3*a2 + 3*a1, B = 3*a2 - 6*a1 and C = 3*a1. The same helpers
serve both axes: pass (x1, x2) for x(t) and (y1, y2) for y(t).
"""

from __future__ import annotations


def coefficients(a1: float, a2: float) -> tuple[float, float, float]:
    """Return the power-form coefficients (A, B, C) for control values.

    Example:
        >>> coefficients(0.0, 1.0)
        (-2.0, 3.0, 0.0)
    """
    return 1.0 - 3.0 * a2 + 3.0 * a1, 3.0 * a2 - 6.0 * a1, 3.0 * a1


def evaluate(t: float, a1: float, a2: float) -> float:
    """Evaluate the coordinate at parameter t.

    t is not validated. The refiners may probe slightly outside [0, 1] and
    still get a plain numeric result.

    Args:
        t: Curve parameter, normally in [0, 1].
        a1: First interior control value.
        a2: Second interior control value.

    Returns:
        Coordinate value at t.

    Example:
        >>> evaluate(0.5, 0.0, 1.0)
        0.5
    """
    a, b, c = coefficients(a1, a2)
    return ((a * t + b) * t + c) * t


def slope(t: float, a1: float, a2: float) -> float:
    """Evaluate the first derivative of the coordinate at parameter t.

    Args:
        t: Curve parameter.
        a1: First interior control value.
        a2: Second interior control value.

    Returns:
        d/dt of the coordinate at t.
    """
    a, b, c = coefficients(a1, a2)
    return 3.0 * a * t * t + 2.0 * b * t + c
