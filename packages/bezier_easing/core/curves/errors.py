"""Errors raised by the cubic Bézier easing factory."""

from __future__ import annotations


class InvalidControlPoint(ValueError):
    """Raised when an x control coordinate lies outside [0, 1].

    x(t) is only monotonic (and therefore invertible) when both x control
    values are in range, so the factory refuses to build anything else.

    Attributes:
        axis: Name of the offending coordinate ("x1" or "x2").
        value: The rejected value.
    """

    def __init__(self, axis: str, value: float) -> None:
        self.axis = axis
        self.value = value
        super().__init__(f"x values must be in [0, 1], got {axis}={value!r}")
