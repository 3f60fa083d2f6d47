"""Cubic Bézier easing curves."""

from bezier_easing.core.curves.easing import BezierEasing, create_easing, linear
from bezier_easing.core.curves.errors import InvalidControlPoint
from bezier_easing.core.curves.generators import generate_cubic_bezier, sample_easing
from bezier_easing.core.curves.models import ControlPoints, CurvePoint
from bezier_easing.core.curves.presets import CssTimingFunction, get_preset
from bezier_easing.core.curves.solver import RefineStrategy, solve_t_for_x

__all__ = [
    "BezierEasing",
    "ControlPoints",
    "CssTimingFunction",
    "CurvePoint",
    "InvalidControlPoint",
    "RefineStrategy",
    "create_easing",
    "generate_cubic_bezier",
    "get_preset",
    "linear",
    "sample_easing",
    "solve_t_for_x",
]
