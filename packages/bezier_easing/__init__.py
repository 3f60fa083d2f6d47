"""Cubic Bézier easing functions compatible with CSS cubic-bezier()."""

from bezier_easing.core.config import SolverConfig, load_solver_config
from bezier_easing.core.curves import (
    BezierEasing,
    ControlPoints,
    CssTimingFunction,
    CurvePoint,
    InvalidControlPoint,
    create_easing,
    generate_cubic_bezier,
    get_preset,
    linear,
    sample_easing,
)

__all__ = [
    "BezierEasing",
    "ControlPoints",
    "CssTimingFunction",
    "CurvePoint",
    "InvalidControlPoint",
    "SolverConfig",
    "create_easing",
    "generate_cubic_bezier",
    "get_preset",
    "linear",
    "load_solver_config",
    "sample_easing",
]

__version__ = "0.1.0"
