"""CSS keyword timing functions as cubic-bezier presets."""

from __future__ import annotations

from enum import Enum

from bezier_easing.core.config.models import SolverConfig
from bezier_easing.core.curves.easing import BezierEasing, create_easing
from bezier_easing.core.curves.models import ControlPoints


class CssTimingFunction(str, Enum):
    """CSS timing keywords that are defined as cubic-bezier curves."""

    EASE = "ease"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"
    LINEAR = "linear"


PRESET_CONTROL_POINTS: dict[CssTimingFunction, ControlPoints] = {
    CssTimingFunction.EASE: ControlPoints(x1=0.25, y1=0.1, x2=0.25, y2=1.0),
    CssTimingFunction.EASE_IN: ControlPoints(x1=0.42, y1=0.0, x2=1.0, y2=1.0),
    CssTimingFunction.EASE_OUT: ControlPoints(x1=0.0, y1=0.0, x2=0.58, y2=1.0),
    CssTimingFunction.EASE_IN_OUT: ControlPoints(x1=0.42, y1=0.0, x2=0.58, y2=1.0),
    CssTimingFunction.LINEAR: ControlPoints(x1=0.0, y1=0.0, x2=1.0, y2=1.0),
}


def get_preset(kind: CssTimingFunction, config: SolverConfig | None = None) -> BezierEasing:
    """Return the easing function for a CSS timing keyword.

    Example:
        >>> ease_in = get_preset(CssTimingFunction.EASE_IN)
        >>> ease_in.control_points
        (0.42, 0.0, 1.0, 1.0)
    """
    return create_easing(*PRESET_CONTROL_POINTS[kind].as_tuple(), config=config)
