"""Curve schema models.

- ControlPoints: validated cubic-bezier control points (x1, y1, x2, y2)
- CurvePoint: a single sampled point (t, v) of an easing curve

Both models are immutable and validate on construction.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from bezier_easing.core.config.models import SolverConfig
from bezier_easing.core.curves.easing import BezierEasing, create_easing


class ControlPoints(BaseModel):
    """Interior control points of a cubic-bezier timing function.

    x values are bounded to [0, 1] so that x(t) stays invertible; y values
    are free and may overshoot for back/elastic style easing.

    Example:
        >>> cp = ControlPoints(x1=0.25, y1=0.1, x2=0.25, y2=1.0)
        >>> cp.as_tuple()
        (0.25, 0.1, 0.25, 1.0)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x1: float = Field(
        ..., ge=0.0, le=1.0, allow_inf_nan=False, description="First control point x [0,1]"
    )
    y1: float = Field(..., allow_inf_nan=False, description="First control point y")
    x2: float = Field(
        ..., ge=0.0, le=1.0, allow_inf_nan=False, description="Second control point x [0,1]"
    )
    y2: float = Field(..., allow_inf_nan=False, description="Second control point y")

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return (x1, y1, x2, y2)."""
        return self.x1, self.y1, self.x2, self.y2

    def to_easing(self, config: SolverConfig | None = None) -> BezierEasing:
        """Build the easing function for these control points."""
        return create_easing(*self.as_tuple(), config=config)


class CurvePoint(BaseModel):
    """A single sampled point of an easing curve.

    t is normalized progress in [0, 1]. v is the eased value; it is not
    clamped because cubic-bezier y values may overshoot.

    Example:
        >>> CurvePoint(t=0.5, v=0.3125).v
        0.3125
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized time [0,1]")
    v: float = Field(..., description="Eased value")
