"""Configuration models for the Bézier easing solver."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SolverConfig(BaseModel):
    """Tuning constants for the t-for-x solver.

    The defaults are the usual cubic-bezier() easing solver constants.
    Changing them trades accuracy for speed (or the reverse) and changes
    output.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    newton_iterations: int = Field(
        default=4, ge=0, description="Fixed number of Newton-Raphson steps"
    )

    newton_min_slope: float = Field(
        default=0.001,
        gt=0.0,
        description="Slopes at or above this use Newton; shallower slopes bisect",
    )

    subdivision_precision: float = Field(
        default=1e-7, gt=0.0, description="Early-exit tolerance on |x(t) - x| for bisection"
    )

    subdivision_max_iterations: int = Field(
        default=10, ge=1, description="Maximum bisection steps"
    )

    sample_table_size: int = Field(
        default=11, ge=2, description="Entries in the x(t) bracketing table"
    )

    cache_sample_table: bool = Field(
        default=True,
        description=(
            "Build the sample table once per easing instead of on every call "
            "(output is identical either way)"
        ),
    )


DEFAULT_SOLVER_CONFIG = SolverConfig()
