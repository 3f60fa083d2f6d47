"""Solver configuration."""

from bezier_easing.core.config.loader import load_config, load_solver_config
from bezier_easing.core.config.models import DEFAULT_SOLVER_CONFIG, SolverConfig

__all__ = [
    "DEFAULT_SOLVER_CONFIG",
    "SolverConfig",
    "load_config",
    "load_solver_config",
]
