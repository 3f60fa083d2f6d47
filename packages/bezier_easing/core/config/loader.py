"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from bezier_easing.core.config.models import SolverConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "BEZIER_EASING_"

# Default solver config path (can be overridden)
_DEFAULT_CONFIG_PATH = Path("bezier_easing.yaml")


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("solver.json")
        'json'
        >>> detect_format("solver.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            data: Any = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if data is None:
            data = {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping in {path}, got {type(data).__name__}")
    return data


def _env_overrides() -> dict[str, str]:
    """Collect BEZIER_EASING_* variables that name SolverConfig fields."""
    overrides: dict[str, str] = {}
    for field_name in SolverConfig.model_fields:
        value = os.getenv(ENV_PREFIX + field_name.upper())
        if value is not None:
            overrides[field_name] = value
    return overrides


def load_solver_config(path: str | Path | None = None) -> SolverConfig:
    """Load and validate solver configuration.

    Values come from the config file (if any), then environment variables
    named BEZIER_EASING_<FIELD> override them.

    Args:
        path: Path to a .json/.yaml/.yml file. Defaults to bezier_easing.yaml
              in the working directory; a missing default file means defaults.

    Returns:
        Validated SolverConfig instance

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If config is invalid

    Example:
        >>> config = load_solver_config("solver.yaml")
        >>> config.newton_iterations
        4
    """
    raw_config: dict[str, Any] = {}

    if path is not None:
        raw_config = load_config(path)
    elif _DEFAULT_CONFIG_PATH.exists():
        raw_config = load_config(_DEFAULT_CONFIG_PATH)

    overrides = _env_overrides()
    if overrides:
        logger.debug("Applying solver config overrides from environment: %s", sorted(overrides))
        raw_config = {**raw_config, **overrides}

    return SolverConfig.model_validate(raw_config)
