"""Sampling helpers for easing curves.

This module builds the coarse x(t) lookup table used to bracket the solver
and the uniform x grids used when rendering an easing into samples.
"""

from __future__ import annotations

from bezier_easing.core.curves.polynomial import evaluate

SAMPLE_TABLE_SIZE = 11


def sample_step(table_size: int = SAMPLE_TABLE_SIZE) -> float:
    """Return the t spacing between adjacent sample table entries."""
    return 1.0 / (table_size - 1)


def build_sample_table(
    x1: float, x2: float, table_size: int = SAMPLE_TABLE_SIZE
) -> tuple[float, ...]:
    """Precompute x(t) at evenly-spaced t over [0, 1].

    Entry i holds x(i * step). With x1, x2 in [0, 1] the table is
    non-decreasing, which is what lets the solver bracket by linear scan.

    Args:
        x1: First x control value.
        x2: Second x control value.
        table_size: Number of entries (including both endpoints).

    Returns:
        Immutable tuple of table_size x values.

    Raises:
        ValueError: If table_size < 2.

    Example:
        >>> table = build_sample_table(0.0, 1.0)
        >>> len(table), table[0], table[-1]
        (11, 0.0, 1.0)
    """
    if table_size < 2:
        raise ValueError("table_size must be >= 2")

    step = sample_step(table_size)
    return tuple(evaluate(i * step, x1, x2) for i in range(table_size))


def sample_uniform_grid(n: int, *, include_end: bool = True) -> list[float]:
    """Generate N evenly-spaced samples over [0, 1].

    Args:
        n: Number of samples to generate. Must be >= 2.
        include_end: If True the last sample is exactly 1.0, giving
            [0, 1/(N-1), ..., 1]. If False the grid is [0, 1/N, ..., (N-1)/N].

    Returns:
        List of N float values.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
        >>> sample_uniform_grid(4, include_end=False)
        [0.0, 0.25, 0.5, 0.75]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    if include_end:
        return [i / (n - 1) for i in range(n)]
    return [i / n for i in range(n)]
