"""Core easing, solver and configuration modules."""
