"""Test suite for bezier_easing.

Test Structure:
- unit/curves/: polynomial, sampling table, solver, easing factory, models,
  presets and sampled curve generation
- unit/config/: solver config model and JSON/YAML loader
- module DEBUG records are checked with caplog in unit/curves/
"""
