"""Fuzz testing infrastructure for numscore.

This package contains:
- test_heuristics_property: Monotonicity and totality over arbitrary input

Python 3.13+.
"""
