"""Hypothesis strategies for numscore property-based testing.

- numeric: Grammar-conforming literals, near misses and arbitrary text

Usage:
    from tests.strategies import float_literals, integer_literals, mixed_text

Event-Emitting Strategies (HypoFuzz-Optimized):
    - float_literals, integer_literals, mixed_text
"""

from .numeric import (
    FLOAT_GRAMMAR,
    any_text,
    float_literals,
    integer_literals,
    matches_float_grammar,
    matches_integer_grammar,
    mixed_text,
    near_numeric_text,
)

__all__ = [
    "FLOAT_GRAMMAR",
    "any_text",
    "float_literals",
    "integer_literals",
    "matches_float_grammar",
    "matches_integer_grammar",
    "mixed_text",
    "near_numeric_text",
]
