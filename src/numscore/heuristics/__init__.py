"""Numeric parse heuristics: distance of a string to a numeric literal grammar.

- Scores are floats in [H_REACHED_BUT_NULL, 1.0]
- Configuration errors are returned in tuple, never raised
- Scoring functions never fail because of the scored content

Used by search-based test generation to reward inputs that get closer to
something a numeric parser accepts, instead of a binary success/failure.

Public API:
    Floating point:
        float_score - Returns float
        float_distance - Returns int

    Integers:
        integer_score - Returns tuple[float | None, tuple[HeuristicError, ...]]
        integer_distance - Returns int
        byte_score, short_score, int_score, long_score - Return float

    Dispatch:
        score_parse - Returns tuple[float | None, tuple[HeuristicError, ...]]

    Normalization:
        normalize_distance - Returns float

    Type Guards:
        is_score - TypeIs guard for a score (not None)
        is_exact_match - Predicate for a score of 1.0

Example:
    >>> from numscore.heuristics import int_score, float_score
    >>> int_score("-42")
    1.0
    >>> float_score("1.2.3") < 1.0
    True

Python 3.13+.
"""

from .dispatch import score_parse
from .floats import float_distance, float_score
from .guards import is_exact_match, is_score
from .integers import (
    byte_score,
    int_score,
    integer_distance,
    integer_score,
    long_score,
    short_score,
)
from .scoring import normalize_distance

__all__ = [
    # Type guards
    "is_exact_match",
    "is_score",
    # Scoring functions
    "byte_score",
    "float_distance",
    "float_score",
    "int_score",
    "integer_distance",
    "integer_score",
    "long_score",
    "normalize_distance",
    "score_parse",
    "short_score",
]
