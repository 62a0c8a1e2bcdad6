"""Type guard functions for heuristic result type narrowing.

integer_score() and score_parse() return tuple[float | None, errors].
Type guards check the result component to narrow types for mypy.

Note: Both functions accept None and return False. is_exact_match is a plain
predicate rather than a TypeIs guard: its False branch includes floats.

Example:
    >>> score, errors = integer_score("12", 11)
    >>> if is_score(score):
    ...     # mypy knows score is float
    ...     fitness += score
"""

import math
from typing import TypeIs

from numscore.constants import H_REACHED_BUT_NULL

__all__ = [
    "is_exact_match",
    "is_score",
]


def is_score(value: float | None) -> TypeIs[float]:
    """Type guard: Check if value is a heuristic score.

    Args:
        value: Score from a heuristic result tuple (may be None on error)

    Returns:
        True if value is a finite float in [H_REACHED_BUT_NULL, 1.0]
    """
    return value is not None and math.isfinite(value) and H_REACHED_BUT_NULL <= value <= 1.0


def is_exact_match(value: float | None) -> bool:
    """Check if the scored input already conforms to the grammar.

    A score of exactly 1.0 means distance 0: the real parser would accept
    the shape of the input. Returns a plain bool: a False result says nothing
    about whether value is None, so it must not narrow the type.
    """
    return value is not None and value == 1.0
