"""Integer parse heuristics.

Scores how close a string is to the grammar ['-']? digit{1,max_digits}
accepted by signed integer parsers, without parsing it.

- integer_score() returns tuple[float | None, tuple[HeuristicError, ...]]
- Invalid configuration (negative max_digits) is returned in the tuple
- byte_score(), short_score(), int_score(), long_score() bind the digit
  limit of each signed width and return a plain float

Thread-safe. Pure functions, no state.

Python 3.13+.
"""

import logging

from numscore.constants import (
    BYTE_MAX_DIGITS,
    H_NOT_NULL,
    H_REACHED_BUT_NULL,
    INT_MAX_DIGITS,
    LONG_MAX_DIGITS,
    MAX_CHAR_DISTANCE,
    SHORT_MAX_DIGITS,
)
from numscore.diagnostics import ErrorTemplate, HeuristicConfigError, HeuristicError
from numscore.distance import distance_to_char, distance_to_digit

from .scoring import normalize_distance

__all__ = [
    "byte_score",
    "int_score",
    "integer_distance",
    "integer_score",
    "long_score",
    "short_score",
]

logger = logging.getLogger(__name__)


def integer_distance(value: str, max_digits: int) -> int:
    """Distance of a string to the integer literal grammar.

    The caller is responsible for max_digits being non-negative.

    Args:
        value: Input string (may be empty)
        max_digits: Longest accepted representation, sign included

    Returns:
        Non-negative distance; 0 iff the string already conforms

    Example:
        >>> integer_distance("-42", 4)
        0
        >>> integer_distance("12345", 4)
        65536
    """
    if not value:
        return 0

    if len(value) == 1:
        # cannot be '-'
        return distance_to_digit(value)

    distance = 0
    for index, char in enumerate(value):
        if index == 0:
            distance += min(distance_to_digit(char), distance_to_char(char, "-"))
        elif index >= max_digits:
            # too long to be a valid representation for the width
            distance += MAX_CHAR_DISTANCE
        else:
            distance += distance_to_digit(char)

    return distance


def _score(value: str | None, max_digits: int) -> float:
    if value is None:
        return H_REACHED_BUT_NULL

    if not value:
        return H_NOT_NULL

    return normalize_distance(integer_distance(value, max_digits))


def integer_score(
    value: str | None,
    max_digits: int,
) -> tuple[float | None, tuple[HeuristicError, ...]]:
    """Heuristic score of an integer parse attempt for a given digit limit.

    Args:
        value: String handed to the parser, or None if the argument was absent
        max_digits: Longest accepted representation, sign included

    Returns:
        Tuple of (result, errors):
        - result: Score, or None if max_digits is negative
        - errors: Tuple of HeuristicError (empty tuple on success)

    Examples:
        >>> integer_score("0", 11)
        (1.0, ())

        >>> score, errors = integer_score("0", -1)
        >>> score is None
        True
        >>> errors[0].diagnostic.code.name
        'INVALID_DIGIT_COUNT'
    """
    if max_digits < 0:
        diagnostic = ErrorTemplate.negative_digit_count(max_digits)
        logger.warning("Rejected integer heuristic configuration: %s", diagnostic)
        error = HeuristicConfigError(
            diagnostic, parameter="max_digits", received=repr(max_digits)
        )
        return (None, (error,))

    return (_score(value, max_digits), ())


def byte_score(value: str | None) -> float:
    """Heuristic score of an 8-bit signed integer parse attempt."""
    return _score(value, BYTE_MAX_DIGITS)


def short_score(value: str | None) -> float:
    """Heuristic score of a 16-bit signed integer parse attempt."""
    return _score(value, SHORT_MAX_DIGITS)


def int_score(value: str | None) -> float:
    """Heuristic score of a 32-bit signed integer parse attempt."""
    return _score(value, INT_MAX_DIGITS)


def long_score(value: str | None) -> float:
    """Heuristic score of a 64-bit signed integer parse attempt."""
    return _score(value, LONG_MAX_DIGITS)
