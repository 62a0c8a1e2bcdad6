"""Floating-point parse heuristic.

Scores how close a string is to the grammar ['-']? digit* ['.']? digit*
accepted by floating-point parsers, without parsing it.

- float_distance() returns the accumulated per-character cost
- float_score() returns the normalized score; never raises for str/None input

Thread-safe. Pure functions, no state.

Python 3.13+.
"""

from numscore.constants import H_NOT_NULL, H_REACHED_BUT_NULL
from numscore.distance import distance_to_char, distance_to_digit

from .scoring import normalize_distance

__all__ = ["float_distance", "float_score"]


def _dot_is_optimal(value: str, first_dot: int) -> bool:
    # "-." is the one placement of the first dot that is not free.
    return first_dot != 1 or value[0] != "-" or len(value) > 2


def float_distance(value: str) -> int:
    """Distance of a string to the floating-point literal grammar.

    A single character must be a digit. Otherwise the first character may be
    a sign, a digit or a dot; the first dot found later in the string costs
    nothing (unless the input is exactly "-."), and every other position must
    be a digit. Without any dot, each position after the first may still be
    turned into the decimal point, so its cost is the cheaper of the two.

    Args:
        value: Input string (may be empty)

    Returns:
        Non-negative distance; 0 iff the string already conforms

    Example:
        >>> float_distance("-1.23")
        0
        >>> float_distance("-.")
        2
    """
    if not value:
        return 0

    if len(value) == 1:
        # cannot be '-' or '.'
        return distance_to_digit(value)

    first_dot = value.find(".")
    distance = 0

    for index, char in enumerate(value):
        digit_dist = distance_to_digit(char)

        if index == 0:
            distance += min(
                digit_dist,
                distance_to_char(char, "-"),
                distance_to_char(char, "."),
            )
        elif first_dot < 0:
            # no dots, so any position can still become the '.'
            distance += min(digit_dist, distance_to_char(char, "."))
        elif index == first_dot and _dot_is_optimal(value, first_dot):
            continue
        else:
            distance += digit_dist

    return distance


def float_score(value: str | None) -> float:
    """Heuristic score of a floating-point parse attempt.

    Args:
        value: String handed to the parser, or None if the argument was absent

    Returns:
        H_REACHED_BUT_NULL for None, H_NOT_NULL for "", otherwise a score in
        (H_NOT_NULL, 1.0], exactly 1.0 for a conforming literal

    Example:
        >>> float_score("0")
        1.0
        >>> float_score(None)
        0.05
    """
    if value is None:
        return H_REACHED_BUT_NULL

    if not value:
        return H_NOT_NULL

    return normalize_distance(float_distance(value))
