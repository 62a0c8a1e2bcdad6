"""Character-level distance primitives.

Every heuristic in numscore is a sum of per-character costs computed here.
Characters are compared by Unicode code point. All costs saturate at
MAX_CHAR_DISTANCE so that a single far-away character (control characters,
astral-plane symbols) cannot outweigh the rest of the input.

Thread-safe. Pure functions, no state.

Python 3.13+. Zero external dependencies.
"""

from numscore.constants import MAX_CHAR_DISTANCE

__all__ = [
    "distance_to_char",
    "distance_to_digit",
    "distance_to_range",
]


def distance_to_range(char: str, min_inclusive: str, max_inclusive: str) -> int:
    """Distance from a character to an inclusive code-point range.

    Args:
        char: Single character to measure
        min_inclusive: Lowest character of the range
        max_inclusive: Highest character of the range

    Returns:
        0 if char falls inside the range, otherwise the code-point gap to the
        nearest bound, capped at MAX_CHAR_DISTANCE

    Raises:
        ValueError: If min_inclusive is greater than max_inclusive

    Example:
        >>> distance_to_range("a", "0", "9")
        40
        >>> distance_to_range("5", "0", "9")
        0
    """
    low = ord(min_inclusive)
    high = ord(max_inclusive)
    if low > high:
        msg = f"Invalid range: {min_inclusive!r} > {max_inclusive!r}"
        raise ValueError(msg)

    code = ord(char)
    gap = max(low - code, code - high, 0)
    return min(gap, MAX_CHAR_DISTANCE)


def distance_to_digit(char: str) -> int:
    """Distance from a character to the nearest ASCII digit '0'..'9'.

    Saturates at MAX_CHAR_DISTANCE like distance_to_range(). Code points
    from U+10039 upward reach the cap.
    """
    return distance_to_range(char, "0", "9")


def distance_to_char(char: str, target: str) -> int:
    """Distance from a character to one specific target character."""
    return distance_to_range(char, target, target)
