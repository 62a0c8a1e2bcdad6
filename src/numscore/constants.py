"""Shared constants for numscore.

Constants are grouped by domain:
- Heuristic values: Sentinel and floor values of every score
- Character distance: Saturation of per-character costs
- Integer widths: Maximum digit counts of the signed integer types

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Heuristic values
    "H_REACHED_BUT_NULL",
    "H_NOT_NULL",
    # Character distance
    "MAX_CHAR_DISTANCE",
    # Integer widths
    "BYTE_MIN_VALUE",
    "SHORT_MIN_VALUE",
    "INT_MIN_VALUE",
    "LONG_MIN_VALUE",
    "BYTE_MAX_DIGITS",
    "SHORT_MAX_DIGITS",
    "INT_MAX_DIGITS",
    "LONG_MAX_DIGITS",
]

# ============================================================================
# HEURISTIC VALUES
# ============================================================================
#
# Scores live in [H_REACHED_BUT_NULL, 1.0]:
#
#   H_REACHED_BUT_NULL  parse call reached with an absent argument
#   H_NOT_NULL          empty string; limit of any non-empty input
#   1.0                 input already conforms to the grammar
#
# H_REACHED_BUT_NULL < H_NOT_NULL < 1.0 must hold.
#
# ============================================================================

H_REACHED_BUT_NULL: float = 0.05

H_NOT_NULL: float = 0.1

# ============================================================================
# CHARACTER DISTANCE
# ============================================================================

# Upper bound of a single character mismatch cost.
# Also charged for every position past the digit limit of an integer width.
MAX_CHAR_DISTANCE: int = 65_536

# ============================================================================
# INTEGER WIDTHS
# ============================================================================
#
# The longest decimal representation of a signed width is its minimum value,
# sign included: "-128" for 8 bits, "-9223372036854775808" for 64 bits.
#
# ============================================================================

BYTE_MIN_VALUE: int = -(2**7)
SHORT_MIN_VALUE: int = -(2**15)
INT_MIN_VALUE: int = -(2**31)
LONG_MIN_VALUE: int = -(2**63)

BYTE_MAX_DIGITS: int = len(str(BYTE_MIN_VALUE))
SHORT_MAX_DIGITS: int = len(str(SHORT_MIN_VALUE))
INT_MAX_DIGITS: int = len(str(INT_MIN_VALUE))
LONG_MAX_DIGITS: int = len(str(LONG_MIN_VALUE))
