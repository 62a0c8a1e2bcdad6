"""numscore - Heuristic distance of strings to numeric literal grammars.

Gives search-based test generators a continuous signal for numeric parse
calls: instead of "parsed" or "failed", every candidate string gets a score
in [H_REACHED_BUT_NULL, 1.0] that grows as it approaches a literal the parser
would accept.

Public API:
    float_score - Floating point grammar ['-']? digit* ['.']? digit*
    byte_score, short_score, int_score, long_score - Signed integer widths
    integer_score - Integer grammar for an explicit digit limit
    score_parse - Dispatch on NumericType
    NumericType - Supported parse targets

Exceptions:
    HeuristicError - Base exception class
    HeuristicConfigError - Invalid configuration (returned, not raised)

Submodules:
    numscore.heuristics - Scoring functions, distances and type guards
    numscore.distance - Character distance primitives
    numscore.constants - Sentinel scores, saturation and width limits
    numscore.diagnostics - Error types, codes and formatting
"""

from .constants import H_NOT_NULL, H_REACHED_BUT_NULL, MAX_CHAR_DISTANCE
from .diagnostics import HeuristicConfigError, HeuristicError
from .enums import NumericType
from .heuristics import (
    byte_score,
    float_score,
    int_score,
    integer_score,
    long_score,
    score_parse,
    short_score,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("numscore")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "H_NOT_NULL",
    "H_REACHED_BUT_NULL",
    "MAX_CHAR_DISTANCE",
    "HeuristicConfigError",
    "HeuristicError",
    "NumericType",
    "__version__",
    "byte_score",
    "float_score",
    "int_score",
    "integer_score",
    "long_score",
    "score_parse",
    "short_score",
]
