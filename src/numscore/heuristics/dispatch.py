"""Parse target dispatch.

Routes an intercepted parse call to the heuristic of its numeric type, so the
instrumentation layer can forward (target, value) pairs without knowing
which grammar applies.

- score_parse() returns tuple[float | None, tuple[HeuristicError, ...]]
- Unknown target names are returned as errors in the tuple

Thread-safe. Dispatch table is read-only.

Python 3.13+.
"""

import logging
from collections.abc import Callable

from numscore.diagnostics import ErrorTemplate, HeuristicConfigError, HeuristicError
from numscore.enums import NumericType

from .floats import float_score
from .integers import byte_score, int_score, long_score, short_score

__all__ = ["score_parse"]

logger = logging.getLogger(__name__)

_HEURISTICS: dict[NumericType, Callable[[str | None], float]] = {
    NumericType.BYTE: byte_score,
    NumericType.SHORT: short_score,
    NumericType.INT: int_score,
    NumericType.LONG: long_score,
    NumericType.FLOAT: float_score,
    NumericType.DOUBLE: float_score,
}


def score_parse(
    target: NumericType | str,
    value: str | None,
) -> tuple[float | None, tuple[HeuristicError, ...]]:
    """Heuristic score of a parse attempt for any supported numeric type.

    Args:
        target: NumericType member or its string value ("int", "double", ...)
        value: String handed to the parser, or None if the argument was absent

    Returns:
        Tuple of (result, errors):
        - result: Score, or None if target is not a supported numeric type
        - errors: Tuple of HeuristicError (empty tuple on success)

    Examples:
        >>> score_parse(NumericType.DOUBLE, "-1.5")
        (1.0, ())

        >>> score, errors = score_parse("decimal", "1")
        >>> score is None
        True
    """
    try:
        numeric_type = NumericType(target)
    except ValueError:
        name = str(target)
        diagnostic = ErrorTemplate.unsupported_numeric_type(
            name, tuple(member.value for member in NumericType)
        )
        logger.warning("Rejected parse target: %s", diagnostic)
        error = HeuristicConfigError(diagnostic, parameter="target", received=repr(target))
        return (None, (error,))

    logger.debug("Scoring %s parse attempt", numeric_type)
    return (_HEURISTICS[numeric_type](value), ())
