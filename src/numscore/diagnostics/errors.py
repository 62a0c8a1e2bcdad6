"""numscore exception hierarchy with structured diagnostics.

Scoring functions never raise these for invalid configuration: they are
returned inside the (result, errors) tuple so callers can inspect them.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class HeuristicError(Exception):
    """Base exception for all numscore errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize HeuristicError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class HeuristicConfigError(HeuristicError):
    """Invalid heuristic configuration supplied by the caller.

    A programming error in the instrumentation layer (negative digit count,
    unknown parse target), never a property of the scored input.

    Attributes:
        parameter: Name of the offending argument
        received: repr() of the offending value

    Example:
        >>> score, errors = integer_score("12", -1)
        >>> score is None
        True
        >>> errors[0].parameter
        'max_digits'
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        parameter: str = "",
        received: str = "",
    ) -> None:
        """Initialize HeuristicConfigError.

        Args:
            message: Error message string OR Diagnostic object
            parameter: Name of the offending argument
            received: repr() of the offending value
        """
        super().__init__(message)
        self.parameter = parameter
        self.received = received
