"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def negative_digit_count(max_digits: int) -> Diagnostic:
        """Maximum digit count passed to the integer heuristic is negative.

        Args:
            max_digits: The rejected digit count

        Returns:
            Diagnostic for INVALID_DIGIT_COUNT
        """
        msg = f"Number of digits cannot be negative, got {max_digits}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DIGIT_COUNT,
            message=msg,
            hint="Pass a non-negative digit count, e.g. len(str(min_value)) of the width",
            argument_name="max_digits",
            expected_type="int >= 0",
            received_type=str(max_digits),
        )

    @staticmethod
    def unsupported_numeric_type(name: str, supported: tuple[str, ...]) -> Diagnostic:
        """Parse target name does not match any NumericType.

        Args:
            name: The rejected target name
            supported: Accepted target names

        Returns:
            Diagnostic for UNSUPPORTED_NUMERIC_TYPE
        """
        msg = f"Unsupported numeric type '{name}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_NUMERIC_TYPE,
            message=msg,
            hint=f"Use one of: {', '.join(supported)}",
            argument_name="target",
            expected_type="NumericType",
            received_type=name,
        )
