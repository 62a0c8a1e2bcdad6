"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (caller supplied invalid parameters)
    """

    # Configuration errors (1000-1999)
    INVALID_DIGIT_COUNT = 1001
    UNSUPPORTED_NUMERIC_TYPE = 1002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        argument_name: Argument name that caused the error
        expected_type: Expected value or type for the argument
        received_type: Actual value received
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[INVALID_DIGIT_COUNT]: Number of digits cannot be negative, got -1
              = argument: max_digits
              = expected: int >= 0
              = received: -1
              = help: Pass a non-negative digit count

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
