"""Enumerations for numscore type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class NumericType(StrEnum):
    """Numeric parse target intercepted by the instrumentation layer.

    StrEnum provides automatic string conversion: str(NumericType.INT) == "int"
    """

    BYTE = "byte"
    """8-bit signed integer: Byte.parseByte"""

    SHORT = "short"
    """16-bit signed integer: Short.parseShort"""

    INT = "int"
    """32-bit signed integer: Integer.parseInt"""

    LONG = "long"
    """64-bit signed integer: Long.parseLong"""

    FLOAT = "float"
    """Single precision floating point: Float.parseFloat"""

    DOUBLE = "double"
    """Double precision floating point: Double.parseDouble"""

    @property
    def is_integral(self) -> bool:
        """True for the four signed integer widths."""
        return self not in (NumericType.FLOAT, NumericType.DOUBLE)


__all__ = [
    "NumericType",
]
