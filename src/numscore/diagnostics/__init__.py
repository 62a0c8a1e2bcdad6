"""Diagnostic system for numscore errors.

Provides structured error diagnostics with codes, hints and argument details.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import HeuristicConfigError, HeuristicError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "HeuristicConfigError",
    "HeuristicError",
    "OutputFormat",
]
