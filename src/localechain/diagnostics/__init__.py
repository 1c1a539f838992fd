"""Diagnostic system for locale resolution errors.

Provides structured error diagnostics with codes, hints, and the candidate
chains that were tried.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import LocaleError, UnknownLocaleError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LocaleError",
    "OutputFormat",
    "UnknownLocaleError",
]
