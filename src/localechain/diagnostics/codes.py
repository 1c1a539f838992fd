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
        1000-1999: Resolution errors (no candidate locale available)
        2000-2999: Locale data errors (Babel/CLDR lookups)
    """

    # Resolution errors (1000-1999)
    LOCALE_UNKNOWN = 1001

    # Locale data errors (2000-2999)
    NUMBER_FORMAT_UNAVAILABLE = 2001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale identifier the error is about
        candidates: Candidate chain tried before giving up (resolution errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str | None = None
    candidates: tuple[str, ...] | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[LOCALE_UNKNOWN]: Unknown locale 'zh-Hans-CN'
              = candidates: zh-Hans-CN, zh-Hans, zh
              = help: Add one of the candidate locales or pass a fallback locale

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
