"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def locale_unknown(locale: str, candidates: tuple[str, ...] = ()) -> Diagnostic:
        """No candidate of the requested locale is available.

        Args:
            locale: Canonicalized requested locale
            candidates: Candidate chain that was tried

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint=(
                "Add one of the candidate locales to the available locales "
                "or pass a fallback locale"
            ),
            locale=locale,
            candidates=candidates,
        )

    @staticmethod
    def number_format_unavailable(locale: str) -> Diagnostic:
        """CLDR has no number data for the locale.

        Args:
            locale: Canonical locale identifier

        Returns:
            Diagnostic for NUMBER_FORMAT_UNAVAILABLE
        """
        msg = f"No number format data for locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_FORMAT_UNAVAILABLE,
            message=msg,
            hint="Check that the locale exists in the installed Babel CLDR data",
            locale=locale,
        )
