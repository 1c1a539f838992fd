"""Locale exception hierarchy with structured diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["LocaleError", "UnknownLocaleError"]


class LocaleError(Exception):
    """Base exception for all localechain errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnknownLocaleError(LocaleError):
    """No candidate locale is present in the available locales.

    Raised by resolve() once the candidate chain of the requested locale
    (and of the fallback locale, if any) is exhausted.

    Attributes:
        locale: The canonicalized requested locale
        candidates: Candidates tried, most specific first

    Example:
        >>> try:
        ...     resolve([], "FR")
        ... except UnknownLocaleError as e:
        ...     print(e.locale)
        fr
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale: str = "",
        candidates: tuple[str, ...] = (),
    ) -> None:
        """Initialize UnknownLocaleError.

        Args:
            message: Error message string OR Diagnostic object
            locale: The canonicalized requested locale
            candidates: Candidates tried before giving up
        """
        super().__init__(message)
        self.locale = locale
        self.candidates = candidates
