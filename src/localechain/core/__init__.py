"""Core utilities shared by the Babel-backed modules.

Exports:
    BabelImportError: Raised when a feature needs Babel and it is missing
    is_babel_available: Cached check for an importable Babel
    require_babel: Fail fast with BabelImportError

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
