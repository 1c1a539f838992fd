"""Shared constants for localechain.

Centralized configuration constants used by the resolver, the locale
utilities and the number-format records. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Identifiers: separators and the root sentinel
- Cache limits: memory bounds for cached Babel locales
- Defaults: locale used when none can be detected
- Number formats: supported numbering systems

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Identifiers
    "LOCALE_SEPARATOR",
    "ROOT_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Defaults
    "DEFAULT_LOCALE",
    # Number formats
    "DEFAULT_NUMBERING_SYSTEM",
    "SUPPORTED_NUMBERING_SYSTEMS",
]

# ============================================================================
# IDENTIFIERS
# ============================================================================

# Canonical identifiers are joined with hyphens (BCP-47 style).
LOCALE_SEPARATOR: str = "-"

# Parent of script-only "aggregate" locales such as "sr-Latn".
# Has no parent itself, so a parent walk ends once it is reached.
ROOT_LOCALE: str = "root"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of Babel Locale objects kept by locale_utils.get_babel_locale.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# DEFAULTS
# ============================================================================

# Returned by get_system_locale() when the environment names no locale.
DEFAULT_LOCALE: str = "en"

# ============================================================================
# NUMBER FORMATS
# ============================================================================

DEFAULT_NUMBERING_SYSTEM: str = "latn"

# Numbering systems kept when a locale declares them as its default.
# Any other default numbering system is replaced by DEFAULT_NUMBERING_SYSTEM.
SUPPORTED_NUMBERING_SYSTEMS: frozenset[str] = frozenset(
    {"arab", "arabext", "beng", "deva", "latn"}
)
