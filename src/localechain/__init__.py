"""localechain - CLDR locale resolution with alias and parent fallback.

Resolves a requested locale identifier (e.g. "zh-CN", "sh-BA") to the
best-matching locale from a set of locales for which data is available,
using CLDR-derived alias and parent tables.

Public API:
    resolve - Resolve a locale against the available locales
    canonicalize - Normalize separators and subtag case ("EN_us" -> "en-US")
    replace_alias - Replace a legacy identifier ("zh-CN" -> "zh-Hans-CN")
    get_parent - Parent in the CLDR fallback hierarchy ("pt-AO" -> "pt-PT")
    get_candidates - Ordered candidate chain tried by resolve
    LocaleResolver - The same operations over custom tables

Exceptions:
    LocaleError - Base exception class
    UnknownLocaleError - No candidate locale is available

Submodules:
    localechain.tables - CLDR alias and parent tables
    localechain.diagnostics - Error types and diagnostic formatting
    localechain.locale_utils - POSIX conversion, Babel locales, system locale
    localechain.numbers - Per-locale number-format records (requires Babel)
"""

from .diagnostics import LocaleError, UnknownLocaleError
from .resolver import (
    LocaleResolver,
    canonicalize,
    get_candidates,
    get_parent,
    replace_alias,
    resolve,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localechain")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "LocaleError",
    "LocaleResolver",
    "UnknownLocaleError",
    "__version__",
    "canonicalize",
    "get_candidates",
    "get_parent",
    "replace_alias",
    "resolve",
]
