"""Locale utilities for BCP-47 to POSIX conversion and system locale detection.

Canonical identifiers are hyphenated (BCP-47 style, "sr-Latn-BA"), while
Babel parses underscore-separated POSIX identifiers ("sr_Latn_BA"). This
module converts at the Babel boundary and caches parsed Babel locales.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from localechain.constants import DEFAULT_LOCALE, LOCALE_SEPARATOR, MAX_LOCALE_CACHE_SIZE
from localechain.core.babel_compat import get_locale_class, require_babel
from localechain.resolver import canonicalize

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "to_posix",
]

logger = logging.getLogger(__name__)

# Pseudo-locales that name no language.
_PSEUDO_LOCALES = frozenset({"C", "POSIX", ""})


def to_posix(locale: str) -> str:
    """Convert a canonical locale identifier to POSIX format for Babel.

    Args:
        locale: Canonical locale identifier (e.g., "sr-Latn-BA")

    Returns:
        POSIX-formatted identifier (e.g., "sr_Latn_BA")

    Example:
        >>> to_posix("en-US")
        'en_US'
        >>> to_posix("en")
        'en'
    """
    return locale.replace(LOCALE_SEPARATOR, "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale: Locale identifier (any case, hyphens or underscores)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If locale format is invalid

    Example:
        >>> get_babel_locale("sr-Latn-BA").script
        'Latn'
    """
    require_babel("get_babel_locale")
    return get_locale_class().parse(to_posix(canonicalize(locale)))


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache."""
    get_babel_locale.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the system locale from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Encoding suffixes (".UTF-8") and modifiers ("@euro") are stripped and
    the "C"/"POSIX" pseudo-locales are ignored.

    Args:
        raise_on_failure: If True, raise RuntimeError when no locale is
            found. If False (default), return DEFAULT_LOCALE.

    Returns:
        Canonical locale identifier (e.g., "de-DE")

    Raises:
        RuntimeError: If raise_on_failure is True and no locale is found.

    Example:
        >>> os.environ["LANG"] = "de_DE.UTF-8"
        >>> get_system_locale()
        'de-DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError) as e:
        logger.debug("locale.getlocale() failed: %s", e)
        system_locale = None

    env_values = [os.environ.get(var) for var in ("LC_ALL", "LC_MESSAGES", "LANG")]
    for value in [system_locale, *env_values]:
        if not value:
            continue
        code = value.split(".")[0].split("@")[0]
        if code not in _PSEUDO_LOCALES:
            return canonicalize(code)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    logger.warning("Could not determine system locale, using '%s'", DEFAULT_LOCALE)
    return DEFAULT_LOCALE
