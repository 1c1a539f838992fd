"""Locale resolution against CLDR alias and parent tables.

Resolves a requested locale identifier to the best available locale:

    canonicalize -> replace_alias -> parent chain -> first available candidate

For example, with only "en" and "sr-Latn" available, "SH_ba" canonicalizes
to "sh-BA", is de-aliased to "sr-Latn-BA", and resolves to "sr-Latn".

Parents are looked up in the explicit CLDR parent table first, then derived
by dropping the last subtag. Explicit parents cover the irregular cases:
"pt-AO" -> "pt-PT", "en-AU" -> "en-001", and script locales such as
"sr-Latn" whose parent is the "root" sentinel rather than "sr".

Thread Safety:
    All functions are pure over read-only tables and per-call arguments.
    No locking required.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from localechain.constants import LOCALE_SEPARATOR
from localechain.diagnostics import ErrorTemplate, UnknownLocaleError
from localechain.tables import ALIASES, PARENTS

__all__ = [
    "LocaleResolver",
    "canonicalize",
    "default_resolver",
    "get_candidates",
    "get_parent",
    "replace_alias",
    "resolve",
]

logger = logging.getLogger(__name__)

# ASCII-only case mapping: subtag lengths never change ("ß".upper() is "SS").
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

# Length of an ISO 15924 script subtag ("Latn", "Hans").
_SCRIPT_LENGTH = 4


def canonicalize(locale: str) -> str:
    """Canonicalize a locale identifier.

    Accepts hyphens or underscores as separators and any letter case.
    The language subtag is lowercased, 4-letter script subtags are
    title-cased, and all other subtags (region, variant) are uppercased.

    Args:
        locale: Locale identifier (e.g., "EN_us", "zh_hans_cn")

    Returns:
        Canonical hyphenated identifier. Empty input is returned unchanged.

    Example:
        >>> canonicalize("EN_us")
        'en-US'
        >>> canonicalize("ZH_hans_cn")
        'zh-Hans-CN'
    """
    if not locale:
        return locale

    parts = locale.translate(_TO_LOWER).replace("_", LOCALE_SEPARATOR).split(LOCALE_SEPARATOR)
    for index in range(1, len(parts)):
        part = parts[index]
        if len(part) == _SCRIPT_LENGTH:
            parts[index] = part[:1].translate(_TO_UPPER) + part[1:]
        else:
            parts[index] = part.translate(_TO_UPPER)

    return LOCALE_SEPARATOR.join(parts)


class LocaleResolver:
    """Resolver over a pair of alias and parent tables.

    The module-level functions use a shared instance built over the CLDR
    tables (see default_resolver()). Construct your own instance to resolve
    against different tables; the parent relation must be acyclic.

    Attributes:
        aliases: Read-only alias table (legacy identifier -> canonical)
        parents: Read-only explicit parent table (locale -> parent)

    Example:
        >>> resolver = LocaleResolver(aliases={}, parents={"pt-AO": "pt-PT"})
        >>> resolver.get_candidates("pt-AO")
        ('pt-AO', 'pt-PT', 'pt')
    """

    __slots__ = ("_aliases", "_parents")

    def __init__(self, aliases: Mapping[str, str], parents: Mapping[str, str]) -> None:
        """Initialize resolver.

        Args:
            aliases: Alias table with canonical keys and values
            parents: Explicit parent table with canonical keys and values
        """
        self._aliases = MappingProxyType(dict(aliases))
        self._parents = MappingProxyType(dict(parents))

    @property
    def aliases(self) -> Mapping[str, str]:
        """Read-only alias table."""
        return self._aliases

    @property
    def parents(self) -> Mapping[str, str]:
        """Read-only explicit parent table."""
        return self._parents

    def replace_alias(self, locale: str) -> str:
        """Replace a legacy locale identifier with its canonical equivalent.

        Exact match only: "sh" is an alias, "SH" and "sh-Latn" are not.

        Args:
            locale: Canonical locale identifier

        Returns:
            The alias target, or the locale unchanged
        """
        if locale and locale in self._aliases:
            return self._aliases[locale]
        return locale

    def get_parent(self, locale: str) -> str | None:
        """Get the parent of a locale.

        Args:
            locale: Canonical locale identifier

        Returns:
            The explicit parent if one is listed, otherwise the identifier
            with its last subtag removed. None for bare language codes.

        Example:
            >>> default_resolver().get_parent("pt-AO")
            'pt-PT'
            >>> default_resolver().get_parent("fr-FR")
            'fr'
            >>> default_resolver().get_parent("fr") is None
            True
        """
        if locale in self._parents:
            return self._parents[locale]
        if LOCALE_SEPARATOR in locale:
            return locale.rsplit(LOCALE_SEPARATOR, 1)[0]
        return None

    def get_candidates(
        self, locale: str, fallback_locale: str | None = None
    ) -> tuple[str, ...]:
        """Get the candidate chain for a locale.

        The locale is de-aliased once, then followed by each of its
        ancestors. If a fallback locale is given, it and its ancestors
        follow. The fallback is used as given: it is neither de-aliased
        nor canonicalized. Duplicates keep their first position.

        Args:
            locale: Canonical locale identifier (e.g., "bs-Cyrl-BA")
            fallback_locale: Canonical fallback locale (e.g., "en")

        Returns:
            Candidates, most specific first

        Example:
            >>> get_candidates("bs-Cyrl-BA")
            ('bs-Cyrl-BA', 'bs-Cyrl', 'root')
            >>> get_candidates("sh", "en")
            ('sr-Latn', 'root', 'en')
        """
        candidates = dict.fromkeys(self._ancestry(self.replace_alias(locale)))
        if fallback_locale is not None:
            candidates.update(dict.fromkeys(self._ancestry(fallback_locale)))
        return tuple(candidates)

    def resolve(
        self,
        available_locales: Iterable[str],
        locale: str,
        fallback_locale: str | None = None,
    ) -> str:
        """Resolve a locale against the available locales.

        Canonicalizes the requested and fallback locales, then returns the
        first candidate (see get_candidates) that is available.

        Args:
            available_locales: Canonical identifiers of locales with data
            locale: Requested locale, any case and separator (e.g., "fr_FR")
            fallback_locale: Locale to try once the requested chain is exhausted

        Returns:
            The first available candidate

        Raises:
            UnknownLocaleError: If no candidate is available

        Example:
            >>> resolve(["en", "fr"], "fr-FR")
            'fr'
            >>> resolve(["en"], "zh-CN", "en")
            'en'
        """
        canonical = canonicalize(locale)
        if fallback_locale is not None:
            fallback_locale = canonicalize(fallback_locale)

        available = frozenset(available_locales)
        candidates = self.get_candidates(canonical, fallback_locale)
        for candidate in candidates:
            if candidate in available:
                logger.debug("Resolved locale '%s' to '%s'", locale, candidate)
                return candidate

        logger.debug("No available locale for '%s' (tried: %s)", canonical, candidates)
        diagnostic = ErrorTemplate.locale_unknown(canonical, candidates)
        raise UnknownLocaleError(diagnostic, locale=canonical, candidates=candidates)

    def _ancestry(self, locale: str) -> Iterator[str]:
        """Yield the locale followed by each of its ancestors."""
        current: str | None = locale
        while current is not None:
            yield current
            current = self.get_parent(current)


_DEFAULT_RESOLVER = LocaleResolver(ALIASES, PARENTS)


def default_resolver() -> LocaleResolver:
    """Get the process-wide resolver over the CLDR tables."""
    return _DEFAULT_RESOLVER


def replace_alias(locale: str) -> str:
    """Replace a legacy locale identifier using the CLDR alias table.

    Example:
        >>> replace_alias("zh-CN")
        'zh-Hans-CN'
    """
    return _DEFAULT_RESOLVER.replace_alias(locale)


def get_parent(locale: str) -> str | None:
    """Get the parent of a locale using the CLDR parent table."""
    return _DEFAULT_RESOLVER.get_parent(locale)


def get_candidates(locale: str, fallback_locale: str | None = None) -> tuple[str, ...]:
    """Get the candidate chain of a locale using the CLDR tables."""
    return _DEFAULT_RESOLVER.get_candidates(locale, fallback_locale)


def resolve(
    available_locales: Iterable[str],
    locale: str,
    fallback_locale: str | None = None,
) -> str:
    """Resolve a locale against the available locales using the CLDR tables.

    Raises:
        UnknownLocaleError: If no candidate is available
    """
    return _DEFAULT_RESOLVER.resolve(available_locales, locale, fallback_locale)
