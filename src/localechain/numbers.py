"""Per-locale number-format records keyed by canonical locale identifiers.

Records hold the CLDR data a number formatter needs (numbering system,
patterns and symbols). They are built from Babel's CLDR data and looked up
through the locale resolver, so a request for "fr-CH" or "sh-BA" finds the
closest locale that has a record. Formatting numbers is left to the caller.

Example:
    >>> repository = NumberFormatRepository.load(["en", "fr", "de-CH"])
    >>> repository.get("fr_FR").decimal_separator
    ','
    >>> repository.get("pt-BR").locale  # falls back to "en"
    'en'

Python 3.13+. Requires Babel (pip install localechain[babel]) for load().
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from localechain.constants import (
    DEFAULT_LOCALE,
    DEFAULT_NUMBERING_SYSTEM,
    SUPPORTED_NUMBERING_SYSTEMS,
)
from localechain.core.babel_compat import get_unknown_locale_error, require_babel
from localechain.diagnostics import (
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    UnknownLocaleError,
)
from localechain.locale_utils import get_babel_locale
from localechain.resolver import LocaleResolver, canonicalize, default_resolver

__all__ = [
    "NumberFormat",
    "NumberFormatRepository",
    "load_number_format",
    "strip_inherited",
]

logger = logging.getLogger(__name__)

# Single-line diagnostics for log records.
_LOG_FORMATTER = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)


@dataclass(frozen=True, slots=True)
class NumberFormat:
    """Number-formatting data of one locale.

    Two records compare equal when their data matches, whatever locale
    they belong to.

    Attributes:
        locale: Canonical locale identifier the record was built for
        numbering_system: CLDR numbering system ("latn", "arab", ...)
        decimal_pattern: Standard decimal pattern (e.g., "#,##0.###")
        percent_pattern: Standard percent pattern (e.g., "#,##0%")
        currency_pattern: Standard currency pattern (e.g., "¤#,##0.00")
        accounting_currency_pattern: Accounting currency pattern
        decimal_separator: Decimal symbol
        grouping_separator: Grouping symbol
        plus_sign: Plus sign symbol
        minus_sign: Minus sign symbol
        percent_sign: Percent sign symbol
    """

    locale: str = field(compare=False)
    numbering_system: str
    decimal_pattern: str
    percent_pattern: str
    currency_pattern: str
    accounting_currency_pattern: str
    decimal_separator: str = "."
    grouping_separator: str = ","
    plus_sign: str = "+"
    minus_sign: str = "-"
    percent_sign: str = "%"


def load_number_format(locale: str, resolver: LocaleResolver | None = None) -> NumberFormat:
    """Build the number-format record of a locale from Babel's CLDR data.

    The record is keyed by the alias target of the canonical identifier
    ("iw" -> "he", "zh-CN" -> "zh-Hans-CN"), which is the identifier
    resolution matches against. The locale's default numbering system is
    used if it is one of SUPPORTED_NUMBERING_SYSTEMS, otherwise
    DEFAULT_NUMBERING_SYSTEM.

    Args:
        locale: Locale identifier (any case, hyphens or underscores)
        resolver: Resolver providing aliases (default: CLDR tables)

    Returns:
        NumberFormat keyed by the de-aliased canonical identifier

    Raises:
        BabelImportError: If Babel is not installed
        UnknownLocaleError: If CLDR has no data for the locale
    """
    require_babel("load_number_format")
    babel_unknown_locale = get_unknown_locale_error()

    resolver = resolver or default_resolver()
    canonical = resolver.replace_alias(canonicalize(locale))
    try:
        babel_locale = get_babel_locale(canonical)
    except (babel_unknown_locale, ValueError) as e:
        diagnostic = ErrorTemplate.number_format_unavailable(canonical)
        raise UnknownLocaleError(diagnostic, locale=canonical) from e

    # Babel keeps one pattern set per locale. CLDR patterns of the latn
    # system match those of the unsupported defaults (mymr, ...), so only the
    # symbols are switched below.
    numbering_system = babel_locale.default_numbering_system
    if numbering_system not in SUPPORTED_NUMBERING_SYSTEMS:
        numbering_system = DEFAULT_NUMBERING_SYSTEM

    symbols = babel_locale.number_symbols.get(numbering_system) or (
        babel_locale.number_symbols[DEFAULT_NUMBERING_SYSTEM]
    )
    currency_formats = babel_locale.currency_formats
    accounting = currency_formats.get("accounting") or currency_formats["standard"]

    return NumberFormat(
        locale=canonical,
        numbering_system=numbering_system,
        decimal_pattern=babel_locale.decimal_formats[None].pattern,
        percent_pattern=babel_locale.percent_formats[None].pattern,
        currency_pattern=currency_formats["standard"].pattern,
        accounting_currency_pattern=accounting.pattern,
        decimal_separator=symbols.get("decimal", "."),
        grouping_separator=symbols.get("group", ","),
        plus_sign=symbols.get("plusSign", "+"),
        minus_sign=symbols.get("minusSign", "-"),
        percent_sign=symbols.get("percentSign", "%"),
    )


def strip_inherited(
    records: Mapping[str, NumberFormat],
    resolver: LocaleResolver | None = None,
) -> dict[str, NumberFormat]:
    """Remove records whose data matches the record of their parent.

    Every comparison is made against the original records, so a chain such
    as "bs-Latn-BA" -> "bs-Latn" -> "bs" with identical data collapses to
    "bs" alone. Resolving a removed locale then reaches the ancestor that
    holds the same data.

    Args:
        records: Records keyed by canonical locale identifier
        resolver: Resolver providing parents (default: CLDR tables)

    Returns:
        New dict without the inherited records
    """
    resolver = resolver or default_resolver()
    inherited: set[str] = set()
    for locale, record in records.items():
        parent = resolver.get_parent(locale)
        if parent is not None and records.get(parent) == record:
            inherited.add(locale)
    return {locale: record for locale, record in records.items() if locale not in inherited}


class NumberFormatRepository:
    """Read-only set of number-format records with locale resolution.

    get() resolves the requested locale against the repository's own
    locales, walking the CLDR parent chain and then the fallback locale.

    Thread Safety:
        Immutable after construction. Safe to share between threads.

    Example:
        >>> records = {"en": en_record, "fr": fr_record}
        >>> repository = NumberFormatRepository(records, fallback_locale="en")
        >>> repository.get("fr-CA") is fr_record
        True
    """

    __slots__ = ("_fallback_locale", "_records", "_resolver")

    def __init__(
        self,
        records: Mapping[str, NumberFormat],
        *,
        fallback_locale: str | None = DEFAULT_LOCALE,
        resolver: LocaleResolver | None = None,
    ) -> None:
        """Initialize repository.

        Args:
            records: Records keyed by canonical locale identifier
            fallback_locale: Locale used when the requested chain has no record
            resolver: Resolver providing aliases and parents (default: CLDR tables)
        """
        self._records = MappingProxyType(dict(records))
        self._resolver = resolver or default_resolver()
        self._fallback_locale = fallback_locale

    @classmethod
    def load(
        cls,
        locales: Iterable[str],
        *,
        fallback_locale: str | None = DEFAULT_LOCALE,
        collapse: bool = True,
        resolver: LocaleResolver | None = None,
    ) -> NumberFormatRepository:
        """Build a repository from Babel's CLDR data.

        Locales without CLDR data are skipped with a warning.

        Args:
            locales: Locale identifiers to load
            fallback_locale: Locale used when the requested chain has no record
            collapse: Drop records identical to their parent's (see strip_inherited)
            resolver: Resolver providing aliases and parents (default: CLDR tables)

        Returns:
            New repository

        Raises:
            BabelImportError: If Babel is not installed
        """
        records: dict[str, NumberFormat] = {}
        for locale in locales:
            try:
                record = load_number_format(locale, resolver)
            except UnknownLocaleError as e:
                reason = _LOG_FORMATTER.format(e.diagnostic) if e.diagnostic else str(e)
                logger.warning("Skipping locale '%s': %s", e.locale, reason)
                continue
            records[record.locale] = record

        if collapse:
            records = strip_inherited(records, resolver)
        logger.debug("Loaded %d number format records", len(records))
        return cls(records, fallback_locale=fallback_locale, resolver=resolver)

    @property
    def available_locales(self) -> frozenset[str]:
        """Locales that hold a record."""
        return frozenset(self._records)

    @property
    def fallback_locale(self) -> str | None:
        """Locale used when the requested chain has no record."""
        return self._fallback_locale

    def get(self, locale: str) -> NumberFormat:
        """Get the number-format record for a locale.

        Args:
            locale: Requested locale, any case and separator

        Returns:
            Record of the first candidate locale that has one

        Raises:
            UnknownLocaleError: If neither the locale chain nor the
                fallback chain has a record
        """
        resolved = self._resolver.resolve(self._records.keys(), locale, self._fallback_locale)
        return self._records[resolved]

    def __contains__(self, locale: object) -> bool:
        return locale in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
