"""Locale Resolution Example - CLDR Alias and Parent Fallback.

Demonstrates resolving requested locales against the locales an application
actually ships data for.

Scenarios covered:
1. Basic resolution by subtag truncation
2. Legacy aliases and explicit CLDR parents
3. Fallback locales and error handling
4. Number-format records (requires Babel)

Python 3.13+.
"""

from __future__ import annotations

from localechain import UnknownLocaleError, canonicalize, get_candidates, resolve
from localechain.core import is_babel_available


def example_1_basic_resolution() -> None:
    """Example 1: Region locales fall back to their language."""
    print("=" * 60)
    print("Example 1: Basic Resolution")
    print("=" * 60)

    available = {"en", "fr", "de"}
    for requested in ["fr_FR", "DE-at", "en-us"]:
        print(f"{requested:>10} -> {canonicalize(requested):<8} -> {resolve(available, requested)}")


def example_2_aliases_and_parents() -> None:
    """Example 2: Legacy identifiers and irregular CLDR parents."""
    print("\n" + "=" * 60)
    print("Example 2: Aliases and Explicit Parents")
    print("=" * 60)

    for requested in ["sh-BA", "zh-CN", "pt-AO", "en-AU", "bs-Cyrl-BA"]:
        print(f"{requested:>10}: {' -> '.join(get_candidates(requested))}")

    available = {"en", "en-001", "pt", "pt-PT", "sr", "sr-Latn"}
    print(f"\nAvailable: {sorted(available)}")
    for requested in ["sh-BA", "pt-AO", "en-AU"]:
        print(f"{requested:>10} -> {resolve(available, requested)}")


def example_3_fallback_locale() -> None:
    """Example 3: Fallback locale and unknown locales."""
    print("\n" + "=" * 60)
    print("Example 3: Fallback Locale")
    print("=" * 60)

    available = {"en", "lv"}
    print(f"zh-CN (fallback en) -> {resolve(available, 'zh-CN', 'en')}")

    try:
        resolve(available, "zh-CN")
    except UnknownLocaleError as e:
        print("\nWithout a fallback:")
        print(e)


def example_4_number_formats() -> None:
    """Example 4: Number-format records looked up through the resolver."""
    print("\n" + "=" * 60)
    print("Example 4: Number Formats")
    print("=" * 60)

    if not is_babel_available():
        print("[SKIP] Install Babel: pip install localechain[babel]")
        return

    from localechain.numbers import NumberFormatRepository  # noqa: PLC0415

    repository = NumberFormatRepository.load(["en", "fr", "de", "ar-EG"])
    for requested in ["fr-CA", "de-CH", "ar-EG", "ja-JP"]:
        record = repository.get(requested)
        print(
            f"{requested:>6} -> {record.locale:<6} "
            f"decimal={record.decimal_separator!r} group={record.grouping_separator!r} "
            f"system={record.numbering_system}"
        )


# Main execution
if __name__ == "__main__":
    example_1_basic_resolution()
    example_2_aliases_and_parents()
    example_3_fallback_locale()
    example_4_number_formats()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
