"""Hypothesis strategies for localechain property-based testing.

Usage:
    from tests.strategies import canonical_locales, messy_locales
    from tests.strategies.locales import alias_keys, parent_keys
"""

from .locales import (
    alias_keys,
    any_identifiers,
    canonical_locales,
    language_codes,
    messy_locales,
    parent_keys,
    region_codes,
    script_codes,
)

__all__ = [
    "alias_keys",
    "any_identifiers",
    "canonical_locales",
    "language_codes",
    "messy_locales",
    "parent_keys",
    "region_codes",
    "script_codes",
]
