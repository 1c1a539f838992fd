"""Hypothesis strategies for locale identifier testing.

Provides strategies for generating canonical locale identifiers, the same
identifiers in arbitrary case and separator conventions, and entries of the
CLDR alias and parent tables.

Usage:
    from hypothesis import given
    from tests.strategies.locales import canonical_locales, messy_locales

    @given(locale=messy_locales())
    def test_canonicalize(locale):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from localechain.tables import ALIASES, PARENTS

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# SUBTAGS
# ============================================================================

language_codes: SearchStrategy[str] = st.sampled_from(
    ["en", "fr", "de", "pt", "es", "zh", "sr", "bs", "uz", "az", "yue", "shi", "fil"]
)

script_codes: SearchStrategy[str] = st.sampled_from(
    ["Latn", "Cyrl", "Hans", "Hant", "Arab", "Deva", "Tfng"]
)

region_codes: SearchStrategy[str] = st.one_of(
    st.sampled_from(["US", "GB", "FR", "BA", "RS", "CN", "TW", "AO", "CH", "MX"]),
    st.sampled_from(["001", "150", "419"]),
)

variant_codes: SearchStrategy[str] = st.sampled_from(["POSIX", "VALENCIA", "NY"])


# ============================================================================
# IDENTIFIERS
# ============================================================================


@composite
def canonical_locales(draw: st.DrawFn) -> str:
    """Generate a canonical language[-Script][-REGION][-VARIANT] identifier.

    Events emitted:
    - locale_shape={language|script|region|full}
    """
    parts = [draw(language_codes)]
    script = draw(st.none() | script_codes)
    region = draw(st.none() | region_codes)
    variant = draw(st.none() | variant_codes) if region else None

    if script:
        parts.append(script)
    if region:
        parts.append(region)
    if variant:
        parts.append(variant)

    match len(parts):
        case 1:
            event("locale_shape=language")
        case 2 if script:
            event("locale_shape=script")
        case 2:
            event("locale_shape=region")
        case _:
            event("locale_shape=full")

    return "-".join(parts)


@composite
def messy_locales(draw: st.DrawFn) -> tuple[str, str]:
    """Generate (messy, canonical) pairs.

    The messy form uses random letter case per character and a random mix
    of '-' and '_' separators.
    """
    canonical = draw(canonical_locales())
    chars = []
    for char in canonical:
        if char == "-":
            chars.append(draw(st.sampled_from(["-", "_"])))
        elif draw(st.booleans()):
            chars.append(char.swapcase())
        else:
            chars.append(char)
    return "".join(chars), canonical


# Arbitrary text, including separators and non-ASCII letters.
any_identifiers: SearchStrategy[str] = st.text(
    alphabet=st.one_of(
        st.sampled_from("-_"),
        st.characters(codec="utf-8", exclude_categories=("Cs",)),
    ),
    max_size=24,
)


# ============================================================================
# CLDR TABLE ENTRIES
# ============================================================================

alias_keys: SearchStrategy[str] = st.sampled_from(sorted(ALIASES))
parent_keys: SearchStrategy[str] = st.sampled_from(sorted(PARENTS))
