"""Property-based tests for locale resolution.

Covers canonicalization idempotence, candidate chain structure, and the
resolve() contract over generated identifiers and availability sets.

Python 3.13+.
"""

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from localechain import (
    UnknownLocaleError,
    canonicalize,
    get_candidates,
    get_parent,
    replace_alias,
    resolve,
)
from tests.strategies import (
    alias_keys,
    any_identifiers,
    canonical_locales,
    messy_locales,
)


class TestCanonicalizeProperties:
    """Properties of canonicalize."""

    @given(locale=any_identifiers)
    def test_idempotent(self, locale: str) -> None:
        once = canonicalize(locale)
        assert canonicalize(once) == once

    @given(locale=any_identifiers)
    def test_length_preserved(self, locale: str) -> None:
        assert len(canonicalize(locale)) == len(locale)

    @given(locale=any_identifiers)
    def test_no_underscores_remain(self, locale: str) -> None:
        assert "_" not in canonicalize(locale)

    @given(pair=messy_locales())
    def test_messy_input_canonicalized(self, pair: tuple[str, str]) -> None:
        messy, canonical = pair
        event(f"separator_mixed={'_' in messy}")
        assert canonicalize(messy) == canonical

    @given(locale=canonical_locales())
    def test_canonical_is_fixed_point(self, locale: str) -> None:
        assert canonicalize(locale) == locale


class TestCandidateProperties:
    """Properties of get_candidates."""

    @given(locale=canonical_locales(), fallback=st.none() | canonical_locales())
    def test_no_duplicates(self, locale: str, fallback: str | None) -> None:
        candidates = get_candidates(locale, fallback)
        assert len(candidates) == len(set(candidates))

    @given(locale=canonical_locales())
    def test_head_is_dealiased_locale(self, locale: str) -> None:
        assert get_candidates(locale)[0] == replace_alias(locale)

    @given(locale=canonical_locales())
    def test_each_candidate_is_parent_of_previous(self, locale: str) -> None:
        candidates = get_candidates(locale)
        for child, parent in zip(candidates, candidates[1:], strict=False):
            assert get_parent(child) == parent
        assert get_parent(candidates[-1]) is None

    @given(locale=canonical_locales(), fallback=canonical_locales())
    def test_fallback_chain_included(self, locale: str, fallback: str) -> None:
        with_fallback = get_candidates(locale, fallback)
        assert set(get_candidates(locale)) <= set(with_fallback)
        assert fallback in with_fallback
        assert with_fallback[: len(get_candidates(locale))] == get_candidates(locale)

    @given(locale=alias_keys)
    def test_alias_keys_never_appear(self, locale: str) -> None:
        assert locale not in get_candidates(locale)

    @given(locale=any_identifiers)
    def test_finite_for_any_input(self, locale: str) -> None:
        candidates = get_candidates(canonicalize(locale))
        assert 1 <= len(candidates) <= len(locale) + 2


class TestResolveProperties:
    """Properties of resolve."""

    @given(
        locale=canonical_locales(),
        fallback=st.none() | canonical_locales(),
        data=st.data(),
    )
    def test_result_is_first_available_candidate(
        self, locale: str, fallback: str | None, data: st.DataObject
    ) -> None:
        candidates = get_candidates(locale, fallback)
        available = data.draw(st.sets(st.sampled_from(candidates)))
        event(f"available_size={len(available)}")

        if not available:
            with pytest.raises(UnknownLocaleError) as exc_info:
                resolve(available, locale, fallback)
            assert exc_info.value.locale == locale
            return

        result = resolve(available, locale, fallback)
        assert result in available
        assert result == next(c for c in candidates if c in available)

    @given(pair=messy_locales())
    def test_resolution_independent_of_input_convention(
        self, pair: tuple[str, str]
    ) -> None:
        messy, canonical = pair
        available = set(get_candidates(canonical))
        assert resolve(available, messy) == resolve(available, canonical)
