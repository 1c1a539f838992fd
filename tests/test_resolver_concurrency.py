"""Thread safety tests for locale resolution.

Resolution is pure over read-only tables, so concurrent callers must always
observe the same results.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed

from localechain import UnknownLocaleError, get_candidates, resolve

_REQUESTS = [
    ("sh-BA", None, "sr-Latn"),
    ("zh-CN", "en", "en"),
    ("fr_FR", None, "fr"),
    ("pt-AO", None, "pt-PT"),
    ("en-AU", None, "en-001"),
]
_AVAILABLE = frozenset({"en", "en-001", "fr", "pt", "pt-PT", "sr-Latn"})


class TestResolverConcurrency:
    """Test concurrent resolution."""

    def test_concurrent_resolve(self) -> None:
        """Concurrent resolve calls return the expected locale."""

        def run(index: int) -> tuple[str, str]:
            locale, fallback, expected = _REQUESTS[index % len(_REQUESTS)]
            return resolve(_AVAILABLE, locale, fallback), expected

        with ThreadPoolExecutor(max_workers=10) as executor:
            futures = [executor.submit(run, i) for i in range(200)]
            results = [future.result() for future in as_completed(futures)]

        assert all(actual == expected for actual, expected in results)

    def test_concurrent_failures_isolated(self) -> None:
        """Errors raised in one thread carry that thread's locale."""

        def run(locale: str) -> str:
            try:
                resolve(frozenset(), locale)
            except UnknownLocaleError as e:
                return e.locale
            return ""

        locales = [f"x{i}-YY" for i in range(50)]
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(run, locales))

        assert results == locales

    def test_concurrent_candidates_identical(self) -> None:
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(get_candidates, ["zh-Hant-MO"] * 100))

        assert set(results) == {("zh-Hant-MO", "zh-Hant-HK", "zh-Hant", "root")}
