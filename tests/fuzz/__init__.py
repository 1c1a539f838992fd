"""Fuzz tests for localechain.

Intensive property tests marked with pytest.mark.fuzz; skipped unless run
with: pytest -m fuzz

Python 3.13+.
"""
