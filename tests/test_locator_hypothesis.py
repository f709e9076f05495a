"""Hypothesis-based property tests for the warmth locator.

Covers:
- Any in-range percentage after the keyword is extracted
- Out-of-range percentages are never reported
- Hidden subtrees never match
- Locating is idempotent on an unchanged tree
"""

from __future__ import annotations

from hypothesis import given, strategies as st

from conftest import w
from warmthalert.locator import locate, parse_warmth

# Text that can never contain a percent sign or the keyword
filler_text = st.text(
    alphabet=st.characters(whitelist_categories=("L", "N", "Zs"), blacklist_characters="%"),
    max_size=30,
).filter(lambda s: "warmth" not in s.lower())

in_range = st.integers(min_value=0, max_value=100)
out_of_range = st.integers(min_value=101, max_value=10**9)
labels = st.sampled_from(["Your Warmth:", "Warmth:", "WARMTH", "warmth -"])
spacing = st.sampled_from(["", " ", "  ", "\t"])


@given(label=labels, pct=in_range, gap=spacing)
def test_in_range_percentage_extracted(label: str, pct: int, gap: str) -> None:
    assert parse_warmth(f"{label} {pct}{gap}%") == pct


@given(label=labels, pct=out_of_range, gap=spacing)
def test_out_of_range_percentage_rejected(label: str, pct: int, gap: str) -> None:
    assert parse_warmth(f"{label} {pct}{gap}%") is None


@given(text=filler_text)
def test_text_without_keyword_never_matches(text: str) -> None:
    assert parse_warmth(f"{text} 50%") is None


@given(pct=in_range, depth=st.integers(min_value=0, max_value=6), others=st.lists(filler_text, max_size=5))
def test_single_match_anywhere_is_found(pct: int, depth: int, others: list[str]) -> None:
    node = w(f"Your Warmth: {pct}%")
    for _ in range(depth):
        node = w(static=[w(text) for text in others] + [node])
    assert locate([w(dynamic=[w(text) for text in others]), node]) == pct


@given(pct=in_range, depth=st.integers(min_value=0, max_value=6))
def test_hidden_subtree_never_matches(pct: int, depth: int) -> None:
    node = w(f"Warmth: {pct}%")
    for _ in range(depth):
        node = w(nested=[node])
    assert locate([w(hidden=True, dynamic=[node])]) is None


@given(pcts=st.lists(in_range, min_size=1, max_size=8))
def test_locate_is_idempotent_and_returns_first(pcts: list[int]) -> None:
    roots = [w(static=[w(f"Warmth: {pct}%")]) for pct in pcts]
    assert locate(roots) == locate(roots) == pcts[0]
