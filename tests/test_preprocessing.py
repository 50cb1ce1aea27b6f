"""Tests for the optional pattern preprocessing pass."""

from __future__ import annotations

from itertools import product

import pytest

from pyglob.matcher import match_graphemes
from pyglob.preprocessing import collapse_stars, preprocess, strip_common_affixes
from pyglob.segmentation import graphemes


def _g(s: str) -> tuple[str, ...]:
    return graphemes(s)


# === collapse_stars ===


class TestCollapseStars:
    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("", ""),
            ("*", "*"),
            ("***", "*"),
            ("a**b", "a*b"),
            ("**a**b**", "*a*b*"),
            ("?**?", "?*?"),
            ("abc", "abc"),
        ],
    )
    def test_collapses_runs(self, pattern: str, expected: str) -> None:
        assert collapse_stars(_g(pattern)) == _g(expected)

    def test_returns_tuple(self) -> None:
        assert isinstance(collapse_stars(["*", "*"]), tuple)

    def test_does_not_mutate_input(self) -> None:
        pattern = ["a", "*", "*"]
        collapse_stars(pattern)
        assert pattern == ["a", "*", "*"]


# === strip_common_affixes ===


class TestStripCommonAffixes:
    def test_strips_prefix_up_to_star(self) -> None:
        assert strip_common_affixes(_g("ab*"), _g("abxyz")) == (_g("*"), _g("xyz"))

    def test_strips_suffix_back_to_star(self) -> None:
        assert strip_common_affixes(_g("*yz"), _g("abxyz")) == (_g("*"), _g("abx"))

    def test_strips_both_ends(self) -> None:
        assert strip_common_affixes(_g("a?*?z"), _g("abcdyz")) == (_g("*"), _g("cd"))

    def test_question_mark_consumes_any_grapheme(self) -> None:
        assert strip_common_affixes(_g("??*"), _g("xyz")) == (_g("*"), _g("z"))

    def test_stops_at_first_mismatch(self) -> None:
        assert strip_common_affixes(_g("abc*"), _g("abxq")) == (_g("c*"), _g("xq"))

    def test_pattern_star_is_never_stripped(self) -> None:
        assert strip_common_affixes(_g("*"), _g("*")) == (_g("*"), _g("*"))

    def test_identical_literals_strip_to_empty(self) -> None:
        assert strip_common_affixes(_g("abc"), _g("abc")) == ((), ())

    def test_empty_inputs(self) -> None:
        assert strip_common_affixes((), ()) == ((), ())
        assert strip_common_affixes(_g("ab"), ()) == (_g("ab"), ())
        assert strip_common_affixes((), _g("ab")) == ((), _g("ab"))

    # Test: prefix and suffix passes never claim the same text grapheme
    def test_front_and_back_do_not_overlap(self) -> None:
        pattern, text = strip_common_affixes(_g("ab*ba"), _g("aba"))
        assert pattern == _g("*b")
        assert text == ()

    def test_length_mismatch_without_star(self) -> None:
        assert strip_common_affixes(_g("a"), _g("aa")) == ((), _g("a"))

    def test_grapheme_clusters_strip_as_units(self) -> None:
        pattern, text = strip_common_affixes(_g("e\u0301*"), _g("e\u0301x"))
        assert pattern == ("*",)
        assert text == ("x",)


# === preprocess ===


class TestPreprocess:
    def test_collapses_then_strips(self) -> None:
        assert preprocess(_g("ab***cd"), _g("abXYcd")) == (_g("*"), _g("XY"))

    def test_preserves_match_result(self) -> None:
        patterns = ["".join(p) for n in range(5) for p in product("ab*?", repeat=n)]
        texts = ["".join(t) for n in range(5) for t in product("ab", repeat=n)]
        for pattern in patterns:
            for text in texts:
                p, t = _g(pattern), _g(text)
                expected = match_graphemes(p, t)
                assert match_graphemes(*preprocess(p, t)) is expected, (text, pattern)
