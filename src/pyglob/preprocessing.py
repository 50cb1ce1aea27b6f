"""Optional pattern rewrites that shrink the matching grid.

None of these change the outcome of a match; they only reduce how many
states the matcher has to look at. They are applied when a caller asks for
``preprocess=True`` and never otherwise.
"""

from __future__ import annotations

from pyglob.types import ANY_ONE, ANY_RUN, GraphemeSequence

__all__ = ["collapse_stars", "strip_common_affixes", "preprocess"]


def collapse_stars(pattern: GraphemeSequence) -> tuple[str, ...]:
    """Replace each run of consecutive ``*`` with a single ``*``."""
    collapsed: list[str] = []
    for grapheme in pattern:
        if grapheme == ANY_RUN and collapsed and collapsed[-1] == ANY_RUN:
            continue
        collapsed.append(grapheme)
    return tuple(collapsed)


def _consumes(pattern_grapheme: str, text_grapheme: str) -> bool:
    if pattern_grapheme == ANY_RUN:
        return False
    return pattern_grapheme == ANY_ONE or pattern_grapheme == text_grapheme


def strip_common_affixes(
    pattern: GraphemeSequence, text: GraphemeSequence
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Drop the anchored prefix and suffix that pattern and text agree on.

    Stripping from either end stops at the first ``*`` in the pattern, at the
    first grapheme that does not match, or when either side runs out. The
    suffix pass only looks at what the prefix pass left behind, so the two
    never overlap.

    Args:
        pattern: Pattern graphemes.
        text: Text graphemes.

    Returns:
        ``(pattern, text)`` with the shared affixes removed.
    """
    pattern_len = len(pattern)
    text_len = len(text)

    front = 0
    while (
        front < pattern_len
        and front < text_len
        and _consumes(pattern[front], text[front])
    ):
        front += 1

    back = 0
    while (
        back < pattern_len - front
        and back < text_len - front
        and _consumes(pattern[pattern_len - 1 - back], text[text_len - 1 - back])
    ):
        back += 1

    return (
        tuple(pattern[front : pattern_len - back]),
        tuple(text[front : text_len - back]),
    )


def preprocess(
    pattern: GraphemeSequence, text: GraphemeSequence
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Collapse star runs, then strip the common affixes."""
    return strip_common_affixes(collapse_stars(pattern), text)
