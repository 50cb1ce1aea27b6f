"""Grapheme cluster segmentation."""

from __future__ import annotations

import regex

__all__ = ["graphemes"]

# \X is an extended grapheme cluster as defined by UAX #29.
_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> tuple[str, ...]:
    """Split ``text`` into user-perceived characters.

    Each entry is one extended grapheme cluster, so a base letter followed by
    combining marks, a flag, or a ZWJ emoji sequence is a single entry.
    Joining the result gives back ``text`` unchanged.

    Args:
        text: Any string, possibly empty.

    Returns:
        The grapheme clusters of ``text`` in order. Empty for ``""``.
    """
    return tuple(_GRAPHEME.findall(text))
