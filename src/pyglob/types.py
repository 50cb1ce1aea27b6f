"""Shared constants and type definitions."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

__all__ = [
    "ANY_RUN",
    "ANY_ONE",
    "GraphemeSequence",
    "MemoStrategy",
]

ANY_RUN = "*"
ANY_ONE = "?"

GraphemeSequence = Sequence[str]


class MemoStrategy(str, Enum):
    """Layout of the memo table used by the matcher."""

    SPARSE = "sparse"
    DENSE = "dense"
