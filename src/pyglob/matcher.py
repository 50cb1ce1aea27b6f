"""Wildcard matching over grapheme sequences.

Patterns support two wildcards:

* ``*`` matches any run of graphemes, including none.
* ``?`` matches exactly one grapheme.

Every other grapheme matches only itself, and a match must consume the whole
pattern and the whole text. The decision is a dynamic program over position
pairs ``(row, column)`` where ``row`` walks the pattern and ``column`` walks
the text. Both are offset by one so that ``1`` marks the empty prefix and
``0`` marks a position before the start, which never matches.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from pyglob.config import MatchSettings
from pyglob.errors import InvalidInputError
from pyglob.preprocessing import preprocess as preprocess_pair
from pyglob.segmentation import graphemes
from pyglob.types import ANY_ONE, ANY_RUN, GraphemeSequence, MemoStrategy

if TYPE_CHECKING:
    from pyglob.config import Config
    from pyglob.observability.metrics import MetricsCollector

__all__ = ["match_graphemes", "is_wildcard_match", "Matcher"]

_logger = logging.getLogger("pyglob.matcher")

# Marker used for the empty prefix before the first grapheme.
_BOUNDARY = ""


def _sparse_memo(
    pattern: GraphemeSequence, text: GraphemeSequence
) -> dict[tuple[int, int], bool]:
    """Fill the memo table from the goal state backwards.

    Only states the goal actually depends on are visited. A ``*`` first tries
    to match nothing more and only looks at consuming another text grapheme
    when that fails. The walk uses an explicit stack, so long inputs are not
    bounded by the interpreter's recursion limit.
    """
    memo: dict[tuple[int, int], bool] = {(1, 1): True}
    stack = [(len(pattern) + 1, len(text) + 1)]

    while stack:
        state = stack[-1]
        if state in memo:
            stack.pop()
            continue

        row, column = state
        if row == 0 or column == 0:
            memo[state] = False
            stack.pop()
            continue

        pattern_char = pattern[row - 2] if row > 1 else _BOUNDARY
        text_char = text[column - 2] if column > 1 else _BOUNDARY

        if (pattern_char == text_char and text_char != ANY_RUN) or pattern_char == ANY_ONE:
            diagonal = (row - 1, column - 1)
            if diagonal not in memo:
                stack.append(diagonal)
                continue
            memo[state] = memo[diagonal]
        elif pattern_char == ANY_RUN:
            above = (row - 1, column)
            if above not in memo:
                stack.append(above)
                continue
            if memo[above]:
                memo[state] = True
            else:
                left = (row, column - 1)
                if left not in memo:
                    stack.append(left)
                    continue
                memo[state] = memo[left]
        else:
            memo[state] = False
        stack.pop()

    return memo


def _dense_match(pattern: GraphemeSequence, text: GraphemeSequence) -> bool:
    """Fill the whole grid one pattern row at a time.

    ``previous[j]`` holds whether the pattern consumed so far matches the
    first ``j`` text graphemes. Only two rows are alive at once.
    """
    text_len = len(text)
    previous = [False] * (text_len + 1)
    previous[0] = True

    for pattern_char in pattern:
        current = [False] * (text_len + 1)
        if pattern_char == ANY_RUN:
            current[0] = previous[0]
            for j in range(1, text_len + 1):
                current[j] = previous[j] or current[j - 1]
        else:
            for j in range(1, text_len + 1):
                if pattern_char == ANY_ONE or pattern_char == text[j - 1]:
                    current[j] = previous[j - 1]
        previous = current

    return previous[text_len]


def _solve(
    pattern: GraphemeSequence, text: GraphemeSequence, memo: MemoStrategy
) -> tuple[bool, int]:
    """Return the decision and the number of memo states it took."""
    if memo is MemoStrategy.DENSE:
        return _dense_match(pattern, text), (len(pattern) + 1) * (len(text) + 1)
    table = _sparse_memo(pattern, text)
    return table[(len(pattern) + 1, len(text) + 1)], len(table)


def match_graphemes(
    pattern: GraphemeSequence,
    text: GraphemeSequence,
    memo: MemoStrategy | str = MemoStrategy.SPARSE,
) -> bool:
    """Decide whether ``pattern`` matches all of ``text``.

    Args:
        pattern: Pattern graphemes, possibly containing ``*`` and ``?``.
        text: Text graphemes. A ``*`` here is ordinary text.
        memo: Memo table layout. Both layouts give the same answer.

    Returns:
        True if the whole pattern matches the whole text.
    """
    matched, _ = _solve(pattern, text, MemoStrategy(memo))
    return matched


def _check_inputs(text: Any, pattern: Any) -> None:
    if not isinstance(text, str):
        raise InvalidInputError("text", text)
    if not isinstance(pattern, str):
        raise InvalidInputError("pattern", pattern)


def is_wildcard_match(
    text: str,
    pattern: str,
    *,
    preprocess: bool = False,
    memo: MemoStrategy | str = MemoStrategy.SPARSE,
) -> bool:
    """Check whether a wildcard pattern matches a whole string.

    Both strings are split into grapheme clusters first, so ``?`` always
    stands for one user-visible character.

    Example::

        >>> is_wildcard_match("aplbq", "a*b?")
        True
        >>> is_wildcard_match("abc", "a*b")
        False

    Args:
        text: The string to test.
        pattern: The pattern to test it against.
        preprocess: Collapse star runs and strip shared affixes before
            matching. Never changes the result.
        memo: Memo table layout, ``"sparse"`` or ``"dense"``.

    Returns:
        True if the pattern matches the entire text.

    Raises:
        InvalidInputError: If ``text`` or ``pattern`` is not a string.
    """
    _check_inputs(text, pattern)
    pattern_graphemes = graphemes(pattern)
    text_graphemes = graphemes(text)
    if preprocess:
        pattern_graphemes, text_graphemes = preprocess_pair(
            pattern_graphemes, text_graphemes
        )
    return match_graphemes(pattern_graphemes, text_graphemes, memo)


class Matcher:
    """Reusable matcher bound to a set of settings.

    Each call still builds and drops its own memo table, so one instance can
    be shared between threads. When a metrics collector is given, every call
    records its outcome, the number of memo states used and its duration.
    """

    def __init__(
        self,
        settings: MatchSettings | None = None,
        metrics: MetricsCollector | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._settings = settings or MatchSettings()
        self._metrics = metrics
        self._logger = logger or _logger

    @classmethod
    def from_config(cls, config: Config, **kwargs: Any) -> Matcher:
        """Build a matcher from the ``matching`` section of a Config."""
        return cls(settings=config.match_settings(), **kwargs)

    @property
    def settings(self) -> MatchSettings:
        return self._settings

    def match(self, text: str, pattern: str) -> bool:
        """Same as :func:`is_wildcard_match` with this matcher's settings."""
        _check_inputs(text, pattern)
        start_time = time.time()
        pattern_graphemes = graphemes(pattern)
        text_graphemes = graphemes(text)
        if self._settings.preprocess:
            pattern_graphemes, text_graphemes = preprocess_pair(
                pattern_graphemes, text_graphemes
            )

        memo = self._settings.memo
        matched, states = _solve(pattern_graphemes, text_graphemes, memo)
        duration_s = time.time() - start_time

        self._logger.debug(
            f"{'MATCH' if matched else 'NO MATCH'} pattern={pattern!r} "
            f"({states} states, {memo.value})",
            extra={
                "pattern_length": len(pattern_graphemes),
                "text_length": len(text_graphemes),
                "states": states,
                "memo": memo.value,
            },
        )
        if self._metrics is not None:
            self._metrics.increment_matches(matched, memo.value)
            self._metrics.observe_states(memo.value, states)
            self._metrics.observe_duration(memo.value, duration_s)
        return matched
