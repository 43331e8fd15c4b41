"""Longest common subsequence search and highlighting.

Example usage:
    >>> from nearmatch import lcs_indices, is_subsequence, highlight_lcs_string
    >>> lcs_indices("fooandbar", "foobar")
    [1, 2, 3, 7, 8, 9]
    >>> is_subsequence("adg", "abcdefg")
    True
    >>> highlight_lcs_string("fooandbar", "foobar", before="[", after="]")
    '[foo]and[bar]'
"""

import io
from collections.abc import Sequence
from typing import Any, Iterable, List, TextIO

__all__ = [
    "DEFAULT_HIGHLIGHT_BEFORE",
    "DEFAULT_HIGHLIGHT_AFTER",
    "lcs_indices",
    "lcs_length",
    "lcs_values",
    "is_subsequence",
    "highlight_lcs",
    "highlight_lcs_string",
]

DEFAULT_HIGHLIGHT_BEFORE = "\x1b[1m"
"""ANSI bold on."""

DEFAULT_HIGHLIGHT_AFTER = "\x1b[22m"
"""ANSI bold off."""


def _indexable(items: Iterable[Any]) -> Sequence:
    return items if isinstance(items, Sequence) else list(items)


def _length_table(a: Sequence, b: Sequence) -> List[List[int]]:
    """``table[i][j]`` is the LCS length of ``a[:i]`` and ``b[:j]``."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, x in enumerate(a, 1):
        row, above = table[i], table[i - 1]
        for j, y in enumerate(b, 1):
            if x == y:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(row[j - 1], above[j])
    return table


def lcs_indices(a: Iterable[Any], b: Iterable[Any], start: int = 1) -> List[int]:
    """Find the longest common subsequence of ``a`` and ``b``.

    Intended for strings, but any elements supporting ``==`` work.

    When several subsequences share the longest length, backtracking from
    the end of both sequences prefers stepping back in ``b`` on a tie, so
    matches in ``a`` are taken as late as possible.

    Args:
        a: The sequence whose positions are returned.
        b: The sequence to compare against.
        start: Number given to the first position of ``a``. Positions are
            1-based by default, the way editors count columns; pass
            ``start=0`` to get Python indices.

    Returns:
        Ascending positions in ``a`` of the elements of the subsequence.

    Example:
        >>> lcs_indices("same", "same")
        [1, 2, 3, 4]
        >>> lcs_indices("same", "same", start=0)
        [0, 1, 2, 3]
    """
    a, b = _indexable(a), _indexable(b)
    table = _length_table(a, b)
    positions = []
    i, j = len(a), len(b)
    while table[i][j] > 0:
        if a[i - 1] == b[j - 1]:
            positions.append(i - 1)
            i -= 1
            j -= 1
        elif table[i][j - 1] >= table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    positions.reverse()
    return [position + start for position in positions]


def lcs_length(a: Iterable[Any], b: Iterable[Any]) -> int:
    a, b = _indexable(a), _indexable(b)
    return _length_table(a, b)[len(a)][len(b)]


def lcs_values(a: Iterable[Any], b: Iterable[Any]) -> Any:
    """Return the subsequence itself: a string for string input, else a list."""
    a = _indexable(a)
    values = [a[i] for i in lcs_indices(a, b, start=0)]
    if isinstance(a, str):
        return "".join(values)
    return values


def is_subsequence(a: Iterable[Any], b: Iterable[Any]) -> bool:
    """Return True if ``a`` is a subsequence of ``b``.

    Example:
        >>> is_subsequence("abc", "abc")
        True
        >>> is_subsequence("gda", "abcdefg")
        False
    """
    a = _indexable(a)
    return lcs_length(a, b) == len(a)


def highlight_lcs(
    sink: TextIO,
    a: str,
    b: str,
    before: str = DEFAULT_HIGHLIGHT_BEFORE,
    after: str = DEFAULT_HIGHLIGHT_AFTER,
    invert: bool = False,
) -> None:
    """Write ``a`` to ``sink``, marking the runs it shares with ``b``.

    ``before`` is written when entering a run of characters that are part
    of the longest common subsequence and ``after`` when leaving it,
    including at the end of ``a``. With ``invert`` the characters outside
    the subsequence are marked instead.

    Args:
        sink: Anything with a ``write(str)`` method.
        a: The text to write.
        b: The text to compare against.
        before: Marker written at the start of each marked run.
        after: Marker written at the end of each marked run.
        invert: Mark the characters that are not shared.
    """
    shared = set(lcs_indices(a, b, start=0))
    marked = False
    for position, char in enumerate(a):
        wanted = (position in shared) != invert
        if wanted != marked:
            sink.write(before if wanted else after)
            marked = wanted
        sink.write(char)
    if marked:
        sink.write(after)


def highlight_lcs_string(
    a: str,
    b: str,
    before: str = DEFAULT_HIGHLIGHT_BEFORE,
    after: str = DEFAULT_HIGHLIGHT_AFTER,
    invert: bool = False,
) -> str:
    """Like :func:`highlight_lcs`, returning the text instead of writing it."""
    buffer = io.StringIO()
    highlight_lcs(buffer, a, b, before=before, after=after, invert=invert)
    return buffer.getvalue()
