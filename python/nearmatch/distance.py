"""Restricted Damerau-Levenshtein (Optimal String Alignment) distance.

The distance counts single-element insertions, deletions, substitutions and
transpositions of adjacent elements, with the restriction that no substring
is edited more than once. This is *not* the unrestricted Damerau-Levenshtein
distance: ``string_distance("ca", "abc")`` is 3, not 2.

Example usage:
    >>> from nearmatch import string_distance
    >>> string_distance("typo", "tpyo")
    1
    >>> string_distance("Thing", "thing", halfcase=True)
    0.5
"""

from collections.abc import Sequence
from typing import Any, Union

__all__ = ["string_distance", "osa_distance"]


def _switch_case(element: Any) -> Any:
    """Return ``element`` with its letter case flipped, if it has one."""
    if isinstance(element, str):
        if element.isupper():
            return element.lower()
        if element.islower():
            return element.upper()
    return element


def string_distance(a: Sequence, b: Sequence, *, halfcase: bool = False) -> Union[int, float]:
    """Calculate the Optimal String Alignment distance between two sequences.

    Intended for strings, but any two indexable sequences whose elements
    support ``==`` are accepted.

    Costs are doubled internally so that a case-only substitution can cost
    one half-step while every other edit stays integral.

    Args:
        a: First sequence.
        b: Second sequence.
        halfcase: When true, a substitution that only switches the case of a
            character (``'a'`` to ``'A'``) costs 0.5 instead of 1.

    Returns:
        The edit distance. An ``int`` when ``halfcase`` is false, otherwise a
        ``float`` that may end in ``.5``.

    Example:
        >>> string_distance("The quick brown fox jumps over the lazy dog",
        ...                 "The quack borwn fox leaps ovver the lzy dog")
        7
        >>> string_distance("frog", "cat")
        4
    """
    if len(a) > len(b):
        a, b = b, a

    start = 0
    for x, y in zip(a, b):
        if x != y:
            break
        start += 1

    # `a` is a prefix of `b`: only insertions remain
    if start == len(a):
        remaining = len(b) - start
        return float(remaining) if halfcase else remaining

    short, long = a[start:], b[start:]
    width = len(short)

    # Rows run along the shorter sequence; `before` is two rows back and
    # only feeds the transposition case.
    before = [0] * (width + 1)
    previous = list(range(0, 2 * width + 1, 2))
    for i in range(1, len(long) + 1):
        li = long[i - 1]
        flipped = _switch_case(li) if halfcase else li
        current = [2 * i] + [0] * width
        for j in range(1, width + 1):
            sj = short[j - 1]
            if li == sj:
                cost = previous[j - 1]
            else:
                substitute = 1 if halfcase and flipped == sj else 2
                cost = min(
                    previous[j - 1] + substitute,
                    previous[j] + 2,
                    current[j - 1] + 2,
                )
                if i > 1 and j > 1 and li == short[j - 2] and long[i - 2] == sj:
                    cost = min(cost, before[j - 2] + 2)
            current[j] = cost
        before, previous = previous, current

    if halfcase:
        return previous[width] / 2
    return previous[width] // 2


# Alias naming the algorithm rather than its usual input
osa_distance = string_distance
