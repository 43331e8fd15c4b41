"""Kind-aware similarity scores in [0, 1].

:func:`similarity` classifies both arguments into a :class:`ValueKind` and
looks the pair up in a fixed dispatch table. Pairs without an entry score
0.0 rather than raising.

Example usage:
    >>> import nearmatch as nm
    >>> nm.similarity("semi", "demi")
    0.75
    >>> nm.similarity("Same", "same")
    0.875
    >>> nm.similarity(3, 4)
    0.75
    >>> nm.similarity(2, 2.0) < 1.0
    True
"""

import math
import numbers
import random
from collections.abc import Sequence
from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple, Union

from nearmatch._utils import normalize_kind
from nearmatch.distance import string_distance
from nearmatch.enums import ValueKind
from nearmatch.exceptions import ValidationError
from nearmatch.hierarchy import TypeTag

__all__ = [
    "ALMOST_ONE",
    "MAX_PERMUTATION_SAMPLES",
    "Char",
    "classify",
    "is_comparable",
    "similarity",
    "string_similarity",
    "char_similarity",
    "numeric_similarity",
    "type_similarity",
    "sequence_similarity",
]

ALMOST_ONE = math.nextafter(1.0, 0.0)
"""Score for an integer equal in value to a non-integral real."""

MAX_PERMUTATION_SAMPLES = 1000
"""Upper bound on the shuffles drawn by :func:`sequence_similarity`."""


class Char(str):
    """A single character, scored by exact equality rather than edit distance.

    Python has no character type, so one-character strings are text. Wrap a
    character in ``Char`` to have it compared as a character.

    Example:
        >>> similarity(Char("a"), Char("A"))
        0.0
        >>> similarity("a", "A")
        0.5
    """

    def __new__(cls, value: str) -> "Char":
        if not isinstance(value, str) or len(value) != 1:
            raise ValidationError(f"Char requires a single character, got {value!r}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Char({str(self)!r})"


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` used to score ``value``."""
    if isinstance(value, Char):
        return ValueKind.CHAR
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, TypeTag):
        return ValueKind.NOMINAL_TYPE
    if isinstance(value, numbers.Integral):
        return ValueKind.INTEGER
    if isinstance(value, numbers.Real):
        return ValueKind.REAL
    if isinstance(value, Sequence):
        return ValueKind.ORDERED_SEQUENCE
    return ValueKind.OTHER


def string_similarity(a: str, b: str, *, halfcase: bool = True) -> float:
    """Return one minus the edit distance as a share of the longer length.

    Two empty strings are identical (1.0).
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - string_distance(a, b, halfcase=halfcase) / longest


def char_similarity(a: str, b: str) -> float:
    return float(a == b)


def numeric_similarity(a: numbers.Real, b: numbers.Real) -> float:
    """Return ``1 - |a - b| / max(a, b)`` clamped into [0, 1].

    When the larger operand is zero the ratio is undefined: equal operands
    score 1.0 and anything else 0.0.
    """
    top = max(a, b)
    if top == 0:
        return 1.0 if a == b else 0.0
    score = 1.0 - abs((a - b) / top)
    if math.isnan(score):
        return 0.0
    return float(min(max(score, 0.0), 1.0))


def _mixed_numeric_similarity(integer: numbers.Integral, real: numbers.Real) -> float:
    # Equal in value but not in kind: just below a perfect score
    if integer == real:
        return ALMOST_ONE
    try:
        as_real = float(integer)
    except OverflowError:
        # Beyond the float range, so nowhere near any real
        return 0.0
    return numeric_similarity(as_real, real)


def type_similarity(a: TypeTag, b: TypeTag) -> float:
    """Score two declared types by their shared ancestry.

    Supertype chains are aligned from the root and the matching positions
    are counted, relative to the longer chain plus one.
    """
    if a == b:
        return 1.0
    a_chain, b_chain = a.ancestors(), b.ancestors()
    shared = sum(x == y for x, y in zip(reversed(a_chain), reversed(b_chain)))
    return shared / (max(len(a_chain), len(b_chain)) + 1)


def sequence_similarity(
    a: Sequence,
    b: Sequence,
    *,
    halfcase: bool = True,
    rng: Optional[random.Random] = None,
    nsamples: Optional[int] = None,
) -> float:
    """Score two ordered sequences against random shuffles of themselves.

    The element-wise mean similarity over the overlapping positions is the
    "ordered" score. Both sequences are then repeatedly perturbed by swapping
    two randomly chosen positions (the swaps accumulate), and each perturbed
    pair is scored the same way but divided by one more position. The
    result is::

        share of samples below the ordered score
        * max(ordered score, best sample)
        * similarity(len(a), len(b))

    Args:
        a: First sequence.
        b: Second sequence.
        halfcase: Passed on to element scoring.
        rng: Random source for the shuffles. Pass a seeded
            ``random.Random`` for reproducible scores.
        nsamples: Number of shuffles; defaults to
            ``min(2 ** max(len(a), len(b)), MAX_PERMUTATION_SAMPLES)``.

    Returns:
        A score in [0, 1]. Two empty sequences score 1.0; an empty sequence
        against a non-empty one scores 0.0.
    """
    joint = min(len(a), len(b))
    if joint == 0:
        return 1.0 if len(a) == len(b) else 0.0
    if nsamples is None:
        # 2 ** 10 already exceeds the cap
        nsamples = min(2 ** min(max(len(a), len(b)), 10), MAX_PERMUTATION_SAMPLES)
    elif nsamples < 1:
        raise ValidationError(f"nsamples must be at least 1, got {nsamples}")
    if rng is None:
        rng = random.Random()

    def mean_similarity(left: Sequence, right: Sequence, positions: int) -> float:
        return sum(
            similarity(left[k], right[k], halfcase=halfcase, rng=rng) for k in range(joint)
        ) / positions

    ordered = mean_similarity(a, b, joint)

    shuffled_a, shuffled_b = list(a), list(b)
    samples = []
    for _ in range(nsamples):
        i, j = rng.randrange(len(shuffled_a)), rng.randrange(len(shuffled_a))
        shuffled_a[i], shuffled_a[j] = shuffled_a[j], shuffled_a[i]
        i, j = rng.randrange(len(shuffled_b)), rng.randrange(len(shuffled_b))
        shuffled_b[i], shuffled_b[j] = shuffled_b[j], shuffled_b[i]
        samples.append(mean_similarity(shuffled_a, shuffled_b, joint + 1))

    beaten = sum(1 for sample in samples if sample < ordered)
    return (
        beaten / nsamples
        * max(ordered, max(samples))
        * numeric_similarity(len(a), len(b))
    )


class _Options(NamedTuple):
    halfcase: bool
    rng: Optional[random.Random]
    nsamples: Optional[int]


_Scorer = Callable[[Any, Any, _Options], float]

_DISPATCH: Dict[Tuple[ValueKind, ValueKind], _Scorer] = {
    (ValueKind.TEXT, ValueKind.TEXT): lambda a, b, o: string_similarity(
        a, b, halfcase=o.halfcase
    ),
    (ValueKind.CHAR, ValueKind.CHAR): lambda a, b, o: char_similarity(a, b),
    (ValueKind.REAL, ValueKind.REAL): lambda a, b, o: numeric_similarity(a, b),
    (ValueKind.INTEGER, ValueKind.INTEGER): lambda a, b, o: numeric_similarity(a, b),
    (ValueKind.INTEGER, ValueKind.REAL): lambda a, b, o: _mixed_numeric_similarity(a, b),
    (ValueKind.REAL, ValueKind.INTEGER): lambda a, b, o: _mixed_numeric_similarity(b, a),
    (ValueKind.NOMINAL_TYPE, ValueKind.NOMINAL_TYPE): lambda a, b, o: type_similarity(a, b),
    (ValueKind.ORDERED_SEQUENCE, ValueKind.ORDERED_SEQUENCE): lambda a, b, o: sequence_similarity(
        a, b, halfcase=o.halfcase, rng=o.rng, nsamples=o.nsamples
    ),
}


def is_comparable(a: Union[str, ValueKind], b: Union[str, ValueKind]) -> bool:
    """Return True if :func:`similarity` has a scoring rule for this pair of kinds.

    Kinds may be given as :class:`ValueKind` members or their names.

    Example:
        >>> is_comparable("integer", "real")
        True
        >>> is_comparable(ValueKind.TEXT, ValueKind.CHAR)
        False
    """
    return (normalize_kind(a), normalize_kind(b)) in _DISPATCH


def similarity(
    a: Any,
    b: Any,
    *,
    halfcase: bool = True,
    rng: Optional[random.Random] = None,
    nsamples: Optional[int] = None,
) -> float:
    """Compute how similar two values are, from 0.0 (unrelated) to 1.0 (identical).

    The pair of :class:`ValueKind` values of ``a`` and ``b`` selects the rule:

    - text: edit-distance similarity, see :func:`string_similarity`
    - characters: 1.0 when equal, else 0.0
    - numbers: ``1 - |a - b| / max(a, b)``; an integer equal to a
      non-integral real scores :data:`ALMOST_ONE`
    - declared types: shared ancestry, see :func:`type_similarity`
    - ordered sequences: see :func:`sequence_similarity` (randomised)
    - any other pairing: 0.0

    Args:
        a: First value.
        b: Second value.
        halfcase: Count case-only substitutions in text as half an edit.
        rng: Random source for sequence scoring.
        nsamples: Shuffle count for sequence scoring.

    Returns:
        A similarity score in [0.0, 1.0].
    """
    scorer = _DISPATCH.get((classify(a), classify(b)))
    if scorer is None:
        return 0.0
    return scorer(a, b, _Options(halfcase, rng, nsamples))
