"""Ranking candidates by similarity to a reference value.

This is the entry point most callers want: given the value that failed to
match (a misspelt key, an unknown attribute name) and the values that do
exist, :func:`most_similar` returns the plausible intended ones, best first.

Example usage:
    >>> from nearmatch import most_similar
    >>> most_similar("lenght", ["length", "width", "height", "depth"])
    ['length']
    >>> most_similar("colour", ["color", "colon", "flavour"], adaptive=False)
    ['color']
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, List, Optional, TypeVar

from nearmatch._utils import check_count, check_finite, clamp
from nearmatch.similarity import similarity
from nearmatch.threshold import adaptive_threshold, default_threshold

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = ["ScoredCandidate", "most_similar", "rank_candidates"]


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate kept by :func:`rank_candidates`.

    Attributes:
        value: The candidate itself.
        score: Its similarity to the reference value.
        index: Its position in the candidate collection.
    """

    value: Any
    score: float
    index: int


def _as_candidates(candidates: Any) -> Optional[List[Any]]:
    if isinstance(candidates, list):
        return candidates
    if isinstance(candidates, Iterable):
        return list(candidates)
    return None


def rank_candidates(
    ref: Any,
    candidates: Iterable[T],
    threshold: Optional[float] = None,
    *,
    adaptive: bool = True,
    atleast: int = 0,
    limit: Optional[int] = None,
    halfcase: bool = True,
    rng: Optional[random.Random] = None,
) -> List[ScoredCandidate]:
    """Filter and rank ``candidates`` by similarity to ``ref``, keeping scores.

    Takes the same arguments as :func:`most_similar`, which returns just the
    values of this function's result.
    """
    if threshold is not None:
        check_finite("threshold", threshold)
    check_count("atleast", atleast)
    check_count("limit", limit)

    pool = _as_candidates(candidates)
    if not pool:
        return []
    if limit is None:
        limit = len(pool)

    if threshold is None:
        threshold = default_threshold(ref, pool)
    threshold = clamp(threshold)

    scores = [similarity(ref, candidate, halfcase=halfcase, rng=rng) for candidate in pool]
    if adaptive:
        threshold = max(adaptive_threshold(scores, threshold), threshold / 2)

    kept = [i for i, score in enumerate(scores) if score >= threshold]
    if len(kept) < atleast:
        # Lower the bar to the atleast-th smallest score; asking for more
        # candidates than exist keeps them all
        position = atleast if atleast <= len(scores) else 1
        threshold = sorted(scores)[position - 1]
        kept = [i for i, score in enumerate(scores) if score >= threshold]

    logger.debug(
        "Kept %d of %d candidates for %r at threshold %.4f",
        len(kept), len(pool), ref, threshold,
    )

    # Stable: equal scores keep their candidate order
    kept.sort(key=lambda i: scores[i], reverse=True)
    return [ScoredCandidate(pool[i], scores[i], i) for i in kept[:limit]]


def most_similar(
    ref: T,
    candidates: Iterable[T],
    threshold: Optional[float] = None,
    *,
    adaptive: bool = True,
    atleast: int = 0,
    limit: Optional[int] = None,
    halfcase: bool = True,
    rng: Optional[random.Random] = None,
) -> List[T]:
    """Return the candidates most similar to ``ref``, most similar first.

    Every candidate is scored with :func:`nearmatch.similarity`. Those at or
    above the threshold are kept, sorted by descending score; candidates
    with equal scores stay in their original order.

    Args:
        ref: The reference value.
        candidates: Any iterable of candidates. Non-iterable values give an
            empty result.
        threshold: Minimum similarity. Defaults to
            :func:`nearmatch.default_threshold`; clamped into [0, 1].
        adaptive: Raise (or lower, to no less than half) the threshold
            according to the shape of the score distribution, see
            :func:`nearmatch.adaptive_threshold`.
        atleast: If fewer candidates pass, lower the threshold to the
            ``atleast``-th smallest score and select again.
        limit: Maximum number of results (default: all).
        halfcase: Count case-only substitutions in text as half an edit.
        rng: Random source, only used when candidates are sequences.

    Returns:
        A list of candidates, possibly empty.

    Raises:
        ValidationError: If ``threshold`` is NaN or infinite, or ``atleast``
            or ``limit`` is negative.
    """
    ranked = rank_candidates(
        ref,
        candidates,
        threshold,
        adaptive=adaptive,
        atleast=atleast,
        limit=limit,
        halfcase=halfcase,
        rng=rng,
    )
    return [match.value for match in ranked]

