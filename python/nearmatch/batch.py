"""Batch operations API for nearmatch.

This module provides list-based helpers for scoring many values at once.
All functions are thin loops over :func:`nearmatch.similarity` and
:func:`nearmatch.rank_candidates`.

Example usage:
    >>> import nearmatch.batch as batch

    # Score a query against every value, in input order
    >>> results = batch.similarity(["hello", "hallo", "world"], "helo")
    >>> [(r.value, round(r.score, 2)) for r in results]
    [('hello', 0.8), ('hallo', 0.6), ('world', 0.2)]

    # Top N matches above a fixed bar
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [m.value for m in matches]
    ['apple', 'apply']

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["hello", "world"], ["hallo", "word"])
    [0.8, 0.8]
"""

from __future__ import annotations

from typing import Any, Sequence

from nearmatch._utils import check_count, check_unit_interval
from nearmatch.exceptions import ValidationError
from nearmatch.ranking import ScoredCandidate, rank_candidates
from nearmatch.similarity import similarity as _similarity

__all__ = [
    "similarity",
    "best_matches",
    "pairwise",
    "similarity_matrix",
]


def similarity(
    values: Sequence[Any],
    query: Any,
    halfcase: bool = True,
) -> list[ScoredCandidate]:
    """Compute similarity of a query against all values.

    Args:
        values: Values to compare against the query.
        query: The reference value.
        halfcase: Count case-only substitutions in text as half an edit.

    Returns:
        One ScoredCandidate per value, in input order. ``index`` is the
        position in ``values``.
    """
    return [
        ScoredCandidate(value, _similarity(query, value, halfcase=halfcase), i)
        for i, value in enumerate(values)
    ]


def best_matches(
    values: Sequence[Any],
    query: Any,
    limit: int = 5,
    min_similarity: float = 0.0,
    halfcase: bool = True,
) -> list[ScoredCandidate]:
    """Find the top ``limit`` values scoring at least ``min_similarity``.

    Unlike :func:`nearmatch.most_similar` the threshold is fixed, never
    adapted to the scores.

    Args:
        values: Values to search.
        query: The reference value.
        limit: Maximum number of results to return (default: 5).
        min_similarity: Minimum similarity score to include in results
            (default: 0.0, meaning all results are included).
        halfcase: Count case-only substitutions in text as half an edit.

    Returns:
        ScoredCandidate objects sorted by score descending.

    Raises:
        ValidationError: If min_similarity is outside [0, 1] or limit is
            negative.
    """
    check_unit_interval("min_similarity", min_similarity)
    check_count("limit", limit)
    return rank_candidates(
        query,
        values,
        min_similarity,
        adaptive=False,
        limit=limit,
        halfcase=halfcase,
    )


def pairwise(
    left: Sequence[Any],
    right: Sequence[Any],
    halfcase: bool = True,
) -> list[float]:
    """Compute similarity between each ``left[i]`` and ``right[i]``.

    Raises:
        ValidationError: If left and right have different lengths.
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have equal length, got {len(left)} and {len(right)}"
        )
    return [_similarity(a, b, halfcase=halfcase) for a, b in zip(left, right)]


def similarity_matrix(
    queries: Sequence[Any],
    choices: Sequence[Any],
    halfcase: bool = True,
) -> list[list[float]]:
    """Compute the similarity between every query and every choice.

    Returns:
        2D list where ``result[i][j]`` is the similarity between
        ``queries[i]`` and ``choices[j]``.
    """
    return [[_similarity(q, c, halfcase=halfcase) for c in choices] for q in queries]
