"""Polars Series API for nearmatch.

Column-level wrappers around the matching engine for string data held in
Polars Series.

Functions in This Module
------------------------
- ``batch_similarity()``: Similarity between two aligned Series
- ``batch_best_match()``: The closest candidate for each query, or null
- ``batch_suggest()``: All plausible candidates for each query, as a list column

Example Usage
-------------
>>> import polars as pl
>>> import nearmatch as nm
>>>
>>> df = pl.DataFrame({"a": ["hello", "world"], "b": ["hallo", "word"]})
>>> df = df.with_columns(score=nm.batch_similarity(df["a"], df["b"]))
>>>
>>> fields = ["length", "width", "height"]
>>> typos = pl.Series(["lenght", "wdith", None])
>>> nm.batch_best_match(typos, fields).to_list()
['length', 'width', None]

Nulls in the input give nulls in the output.

See Also
--------
- ``nearmatch.expr``: Polars expression namespace for column operations
- ``nearmatch.SuggestionIndex``: Reusable candidate collection
"""

import logging
from typing import List, Optional

import polars as pl

from nearmatch.exceptions import ValidationError
from nearmatch.ranking import most_similar
from nearmatch.similarity import similarity

logger = logging.getLogger(__name__)

__all__ = ["batch_similarity", "batch_best_match", "batch_suggest"]


def batch_similarity(
    left: "pl.Series",
    right: "pl.Series",
    halfcase: bool = True,
) -> "pl.Series":
    """
    Compute similarity between two Series row by row.

    Args:
        left: First string Series
        right: Second string Series (must be same length as left)
        halfcase: Count case-only substitutions as half an edit

    Returns:
        Float64 Series named "similarity" with scores (0.0 to 1.0), null
        where either input is null

    Raises:
        ValidationError: If the Series differ in length

    Example:
        >>> df = pl.DataFrame({"a": ["hello", "world"], "b": ["hallo", "word"]})
        >>> df = df.with_columns(score=nm.batch_similarity(df["a"], df["b"]))
    """
    if len(left) != len(right):
        raise ValidationError("Series must have equal length")

    scores = [
        None if a is None or b is None else similarity(str(a), str(b), halfcase=halfcase)
        for a, b in zip(left.to_list(), right.to_list())
    ]
    return pl.Series("similarity", scores, dtype=pl.Float64)


def batch_suggest(
    queries: "pl.Series",
    candidates: List[str],
    threshold: Optional[float] = None,
    adaptive: bool = True,
    limit: Optional[int] = None,
) -> "pl.Series":
    """
    Find the plausible candidates for each query.

    Each query is ranked against ``candidates`` with
    :func:`nearmatch.most_similar`.

    Args:
        queries: Series of query strings
        candidates: Candidate strings
        threshold: Minimum similarity; defaults per query
        adaptive: Adapt the threshold to each query's score distribution
        limit: Maximum suggestions per query

    Returns:
        List[Utf8] Series named "suggestions", null where the query is null

    Example:
        >>> nm.batch_suggest(pl.Series(["colr"]), ["color", "colour", "cooler"]).to_list()
        [['color', 'colour', 'cooler']]
    """
    suggestions = []
    for query in queries.to_list():
        if query is None:
            suggestions.append(None)
            continue
        suggestions.append(
            most_similar(str(query), candidates, threshold, adaptive=adaptive, limit=limit)
        )
    logger.debug("Suggested candidates for %d queries", len(suggestions))
    return pl.Series("suggestions", suggestions, dtype=pl.List(pl.Utf8))


def batch_best_match(
    queries: "pl.Series",
    candidates: List[str],
    threshold: Optional[float] = None,
    adaptive: bool = True,
) -> "pl.Series":
    """
    Find the single closest candidate for each query.

    Args:
        queries: Series of query strings
        candidates: Candidate strings
        threshold: Minimum similarity; defaults per query
        adaptive: Adapt the threshold to each query's score distribution

    Returns:
        Utf8 Series named "best_match", null where nothing is similar enough
        or the query is null
    """
    suggestions = batch_suggest(queries, candidates, threshold, adaptive=adaptive, limit=1)
    return pl.Series(
        "best_match",
        [matches[0] if matches else None for matches in suggestions.to_list()],
        dtype=pl.Utf8,
    )
