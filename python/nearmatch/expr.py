"""Polars expression namespace for approximate matching.

This module registers a `.nearmatch` namespace on Polars expressions,
enabling matching operations directly in Polars expression contexts.
Importing :mod:`nearmatch` registers it.

Warning:
    Every row is scored in Python. For large frames prefer the Series API:
    - nm.batch_similarity() for similarity computation
    - nm.batch_best_match() for finding best matches

Example:
    >>> import polars as pl
    >>> import nearmatch  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["length", "lenght", "width"]})
    >>> df.with_columns(
    ...     is_similar=pl.col("name").nearmatch.is_similar("length", min_similarity=0.8)
    ... )
"""

from typing import List, Optional, Union

import polars as pl

from nearmatch.ranking import most_similar
from nearmatch.similarity import similarity as _similarity


@pl.api.register_expr_namespace("nearmatch")
class NearMatchExprNamespace:
    """
    Approximate matching namespace for Polars expressions.

    Access via `.nearmatch` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def similarity(self, other: Union[str, pl.Expr], halfcase: bool = True) -> pl.Expr:
        """
        Calculate similarity between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            halfcase: Count case-only substitutions as half an edit

        Returns:
            Expression producing similarity scores (0.0 to 1.0)

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name").nearmatch.similarity("length")
            ... )
            >>> df.with_columns(
            ...     score=pl.col("name1").nearmatch.similarity(pl.col("name2"))
            ... )
        """
        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: _similarity(str(s), other, halfcase=halfcase),
                return_dtype=pl.Float64,
            )

        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: None
            if row["_left"] is None or row["_right"] is None
            else _similarity(str(row["_left"]), str(row["_right"]), halfcase=halfcase),
            return_dtype=pl.Float64,
        )

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.8,
        halfcase: bool = True,
    ) -> pl.Expr:
        """
        Check if values are at least ``min_similarity`` similar to another value/column.

        Returns:
            Boolean expression

        Example:
            >>> df.filter(pl.col("name").nearmatch.is_similar("length", min_similarity=0.8))
        """
        return self.similarity(other, halfcase=halfcase) >= min_similarity

    def best_match(
        self,
        choices: List[str],
        threshold: Optional[float] = None,
        adaptive: bool = True,
    ) -> pl.Expr:
        """
        Find the most similar string from a list of choices.

        Args:
            choices: List of strings to match against
            threshold: Minimum similarity; defaults per value
            adaptive: Adapt the threshold to each value's score distribution

        Returns:
            Expression with the best matching string (or null)

        Example:
            >>> fields = ["length", "width", "height"]
            >>> df.with_columns(field=pl.col("raw_field").nearmatch.best_match(fields))
        """

        def find_best(value):
            matches = most_similar(str(value), choices, threshold, adaptive=adaptive, limit=1)
            return matches[0] if matches else None

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)
