"""SuggestionIndex for repeated lookups against one candidate collection.

This module provides a high-level interface for holding a fixed set of
candidates (from a Python list, a Polars Series or a DataFrame column) and
ranking many queries against it, with optional persistence to disk.

Warning:
    This class is NOT thread-safe. Create separate instances per thread
    for concurrent operations.
"""

import logging
import pickle
from pathlib import Path
from typing import Any, List, Optional, Union

import polars as pl

from nearmatch.ranking import ScoredCandidate, rank_candidates

logger = logging.getLogger(__name__)


class SuggestionIndex:
    """
    A reusable candidate collection searched with ``most_similar`` semantics.

    Every search scores all candidates, then applies the same default and
    adaptive thresholds as :func:`nearmatch.most_similar`.

    Warning:
        This class is NOT thread-safe. Create separate instances for each
        thread when using in concurrent applications.

    Example:
        >>> import polars as pl
        >>> from nearmatch import SuggestionIndex
        >>>
        >>> fields = pl.Series(["length", "width", "height", "depth"])
        >>> index = SuggestionIndex.from_series(fields)
        >>>
        >>> [r.value for r in index.search("lenght")]
        ['length']
        >>>
        >>> # Save for later reuse
        >>> index.save("fields_index.pkl")
        >>> index = SuggestionIndex.load("fields_index.pkl")
    """

    def __init__(self, items: List[Any], halfcase: bool = True):
        """
        Create a SuggestionIndex from a list of candidates.

        Args:
            items: Candidate values
            halfcase: Count case-only substitutions in text as half an edit
        """
        self._items = list(items)
        self._halfcase = halfcase
        logger.debug("Built suggestion index over %d items", len(self._items))

    @classmethod
    def from_series(cls, series: "pl.Series", halfcase: bool = True) -> "SuggestionIndex":
        """
        Create a SuggestionIndex from a Polars Series of strings.

        Nulls become empty strings so positions line up with the Series.

        Example:
            >>> names = pl.Series(["length", "width", "height"])
            >>> index = SuggestionIndex.from_series(names)
        """
        items = [str(x) if x is not None else "" for x in series.to_list()]
        return cls(items, halfcase=halfcase)

    @classmethod
    def from_dataframe(
        cls,
        df: "pl.DataFrame",
        column: str,
        halfcase: bool = True,
    ) -> "SuggestionIndex":
        """Create a SuggestionIndex from a DataFrame column."""
        return cls.from_series(df[column], halfcase=halfcase)

    def search(
        self,
        query: Any,
        threshold: Optional[float] = None,
        adaptive: bool = True,
        atleast: int = 0,
        limit: Optional[int] = 10,
    ) -> List[ScoredCandidate]:
        """
        Rank the indexed candidates against ``query``.

        Args:
            query: Reference value
            threshold: Minimum similarity; defaults per query
            adaptive: Adapt the threshold to the score distribution
            atleast: Minimum number of results when candidates exist
            limit: Maximum number of results to return

        Returns:
            List of ScoredCandidate objects with value, score, and index
        """
        return rank_candidates(
            query,
            self._items,
            threshold,
            adaptive=adaptive,
            atleast=atleast,
            limit=limit,
            halfcase=self._halfcase,
        )

    def search_series(
        self,
        queries: "pl.Series",
        threshold: Optional[float] = None,
        limit: int = 1,
        include_query: bool = True,
    ) -> "pl.DataFrame":
        """
        Search for each query in a Series, returning a DataFrame of results.

        Args:
            queries: Series of query strings
            threshold: Minimum similarity; defaults per query
            limit: Maximum matches per query (default: 1 for best match only)
            include_query: Include query column in results

        Returns:
            DataFrame with columns:
            - query_idx: Index of the query in the input Series
            - query: The query string (if include_query=True)
            - match: The matched candidate
            - match_idx: Index of the match in the indexed candidates
            - score: Similarity score
        """
        rows = []
        for query_idx, query in enumerate(queries.to_list()):
            if query is None:
                continue

            for match in self.search(str(query), threshold=threshold, limit=limit):
                row = {
                    "query_idx": query_idx,
                    "match": match.value,
                    "match_idx": match.index,
                    "score": match.score,
                }
                if include_query:
                    row["query"] = str(query)
                rows.append(row)

        if not rows:
            schema = {
                "query_idx": pl.Int64,
                "match": pl.Utf8,
                "match_idx": pl.Int64,
                "score": pl.Float64,
            }
            if include_query:
                schema["query"] = pl.Utf8
            df = pl.DataFrame(schema=schema)
        else:
            df = pl.DataFrame(rows)

        if include_query:
            return df.select(["query_idx", "query", "match", "match_idx", "score"])
        return df.select(["query_idx", "match", "match_idx", "score"])

    def batch_search(
        self,
        queries: List[Any],
        threshold: Optional[float] = None,
        limit: Optional[int] = 1,
    ) -> List[List[ScoredCandidate]]:
        """Search for multiple queries, returning one result list per query."""
        return [self.search(q, threshold=threshold, limit=limit) for q in queries]

    def get_items(self) -> List[Any]:
        """Return the list of indexed items."""
        return self._items.copy()

    def __len__(self) -> int:
        return len(self._items)

    def save(self, path: Union[str, Path]) -> None:
        """
        Save the index to a file.

        Example:
            >>> index.save("my_index.pkl")
        """
        data = {"items": self._items, "halfcase": self._halfcase}
        with open(path, "wb") as f:
            pickle.dump(data, f)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "SuggestionIndex":
        """
        Load an index from a file written by :meth:`save`.

        Example:
            >>> index = SuggestionIndex.load("my_index.pkl")
        """
        with open(path, "rb") as f:
            data = pickle.load(f)

        return cls(items=data["items"], halfcase=data["halfcase"])

    def __repr__(self) -> str:
        return f"SuggestionIndex(size={len(self._items)}, halfcase={self._halfcase!r})"
