"""Tests for the Polars Series API and the .nearmatch expression namespace."""

import polars as pl
import pytest
from polars.testing import assert_series_equal

import nearmatch as nm

FIELDS = ["length", "width", "height"]


class TestBatchSimilarity:
    """Tests for batch_similarity."""

    def test_scores(self):
        result = nm.batch_similarity(pl.Series(["hello", "world"]), pl.Series(["hallo", "word"]))
        assert_series_equal(result, pl.Series("similarity", [0.8, 0.8], dtype=pl.Float64))

    def test_nulls(self):
        result = nm.batch_similarity(pl.Series(["hello", None]), pl.Series(["hello", "x"]))
        assert result.to_list() == [1.0, None]

    def test_length_mismatch(self):
        with pytest.raises(nm.ValidationError):
            nm.batch_similarity(pl.Series(["a", "b"]), pl.Series(["a"]))


class TestBatchSuggest:
    """Tests for batch_suggest and batch_best_match."""

    def test_best_match(self):
        result = nm.batch_best_match(pl.Series(["lenght", "wdith", None]), FIELDS)
        assert result.name == "best_match"
        assert result.dtype == pl.Utf8
        assert result.to_list() == ["length", "width", None]

    def test_best_match_nothing_close(self):
        assert nm.batch_best_match(pl.Series(["zzzz"]), FIELDS).to_list() == [None]

    def test_suggest(self):
        result = nm.batch_suggest(pl.Series(["colr", None]), ["color", "colour", "cooler"])
        assert result.dtype == pl.List(pl.Utf8)
        assert result.to_list() == [["color", "colour", "cooler"], None]

    def test_suggest_limit(self):
        result = nm.batch_suggest(pl.Series(["colr"]), ["color", "colour", "cooler"], limit=1)
        assert result.to_list() == [["color"]]


class TestExprNamespace:
    """Tests for the .nearmatch expression namespace."""

    def test_similarity_to_literal(self):
        df = pl.DataFrame({"name": ["hello", "hallo"]})
        result = df.select(score=pl.col("name").nearmatch.similarity("hello"))
        assert result["score"].to_list() == [1.0, 0.8]

    def test_similarity_between_columns(self):
        df = pl.DataFrame({"a": ["hello", "world"], "b": ["hallo", "word"]})
        result = df.select(score=pl.col("a").nearmatch.similarity(pl.col("b")))
        assert result["score"].to_list() == [0.8, 0.8]

    def test_is_similar(self):
        df = pl.DataFrame({"name": ["length", "lenght", "width"]})
        result = df.filter(pl.col("name").nearmatch.is_similar("length", min_similarity=0.8))
        assert result["name"].to_list() == ["length", "lenght"]

    def test_best_match(self):
        df = pl.DataFrame({"raw": ["lenght", "wdith", "zzzz"]})
        result = df.select(field=pl.col("raw").nearmatch.best_match(FIELDS))
        assert result["field"].to_list() == ["length", "width", None]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
