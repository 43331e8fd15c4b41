"""
Correctness verification tests for nearmatch.

Compares nearmatch results with RapidFuzz:
- OSA for the edit distance without the case discount
- LCSseq for the longest common subsequence length

These tests ensure the hand-written dynamic programs agree with an
established implementation.
"""

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings
from rapidfuzz.distance import OSA, LCSseq

import nearmatch as nm

# Strategy for ASCII strings (avoiding unicode edge cases in reference comparison)
ascii_text = st.text(
    alphabet=st.characters(min_codepoint=32, max_codepoint=126), min_size=0, max_size=50
)


class TestOSACorrectness:
    """Verify the edit distance matches RapidFuzz's Optimal String Alignment."""

    TEST_PAIRS = [
        ("kitten", "sitting"),
        ("hello", "hallo"),
        ("world", "word"),
        ("", "test"),
        ("test", ""),
        ("", ""),
        ("same", "same"),
        ("ca", "abc"),
        ("abcdef", "abdcef"),
        ("Saturday", "Sunday"),
        ("intention", "execution"),
        ("The quick brown fox jumps over the lazy dog",
         "The quack borwn fox leaps ovver the lzy dog"),
    ]

    def test_distance_matches_rapidfuzz(self):
        for s1, s2 in self.TEST_PAIRS:
            nm_result = nm.string_distance(s1, s2)
            rf_result = OSA.distance(s1, s2)
            assert nm_result == rf_result, f"Mismatch for {s1!r}, {s2!r}: {nm_result} vs {rf_result}"

    def test_similarity_matches_rapidfuzz(self):
        for s1, s2 in self.TEST_PAIRS:
            nm_result = nm.similarity(s1, s2, halfcase=False)
            rf_result = OSA.normalized_similarity(s1, s2)
            assert nm_result == pytest.approx(rf_result, abs=1e-9), \
                f"Mismatch for {s1!r}, {s2!r}: {nm_result} vs {rf_result}"

    @given(ascii_text, ascii_text)
    @settings(max_examples=300)
    def test_distance_matches_rapidfuzz_property(self, s1: str, s2: str):
        assert nm.string_distance(s1, s2) == OSA.distance(s1, s2)

    @given(st.lists(st.integers(min_value=0, max_value=4), max_size=20),
           st.lists(st.integers(min_value=0, max_value=4), max_size=20))
    def test_sequences_match_rapidfuzz(self, s1, s2):
        assert nm.string_distance(s1, s2) == OSA.distance(s1, s2)


class TestLCSCorrectness:
    """Verify the LCS length matches RapidFuzz's LCSseq."""

    TEST_PAIRS = [
        ("fooandbar", "foobar"),
        ("ab", "ba"),
        ("abcde", "ace"),
        ("", "abc"),
        ("AGGTAB", "GXTXAYB"),
    ]

    def test_length_matches_rapidfuzz(self):
        for s1, s2 in self.TEST_PAIRS:
            assert nm.lcs_length(s1, s2) == LCSseq.similarity(s1, s2), f"Mismatch for {s1!r}, {s2!r}"
            assert len(nm.lcs_indices(s1, s2)) == LCSseq.similarity(s1, s2)

    @given(ascii_text, ascii_text)
    @settings(max_examples=300)
    def test_length_matches_rapidfuzz_property(self, s1: str, s2: str):
        assert len(nm.lcs_values(s1, s2)) == LCSseq.similarity(s1, s2)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
