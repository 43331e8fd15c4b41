"""Tests for the Optimal String Alignment edit distance.

This module tests string_distance on strings and other sequences, including
the half-cost case switch mode.
"""

import pytest

import nearmatch as nm


class TestStringDistance:
    """Tests for known distances."""

    def test_sentence_with_several_typos(self):
        assert nm.string_distance(
            "The quick brown fox jumps over the lazy dog",
            "The quack borwn fox leaps ovver the lzy dog",
        ) == 7

    def test_transposition_is_one_edit(self):
        assert nm.string_distance("typo", "tpyo") == 1
        assert nm.string_distance("ab", "ba") == 1

    def test_no_shared_characters(self):
        assert nm.string_distance("frog", "cat") == 4

    def test_classic_examples(self):
        assert nm.string_distance("kitten", "sitting") == 3
        assert nm.string_distance("saturday", "sunday") == 3

    def test_restricted_transposition(self):
        # Unrestricted Damerau-Levenshtein gives 2; OSA cannot edit "ca" twice
        assert nm.string_distance("ca", "abc") == 3


class TestEdgeCases:
    """Tests for identical, empty and prefix inputs."""

    def test_identical_strings(self):
        assert nm.string_distance("hello", "hello") == 0, "Identical strings should have distance 0"
        assert nm.string_distance("", "") == 0, "Two empty strings should have distance 0"

    def test_empty_strings(self):
        assert nm.string_distance("hello", "") == 5, "Distance to empty string equals string length"
        assert nm.string_distance("", "hello") == 5, "Distance from empty string equals target length"

    def test_prefix_is_pure_insertion(self):
        assert nm.string_distance("abc", "abcde") == 2
        assert nm.string_distance("abcde", "abc") == 2

    def test_common_prefix_does_not_change_result(self):
        assert nm.string_distance("prefix-typo", "prefix-tpyo") == nm.string_distance("typo", "tpyo")

    def test_unicode(self):
        assert nm.string_distance("café", "cafe") == 1
        assert nm.string_distance("日本語", "日本") == 1

    def test_long_strings(self):
        assert nm.string_distance("a" * 200, "b" * 200) == 200


class TestHalfCase:
    """Tests for discounted case switches."""

    def test_case_switch_costs_half(self):
        assert nm.string_distance("Thing", "thing", halfcase=True) == 0.5

    def test_case_switch_costs_one_by_default(self):
        assert nm.string_distance("Thing", "thing") == 1

    def test_every_character_switched(self):
        assert nm.string_distance("HELLO", "hello", halfcase=True) == 2.5

    def test_non_letters_are_not_discounted(self):
        assert nm.string_distance("1", "!", halfcase=True) == 1.0

    def test_mixed_edits(self):
        # One case switch plus one substitution
        assert nm.string_distance("Cat", "cot", halfcase=True) == 1.5

    def test_result_types(self):
        assert isinstance(nm.string_distance("abc", "abd"), int)
        assert isinstance(nm.string_distance("abc", "abd", halfcase=True), float)
        assert isinstance(nm.string_distance("abc", "abcd", halfcase=True), float)


class TestSequences:
    """Tests for non-string sequences."""

    def test_lists_of_integers(self):
        assert nm.string_distance([1, 2, 3], [1, 3, 2]) == 1
        assert nm.string_distance([1, 2, 3], [4, 5]) == 3

    def test_tuples_of_words(self):
        assert nm.string_distance(("the", "quick", "fox"), ("the", "slow", "fox")) == 1

    def test_case_switch_applies_to_string_elements(self):
        assert nm.string_distance(["a", "B"], ["A", "B"], halfcase=True) == 0.5

    def test_aliases(self):
        assert nm.osa_distance is nm.string_distance
        assert nm.edit_distance is nm.string_distance


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
