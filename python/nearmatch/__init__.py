"""
nearmatch - Approximate matching of values against candidate collections

Scores how similar two values are (strings, characters, numbers, ordered
sequences, declared types) and picks out the candidates a user most likely
meant, using a threshold that adapts to the spread of the scores.

Example usage:
    >>> import nearmatch as nm

    # Edit distance with transpositions, case switches at half cost
    >>> nm.string_distance("typo", "tpyo")
    1
    >>> nm.similarity("Same", "same")
    0.875

    # "Did you mean ...?"
    >>> nm.most_similar("lenght", ["length", "width", "height", "depth"])
    ['length']

    # Shared structure between two strings
    >>> nm.lcs_indices("fooandbar", "foobar")
    [1, 2, 3, 7, 8, 9]
"""

from importlib.metadata import version as _get_version

# Register the .nearmatch expression namespace
import nearmatch.expr  # noqa: F401
from nearmatch import batch
from nearmatch.distance import osa_distance, string_distance
from nearmatch.enums import HintKind, ValueKind
from nearmatch.exceptions import NearMatchError, ValidationError
from nearmatch.hierarchy import ANY, TypeHierarchy, TypeTag
from nearmatch.hints import (
    Hint,
    HintContext,
    did_you_mean,
    first_or_none,
    indefinite_article,
    join_alternatives,
    pluralise,
    suggest_attributes,
    suggest_keys,
)
from nearmatch.index import SuggestionIndex
from nearmatch.lcs import (
    highlight_lcs,
    highlight_lcs_string,
    is_subsequence,
    lcs_indices,
    lcs_length,
    lcs_values,
)

# -----------------------------------------------------------------------------
# Polars Integration - Series API (polars_api)
# -----------------------------------------------------------------------------
from nearmatch.polars_api import batch_best_match, batch_similarity, batch_suggest
from nearmatch.ranking import ScoredCandidate, most_similar, rank_candidates
from nearmatch.similarity import (
    ALMOST_ONE,
    MAX_PERMUTATION_SAMPLES,
    Char,
    char_similarity,
    classify,
    is_comparable,
    numeric_similarity,
    sequence_similarity,
    similarity,
    string_similarity,
    type_similarity,
)
from nearmatch.threshold import adaptive_threshold, default_threshold

__version__ = _get_version("nearmatch")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "NearMatchError",
    "ValidationError",
    # Enums
    "ValueKind",
    "HintKind",
    # Edit distance
    "string_distance",
    "osa_distance",
    # Similarity
    "similarity",
    "classify",
    "is_comparable",
    "string_similarity",
    "char_similarity",
    "numeric_similarity",
    "type_similarity",
    "sequence_similarity",
    "Char",
    "ALMOST_ONE",
    "MAX_PERMUTATION_SAMPLES",
    # Declared types
    "ANY",
    "TypeTag",
    "TypeHierarchy",
    # Thresholds
    "adaptive_threshold",
    "default_threshold",
    # Ranking
    "most_similar",
    "rank_candidates",
    "ScoredCandidate",
    # Longest common subsequence
    "lcs_indices",
    "lcs_length",
    "lcs_values",
    "is_subsequence",
    "highlight_lcs",
    "highlight_lcs_string",
    # Hints
    "Hint",
    "HintContext",
    "did_you_mean",
    "suggest_keys",
    "suggest_attributes",
    "first_or_none",
    "indefinite_article",
    "join_alternatives",
    "pluralise",
    # Batch processing
    "batch",
    # Polars Integration
    "batch_similarity",
    "batch_best_match",
    "batch_suggest",
    # Index classes
    "SuggestionIndex",
]


# Convenience aliases
edit_distance = string_distance
mostsimilar = most_similar
