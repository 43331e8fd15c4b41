"""Enums for nearmatch API."""

from enum import Enum


class ValueKind(str, Enum):
    """Kinds of values understood by :func:`nearmatch.similarity`.

    The scorer dispatches on the pair of kinds of its two arguments. String
    values are accepted wherever a kind is expected.

    Example:
        >>> from nearmatch import ValueKind, classify
        >>> classify("hello")
        <ValueKind.TEXT: 'text'>
    """

    TEXT = "text"
    """Strings, compared by case-aware edit distance"""

    CHAR = "char"
    """Single characters wrapped in :class:`nearmatch.Char`"""

    INTEGER = "integer"
    """Integral numbers (``int``, ``bool``, ``numbers.Integral``)"""

    REAL = "real"
    """Non-integral real numbers (``float``, ``Fraction``)"""

    NOMINAL_TYPE = "nominal_type"
    """Declared type tags from a :class:`nearmatch.TypeHierarchy`"""

    ORDERED_SEQUENCE = "ordered_sequence"
    """Lists, tuples and other non-string sequences"""

    OTHER = "other"
    """Anything else; always scores 0.0"""


class HintKind(str, Enum):
    """Kinds of caller-facing hints built by :mod:`nearmatch.hints`."""

    SUGGESTION = "suggestion"
    """A likely intended value, e.g. a correctly spelt key"""

    TIP = "tip"
    """Extra context that may help, e.g. where a name is defined"""


__all__ = ["ValueKind", "HintKind"]
