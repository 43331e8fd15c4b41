"""Helpers for building "did you mean" hints on top of :func:`most_similar`.

These are the small pieces an error-reporting layer needs around the
matching engine: close keys for a failed lookup, close attribute names,
phrasing of the suggestion, and a :class:`HintContext` remembering which
hints a session has already shown.

Example:
    >>> from nearmatch import HintContext, did_you_mean
    >>> context = HintContext()
    >>> did_you_mean("lenght", ["length", "width"], context=context).message
    "Did you mean 'length'?"
    >>> did_you_mean("lenght", ["length", "width"], context=context) is None
    True
"""

import logging
from collections.abc import Iterable, Mapping, Sized
from dataclasses import dataclass, field
from typing import Any, Hashable, List, Optional, Set, TypeVar, Union

from nearmatch.enums import HintKind
from nearmatch.ranking import most_similar

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "Hint",
    "HintContext",
    "did_you_mean",
    "first_or_none",
    "indefinite_article",
    "join_alternatives",
    "pluralise",
    "suggest_attributes",
    "suggest_keys",
]

SUGGESTION_LIMIT = 12
"""Most suggestions offered for a single failed lookup."""


@dataclass(frozen=True)
class Hint:
    """A message for the user, tagged with its kind."""

    kind: HintKind
    message: str


@dataclass
class HintContext:
    """Tracks which hints have been shown during a session.

    Pass one context to every call that may produce the same hint to show
    it only once.
    """

    shown: Set[Hashable] = field(default_factory=set)

    def first_time(self, key: Hashable) -> bool:
        """Return True the first time ``key`` is seen, recording it."""
        if key in self.shown:
            return False
        self.shown.add(key)
        return True

    def reset(self) -> None:
        self.shown.clear()


def first_or_none(items: Iterable[T]) -> Optional[T]:
    """Return the first element of ``items``, or None if it is empty."""
    return next(iter(items), None)


def indefinite_article(noun: Any) -> str:
    """Return ``"an"`` for nouns starting with a vowel, else ``"a"``."""
    noun = str(noun)
    if noun and noun[0].lower() in "aeiou":
        return "an"
    return "a"


def pluralise(things: Union[int, Sized], singular: str, plural: Optional[str] = None) -> str:
    """Pick ``singular`` or ``plural`` for a count or a sized collection.

    ``plural`` defaults to ``singular + "s"``.
    """
    count = things if isinstance(things, int) else len(things)
    if count == 1:
        return singular
    return plural if plural is not None else singular + "s"


def join_alternatives(items: Iterable[Any], conjunction: str = "or", quote: str = "'") -> str:
    """Join items as prose: ``'a'``, ``'a' or 'b'``, ``'a', 'b', or 'c'``."""
    quoted = [f"{quote}{item}{quote}" for item in items]
    if len(quoted) <= 1:
        return "".join(quoted)
    if len(quoted) == 2:
        return f"{quoted[0]} {conjunction} {quoted[1]}"
    return f"{', '.join(quoted[:-1])}, {conjunction} {quoted[-1]}"


def suggest_keys(key: Any, mapping: Mapping, limit: int = SUGGESTION_LIMIT) -> List[Any]:
    """Return the keys of ``mapping`` most similar to a missing ``key``."""
    return most_similar(key, list(mapping.keys()), limit=limit)


def suggest_attributes(name: str, obj: Any, limit: int = SUGGESTION_LIMIT) -> List[str]:
    """Return public attribute names of ``obj`` most similar to ``name``.

    When nothing clears the usual bar, a second, much lower threshold (0.1)
    is tried so a short list of distant candidates is still offered.
    """
    names = [attr for attr in dir(obj) if not attr.startswith("_")]
    matches = most_similar(name, names, limit=limit)
    if not matches:
        matches = most_similar(name, names, threshold=0.1, limit=limit)
    return matches


def did_you_mean(
    ref: Any,
    candidates: Iterable[Any],
    context: Optional[HintContext] = None,
    limit: int = SUGGESTION_LIMIT,
) -> Optional[Hint]:
    """Build a suggestion hint naming the candidates closest to ``ref``.

    Returns None when nothing is similar enough, or when ``context`` has
    already shown the same suggestion.
    """
    matches = most_similar(ref, candidates, limit=limit)
    if not matches:
        return None
    if context is not None and not context.first_time((repr(ref), tuple(map(repr, matches)))):
        logger.debug("Suggestion for %r already shown", ref)
        return None
    if len(matches) == 1:
        message = f"Did you mean {join_alternatives(matches)}?"
    else:
        message = f"Did you mean one of {join_alternatives(matches)}?"
    return Hint(HintKind.SUGGESTION, message)
