"""Thresholds for separating good matches from the rest.

:func:`adaptive_threshold` looks for the point where a descending run of
similarity scores stops falling steeply, then backs off towards the top
until the scores on either side of the cut are far enough apart.
"""

import logging
import math
from collections.abc import Sized
from typing import Any, Iterable, List

logger = logging.getLogger(__name__)

__all__ = ["adaptive_threshold", "default_threshold"]


def _separation(upper: float, lower: float) -> float:
    """Return ``ratio / (1 + ratio)`` for ``ratio = upper / lower``.

    Written as ``upper / (upper + lower)`` so a zero ``lower`` gives 1.0
    instead of dividing by zero. Two zeros are taken as equal (0.5).
    """
    total = upper + lower
    if total == 0:
        return 0.5
    return upper / total


def adaptive_threshold(scores: Iterable[float], factor: float) -> float:
    """Adaptively determine a sensible threshold for ``scores``.

    The scores are sorted in descending order. The drop between each pair
    of neighbours is taken, and then how much each drop shrinks going to
    the next one. The cut is first placed after the score where that
    shrinkage is largest (the rightmost such place on ties), i.e. just
    before the scores flatten out after a steep fall.

    From there the cut walks back towards the top while the score above the
    cut and the score initially below it fail ``ratio / (1 + ratio) >= factor``.
    If the walk passes the top score, ``factor`` itself is the threshold.

    Args:
        scores: Similarity scores in any order.
        factor: Baseline threshold, also the bar for the ratio test.

    Returns:
        The score at the chosen cut, or ``factor`` when fewer than two
        scores are given or no cut passes the ratio test.

    Example:
        >>> adaptive_threshold([1.0, 0.9, 0.2, 0.15, 0.1], 0.5)
        0.9
    """
    ranked: List[float] = sorted(scores, reverse=True)
    if len(ranked) < 2:
        return factor

    drops = [ranked[i] - ranked[i + 1] for i in range(len(ranked) - 1)]
    shrinkage = [drops[i] - drops[i + 1] for i in range(len(drops) - 1)]
    if shrinkage:
        steepest = max(shrinkage)
        # Number of scores kept above the cut
        kept = max(i for i, value in enumerate(shrinkage) if value == steepest) + 1
    else:
        kept = 1

    threshold = ranked[kept - 1]
    below = ranked[min(kept, len(ranked) - 1)]
    while kept > 0:
        if _separation(ranked[kept - 1], below) >= factor:
            break
        kept -= 1
        threshold = ranked[kept - 1] if kept > 0 else factor

    logger.debug(
        "Adaptive threshold %.4f over %d scores (factor %.4f, keeping %d)",
        threshold, len(ranked), factor, kept,
    )
    return threshold


def default_threshold(ref: Any, candidates: Any) -> float:
    """Return the starting threshold for matching ``ref`` against ``candidates``.

    Text references get a bar that rises with their length, since a single
    edit matters less in a longer word: ``1 - ln(1 + 1 / (1 + len(ref) / 3))``.
    Anything else gets ``1 / (1 + len(candidates))``.

    Example:
        >>> round(default_threshold("foo", []), 4)
        0.5945
    """
    if isinstance(ref, str):
        return 1.0 - math.log1p(1.0 / (1.0 + len(ref) / 3))
    count = len(candidates) if isinstance(candidates, Sized) else 0
    return 1.0 / (1 + count)
