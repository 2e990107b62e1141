"""Ratcliff/Obershelp similarity and distance scoring."""

from __future__ import annotations

import logging

from obershelp.exceptions import InvalidArgument
from obershelp.interfaces import (
    NormalizedStringDistance,
    NormalizedStringSimilarity,
)
from obershelp.matcher import get_match_list
from obershelp.models import ComparisonResult, Match

logger = logging.getLogger(__name__)


class RatcliffObershelp(NormalizedStringSimilarity, NormalizedStringDistance):
    """
    Ratcliff/Obershelp pattern recognition.

    Similarity is twice the number of matching characters divided by the
    total number of characters in both strings. Matching characters are
    those in the longest common substring plus, recursively, those in the
    unmatched regions on either side of it. Distance is 1 - similarity.

    The score is not symmetric: ties between equally long substrings are
    resolved by position in the first argument, so swapping the arguments
    can change the result.

    Instances hold no state and may be shared between threads.
    """

    def similarity(self, s1: str, s2: str) -> float:
        """
        Return the Ratcliff/Obershelp similarity in the range [0, 1].

        Raises InvalidArgument if *s1* or *s2* is None.
        """
        _require_inputs(s1, s2)
        if s1 == s2:
            logger.debug("Identical inputs, skipping match search")
            return 1.0
        return _ratio(get_match_list(s1, s2), s1, s2)

    def distance(self, s1: str, s2: str) -> float:
        """Return 1 - similarity."""
        return 1.0 - self.similarity(s1, s2)

    def compare(self, s1: str, s2: str) -> ComparisonResult:
        """
        Score two strings and keep the matches that produced the score.

        Raises InvalidArgument if *s1* or *s2* is None.
        """
        _require_inputs(s1, s2)
        if s1 == s2:
            matches = []
            if s1:
                matches.append(Match(text=s1, source_start=0, target_start=0))
            score = 1.0
        else:
            matches = get_match_list(s1, s2)
            score = _ratio(matches, s1, s2)
        return ComparisonResult(
            similarity=score,
            distance=1.0 - score,
            matches=tuple(matches),
        )


def _require_inputs(s1: str, s2: str) -> None:
    if s1 is None:
        raise InvalidArgument("s1")
    if s2 is None:
        raise InvalidArgument("s2")


def _ratio(matches: list[Match], s1: str, s2: str) -> float:
    # s1 != s2 here, so at least one is non-empty
    total = sum(len(m) for m in matches)
    score = 2.0 * total / (len(s1) + len(s2))
    logger.debug(
        "%d matched chars across %d blocks, similarity %.3f",
        total, len(matches), score,
    )
    return score


_default = RatcliffObershelp()


def similarity(s1: str, s2: str) -> float:
    """Ratcliff/Obershelp similarity of *s1* and *s2* (0.0-1.0)."""
    return _default.similarity(s1, s2)


def distance(s1: str, s2: str) -> float:
    """Ratcliff/Obershelp distance of *s1* and *s2* (0.0-1.0)."""
    return _default.distance(s1, s2)


def compare(s1: str, s2: str) -> ComparisonResult:
    """Similarity, distance and matches of *s1* and *s2* in one result."""
    return _default.compare(s1, s2)
