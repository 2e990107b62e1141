"""Longest-common-substring search and recursive match decomposition."""

from __future__ import annotations

import logging

from obershelp.models import Match

logger = logging.getLogger(__name__)


def _longest_match(
    a: str, a_lo: int, a_hi: int, b: str, b_lo: int, b_hi: int
) -> tuple[int, int]:
    """
    Return (start, length) of the longest run of a[a_lo:a_hi] that also
    occurs somewhere in b[b_lo:b_hi]. Length 0 means nothing is shared.

    Start positions are scanned left to right and a candidate only
    replaces the current best when it is strictly longer, so among
    equal-length runs the one starting earliest in *a* wins.

    For a fixed start, if a run of some length is absent from *b* then
    every longer run is absent too. Each start therefore only probes
    lengths above the current best and stops at the first miss.
    """
    best_start, best_len = a_lo, 0
    for i in range(a_lo, a_hi):
        if a_hi - i <= best_len:
            break
        length = best_len + 1
        while (
            i + length <= a_hi
            and b.find(a[i:i + length], b_lo, b_hi) != -1
        ):
            best_start, best_len = i, length
            length += 1
    return best_start, best_len


def find_longest_common_substring(a: str, b: str) -> str:
    """
    Longest substring of *a* that also appears in *b*.

    Ties are broken by the smallest start index in *a*. Returns an empty
    string when the two share no character (or either is empty).
    """
    start, length = _longest_match(a, 0, len(a), b, 0, len(b))
    return a[start:start + length]


def get_match_list(a: str, b: str) -> list[Match]:
    """
    Decompose *a* and *b* into the Ratcliff/Obershelp list of matches.

    The longest common substring is taken first, then the fragments in
    front of it and after it (in both strings) are matched the same way.
    The result is ordered match, front matches, end matches.

    Fragments are tracked as index ranges on a work stack rather than by
    recursion, so very long inputs cannot exhaust the call stack.
    """
    matches: list[Match] = []
    pending = [(0, len(a), 0, len(b))]

    while pending:
        a_lo, a_hi, b_lo, b_hi = pending.pop()
        start, length = _longest_match(a, a_lo, a_hi, b, b_lo, b_hi)
        if length == 0:
            continue

        text = a[start:start + length]
        a_at = a.find(text, a_lo, a_hi)
        b_at = b.find(text, b_lo, b_hi)
        matches.append(
            Match(text=text, source_start=a_at, target_start=b_at)
        )

        # LIFO: the front pair must be popped before the end pair
        pending.append((a_at + length, a_hi, b_at + length, b_hi))
        pending.append((a_lo, a_at, b_lo, b_at))

    logger.debug(
        "Split %d/%d chars into %d matches", len(a), len(b), len(matches)
    )
    return matches
