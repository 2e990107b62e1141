"""obershelp — Ratcliff/Obershelp string similarity and distance."""

from obershelp.exceptions import InvalidArgument, ObershelpError
from obershelp.interfaces import (
    NormalizedStringDistance,
    NormalizedStringSimilarity,
)
from obershelp.matcher import find_longest_common_substring, get_match_list
from obershelp.models import ComparisonResult, Match
from obershelp.scorer import RatcliffObershelp, compare, distance, similarity

__all__ = [
    "RatcliffObershelp",
    "similarity",
    "distance",
    "compare",
    "find_longest_common_substring",
    "get_match_list",
    "Match",
    "ComparisonResult",
    "NormalizedStringSimilarity",
    "NormalizedStringDistance",
    "ObershelpError",
    "InvalidArgument",
]
