"""Tests for obershelp.matcher module."""

import sys

import pytest

from obershelp.matcher import find_longest_common_substring, get_match_list
from obershelp.models import Match


class TestFindLongestCommonSubstring:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("hello", "world", "l"),
            ("abcdef", "zzcdezz", "cde"),
            ("xabcy", "abc", "abc"),
            ("abc", "abc", "abc"),
        ],
    )
    def test_longest_run(self, a: str, b: str, expected: str):
        assert find_longest_common_substring(a, b) == expected

    @pytest.mark.parametrize(
        ("a", "b"),
        [("abc", "xyz"), ("", "abc"), ("abc", ""), ("", "")],
    )
    def test_nothing_shared(self, a: str, b: str):
        assert find_longest_common_substring(a, b) == ""

    def test_tie_prefers_earliest_start_in_first(self):
        # "ab" and "cd" are both length 2; "ab" starts first in a
        assert find_longest_common_substring("abxcd", "cdab") == "ab"

    def test_tie_depends_on_argument_order(self):
        assert find_longest_common_substring("cdxab", "abcd") == "cd"

    def test_later_longer_match_overrides(self):
        assert find_longest_common_substring("ab-wxyz", "wxyz-ab") == "wxyz"

    def test_exact_character_equality(self):
        assert find_longest_common_substring("ABC", "abc") == ""


class TestGetMatchList:
    def test_empty_when_disjoint(self):
        assert get_match_list("abc", "xyz") == []

    def test_empty_inputs(self):
        assert get_match_list("", "") == []
        assert get_match_list("abc", "") == []

    def test_single_match(self):
        assert get_match_list("hello", "world") == [Match("l", 2, 3)]

    def test_order_is_match_front_end(self):
        matches = get_match_list("12abc34", "1abc4")
        assert [m.text for m in matches] == ["abc", "1", "4"]

    def test_offsets_refer_to_original_inputs(self):
        matches = get_match_list("12abc34", "1abc4")
        assert matches == [
            Match("abc", 2, 1),
            Match("1", 0, 0),
            Match("4", 6, 4),
        ]

    def test_front_subtree_precedes_end_subtree(self):
        # front fragments "a1b" / "a2b" yield "a" then "b" before the end "z"
        matches = get_match_list("a1b-XYZ-z", "a2b+XYZ+z")
        assert [m.text for m in matches] == ["XYZ", "a", "b", "z"]

    def test_leftmost_occurrence_used_for_split(self):
        # "ab" occurs twice in b; the first occurrence anchors the split
        matches = get_match_list("ab", "xabyab")
        assert matches == [Match("ab", 0, 1)]

    def test_total_never_exceeds_shorter_input(self):
        a, b = "the quick brown fox", "quick brown the fox"
        total = sum(len(m) for m in get_match_list(a, b))
        assert total <= min(len(a), len(b))

    def test_deep_chain_does_not_recurse(self, deep_chain):
        first, second = deep_chain
        assert len(first) > sys.getrecursionlimit()
        matches = get_match_list(first, second)
        assert [m.text for m in matches] == list(first)
        assert matches[-1] == Match(first[-1], len(first) - 1, len(second) - 1)
