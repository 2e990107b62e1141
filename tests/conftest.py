"""Shared test fixtures."""

import pytest


@pytest.fixture()
def scorer():
    """A fresh RatcliffObershelp instance."""
    from obershelp import RatcliffObershelp

    return RatcliffObershelp()


@pytest.fixture()
def deep_chain() -> tuple[str, str]:
    """
    A pair whose decomposition nests one level per character, deeper
    than the default interpreter recursion limit.

    The first string is 1200 distinct characters; the second holds the
    same characters separated by '-', so every match is a single char
    and each one leaves the rest to the end fragment.
    """
    first = "".join(chr(0x4E00 + i) for i in range(1200))
    second = "-".join(first)
    return first, second
