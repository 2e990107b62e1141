"""Capability interfaces shared by normalized string metrics."""

from abc import ABC, abstractmethod


class NormalizedStringSimilarity(ABC):
    """A similarity measure bounded to [0, 1], 1.0 meaning identical."""

    @abstractmethod
    def similarity(self, s1: str, s2: str) -> float:
        ...


class NormalizedStringDistance(ABC):
    """A distance measure bounded to [0, 1], 0.0 meaning identical."""

    @abstractmethod
    def distance(self, s1: str, s2: str) -> float:
        ...
