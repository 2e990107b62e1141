"""Typed result models for obershelp."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Match:
    """A common substring found by the recursive matcher."""

    text: str
    source_start: int        # offset in the first input
    target_start: int        # offset in the second input

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class ComparisonResult:
    """Complete result of comparing two strings."""

    similarity: float        # 0.0-1.0, 1.0 means identical
    distance: float          # 1 - similarity
    matches: tuple[Match, ...] = field(default_factory=tuple)

    @property
    def matched_characters(self) -> int:
        return sum(len(m) for m in self.matches)

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "similarity": round(self.similarity, 3),
            "distance": round(self.distance, 3),
            "matched_characters": self.matched_characters,
            "matches": [m.text for m in self.matches],
        }
