"""Typed result models for fuzzyrank."""

from dataclasses import dataclass
from typing import Any, NamedTuple


class MatchingBlock(NamedTuple):
    """A maximal run of identical symbols: a[a:a+size] == b[b:b+size]."""

    a: int
    b: int
    size: int


class ScoredMatch(NamedTuple):
    """An original, unprocessed choice and the score it received."""

    choice: Any
    score: int


@dataclass(frozen=True)
class MatchResult:
    """Complete result of matching one sequence against another."""

    matching_blocks: list[MatchingBlock]
    ratio: float             # 0.0-1.0

    @property
    def matches(self) -> int:
        """Total number of symbols covered by the matching blocks."""
        return sum(block.size for block in self.matching_blocks)

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "matching_blocks": [list(block) for block in self.matching_blocks],
            "matches": self.matches,
            "ratio": round(self.ratio, 3),
        }
