"""Longest-matching-block sequence matcher."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Callable, Optional

from fuzzyrank.models import MatchingBlock, MatchResult

# Below this length of b the popularity purge is not applied
_AUTOJUNK_MIN_LENGTH = 200


class SequenceMatcher:
    """
    Compare two sequences of hashable symbols.

    The second sequence is indexed once on construction; matching blocks
    are computed lazily and kept for the lifetime of the instance.

    *isjunk* classifies symbols of b that the longest-match search should
    ignore. With *autojunk*, symbols making up more than 1% of a b of
    200 or more symbols are ignored too, which keeps long repetitive
    inputs from degrading towards quadratic time. Ignored symbols are
    still absorbed into a match when they border it.
    """

    def __init__(
        self,
        a: Sequence[Hashable],
        b: Sequence[Hashable],
        isjunk: Optional[Callable[[Hashable], bool]] = None,
        autojunk: bool = True,
    ):
        self.a = a
        self.b = b
        self.isjunk = isjunk
        self.autojunk = autojunk
        self._blocks: list[MatchingBlock] | None = None
        self._index_b()

    # ── Public API ────────────────────────────────────────────────

    def find_longest_match(
        self, alo: int, ahi: int, blo: int, bhi: int
    ) -> MatchingBlock:
        """
        Return the longest block with a[i:i+k] == b[j:j+k] inside
        a[alo:ahi] and b[blo:bhi].

        Among equally long blocks the one starting earliest in a wins,
        then the one starting earliest in b. Returns a block with
        size 0 at (alo, blo) when nothing matches.
        """
        a, b = self.a, self.b
        besti, bestj, bestsize = alo, blo, 0

        # run_ending_at[j] = length of the match ending at a[i-1], b[j]
        run_ending_at: dict[int, int] = {}
        for i in range(alo, ahi):
            current: dict[int, int] = {}
            for j in self._positions.get(a[i], ()):
                if j < blo:
                    continue
                if j >= bhi:
                    break
                k = current[j] = run_ending_at.get(j - 1, 0) + 1
                if k > bestsize:
                    besti, bestj, bestsize = i - k + 1, j - k + 1, k
            run_ending_at = current

        # Grow across popular symbols first, then across junk
        for absorb_junk in (False, True):
            while (
                besti > alo
                and bestj > blo
                and self._is_junk(b[bestj - 1]) == absorb_junk
                and a[besti - 1] == b[bestj - 1]
            ):
                besti, bestj, bestsize = besti - 1, bestj - 1, bestsize + 1
            while (
                besti + bestsize < ahi
                and bestj + bestsize < bhi
                and self._is_junk(b[bestj + bestsize]) == absorb_junk
                and a[besti + bestsize] == b[bestj + bestsize]
            ):
                bestsize += 1

        return MatchingBlock(besti, bestj, bestsize)

    def get_matching_blocks(self) -> list[MatchingBlock]:
        """
        Return the non-overlapping matching blocks, ordered by position.

        Ranges either side of each longest match are explored from an
        explicit worklist, so deeply fragmented inputs cannot exhaust
        the call stack. Adjacent blocks are merged.
        """
        if self._blocks is not None:
            return list(self._blocks)

        found: list[MatchingBlock] = []
        pending = [(0, len(self.a), 0, len(self.b))]
        while pending:
            alo, ahi, blo, bhi = pending.pop()
            block = self.find_longest_match(alo, ahi, blo, bhi)
            i, j, k = block
            if not k:
                continue
            found.append(block)
            if alo < i and blo < j:
                pending.append((alo, i, blo, j))
            if i + k < ahi and j + k < bhi:
                pending.append((i + k, ahi, j + k, bhi))

        found.sort()
        self._blocks = _merge_adjacent(found)
        return list(self._blocks)

    def ratio(self) -> float:
        """
        Similarity in [0.0, 1.0]: twice the matched symbols over the
        combined length. Two empty sequences are identical (1.0).
        """
        total = len(self.a) + len(self.b)
        if total == 0:
            return 1.0
        matches = sum(block.size for block in self.get_matching_blocks())
        return 2.0 * matches / total

    def result(self) -> MatchResult:
        """Bundle the matching blocks and ratio into a MatchResult."""
        return MatchResult(
            matching_blocks=self.get_matching_blocks(),
            ratio=self.ratio(),
        )

    # ── Private helpers ───────────────────────────────────────────

    def _index_b(self) -> None:
        """Map every usable symbol of b to its ascending positions."""
        positions: dict[Hashable, list[int]] = {}
        for j, symbol in enumerate(self.b):
            positions.setdefault(symbol, []).append(j)

        junk: set[Hashable] = set()
        if self.isjunk is not None:
            junk = {symbol for symbol in positions if self.isjunk(symbol)}
            for symbol in junk:
                del positions[symbol]

        n = len(self.b)
        if self.autojunk and n >= _AUTOJUNK_MIN_LENGTH:
            limit = n // 100 + 1
            popular = {
                symbol for symbol, idxs in positions.items() if len(idxs) > limit
            }
            for symbol in popular:
                del positions[symbol]

        self._positions = positions
        self._junk = junk

    def _is_junk(self, symbol: Hashable) -> bool:
        return symbol in self._junk


def _merge_adjacent(blocks: list[MatchingBlock]) -> list[MatchingBlock]:
    """Fuse blocks that continue one another in both sequences."""
    merged: list[MatchingBlock] = []
    for block in blocks:
        if merged:
            last = merged[-1]
            if last.a + last.size == block.a and last.b + last.size == block.b:
                merged[-1] = MatchingBlock(last.a, last.b, last.size + block.size)
                continue
        merged.append(block)
    return merged


def match(
    a: Sequence[Hashable],
    b: Sequence[Hashable],
    isjunk: Optional[Callable[[Hashable], bool]] = None,
    autojunk: bool = True,
) -> MatchResult:
    """
    Find the matching blocks between *a* and *b* and their ratio.

    Empty inputs never raise: two empty sequences give a ratio of 1.0,
    a single empty sequence gives 0.0 and no blocks.
    """
    return SequenceMatcher(a, b, isjunk=isjunk, autojunk=autojunk).result()
