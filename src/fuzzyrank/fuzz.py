"""
Scoring strategies built on the sequence matcher.

Every scorer takes two strings and returns an integer score from 0 to
100. ``ratio`` and ``partial_ratio`` compare the raw strings and are
case sensitive; the token scorers and ``weighted_ratio`` normalise
their inputs first (see :func:`fuzzyrank.text.full_process`).
"""

from fuzzyrank import collection, text
from fuzzyrank.matcher import SequenceMatcher

# A window scoring above this is treated as an exact containment
_PARTIAL_EXACT = 0.995

_UNBASE_SCALE = 0.95
_PARTIAL_SCALE = 0.9
_FAR_PARTIAL_SCALE = 0.6
# Length ratios gating the partial scorers in weighted_ratio
_TRY_PARTIAL_LENGTH_RATIO = 1.5
_FAR_LENGTH_RATIO = 8


def ratio(s1: str, s2: str) -> int:
    """Plain similarity of *s1* and *s2*; 0 when either is empty."""
    if not s1 or not s2:
        return 0
    return text.intr(100 * SequenceMatcher(s1, s2).ratio())


def partial_ratio(s1: str, s2: str) -> int:
    """
    Score how well the shorter string fits somewhere inside the longer.

    Each matching block proposes an alignment of the shorter string
    against a same-length window of the longer one; the best window
    wins. 'new york mets' vs 'the wonderful new york mets' -> 100.
    """
    if not s1 or not s2:
        return 0

    if len(s1) <= len(s2):
        shorter, longer = s1, s2
    else:
        shorter, longer = s2, s1

    blocks = SequenceMatcher(shorter, longer).get_matching_blocks()
    scores = []
    for block in blocks:
        start = max(block.b - block.a, 0)
        window = longer[start:start + len(shorter)]
        window_ratio = SequenceMatcher(shorter, window).ratio()
        if window_ratio > _PARTIAL_EXACT:
            return 100
        scores.append(window_ratio)

    if not scores:
        return 0
    return text.intr(100 * max(scores))


def _process_and_sort(raw: str, force_ascii: bool) -> str:
    return text.sorted_join(text.tokenize(text.full_process(raw, force_ascii)))


def _token_sort(s1: str, s2: str, partial: bool, force_ascii: bool) -> int:
    sorted1 = _process_and_sort(s1, force_ascii)
    sorted2 = _process_and_sort(s2, force_ascii)
    if partial:
        return partial_ratio(sorted1, sorted2)
    return ratio(sorted1, sorted2)


def _token_set(s1: str, s2: str, partial: bool, force_ascii: bool) -> int:
    """
    Compare the shared tokens against each side's full token set.

    Builds '<sorted intersection>' and '<sorted intersection> <sorted
    remainder>' for each side and returns the best pairwise score, so
    word order and repeated words do not matter.
    """
    p1 = text.full_process(s1, force_ascii)
    p2 = text.full_process(s2, force_ascii)
    if not text.validate(p1) or not text.validate(p2):
        return 0

    tokens1 = text.tokenize(p1)
    tokens2 = text.tokenize(p2)

    sorted_sect = text.sorted_join(collection.intersection(tokens1, tokens2))
    sorted_1to2 = text.sorted_join(collection.difference(tokens1, tokens2))
    sorted_2to1 = text.sorted_join(collection.difference(tokens2, tokens1))

    combined_1to2 = f"{sorted_sect} {sorted_1to2}".strip()
    combined_2to1 = f"{sorted_sect} {sorted_2to1}".strip()

    scorer = partial_ratio if partial else ratio
    return max(
        scorer(sorted_sect, combined_1to2),
        scorer(sorted_sect, combined_2to1),
        scorer(combined_1to2, combined_2to1),
    )


def token_sort_ratio(s1: str, s2: str, force_ascii: bool = True) -> int:
    """ratio of the alphabetically sorted tokens; ignores word order."""
    return _token_sort(s1, s2, partial=False, force_ascii=force_ascii)


def partial_token_sort_ratio(s1: str, s2: str, force_ascii: bool = True) -> int:
    """partial_ratio of the alphabetically sorted tokens."""
    return _token_sort(s1, s2, partial=True, force_ascii=force_ascii)


def token_set_ratio(s1: str, s2: str, force_ascii: bool = True) -> int:
    """Token-set comparison scored with ratio."""
    return _token_set(s1, s2, partial=False, force_ascii=force_ascii)


def partial_token_set_ratio(s1: str, s2: str, force_ascii: bool = True) -> int:
    """Token-set comparison scored with partial_ratio."""
    return _token_set(s1, s2, partial=True, force_ascii=force_ascii)


def weighted_ratio(s1: str, s2: str, force_ascii: bool = True) -> int:
    """
    Blend the other scorers into a single score.

    Strings of similar length (length ratio below 1.5) are scored with
    ratio and the token scorers. Otherwise the partial scorers are
    consulted too, scaled by 0.9, or by 0.6 when one string is more than
    eight times longer than the other. Token scores are further scaled
    by 0.95. The best candidate is truncated to an integer.
    """
    p1 = text.full_process(s1, force_ascii)
    p2 = text.full_process(s2, force_ascii)
    if not text.validate(p1) or not text.validate(p2):
        return 0

    base = ratio(p1, p2)
    length_ratio = max(len(p1), len(p2)) / min(len(p1), len(p2))

    if length_ratio < _TRY_PARTIAL_LENGTH_RATIO:
        tsor = token_sort_ratio(p1, p2, force_ascii) * _UNBASE_SCALE
        tser = token_set_ratio(p1, p2, force_ascii) * _UNBASE_SCALE
        return int(max(base, tsor, tser))

    if length_ratio > _FAR_LENGTH_RATIO:
        partial_scale = _FAR_PARTIAL_SCALE
    else:
        partial_scale = _PARTIAL_SCALE

    partial = partial_ratio(p1, p2) * partial_scale
    ptsor = (
        partial_token_sort_ratio(p1, p2, force_ascii)
        * _UNBASE_SCALE
        * partial_scale
    )
    ptser = (
        partial_token_set_ratio(p1, p2, force_ascii)
        * _UNBASE_SCALE
        * partial_scale
    )
    return int(max(base, partial, ptsor, ptser))


SCORERS = {
    "ratio": ratio,
    "partial_ratio": partial_ratio,
    "token_sort_ratio": token_sort_ratio,
    "partial_token_sort_ratio": partial_token_sort_ratio,
    "token_set_ratio": token_set_ratio,
    "partial_token_set_ratio": partial_token_set_ratio,
    "weighted_ratio": weighted_ratio,
}
