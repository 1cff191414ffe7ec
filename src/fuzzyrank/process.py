"""Rank choices against a query and collapse near-duplicates."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from fuzzyrank import collection, fuzz, text
from fuzzyrank.models import ScoredMatch

logger = logging.getLogger(__name__)

Processor = Callable[[Any], Any]
Scorer = Callable[[Any, Any], int]

_DEFAULT_LIMIT = 5
_DEFAULT_DEDUPE_THRESHOLD = 70


def extract(
    query: str,
    choices: Iterable,
    processor: Optional[Processor] = None,
    scorer: Optional[Scorer] = None,
    limit: Optional[int] = _DEFAULT_LIMIT,
) -> list[ScoredMatch]:
    """
    Score every choice against *query* and return the best *limit*.

    *processor* (default: full_process) only shapes what the scorer
    sees; results always carry the original choice. *scorer* defaults
    to weighted_ratio. Results are ordered by score, highest first,
    keeping input order among equal scores. ``limit=None`` returns
    every choice. Raises InvalidChoices if *choices* is not a collection.
    """
    items = collection.coerce(choices)
    if not items:
        return []

    processor = processor or text.full_process
    scorer = scorer or fuzz.weighted_ratio

    scored = [
        ScoredMatch(choice, scorer(query, processor(choice)))
        for choice in items
    ]
    ranked = collection.multi_sort(scored, (_score_of, True))
    if limit is not None:
        ranked = ranked[:limit]

    logger.debug(
        "extract: query=%r choices=%d returned=%d", query, len(items), len(ranked)
    )
    return ranked


def extract_bests(
    query: str,
    choices: Iterable,
    processor: Optional[Processor] = None,
    scorer: Optional[Scorer] = None,
    cutoff: int = 0,
    limit: Optional[int] = _DEFAULT_LIMIT,
) -> list[ScoredMatch]:
    """Like extract, dropping matches that score below *cutoff*."""
    best_list = extract(query, choices, processor, scorer, limit)
    return [m for m in best_list if m.score >= cutoff]


def extract_one(
    query: str,
    choices: Iterable,
    processor: Optional[Processor] = None,
    scorer: Optional[Scorer] = None,
    cutoff: int = 0,
) -> Optional[ScoredMatch]:
    """
    Return the single best match, or None.

    None means either there were no choices or the best score did not
    strictly exceed *cutoff*.
    """
    best_list = extract(query, choices, processor, scorer, limit=1)
    if not best_list:
        return None
    best = best_list[0]
    return best if best.score > cutoff else None


def dedupe(
    items: Iterable,
    threshold: int = _DEFAULT_DEDUPE_THRESHOLD,
    scorer: Optional[Scorer] = None,
) -> list:
    """
    Collapse fuzzy duplicates in *items* to one representative each.

    Every item is matched against all items (itself included). Matches
    scoring above *threshold* form its group, and the group is
    represented by its longest member, then the highest score, then
    the alphabetically first (case-insensitive). When no group collapses
    anything the original items are returned unchanged.

    ``dedupe(["new york mets", "new york mets", "atlanta braves"], 90)``
    gives ``["new york mets", "atlanta braves"]``.
    """
    contains_dupes = collection.coerce(items)
    scorer = scorer or fuzz.token_set_ratio

    representatives = []
    for item in contains_dupes:
        matches = extract(item, contains_dupes, scorer=scorer, limit=None)
        filtered = [m for m in matches if m.score > threshold]

        # Nothing but the item itself (or, for an item that normalises to
        # nothing, not even that) clears the threshold
        if len(filtered) <= 1:
            representatives.append(item)
            continue

        ranked = collection.multi_sort(
            filtered,
            (lambda m: len(m.choice), True),
            (_score_of, True),
            (lambda m: str(m.choice).lower(), False),
        )
        representatives.append(ranked[0].choice)

    deduplicated = collection.unique(representatives)
    logger.debug(
        "dedupe: kept=%d from=%d (thr=%d)",
        len(deduplicated), len(contains_dupes), threshold,
    )
    if len(deduplicated) == len(contains_dupes):
        return contains_dupes
    return deduplicated


def _score_of(m: ScoredMatch) -> int:
    return m.score
