"""fuzzyrank — Fuzzy string scoring, ranking and deduplication."""

from fuzzyrank.exceptions import (
    ChoicesFileNotFound,
    ConfigError,
    FuzzyRankError,
    InvalidChoices,
    SortKeyError,
)
from fuzzyrank.fuzz import (
    partial_ratio,
    partial_token_set_ratio,
    partial_token_sort_ratio,
    ratio,
    token_set_ratio,
    token_sort_ratio,
    weighted_ratio,
)
from fuzzyrank.matcher import SequenceMatcher, match
from fuzzyrank.models import MatchingBlock, MatchResult, ScoredMatch
from fuzzyrank.process import dedupe, extract, extract_bests, extract_one

__all__ = [
    "ratio",
    "partial_ratio",
    "token_sort_ratio",
    "partial_token_sort_ratio",
    "token_set_ratio",
    "partial_token_set_ratio",
    "weighted_ratio",
    "extract",
    "extract_bests",
    "extract_one",
    "dedupe",
    "match",
    "SequenceMatcher",
    "MatchingBlock",
    "MatchResult",
    "ScoredMatch",
    "FuzzyRankError",
    "InvalidChoices",
    "SortKeyError",
    "ConfigError",
    "ChoicesFileNotFound",
]
