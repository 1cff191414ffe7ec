"""Ordered-container helpers used by the scorers and the pipeline."""

from collections.abc import Iterable, Mapping
from typing import Any, Callable

from fuzzyrank.exceptions import InvalidChoices, SortKeyError

SortKey = tuple[Callable[[Any], Any], bool]


def coerce(value: Any) -> list:
    """
    Materialise *value* into a new list.

    Any finite iterable is accepted; mappings contribute their values.
    Raises InvalidChoices for strings, bytes and anything not iterable,
    since iterating those would silently score single characters.
    """
    if isinstance(value, (str, bytes, bytearray)):
        raise InvalidChoices(value)
    if isinstance(value, Mapping):
        return list(value.values())
    if not isinstance(value, Iterable):
        raise InvalidChoices(value)
    return list(value)


def unique(items: Iterable) -> list:
    """Drop repeated elements, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))


def intersection(left: Iterable, right: Iterable) -> list:
    """Distinct elements of *left* that also occur in *right*, in order."""
    right_set = set(right)
    return [item for item in unique(left) if item in right_set]


def difference(left: Iterable, right: Iterable) -> list:
    """Distinct elements of *left* that do not occur in *right*, in order."""
    right_set = set(right)
    return [item for item in unique(left) if item not in right_set]


def multi_sort(items: Iterable, *keys: SortKey) -> list:
    """
    Stable sort on several keys, the first key being the most significant.

    Each key is a ``(key_func, descending)`` pair, e.g.::

        multi_sort(matches, (lambda m: m.score, True), (str, False))

    Raises SortKeyError when no keys are given.
    """
    if not keys:
        raise SortKeyError()
    result = list(items)
    # Least significant key first; each pass keeps the previous order on ties
    for key_func, descending in reversed(keys):
        result.sort(key=key_func, reverse=descending)
    return result
