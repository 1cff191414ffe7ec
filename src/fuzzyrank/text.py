"""Text normalisation, tokenisation and score rounding."""

import re
from decimal import ROUND_HALF_DOWN, Decimal

_NON_ALNUM_RE = re.compile(r"\W")
_NOISE_PLACES = Decimal("1e-10")


def ascii_only(raw: str) -> str:
    """Drop every character outside the 7-bit ASCII range."""
    return "".join(ch for ch in raw if ord(ch) < 128)


def full_process(raw: str, force_ascii: bool = True) -> str:
    """
    Normalise *raw* for scoring, e.g. 'New-York  Mets!' -> 'new york  mets'.

    Replaces non-alphanumeric characters with whitespace, lower-cases
    and trims. With *force_ascii* non-ASCII characters are removed first.
    """
    if not raw:
        return ""
    if force_ascii:
        raw = ascii_only(raw)
    return _NON_ALNUM_RE.sub(" ", raw).lower().strip()


normalise = full_process


def validate(raw: object) -> bool:
    """Return True if *raw* is a string with a positive length."""
    return isinstance(raw, str) and len(raw) > 0


def tokenize(processed: str) -> list[str]:
    """Split processed text on whitespace, never yielding empty tokens."""
    return processed.split()


def sorted_join(tokens) -> str:
    """Sort tokens and join them with single spaces."""
    return " ".join(sorted(tokens)).strip()


def intr(value: float) -> int:
    """
    Round to the nearest integer, ties rounding down (86.5 -> 86).

    The value is first rounded to ten decimal places so float noise such
    as 100 * (22 / 80) == 27.500000000000004 still counts as a tie.
    """
    cleaned = Decimal(value).quantize(_NOISE_PLACES)
    return int(cleaned.quantize(Decimal(1), rounding=ROUND_HALF_DOWN))
