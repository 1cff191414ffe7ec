"""Shared test fixtures — sample strings and a small choices file."""

from pathlib import Path

import pytest

S1 = "new york mets"
S1A = "new york mets"
S2 = "new YORK mets"
S3 = "the wonderful new york mets"
S4 = "new york mets vs atlanta braves"
S5 = "atlanta braves vs new york mets"
S6 = "new york mets - atlanta braves"
S7 = "new york city mets - atlanta braves"

BASEBALL_STRINGS = [
    "new york mets vs chicago cubs",
    "chicago cubs vs chicago white sox",
    "philladelphia phillies vs atlanta braves",
    "braves vs mets",
]

CIRQUE_STRINGS = [
    "cirque du soleil - zarkana - las vegas",
    "cirque du soleil ",
    "cirque du soleil las vegas",
    "zarkana las vegas",
    "las vegas cirque du soleil at the bellagio",
    "zarakana - cirque du soleil - bellagio",
]


@pytest.fixture()
def baseball_strings() -> list[str]:
    return list(BASEBALL_STRINGS)


@pytest.fixture()
def cirque_strings() -> list[str]:
    return list(CIRQUE_STRINGS)


@pytest.fixture()
def choices_file(tmp_path: Path) -> Path:
    """Write the baseball choices, with a blank line, to a file."""
    path = tmp_path / "choices.txt"
    path.write_text("\n".join(BASEBALL_STRINGS[:2] + [""] + BASEBALL_STRINGS[2:]) + "\n",
                    encoding="utf-8")
    return path


@pytest.fixture()
def cli_env(monkeypatch, choices_file: Path) -> Path:
    """Point the CLI at the test choices file with default settings."""
    for name in (
        "FUZZYRANK_SCORER",
        "FUZZYRANK_LIMIT",
        "FUZZYRANK_CUTOFF",
        "FUZZYRANK_THRESHOLD",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("FUZZYRANK_CHOICES", str(choices_file))
    return choices_file
