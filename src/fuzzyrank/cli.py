"""
Fuzzy Choice Lookup — Interactive CLI
=====================================
Thin wrapper around the fuzzyrank library.

Usage:
    fuzzyrank                  # interactive mode
    fuzzyrank "new york mets"  # single lookup
    fuzzyrank --dedupe         # print the choices with duplicates collapsed

Settings are read from environment variables:
    FUZZYRANK_CHOICES    Newline-delimited choices file (default: ./choices.txt)
    FUZZYRANK_SCORER     Scorer name for lookups (default: weighted_ratio);
                         --dedupe always scores with token_set_ratio
    FUZZYRANK_LIMIT      Maximum matches shown (default: 5)
    FUZZYRANK_CUTOFF     Minimum score shown (default: 0)
    FUZZYRANK_THRESHOLD  Duplicate threshold for --dedupe (default: 70)
    LOG_LEVEL            Logging level (default: WARNING)
"""

import logging
import os
import sys
from pathlib import Path

from fuzzyrank import dedupe, extract_bests
from fuzzyrank.exceptions import ChoicesFileNotFound, ConfigError, FuzzyRankError
from fuzzyrank.fuzz import SCORERS

_BANNER = """\
╔══════════════════════════════════════╗
║         Fuzzy Choice Lookup          ║
║   Query → Best Matching Choices      ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""


def load_settings(environ=None) -> dict:
    """
    Read CLI settings from *environ* (default: os.environ).

    Raises ConfigError for an unknown scorer or a non-integer number.
    """
    env = os.environ if environ is None else environ

    scorer_name = env.get("FUZZYRANK_SCORER", "weighted_ratio")
    if scorer_name not in SCORERS:
        raise ConfigError(
            "FUZZYRANK_SCORER", scorer_name,
            f"expected one of: {', '.join(sorted(SCORERS))}",
        )

    settings = {
        "choices": Path(
            env.get("FUZZYRANK_CHOICES", str(Path.cwd() / "choices.txt"))
        ),
        "scorer": SCORERS[scorer_name],
        "log_level": env.get("LOG_LEVEL", "WARNING").upper(),
    }
    for key, name, default in (
        ("limit", "FUZZYRANK_LIMIT", 5),
        ("cutoff", "FUZZYRANK_CUTOFF", 0),
        ("threshold", "FUZZYRANK_THRESHOLD", 70),
    ):
        raw = env.get(name)
        if raw is None:
            settings[key] = default
            continue
        try:
            settings[key] = int(raw)
        except ValueError:
            raise ConfigError(name, raw, "expected an integer") from None
    return settings


def load_choices(path: Path) -> list[str]:
    """Read one choice per line, skipping blank lines."""
    if not path.is_file():
        raise ChoicesFileNotFound(str(path))
    with path.open("r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def _print_matches(matches) -> None:
    width = max(len(str(m.choice)) for m in matches)
    for m in matches:
        print(f"  {m.score:>3}  {m.choice:<{width}}")


def _run_interactive(choices: list[str], settings: dict) -> None:
    print(_BANNER)
    print(f"Loaded {len(choices)} choices from {settings['choices']}")

    while True:
        try:
            query = input("\nQuery:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if query.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not query:
            print("  ✗ Query is required.")
            continue

        matches = extract_bests(
            query,
            choices,
            scorer=settings["scorer"],
            cutoff=settings["cutoff"],
            limit=settings["limit"],
        )
        if not matches:
            print(f"  ✗ Nothing scores at least {settings['cutoff']} for '{query}'")
            continue
        print(f"  ✓ {len(matches)} match(es)")
        _print_matches(matches)


def main(argv=None) -> None:
    """Entry point — supports single lookups, dedupe and interactive mode."""
    args = sys.argv[1:] if argv is None else argv

    try:
        settings = load_settings()
        logging.basicConfig(
            level=getattr(logging, settings["log_level"], logging.WARNING),
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )
        choices = load_choices(settings["choices"])
    except ChoicesFileNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(
            "Set FUZZYRANK_CHOICES, or run from the directory containing "
            "choices.txt.",
            file=sys.stderr,
        )
        sys.exit(2)
    except FuzzyRankError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    if args == ["--dedupe"]:
        for choice in dedupe(choices, threshold=settings["threshold"]):
            print(choice)
    elif len(args) == 1:
        matches = extract_bests(
            args[0],
            choices,
            scorer=settings["scorer"],
            cutoff=settings["cutoff"],
            limit=settings["limit"],
        )
        if not matches:
            print("No match found.", file=sys.stderr)
            sys.exit(1)
        _print_matches(matches)
    else:
        _run_interactive(choices, settings)


if __name__ == "__main__":
    main()
