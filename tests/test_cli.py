"""Tests for fuzzyrank.cli module."""

from pathlib import Path

import pytest

from fuzzyrank import fuzz
from fuzzyrank.cli import load_choices, load_settings, main
from fuzzyrank.exceptions import ChoicesFileNotFound, ConfigError


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings({})
        assert settings["scorer"] is fuzz.weighted_ratio
        assert settings["limit"] == 5
        assert settings["cutoff"] == 0
        assert settings["threshold"] == 70
        assert settings["log_level"] == "WARNING"
        assert settings["choices"].name == "choices.txt"

    def test_overrides(self):
        settings = load_settings(
            {
                "FUZZYRANK_SCORER": "token_set_ratio",
                "FUZZYRANK_LIMIT": "2",
                "FUZZYRANK_CUTOFF": "50",
                "FUZZYRANK_CHOICES": "/tmp/teams.txt",
                "LOG_LEVEL": "debug",
            }
        )
        assert settings["scorer"] is fuzz.token_set_ratio
        assert settings["limit"] == 2
        assert settings["cutoff"] == 50
        assert settings["choices"] == Path("/tmp/teams.txt")
        assert settings["log_level"] == "DEBUG"

    def test_unknown_scorer(self):
        with pytest.raises(ConfigError) as ctx:
            load_settings({"FUZZYRANK_SCORER": "levenshtein"})
        assert ctx.value.name == "FUZZYRANK_SCORER"

    def test_bad_number(self):
        with pytest.raises(ConfigError) as ctx:
            load_settings({"FUZZYRANK_LIMIT": "five"})
        assert ctx.value.value == "five"


class TestLoadChoices:
    def test_skips_blank_lines(self, choices_file: Path):
        choices = load_choices(choices_file)
        assert len(choices) == 4
        assert "" not in choices

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ChoicesFileNotFound) as ctx:
            load_choices(tmp_path / "nope.txt")
        assert ctx.value.path.endswith("nope.txt")


class TestMain:
    def test_single_lookup(self, cli_env, capsys):
        main(["new york"])
        out = capsys.readouterr().out
        assert out.splitlines()[0].split() == [
            "90", "new", "york", "mets", "vs", "chicago", "cubs",
        ]

    def test_no_match_exits_1(self, cli_env, monkeypatch, capsys):
        monkeypatch.setenv("FUZZYRANK_CUTOFF", "101")
        with pytest.raises(SystemExit) as ctx:
            main(["new york"])
        assert ctx.value.code == 1
        assert "No match found." in capsys.readouterr().err

    def test_dedupe(self, cli_env, capsys):
        cli_env.write_text(
            "new york mets\nnew york mets\natlanta braves\n", encoding="utf-8"
        )
        main(["--dedupe"])
        assert capsys.readouterr().out.splitlines() == [
            "new york mets",
            "atlanta braves",
        ]

    def test_dedupe_ignores_scorer_setting(self, cli_env, monkeypatch, capsys):
        # ratio scores these 62, token_set_ratio 100
        monkeypatch.setenv("FUZZYRANK_SCORER", "ratio")
        cli_env.write_text("new york mets\nmets new york\n", encoding="utf-8")
        main(["--dedupe"])
        assert capsys.readouterr().out.splitlines() == ["mets new york"]

    def test_missing_choices_exits_2(self, cli_env, monkeypatch, tmp_path, capsys):
        monkeypatch.setenv("FUZZYRANK_CHOICES", str(tmp_path / "missing.txt"))
        with pytest.raises(SystemExit) as ctx:
            main(["new york"])
        assert ctx.value.code == 2
        assert "Choices file not found" in capsys.readouterr().err

    def test_bad_config_exits_2(self, cli_env, monkeypatch):
        monkeypatch.setenv("FUZZYRANK_SCORER", "nope")
        with pytest.raises(SystemExit) as ctx:
            main(["new york"])
        assert ctx.value.code == 2

    def test_interactive_quits(self, cli_env, monkeypatch, capsys):
        answers = iter(["new york", "", "q"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        main([])
        out = capsys.readouterr().out
        assert "new york mets vs chicago cubs" in out
        assert "Query is required" in out
        assert out.rstrip().endswith("Bye!")
