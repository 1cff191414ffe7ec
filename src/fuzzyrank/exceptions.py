"""Custom exception hierarchy for fuzzyrank."""


class FuzzyRankError(Exception):
    """Base exception for all fuzzyrank errors."""


class InvalidChoices(FuzzyRankError, TypeError):
    """A collection argument is not an iterable of choices."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Expected an iterable of choices, got {type(value).__name__}"
        )


class SortKeyError(FuzzyRankError, ValueError):
    """multi_sort was called without any sort keys."""

    def __init__(self):
        super().__init__("multi_sort requires at least one sort key")


class ConfigError(FuzzyRankError):
    """An environment setting has a value that cannot be used."""

    def __init__(self, name: str, value: str, detail: str = ""):
        self.name = name
        self.value = value
        message = f"Invalid value for {name}: '{value}'"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ChoicesFileNotFound(FuzzyRankError):
    """The choices file given to the command line does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Choices file not found at: {path}")
