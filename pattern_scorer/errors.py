"""Exceptions raised by the pattern scorer."""


class PatternScorerError(Exception):
    """Base exception for pattern scoring errors."""


class InvalidPatternError(PatternScorerError):
    """Raw pattern data does not describe a valid pattern."""


class ExpansionLimitError(PatternScorerError):
    """Composite expansion would produce too many concrete patterns."""

    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(f"Pattern expands to {count} concrete patterns (limit {limit})")
