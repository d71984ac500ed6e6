"""Pattern types, match records and raw pattern validation."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Annotated, Any, TypeAlias

from pydantic import Field, TypeAdapter, ValidationError

from pattern_scorer.errors import InvalidPatternError

Word: TypeAlias = str
# A plain word, or an ordered phrase that must match contiguous string words.
Choice: TypeAlias = Word | Sequence[Word]
Slot: TypeAlias = Sequence[Choice]
Pattern: TypeAlias = Sequence[Slot]
CompareWords: TypeAlias = Callable[[Word, Word], float]

NonEmptyWord = Annotated[str, Field(min_length=1)]
RawChoice = NonEmptyWord | Annotated[list[NonEmptyWord], Field(min_length=1)]

_pattern_adapter: TypeAdapter[list[list[RawChoice]]] = TypeAdapter(list[list[RawChoice]])


@dataclass(frozen=True, slots=True)
class Match:
    """Alignment of one pattern slot to a string position."""

    pattern_index: int
    string_index: int = -1  # -1 = unmatched
    score: float = 0.0

    @property
    def matched(self) -> bool:
        return self.string_index >= 0


def is_composite(choice: Choice) -> bool:
    """Return True for a choice made of two or more words."""
    return not isinstance(choice, str) and len(choice) > 1


def as_word(choice: Choice) -> Word:
    """Return the single word carried by a non-composite choice."""
    if isinstance(choice, str):
        return choice
    if len(choice) != 1:
        raise InvalidPatternError(
            f"Expected a single word, got {list(choice)!r}; expand composite choices first"
        )
    return choice[0]


def parse_pattern(raw: Any) -> tuple[tuple[Choice, ...], ...]:
    """Validate JSON-like pattern data and normalize it.

    A pattern is a list of slots, each slot a list of choices. A choice is a
    word or a list of words. One-word lists become plain words and
    composites become tuples.

    Raises:
        InvalidPatternError: If *raw* is not a valid pattern.
    """
    try:
        slots = _pattern_adapter.validate_python(raw)
    except ValidationError as exc:
        raise InvalidPatternError(f"Invalid pattern: {exc.error_count()} error(s)") from exc

    return tuple(
        tuple(tuple(choice) if is_composite(choice) else as_word(choice) for choice in slot)
        for slot in slots
    )
