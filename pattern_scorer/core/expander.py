"""Expansion of composite choices into composite-free patterns."""

from __future__ import annotations

import itertools
import logging
import math

from pattern_scorer.config import settings
from pattern_scorer.errors import ExpansionLimitError
from pattern_scorer.models import Pattern, Slot, as_word, is_composite

logger = logging.getLogger(__name__)


def slot_alternatives(slot: Slot) -> list[tuple[Slot, ...]]:
    """Return the slot sequences that may stand in for *slot*.

    A plain slot stands for itself. A slot holding composite choices yields
    one sequence per composite (one single-word slot per word, in phrase
    order), followed by one slot gathering its single-word choices. That
    last alternative is dropped when the slot has no single-word choice.
    """
    composites = [choice for choice in slot if is_composite(choice)]
    if not composites:
        return [(slot,)]

    alternatives: list[tuple[Slot, ...]] = [
        tuple((word,) for word in composite) for composite in composites
    ]
    singles = tuple(as_word(choice) for choice in slot if not is_composite(choice))
    if singles:
        alternatives.append((singles,))
    return alternatives


def count_expansions(pattern: Pattern) -> int:
    """Return the number of concrete patterns *pattern* expands to."""
    return math.prod(len(slot_alternatives(slot)) for slot in pattern)


def expand_pattern(
    pattern: Pattern,
    *,
    max_expansions: int | None = None,
) -> list[tuple[Slot, ...]]:
    """Rewrite *pattern* into every composite-free pattern it stands for.

    Every combination of alternatives across complex slots is produced, each
    alternative placed where its slot was. A pattern without composite
    choices expands to itself.

    Raises:
        ExpansionLimitError: If the combination count exceeds *max_expansions*
            (``settings.max_expansions`` by default, 0 disables the bound).
    """
    if max_expansions is None:
        max_expansions = settings.max_expansions

    alternatives = [slot_alternatives(slot) for slot in pattern]
    count = math.prod(len(options) for options in alternatives)
    if max_expansions and count > max_expansions:
        logger.warning("Pattern expansion count %d exceeds limit %d", count, max_expansions)
        raise ExpansionLimitError(count, max_expansions)

    return [
        tuple(slot for part in combination for slot in part)
        for combination in itertools.product(*alternatives)
    ]
