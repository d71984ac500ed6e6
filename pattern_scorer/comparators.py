"""Word comparators for callers that have none of their own."""

from __future__ import annotations

import functools
from collections.abc import Callable

from rapidfuzz import fuzz
from rapidfuzz import utils as rf_utils

from pattern_scorer.models import CompareWords


def exact_match(choice: str, candidate: str) -> float:
    """Return 1.0 for identical words, 0.0 otherwise."""
    return 1.0 if choice == candidate else 0.0


def rapidfuzz_comparator(
    scorer: Callable[..., float] = fuzz.ratio,
    *,
    processor: Callable[[str], str] | None = rf_utils.default_process,
    score_cutoff: float = 0,
) -> CompareWords:
    """Adapt a rapidfuzz scorer (0..100) into a ``[0, 1]`` word comparator.

    Scores below *score_cutoff* (on the rapidfuzz scale) become 0.
    """

    def compare(choice: str, candidate: str) -> float:
        return scorer(choice, candidate, processor=processor, score_cutoff=score_cutoff) / 100.0

    return compare


def cached_comparator(compare_words: CompareWords, maxsize: int | None = None) -> CompareWords:
    """Memoize an expensive comparator.

    The scorer itself never caches, so callers scoring many strings with a
    costly comparator wrap it here. The comparator must be deterministic.
    """
    return functools.lru_cache(maxsize=maxsize)(compare_words)
