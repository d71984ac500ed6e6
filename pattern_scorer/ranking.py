"""Ranking of candidate strings against one pattern."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pattern_scorer.config import settings
from pattern_scorer.core.expander import expand_pattern
from pattern_scorer.core.scorer import best_score
from pattern_scorer.models import CompareWords, Pattern, Word


@dataclass(frozen=True, slots=True)
class RankedCandidate:
    """A candidate string with its score and position in the input."""

    candidate: tuple[Word, ...]
    score: float
    index: int


def rank(
    pattern: Pattern,
    candidates: Sequence[Sequence[Word]],
    compare_words: CompareWords,
    *,
    limit: int | None = None,
    threshold: float | None = None,
    clamp_similarity: bool | None = None,
    max_expansions: int | None = None,
    stop_on_perfect_score: bool | None = None,
) -> list[RankedCandidate]:
    """Return *candidates* sorted by descending score.

    The pattern is expanded once for the whole batch. Equal scores keep
    input order. Only candidates scoring at or above *threshold* are kept,
    at most *limit* of them. A batch of empty strings is never expanded.
    """
    if not candidates:
        return []

    if clamp_similarity is None:
        clamp_similarity = settings.clamp_similarity
    if stop_on_perfect_score is None:
        stop_on_perfect_score = settings.stop_on_perfect_score

    patterns = (
        expand_pattern(pattern, max_expansions=max_expansions) if any(candidates) else []
    )
    ranked = [
        RankedCandidate(
            candidate=tuple(candidate),
            score=best_score(
                patterns,
                candidate,
                compare_words,
                clamp=clamp_similarity,
                stop_on_perfect_score=stop_on_perfect_score,
            ),
            index=index,
        )
        for index, candidate in enumerate(candidates)
    ]
    if threshold is not None:
        ranked = [item for item in ranked if item.score >= threshold]

    ranked.sort(key=lambda item: item.score, reverse=True)
    if limit is not None:
        return ranked[:limit]
    return ranked
