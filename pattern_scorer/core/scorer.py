"""Pattern/string relevance scoring."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pattern_scorer.config import settings
from pattern_scorer.core.expander import expand_pattern
from pattern_scorer.core.matcher import find_word_matches
from pattern_scorer.core.matrix import build_similarity_matrix
from pattern_scorer.core.order import order_score
from pattern_scorer.models import CompareWords, Pattern, Slot, Word

logger = logging.getLogger(__name__)

PERFECT_SCORE = 1.0


def similarity_score(
    pattern: Pattern,
    string: Sequence[Word],
    compare_words: CompareWords,
    *,
    clamp: bool = False,
) -> float:
    """Score a composite-free pattern against a string.

    Average matched similarity per string word, times the order score.
    """
    if not string:
        return 0.0

    matrix = build_similarity_matrix(pattern, string, compare_words, clamp=clamp)
    matches = find_word_matches(matrix, len(pattern))
    coverage = sum(match.score for match in matches) / len(string)
    return coverage * order_score(matches, len(string))


def best_score(
    patterns: Iterable[Sequence[Slot]],
    string: Sequence[Word],
    compare_words: CompareWords,
    *,
    clamp: bool = False,
    stop_on_perfect_score: bool = True,
) -> float:
    """Return the highest score among already expanded *patterns*.

    With *stop_on_perfect_score*, scoring stops at an exact 1.0. Comparators
    returning values above 1 can still push a later pattern higher.
    """
    best: float | None = None
    for pattern in patterns:
        current = similarity_score(pattern, string, compare_words, clamp=clamp)
        if best is None or current > best:
            best = current
        if stop_on_perfect_score and best == PERFECT_SCORE:
            break
    return 0.0 if best is None else best


def score(
    pattern: Pattern,
    string: Sequence[Word],
    compare_words: CompareWords,
    *,
    clamp_similarity: bool | None = None,
    max_expansions: int | None = None,
    stop_on_perfect_score: bool | None = None,
) -> float:
    """Score *string* against a pattern that may hold composite choices.

    The result is meant as a descending sort key. It is at most 1 for
    comparators honouring ``[0, 1]`` and turns negative when matched words
    appear in scrambled order. An empty string scores 0.

    Options left as ``None`` come from ``settings``.

    Raises:
        ExpansionLimitError: If the pattern has too many composite combinations.
    """
    if not string:
        return 0.0

    if clamp_similarity is None:
        clamp_similarity = settings.clamp_similarity
    if stop_on_perfect_score is None:
        stop_on_perfect_score = settings.stop_on_perfect_score

    patterns = expand_pattern(pattern, max_expansions=max_expansions)
    result = best_score(
        patterns,
        string,
        compare_words,
        clamp=clamp_similarity,
        stop_on_perfect_score=stop_on_perfect_score,
    )
    logger.debug("Scored %d expanded pattern(s), best=%.4f", len(patterns), result)
    return result
