"""Word similarity matrix between string positions and pattern slots."""

from __future__ import annotations

from collections.abc import Sequence

from pattern_scorer.models import CompareWords, Pattern, Word, as_word


def build_similarity_matrix(
    pattern: Pattern,
    string: Sequence[Word],
    compare_words: CompareWords,
    *,
    clamp: bool = False,
) -> list[list[float]]:
    """Return ``matrix[s][p]``, the best similarity of string word *s* to slot *p*.

    The pattern must be composite-free. An empty slot scores 0 everywhere.
    With *clamp*, comparator values are forced into ``[0, 1]``.
    """
    matrix: list[list[float]] = []
    for word in string:
        row: list[float] = []
        for slot in pattern:
            best = max(
                (compare_words(as_word(choice), word) for choice in slot),
                default=0.0,
            )
            if clamp:
                best = min(1.0, max(0.0, best))
            row.append(best)
        matrix.append(row)
    return matrix
