"""Word order coherence of an alignment."""

from __future__ import annotations

from collections.abc import Sequence

from pattern_scorer.models import Match


def order_score(matches: Sequence[Match], string_length: int) -> float:
    """Score how consistently matched positions keep the pattern's word order.

    Each matched slot is compared to the mean pattern/string offset; the
    averaged closeness is remapped from ``[0, 1]`` onto ``[-1, 1]``. A shifted
    but ordered alignment scores 1. Returns 0 when nothing matched.
    """
    matched = [match for match in matches if match.matched]
    if not matched:
        return 0.0

    mean_offset = sum(m.pattern_index - m.string_index for m in matched) / len(matched)
    total_length = max(len(matches), string_length)

    closeness = sum(
        1.0 - abs(m.pattern_index - m.string_index - mean_offset) / total_length for m in matched
    )
    return (closeness / len(matched) - 0.5) / 0.5
