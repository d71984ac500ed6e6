"""Greedy mutual-best-match alignment of pattern slots to string positions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pattern_scorer.models import Match


def _argmax(scores: Iterable[tuple[int, float]]) -> tuple[int, float]:
    """Return the first index holding the strictly greatest positive score.

    Returns ``(-1, 0.0)`` when no score is above zero.
    """
    best_index = -1
    best_score = 0.0
    for index, score in scores:
        if score > best_score:
            best_index = index
            best_score = score
    return best_index, best_score


def find_word_matches(
    matrix: Sequence[Sequence[float]],
    slot_count: int | None = None,
) -> list[Match]:
    """Align pattern slots (columns) with string positions (rows).

    A slot and a position are linked only when each is the other's best
    remaining option. Rounds repeat until one adds no link. Ties go to the
    lowest index. The result holds one ``Match`` per slot, in slot order;
    unmatched slots keep ``string_index == -1`` and a score of 0.

    This is not an optimal assignment: the total score may be lower than
    the one a full assignment solver would find.
    """
    if slot_count is None:
        slot_count = len(matrix[0]) if matrix else 0

    matches = [Match(pattern_index=slot) for slot in range(slot_count)]
    # Ordered lists keep tie-breaking reproducible.
    unmatched_slots = list(range(slot_count))
    unmatched_positions = list(range(len(matrix)))

    changed = True
    while changed and unmatched_slots and unmatched_positions:
        changed = False

        for slot in list(unmatched_slots):
            if not unmatched_positions:
                break

            best_position, _ = _argmax(
                (position, matrix[position][slot]) for position in unmatched_positions
            )
            if best_position < 0:
                continue

            row = matrix[best_position]
            reciprocal_slot, score = _argmax((other, row[other]) for other in unmatched_slots)
            if reciprocal_slot != slot:
                continue

            matches[slot] = Match(pattern_index=slot, string_index=best_position, score=score)
            unmatched_slots.remove(slot)
            unmatched_positions.remove(best_position)
            changed = True

    return matches
