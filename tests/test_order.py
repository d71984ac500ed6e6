"""Tests for word order scoring."""

from __future__ import annotations

import pytest

from pattern_scorer.core.order import order_score
from pattern_scorer.models import Match


class TestOrderScore:
    def test_aligned(self) -> None:
        matches = [Match(0, 0, 1.0), Match(1, 1, 1.0)]
        assert order_score(matches, 2) == 1.0

    def test_constant_shift_is_still_ordered(self) -> None:
        matches = [Match(0, 2, 1.0), Match(1, 3, 1.0)]
        assert order_score(matches, 4) == 1.0

    def test_swapped_pair(self) -> None:
        matches = [Match(0, 1, 1.0), Match(1, 0, 1.0)]
        assert order_score(matches, 2) == 0.0

    def test_scattered(self) -> None:
        matches = [Match(0, 2, 1.0), Match(1, 0, 1.0), Match(2, 1, 1.0)]
        assert order_score(matches, 3) == pytest.approx(1 / 9)

    def test_can_be_negative(self) -> None:
        matches = [Match(0, 2, 1.0), Match(1), Match(2, 0, 1.0)]
        assert order_score(matches, 3) == pytest.approx(-1 / 3)

    def test_unmatched_slots_are_ignored(self) -> None:
        matches = [Match(0, 0, 1.0), Match(1)]
        assert order_score(matches, 1) == 1.0

    def test_longer_string_dampens_disorder(self) -> None:
        swapped = [Match(0, 1, 1.0), Match(1, 0, 1.0)]
        assert order_score(swapped, 10) > order_score(swapped, 2)

    def test_no_matches(self) -> None:
        assert order_score([Match(0), Match(1)], 3) == 0.0

    def test_empty(self) -> None:
        assert order_score([], 0) == 0.0
