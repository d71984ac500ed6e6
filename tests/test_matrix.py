"""Tests for similarity matrix construction."""

from __future__ import annotations

import pytest

from pattern_scorer.comparators import exact_match
from pattern_scorer.core.matrix import build_similarity_matrix
from pattern_scorer.errors import InvalidPatternError


class TestBuildSimilarityMatrix:
    def test_rows_are_string_words_columns_are_slots(self) -> None:
        matrix = build_similarity_matrix([["cat"], ["sat"]], ["cat", "sat", "mat"], exact_match)
        assert matrix == [[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]]

    def test_best_choice_wins(self) -> None:
        def compare(choice: str, candidate: str) -> float:
            return {"kitty": 0.4, "cat": 0.9}[choice]

        matrix = build_similarity_matrix([["kitty", "cat"]], ["feline"], compare)
        assert matrix == [[0.9]]

    def test_comparator_receives_choice_then_candidate(self) -> None:
        calls: list[tuple[str, str]] = []

        def compare(choice: str, candidate: str) -> float:
            calls.append((choice, candidate))
            return 0.0

        build_similarity_matrix([["a"]], ["x"], compare)
        assert calls == [("a", "x")]

    def test_one_word_list_choice(self) -> None:
        matrix = build_similarity_matrix([[["cat"]]], ["cat"], exact_match)
        assert matrix == [[1.0]]

    def test_empty_slot_scores_zero(self) -> None:
        matrix = build_similarity_matrix([[], ["cat"]], ["cat"], exact_match)
        assert matrix == [[0.0, 1.0]]

    def test_empty_string(self) -> None:
        assert build_similarity_matrix([["cat"]], [], exact_match) == []

    def test_empty_pattern(self) -> None:
        assert build_similarity_matrix([], ["cat", "sat"], exact_match) == [[], []]

    def test_out_of_range_values_are_trusted(self) -> None:
        matrix = build_similarity_matrix([["a"]], ["a"], lambda choice, candidate: 2.5)
        assert matrix == [[2.5]]

    def test_clamp(self) -> None:
        def compare(choice: str, candidate: str) -> float:
            return 2.5 if choice == "a" else -1.0

        matrix = build_similarity_matrix([["a"], ["b"]], ["a"], compare, clamp=True)
        assert matrix == [[1.0, 0.0]]

    def test_composite_choice_is_rejected(self) -> None:
        with pytest.raises(InvalidPatternError):
            build_similarity_matrix([["ny", ("new", "york")]], ["new"], exact_match)
