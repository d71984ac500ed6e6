"""Scoring pipeline: similarity matrix, word matching, order scoring, expansion."""

from pattern_scorer.core.expander import count_expansions, expand_pattern, slot_alternatives
from pattern_scorer.core.matcher import find_word_matches
from pattern_scorer.core.matrix import build_similarity_matrix
from pattern_scorer.core.order import order_score
from pattern_scorer.core.scorer import best_score, score, similarity_score

__all__ = [
    "best_score",
    "build_similarity_matrix",
    "count_expansions",
    "expand_pattern",
    "find_word_matches",
    "order_score",
    "score",
    "similarity_score",
    "slot_alternatives",
]
