"""Fuzzy relevance scoring of word sequences against slot patterns."""

from pattern_scorer.comparators import cached_comparator, exact_match, rapidfuzz_comparator
from pattern_scorer.core import (
    build_similarity_matrix,
    expand_pattern,
    find_word_matches,
    order_score,
    score,
    similarity_score,
)
from pattern_scorer.errors import ExpansionLimitError, InvalidPatternError, PatternScorerError
from pattern_scorer.models import Match, parse_pattern
from pattern_scorer.ranking import RankedCandidate, rank

__all__ = [
    "ExpansionLimitError",
    "InvalidPatternError",
    "Match",
    "PatternScorerError",
    "RankedCandidate",
    "build_similarity_matrix",
    "cached_comparator",
    "exact_match",
    "expand_pattern",
    "find_word_matches",
    "order_score",
    "parse_pattern",
    "rank",
    "rapidfuzz_comparator",
    "score",
    "similarity_score",
]
