"""Scoring and asymptotic estimates derived from scan results."""

from .big_o import count_collections, has_recursion, space_complexity, time_complexity
from .scoring import RANK_THRESHOLDS, compute_score, rank_for

__all__ = [
    "compute_score",
    "rank_for",
    "RANK_THRESHOLDS",
    "time_complexity",
    "space_complexity",
    "count_collections",
    "has_recursion",
]
