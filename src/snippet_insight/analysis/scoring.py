"""Weighted complexity score and rank.

The weights and rank bounds are the published contract of the score; they
are fixed, not tuned per run.
"""

import math

from ..models import Rank

LINE_WEIGHT = 0.1
FUNCTION_WEIGHT = 2
CONDITIONAL_WEIGHT = 3
LOOP_WEIGHT = 3
NESTING_WEIGHT = 5

# (inclusive upper bound, rank); anything above the last bound is CRITICAL.
RANK_THRESHOLDS: tuple[tuple[int, Rank], ...] = (
    (20, Rank.SIMPLE),
    (50, Rank.MODERATE),
    (100, Rank.HIGH),
)


def compute_score(
    line_count: int,
    function_count: int,
    conditional_count: int,
    loop_count: int,
    max_nesting_depth: int,
) -> int:
    """Combine structural counts into one non-negative integer.

    Rounds half up (2.5 -> 3), not to even.
    """
    raw = (
        LINE_WEIGHT * line_count
        + FUNCTION_WEIGHT * function_count
        + CONDITIONAL_WEIGHT * conditional_count
        + LOOP_WEIGHT * loop_count
        + NESTING_WEIGHT * max_nesting_depth
    )
    return max(0, math.floor(raw + 0.5))


def rank_for(score: int) -> Rank:
    if score <= 0:
        return Rank.NO_INPUT
    for upper, rank in RANK_THRESHOLDS:
        if score <= upper:
            return rank
    return Rank.CRITICAL
