"""
Pure Glo rating mathematics, free of any bookkeeping.
"""

from .config import DEFAULT_PARAMETERS, GloParameters, PerformanceRatingOptions
from .exceptions import GloRatingError, InvalidDomainError, InvalidInputError
from .glo_rating import (
    HoleRatingAdjuster,
    PerformanceRatingInput,
    PlayScores,
    RatingUpdateInput,
    RatingUpdateResult,
    adjust_hole_rating,
    apply_play_scores,
    calc_expected_score,
    calc_performance_rating,
    calc_play_scores,
    calc_player_k_factor,
    calc_rating_updates,
    modify_player_rating,
)
from .score import to_score, to_strokes
