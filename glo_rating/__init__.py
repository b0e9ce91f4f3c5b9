"""
Glo Rating - Elo-style ratings for players and holes on a continuous score scale.
"""

from .core import (
    DEFAULT_PARAMETERS,
    GloParameters,
    GloRatingError,
    HoleRatingAdjuster,
    InvalidDomainError,
    InvalidInputError,
    PerformanceRatingInput,
    PerformanceRatingOptions,
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
    to_score,
    to_strokes,
)
from .system import GloRatingSystem, RoundResult

__all__ = [
    "to_score",
    "to_strokes",
    "calc_expected_score",
    "calc_performance_rating",
    "calc_player_k_factor",
    "calc_rating_updates",
    "calc_play_scores",
    "apply_play_scores",
    "modify_player_rating",
    "adjust_hole_rating",
    "HoleRatingAdjuster",
    "PerformanceRatingInput",
    "PerformanceRatingOptions",
    "RatingUpdateInput",
    "RatingUpdateResult",
    "PlayScores",
    "GloParameters",
    "DEFAULT_PARAMETERS",
    "GloRatingError",
    "InvalidDomainError",
    "InvalidInputError",
    "GloRatingSystem",
    "RoundResult",
]
