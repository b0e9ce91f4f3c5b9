"""
Core implementation of the Glo rating system.

Players and holes share one rating scale. A play of a hole is scored on a
continuous (0, 1) scale derived from strokes, compared against the score the
logistic model expects, and both ratings move by a K-factor scaled share of the
difference.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .config import DEFAULT_PARAMETERS, GloParameters, PerformanceRatingOptions
from .exceptions import InvalidInputError
from .score import to_score

logger = logging.getLogger(__name__)

HoleRatingAdjuster = Callable[[float, Optional[Sequence[float]]], float]


@dataclass(frozen=True)
class PerformanceRatingInput:
    """
    A round to solve a performance rating for.

    Attributes:
        hole_ratings: Ratings of the holes played (must not be empty)
        total_score: Sum of the scores achieved on those holes
        options: Search range and iteration count
    """

    hole_ratings: Tuple[float, ...]
    total_score: float
    options: PerformanceRatingOptions = PerformanceRatingOptions()

    def __post_init__(self):
        object.__setattr__(self, "hole_ratings", tuple(float(r) for r in self.hole_ratings))
        if not self.hole_ratings:
            raise InvalidInputError("hole_ratings must not be empty")
        if not math.isfinite(self.total_score):
            raise InvalidInputError("total_score must be finite")


@dataclass(frozen=True)
class RatingUpdateInput:
    """
    A single play of a hole.

    Attributes:
        player_rating: Current player rating
        hole_rating: Current hole rating
        strokes: Strokes for this play (lower is better)
        performance_rating: Performance rating of the round the play belongs to.
            Defaults to 0, which drags the blended player rating down; callers
            should normally pass the value from calc_performance_rating.
        hole_details: Optional context handed to the hole rating adjuster
    """

    player_rating: float
    hole_rating: float
    strokes: float
    performance_rating: float = 0.0
    hole_details: Optional[Tuple[float, ...]] = None

    def __post_init__(self):
        if self.hole_details is not None:
            object.__setattr__(self, "hole_details", tuple(self.hole_details))


class RatingUpdateResult(NamedTuple):
    """Updated ratings after a play."""

    player_rating: float
    hole_rating: float


class PlayScores(NamedTuple):
    """Expected and actual score of a play."""

    expected_score: float
    actual_score: float


def calc_expected_score(
    hole_rating: float,
    competing_rating: float,
    rating_scale: float = DEFAULT_PARAMETERS.rating_scale,
) -> float:
    """
    Calculate the expected score of the competing side against a hole.

    Args:
        hole_rating: Rating of the hole
        competing_rating: Rating of the player (or performance) facing the hole
        rating_scale: Rating difference divisor of the logistic curve

    Returns:
        Expected score (between 0 and 1)
    """
    return float(_expected_scores(hole_rating, competing_rating, rating_scale))


def _expected_scores(hole_ratings, competing_rating: float, rating_scale: float):
    with np.errstate(over="ignore"):
        return 1.0 / (1.0 + np.power(10.0, np.subtract(hole_ratings, competing_rating) / rating_scale))


def calc_performance_rating(
    data: PerformanceRatingInput,
    params: GloParameters = DEFAULT_PARAMETERS,
) -> float:
    """
    Find the rating that would have been expected to score ``data.total_score``.

    Runs a fixed number of bisection steps inside
    ``[options.min_return, options.max_return]``. The sum of expected scores
    grows with the rating, so each step keeps the answer bracketed and halves
    the remaining range. There is no tolerance check: the estimate is within
    ``options.resolution`` of the bracketed rating. A rating outside the range
    is not reported; the estimate just ends up next to the nearer bound.

    Args:
        data: Hole ratings, total score and search options
        params: Model parameters (only ``rating_scale`` is used)

    Returns:
        Estimated performance rating
    """
    options = data.options
    hole_ratings = np.asarray(data.hole_ratings, dtype=float)

    offset = (options.max_return - options.min_return) / 2.0
    performance_rating = options.min_return + offset

    for _ in range(options.iterations):
        offset /= 2.0
        expected_total = float(_expected_scores(hole_ratings, performance_rating, params.rating_scale).sum())
        if expected_total < data.total_score:
            performance_rating += offset
        elif expected_total > data.total_score:
            performance_rating -= offset
        else:
            return performance_rating

    if options.iterations and (
        performance_rating - options.min_return <= offset
        or options.max_return - performance_rating <= offset
    ):
        logger.debug(
            "Performance rating %.2f is at the edge of the search range [%s, %s]",
            performance_rating,
            options.min_return,
            options.max_return,
        )

    return performance_rating


def modify_player_rating(
    player_rating: float,
    performance_rating: float,
    params: GloParameters = DEFAULT_PARAMETERS,
) -> float:
    """Weighted average of the player rating and the round's performance rating."""
    return player_rating + params.performance_weight * (performance_rating - player_rating)


def adjust_hole_rating(hole_rating: float, details: Optional[Sequence[float]] = None) -> float:
    """
    Default hole rating adjuster: returns the rating unchanged.

    Any callable with the same signature can be passed to
    calc_rating_updates to adjust a hole for context such as tee or weather.
    """
    return hole_rating


def calc_player_k_factor(player_rating: float, params: GloParameters = DEFAULT_PARAMETERS) -> float:
    """
    Calculate the player K-factor.

    Players below the threshold move faster; the curve meets the default
    K-factor at the threshold and never drops below it.

    Args:
        player_rating: Current player rating

    Returns:
        K-factor, at least ``params.player_k_factor_default``
    """
    if player_rating < params.k_factor_threshold:
        gap = params.k_factor_threshold - player_rating
        return params.k_factor_base * math.sqrt(params.k_factor_offset + gap ** 2 / params.k_factor_spread)
    return params.player_k_factor_default


def calc_play_scores(
    data: RatingUpdateInput,
    hole_adjuster: HoleRatingAdjuster = adjust_hole_rating,
    params: GloParameters = DEFAULT_PARAMETERS,
    modified_hole_rating: Optional[float] = None,
) -> PlayScores:
    """
    Calculate the expected and actual score of a single play.

    Args:
        data: Ratings before the play, strokes and performance rating
        hole_adjuster: Strategy adjusting the hole rating before comparison
        params: Model parameters
        modified_hole_rating: Hole rating already adjusted by the caller.
            When given, ``hole_adjuster`` is not called.

    Returns:
        Expected and actual score
    """
    if modified_hole_rating is None:
        modified_hole_rating = hole_adjuster(data.hole_rating, data.hole_details)
    modified_player_rating = modify_player_rating(data.player_rating, data.performance_rating, params)

    return PlayScores(
        expected_score=calc_expected_score(modified_hole_rating, modified_player_rating, params.rating_scale),
        actual_score=to_score(data.strokes),
    )


def apply_play_scores(
    data: RatingUpdateInput,
    scores: PlayScores,
    params: GloParameters = DEFAULT_PARAMETERS,
) -> RatingUpdateResult:
    """Move the player and hole ratings by their K-factor share of the score difference."""
    # K-factor follows the stored rating, not the blended one
    player_k_factor = calc_player_k_factor(data.player_rating, params)
    difference = scores.actual_score - scores.expected_score

    return RatingUpdateResult(
        player_rating=data.player_rating + player_k_factor * difference,
        hole_rating=data.hole_rating - params.hole_k_factor * difference,
    )


def calc_rating_updates(
    data: RatingUpdateInput,
    hole_adjuster: HoleRatingAdjuster = adjust_hole_rating,
    params: GloParameters = DEFAULT_PARAMETERS,
) -> RatingUpdateResult:
    """
    Calculate new player and hole ratings for a single play.

    Args:
        data: Ratings before the play, strokes and performance rating
        hole_adjuster: Strategy adjusting the hole rating before comparison
        params: Model parameters

    Returns:
        New player and hole ratings
    """
    return apply_play_scores(data, calc_play_scores(data, hole_adjuster, params), params)
