"""
In-memory tracking of player and hole ratings on top of the Glo core.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple

from .core import (
    DEFAULT_PARAMETERS,
    GloParameters,
    HoleRatingAdjuster,
    InvalidInputError,
    PerformanceRatingInput,
    PerformanceRatingOptions,
    RatingUpdateInput,
    RatingUpdateResult,
    adjust_hole_rating,
    apply_play_scores,
    calc_performance_rating,
    calc_play_scores,
    to_score,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundResult:
    """
    Outcome of a recorded round.

    Attributes:
        performance_rating: Rating solved from the round's total score
        total_score: Sum of the per-hole scores
        updates: Per-hole results in play order
        player_rating: Player rating after the last hole
    """

    performance_rating: float
    total_score: float
    updates: Tuple[RatingUpdateResult, ...]
    player_rating: float


class GloRatingSystem:
    """
    A system for tracking Glo ratings of players and holes.
    """

    def __init__(
        self,
        default_player_rating: float = 1500.0,
        default_hole_rating: float = 1500.0,
        params: GloParameters = DEFAULT_PARAMETERS,
        hole_adjuster: HoleRatingAdjuster = adjust_hole_rating,
        performance_options: PerformanceRatingOptions = PerformanceRatingOptions(),
    ):
        """
        Initialize a Glo rating system.

        Args:
            default_player_rating: Rating of players not seen before
            default_hole_rating: Rating of holes not seen before
            params: Model parameters
            hole_adjuster: Strategy adjusting hole ratings before comparison
            performance_options: Solver settings used by record_round
        """
        self.player_ratings: Dict[Hashable, float] = {}
        self.hole_ratings: Dict[Hashable, float] = {}
        self.default_player_rating = default_player_rating
        self.default_hole_rating = default_hole_rating
        self.params = params
        self.hole_adjuster = hole_adjuster
        self.performance_options = performance_options
        self.history: List[Dict[str, Any]] = []

    def get_player_rating(self, player_id: Hashable) -> float:
        return self.player_ratings.get(player_id, self.default_player_rating)

    def get_hole_rating(self, hole_id: Hashable) -> float:
        return self.hole_ratings.get(hole_id, self.default_hole_rating)

    def record_play(
        self,
        player_id: Hashable,
        hole_id: Hashable,
        strokes: float,
        performance_rating: Optional[float] = None,
        hole_details: Optional[Sequence[float]] = None,
    ) -> RatingUpdateResult:
        """
        Record a single play of a hole and update both ratings.

        Args:
            player_id: ID of the player
            hole_id: ID of the hole
            strokes: Strokes for this play
            performance_rating: Performance rating of the round. If omitted the
                player's current rating is used, so the blend leaves it unchanged.
            hole_details: Context handed to the hole adjuster

        Returns:
            New player and hole ratings
        """
        player_rating = self.get_player_rating(player_id)
        if performance_rating is None:
            performance_rating = player_rating
        return self._apply(player_id, hole_id, strokes, performance_rating, hole_details)

    def record_round(
        self,
        player_id: Hashable,
        plays: Sequence[Tuple[Any, ...]],
    ) -> RoundResult:
        """
        Record a round of several holes.

        The performance rating is solved once against the adjusted hole
        ratings as they stood before the round. Holes are then updated in play
        order, each one starting from the player's rating after the previous
        hole. The adjuster runs once per play, plus once more for each repeat
        of a hole already played in this round.

        Args:
            player_id: ID of the player
            plays: (hole_id, strokes) or (hole_id, strokes, hole_details)
                tuples in play order

        Returns:
            Performance rating, per-hole updates and final player rating
        """
        if not plays:
            raise InvalidInputError("A round needs at least one play")

        plays = [_unpack_play(play) for play in plays]
        pre_round = [self.get_hole_rating(hole_id) for hole_id, _, _ in plays]
        adjusted = [
            self.hole_adjuster(hole_rating, details)
            for hole_rating, (_, _, details) in zip(pre_round, plays)
        ]

        total_score = sum(to_score(strokes) for _, strokes, _ in plays)
        performance_rating = calc_performance_rating(
            PerformanceRatingInput(
                hole_ratings=adjusted,
                total_score=total_score,
                options=self.performance_options,
            ),
            self.params,
        )

        updates = []
        played = set()
        for (hole_id, strokes, details), adjusted_rating in zip(plays, adjusted):
            if hole_id in played:
                adjusted_rating = None
            played.add(hole_id)
            updates.append(
                self._apply(player_id, hole_id, strokes, performance_rating, details, adjusted_rating)
            )
        player_rating = self.get_player_rating(player_id)

        logger.debug(
            "Round for player %r: %d holes, total score %.3f, performance %.1f, rating now %.1f",
            player_id,
            len(plays),
            total_score,
            performance_rating,
            player_rating,
        )

        return RoundResult(
            performance_rating=performance_rating,
            total_score=total_score,
            updates=tuple(updates),
            player_rating=player_rating,
        )

    def rankings(self, n: Optional[int] = None) -> List[Hashable]:
        """
        Player IDs ordered by rating, highest first.

        Args:
            n: Number of players to return (all if omitted)
        """
        ranked = sorted(self.player_ratings, key=lambda pid: self.player_ratings[pid], reverse=True)
        return ranked if n is None else ranked[:n]

    def _apply(
        self,
        player_id: Hashable,
        hole_id: Hashable,
        strokes: float,
        performance_rating: float,
        hole_details: Optional[Sequence[float]] = None,
        adjusted_hole_rating: Optional[float] = None,
    ) -> RatingUpdateResult:
        player_rating = self.get_player_rating(player_id)
        hole_rating = self.get_hole_rating(hole_id)

        data = RatingUpdateInput(
            player_rating=player_rating,
            hole_rating=hole_rating,
            strokes=strokes,
            performance_rating=performance_rating,
            hole_details=hole_details,
        )
        scores = calc_play_scores(data, self.hole_adjuster, self.params, adjusted_hole_rating)
        result = apply_play_scores(data, scores, self.params)

        self.player_ratings[player_id] = result.player_rating
        self.hole_ratings[hole_id] = result.hole_rating

        self.history.append({
            'player_id': player_id,
            'hole_id': hole_id,
            'strokes': strokes,
            'hole_details': data.hole_details,
            'performance_rating': performance_rating,
            'expected_score': scores.expected_score,
            'actual_score': scores.actual_score,
            'player_rating_before': player_rating,
            'hole_rating_before': hole_rating,
            'player_rating_after': result.player_rating,
            'hole_rating_after': result.hole_rating,
        })

        return result


def _unpack_play(play: Tuple[Any, ...]) -> Tuple[Hashable, float, Optional[Sequence[float]]]:
    if len(play) == 2:
        hole_id, strokes = play
        return hole_id, strokes, None
    if len(play) == 3:
        return tuple(play)
    raise InvalidInputError(f"A play is (hole_id, strokes[, hole_details]), got {play!r}")
