"""
Numeric parameters for the Glo rating model.
"""

import math
import numbers
from dataclasses import dataclass

from .exceptions import InvalidInputError

K_HOLE = 35.0
K_PLAYER_DEFAULT = 12.0
R_WEIGHT = 0.2
RD = 360.0


@dataclass(frozen=True)
class GloParameters:
    """
    Constants of the rating model.

    Attributes:
        hole_k_factor: K-factor applied to every hole update
        player_k_factor_default: K-factor for players at or above the threshold
        performance_weight: Share of the performance rating blended into the player rating
        rating_scale: Rating difference divisor of the logistic expected-score curve
        k_factor_threshold: Rating below which the player K-factor grows
        k_factor_base: Multiplier of the dynamic K-factor curve
        k_factor_offset: Constant term under the square root of the K-factor curve
        k_factor_spread: Divisor of the squared rating gap in the K-factor curve
    """

    hole_k_factor: float = K_HOLE
    player_k_factor_default: float = K_PLAYER_DEFAULT
    performance_weight: float = R_WEIGHT
    rating_scale: float = RD
    k_factor_threshold: float = 1900.0
    k_factor_base: float = 16.0
    k_factor_offset: float = 0.5625
    k_factor_spread: float = 250000.0

    def __post_init__(self):
        if self.rating_scale <= 0:
            raise InvalidInputError("rating_scale must be positive")
        if self.k_factor_spread <= 0:
            raise InvalidInputError("k_factor_spread must be positive")
        if not 0.0 <= self.performance_weight <= 1.0:
            raise InvalidInputError("performance_weight must be between 0 and 1")


DEFAULT_PARAMETERS = GloParameters()


@dataclass(frozen=True)
class PerformanceRatingOptions:
    """
    Search settings for the performance rating solver.

    Attributes:
        min_return: Lower bound of the search range (default 0)
        max_return: Upper bound of the search range (default 3000)
        iterations: Number of bisection steps (default 8)
    """

    min_return: float = 0.0
    max_return: float = 3000.0
    iterations: int = 8

    def __post_init__(self):
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, numbers.Integral):
            raise InvalidInputError("iterations must be an integer")
        if self.iterations < 0:
            raise InvalidInputError("iterations must be non-negative")
        if not (math.isfinite(self.min_return) and math.isfinite(self.max_return)):
            raise InvalidInputError("min_return and max_return must be finite")
        if self.min_return > self.max_return:
            raise InvalidInputError("min_return must be less than or equal to max_return")

    @property
    def resolution(self) -> float:
        """Worst-case distance between the returned estimate and the bracketed rating."""
        return (self.max_return - self.min_return) / 2 ** self.iterations
