"""
Conversion between raw strokes and normalized scores.
"""

import numpy as np

from .exceptions import InvalidDomainError


def to_score(strokes: float) -> float:
    """
    Convert strokes (-inf, inf) to a score in (0, 1).

    Lower strokes give a higher score; 0 strokes maps to 0.5.

    Args:
        strokes: Strokes relative to an average result

    Returns:
        Normalized score
    """
    # Very large strokes overflow to inf and land on a score of 0.0
    with np.errstate(over="ignore"):
        return float(1.0 / (1.0 + np.power(10.0, strokes / 2.0)))


def to_strokes(score: float) -> float:
    """
    Convert a score in (0, 1) back to strokes.

    Args:
        score: Normalized score, strictly between 0 and 1

    Returns:
        Strokes that produce the given score

    Raises:
        InvalidDomainError: If the score is not strictly between 0 and 1
    """
    if not 0.0 < score < 1.0:
        raise InvalidDomainError(f"score must be strictly between 0 and 1, got {score!r}")
    return float(2.0 * np.log10((1.0 - score) / score))
