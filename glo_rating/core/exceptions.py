"""
Errors raised by the Glo rating core.
"""


class GloRatingError(ValueError):
    """Base class for all Glo rating errors."""


class InvalidDomainError(GloRatingError):
    """A value lies outside the domain where a transform is defined."""


class InvalidInputError(GloRatingError):
    """An input record is malformed (empty hole list, inverted bounds, ...)."""
