"""Exceptions raised by the probability package."""

__all__ = [
    "ProbabilityError",
    "ConstructionError",
    "DomainError",
    "UndefinedMomentError",
]


class ProbabilityError(Exception):
    """Base class for all errors raised by this package."""


class ConstructionError(ProbabilityError, ValueError):
    """A distribution was given parameters outside its valid range.

    Raised from ``__init__`` only; a distribution instance never exists in an
    invalid state.
    """


class DomainError(ProbabilityError, ValueError):
    """An argument lies outside the domain of the function evaluated.

    Examples are a quantile probability outside [0, 1] or a negative shape
    passed to an incomplete gamma function.
    """


class UndefinedMomentError(ProbabilityError, ArithmeticError):
    """The requested moment is not finite for the distribution's parameters."""
