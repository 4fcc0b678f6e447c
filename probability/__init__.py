"""
probability: univariate probability distributions with pluggable randomness.

Every distribution exposes its density or mass, CDF, survival function,
quantile, moments and a sampler driven by a caller-supplied entropy
:class:`~probability.source.Source`.
"""

from .errors import ConstructionError, DomainError, ProbabilityError, UndefinedMomentError
from .source import NumpySource, Source, Xorshift128Plus
from .distributions import *  # noqa: F401,F403
from .distributions import __all__ as _distribution_names
from .sampling import Independent

__version__ = "0.1.0"

__all__ = [
    "ProbabilityError",
    "ConstructionError",
    "DomainError",
    "UndefinedMomentError",
    "Source",
    "Xorshift128Plus",
    "NumpySource",
    "Independent",
    *_distribution_names,
]
