"""Special functions underlying the distribution CDFs and quantiles.

All functions take and return Python floats and raise
:class:`~probability.errors.DomainError` outside their domain.
"""

from .gamma import digamma, gamma, ln_beta, log_gamma
from .incomplete import incomplete_beta, incomplete_gamma, incomplete_gamma_upper
from .error import erf, erf_inv, erfc, erfc_inv

__all__ = [
    "log_gamma",
    "gamma",
    "digamma",
    "ln_beta",
    "incomplete_gamma",
    "incomplete_gamma_upper",
    "incomplete_beta",
    "erf",
    "erfc",
    "erf_inv",
    "erfc_inv",
]
