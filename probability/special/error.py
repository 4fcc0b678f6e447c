"""
Error function, complementary error function and their inverses.

``erf`` and ``erfc`` are expressed through the regularized incomplete gamma
functions, ``erf(x) = P(1/2, x^2)`` and ``erfc(x) = Q(1/2, x^2)`` for
x >= 0. Going through Q keeps full relative precision for ``erfc`` deep in
the upper tail, which is what the Normal CDF needs there.

The inverses start from M. Giles' rational approximation ("Approximating the
erfinv function", GPU Computing Gems, 2011) and are polished with Newton
iterations against the forward functions.
"""

from __future__ import annotations

import math

from ._domain import _as_float, _check_interval
from .incomplete import incomplete_gamma, incomplete_gamma_upper

__all__ = ["erf", "erfc", "erf_inv", "erfc_inv"]

_TWO_OVER_SQRT_PI = 2.0 / math.sqrt(math.pi)
_SQRT_PI_OVER_TWO = math.sqrt(math.pi) / 2.0
_NEWTON_STEPS = 50


def erf(x: float) -> float:
    """The error function, ``2/sqrt(pi) * integral_0^x exp(-t^2) dt``."""
    x = _as_float("erf", "x", x)
    if abs(x) < 1e-8:
        # x^2 would underflow the incomplete gamma; two Taylor terms are exact here
        return _TWO_OVER_SQRT_PI * x * (1.0 - x * x / 3.0)
    value = incomplete_gamma(0.5, x * x)
    return value if x > 0.0 else -value


def erfc(x: float) -> float:
    """The complementary error function ``1 - erf(x)``, accurate for large x."""
    x = _as_float("erfc", "x", x)
    if abs(x) < 1e-8:
        return 1.0 - erf(x)
    if x > 0.0:
        return incomplete_gamma_upper(0.5, x * x)
    return 1.0 + incomplete_gamma(0.5, x * x)


def _giles(y: float, w: float) -> float:
    """Giles' approximation of erfinv(y) given w = -log((1 - y)(1 + y))."""
    if w < 5.0:
        w -= 2.5
        p = 2.81022636e-08
        p = 3.43273939e-07 + p * w
        p = -3.5233877e-06 + p * w
        p = -4.39150654e-06 + p * w
        p = 0.00021858087 + p * w
        p = -0.00125372503 + p * w
        p = -0.00417768164 + p * w
        p = 0.246640727 + p * w
        p = 1.50140941 + p * w
    else:
        w = math.sqrt(w) - 3.0
        p = -0.000200214257
        p = 0.000100950558 + p * w
        p = 0.00134934322 + p * w
        p = -0.00367342844 + p * w
        p = 0.00573950773 + p * w
        p = -0.0076224613 + p * w
        p = 0.00943887047 + p * w
        p = 1.00167406 + p * w
        p = 2.83297682 + p * w
    return p * y


def _erfc_inv_upper(q: float) -> float:
    """erfc_inv for q in (0, 1], i.e. non-negative results."""
    w = -math.log(q * (2.0 - q))
    if w < 16.0:
        x = _giles(1.0 - q, w)
    else:
        # asymptotic erfc(x) ~ exp(-x^2) / (x sqrt(pi))
        x = math.sqrt(-math.log(q))
        x = math.sqrt(-math.log(q) - math.log(x * math.sqrt(math.pi)))

    log_q = math.log(q)
    for _ in range(_NEWTON_STEPS):
        value = erfc(x)
        if value <= 0.0:
            break
        # Newton on log(erfc(x)) - log(q); log erfc is concave so this is monotone
        step = (math.log(value) - log_q) * value * _SQRT_PI_OVER_TWO * math.exp(
            min(x * x, 709.0)
        )
        x += step
        if abs(step) <= 4.0 * math.ulp(x):
            break
    return max(x, 0.0)


def erfc_inv(q: float) -> float:
    """Inverse of ``erfc`` on [0, 2].

    Returns ``inf`` at 0 and ``-inf`` at 2.

    Raises:
        DomainError: If ``q`` lies outside [0, 2].
    """
    q = _check_interval("erfc_inv", "q", q, 0.0, 2.0)
    if q == 0.0:
        return math.inf
    if q == 2.0:
        return -math.inf
    if q > 1.0:
        return -_erfc_inv_upper(2.0 - q)
    return _erfc_inv_upper(q)


def erf_inv(p: float) -> float:
    """Inverse of ``erf`` on [-1, 1].

    For ``|p| <= 1/2`` the rational approximation is refined with two Newton
    steps against ``erf``; closer to the ends the problem is handed to
    ``erfc_inv`` where ``1 - |p|`` is exact.

    Raises:
        DomainError: If ``p`` lies outside [-1, 1].
    """
    p = _check_interval("erf_inv", "p", p, -1.0, 1.0)
    if abs(p) == 1.0:
        return math.copysign(math.inf, p)
    if abs(p) > 0.5:
        return math.copysign(_erfc_inv_upper(1.0 - abs(p)), p)
    if p == 0.0:
        return p

    x = _giles(p, -math.log1p(-p * p))
    for _ in range(2):
        x += (p - erf(x)) / (_TWO_OVER_SQRT_PI * math.exp(-x * x))
    return x
