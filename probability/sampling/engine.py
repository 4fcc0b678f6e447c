"""
Sampling algorithms over an entropy source.

Each function consumes draws from a :class:`~probability.source.Source` and
returns one variate. The number of draws is fixed for the transforms
(uniform, exponential, Box-Muller) and random but finite in expectation for
the rejection methods (gamma, transformed-rejection Poisson).

References:
    - G. E. P. Box and M. E. Muller, "A note on the generation of random
      normal deviates", Annals of Mathematical Statistics, 1958.
    - G. Marsaglia and W. W. Tsang, "A simple method for generating gamma
      variables", ACM Transactions on Mathematical Software, 2000.
    - W. Hormann, "The transformed rejection method for generating Poisson
      random variables", Insurance: Mathematics and Economics, 1993.
    - L. Devroye, Non-Uniform Random Variate Generation, Springer, 1986.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..source import Source
from ..special import log_gamma

__all__ = [
    "uniform",
    "box_muller",
    "standard_normal",
    "standard_exponential",
    "standard_gamma",
    "bernoulli_trials",
    "binomial_inversion",
    "poisson_inversion",
    "poisson_ptrs",
    "geometric",
]

_TWO_PI = 2.0 * math.pi


def uniform(source: Source) -> float:
    """One uniform double in [0, 1) (one draw)."""
    return source.read_f64()


def box_muller(source: Source) -> Tuple[float, float]:
    """Two independent standard normals from exactly two uniform draws."""
    u1 = 1.0 - source.read_f64()  # (0, 1], keeps the log finite
    u2 = source.read_f64()
    radius = math.sqrt(-2.0 * math.log(u1))
    angle = _TWO_PI * u2
    return radius * math.cos(angle), radius * math.sin(angle)


def standard_normal(source: Source) -> float:
    """One standard normal; the second Box-Muller value is discarded."""
    return box_muller(source)[0]


def standard_exponential(source: Source) -> float:
    """Inverse transform ``-log(1 - U)`` (one draw)."""
    return -math.log1p(-source.read_f64())


def standard_gamma(shape: float, source: Source) -> float:
    """Gamma(shape, 1) variate.

    Marsaglia-Tsang squeeze/rejection for shape >= 1. For shape < 1 the
    boosting identity ``G(k) = G(k + 1) * U**(1/k)`` is applied.
    """
    if shape < 1.0:
        boost = math.exp(math.log(source.read_open_f64()) / shape)
        return standard_gamma(shape + 1.0, source) * boost

    d = shape - 1.0 / 3.0
    c = 1.0 / math.sqrt(9.0 * d)
    while True:
        x = standard_normal(source)
        v = 1.0 + c * x
        if v <= 0.0:
            continue
        v = v * v * v
        u = source.read_open_f64()
        x2 = x * x
        if u < 1.0 - 0.0331 * x2 * x2:
            return d * v
        if math.log(u) < 0.5 * x2 + d * (1.0 - v + math.log(v)):
            return d * v


def bernoulli_trials(n: int, p: float, source: Source) -> int:
    """Count successes in n explicit Bernoulli(p) trials (n draws)."""
    successes = 0
    for _ in range(n):
        if source.read_f64() < p:
            successes += 1
    return successes


def binomial_inversion(n: int, p: float, source: Source) -> int:
    """Binomial(n, p) by sequential inversion (one draw).

    Walks the cumulative mass from 0 upwards, so the expected cost is
    O(n * p); meant for small means with ``p <= 1/2``.
    """
    ratio = p / (1.0 - p)
    mass = math.exp(n * math.log1p(-p))
    cumulative = mass
    u = source.read_f64()
    k = 0
    while cumulative <= u and k < n:
        k += 1
        mass *= ratio * (n - k + 1) / k
        if cumulative + mass == cumulative:
            break
        cumulative += mass
    return k


def poisson_inversion(lam: float, source: Source) -> int:
    """Poisson(lam) by sequential inversion (one draw); for small lam."""
    mass = math.exp(-lam)
    cumulative = mass
    u = source.read_f64()
    k = 0
    while cumulative <= u:
        k += 1
        mass *= lam / k
        if cumulative + mass == cumulative:
            break
        cumulative += mass
    return k


def poisson_ptrs(lam: float, source: Source) -> int:
    """Poisson(lam) by Hormann's transformed rejection with squeeze (PTRS).

    Valid for lam >= 10; the acceptance rate is above 0.9 there.
    """
    slam = math.sqrt(lam)
    loglam = math.log(lam)
    b = 0.931 + 2.53 * slam
    a = -0.059 + 0.02483 * b
    inv_alpha = 1.1239 + 1.1328 / (b - 3.4)
    vr = 0.9277 - 3.6224 / (b - 2.0)

    while True:
        u = source.read_open_f64() - 0.5
        v = source.read_open_f64()
        us = 0.5 - abs(u)
        k = int(math.floor((2.0 * a / us + b) * u + lam + 0.43))
        if us >= 0.07 and v <= vr:
            return k
        if k < 0 or (us < 0.013 and v > us):
            continue
        accept = math.log(v) + math.log(inv_alpha) - math.log(a / (us * us) + b)
        if accept <= -lam + k * loglam - log_gamma(k + 1.0):
            return k


def geometric(p: float, source: Source) -> int:
    """Number of Bernoulli(p) trials up to and including the first success."""
    u = source.read_f64()
    if p == 1.0:
        return 1
    k = math.ceil(math.log1p(-u) / math.log1p(-p))
    return max(1, int(k))
