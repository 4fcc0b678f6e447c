# distributions/discrete.py
"""
Discrete distributions on the integers.

Binomial and Poisson evaluate their CDFs through the regularized incomplete
beta and gamma functions and invert them with an integer search started from
a normal approximation. Their samplers pick an algorithm once, at
construction, from the parameters.
"""

from __future__ import annotations

import bisect
import logging
import math
from typing import List, Tuple

import numpy as np

from ..array_backend.utils import _ensure_vector
from ..errors import ConstructionError, UndefinedMomentError
from ..roots import invert_discrete_cdf
from ..sampling import engine
from ..source import Source
from ..special import erfc_inv, incomplete_beta, incomplete_gamma, incomplete_gamma_upper, log_gamma
from ._utils import _count, _positive, _probability
from .distribution import Discrete

log = logging.getLogger(__name__)

__all__ = [
    "Bernoulli",
    "Binomial",
    "Poisson",
    "Geometric",
    "Categorical",
]

_SQRT_2 = math.sqrt(2.0)

# Binomial: sequential inversion while the smaller-tail mean stays below this
_BINOMIAL_INVERSION_MEAN = 10.0
# Binomial: explicit Bernoulli trials up to this many trials
_BINOMIAL_TRIALS_MAX_N = 1000
# Poisson: sequential inversion below this mean, PTRS from here on
_POISSON_PTRS_MIN_MEAN = 10.0


def _xlogx(p: float) -> float:
    return p * math.log(p) if p > 0.0 else 0.0


def _normal_guess(mean: float, std: float, p: float) -> int:
    z = -_SQRT_2 * erfc_inv(2.0 * p)
    return max(0, int(math.floor(mean + z * std)))


class Bernoulli(Discrete):
    """Single trial with success probability ``p``: 1 with probability p, else 0."""

    def __init__(self, p: float):
        self.p = _probability("Bernoulli", "p", p)

    @property
    def support(self) -> Tuple[int, int]:
        return 0, 1

    def _mass(self, k: int) -> float:
        return self.p if k == 1 else 1.0 - self.p

    def _cdf(self, k: int) -> float:
        return 1.0 - self.p

    def _sf(self, k: int) -> float:
        return self.p

    def _quantile(self, p: float) -> int:
        return 0 if p <= 1.0 - self.p else 1

    def mean(self) -> float:
        return self.p

    def variance(self) -> float:
        return self.p * (1.0 - self.p)

    def median(self) -> float:
        if self.p == 0.5:
            return 0.5
        return 1.0 if self.p > 0.5 else 0.0

    def modes(self) -> List[int]:
        q = 1.0 - self.p
        if self.p == q:
            return [0, 1]
        return [1] if self.p > q else [0]

    def entropy(self) -> float:
        return -(_xlogx(self.p) + _xlogx(1.0 - self.p))

    def skewness(self) -> float:
        pq = self.variance()
        if pq == 0.0:
            raise UndefinedMomentError(f"Bernoulli skewness is undefined for p={self.p}")
        return (1.0 - 2.0 * self.p) / math.sqrt(pq)

    def kurtosis(self) -> float:
        pq = self.variance()
        if pq == 0.0:
            raise UndefinedMomentError(f"Bernoulli kurtosis is undefined for p={self.p}")
        return (1.0 - 6.0 * pq) / pq

    def _sample(self, source: Source) -> int:
        return 1 if source.read_f64() < self.p else 0

    def _parameters(self) -> dict:
        return {"p": self.p}


class Binomial(Discrete):
    """Number of successes in ``n`` independent trials with success probability ``p``.

    CDF: ``I_{1-p}(n - k, k + 1)``. Sampling strategy, chosen once per
    instance:

    - ``n * min(p, 1 - p) < 10``: sequential inversion on the smaller tail;
    - ``n <= 1000``: explicit Bernoulli trials;
    - otherwise: inverse transform through the CDF search.
    """

    def __init__(self, n: int, p: float):
        self.n = _count("Binomial", "n", n)
        self.p = _probability("Binomial", "p", p)
        if self.n == 0 or self.p in (0.0, 1.0):
            self._strategy = "degenerate"
        elif self.n * min(self.p, 1.0 - self.p) < _BINOMIAL_INVERSION_MEAN:
            self._strategy = "inversion"
        elif self.n <= _BINOMIAL_TRIALS_MAX_N:
            self._strategy = "trials"
        else:
            self._strategy = "search"
        log.debug(f"Binomial(n={self.n}, p={self.p}): sampling by {self._strategy}")

    @property
    def support(self) -> Tuple[int, int]:
        return 0, self.n

    def _log_mass(self, k: int) -> float:
        n, p = self.n, self.p
        if p == 0.0:
            return 0.0 if k == 0 else -math.inf
        if p == 1.0:
            return 0.0 if k == n else -math.inf
        return (
            log_gamma(n + 1.0) - log_gamma(k + 1.0) - log_gamma(n - k + 1.0)
            + k * math.log(p) + (n - k) * math.log1p(-p)
        )

    def _mass(self, k: int) -> float:
        return math.exp(self._log_mass(k))

    def _cdf(self, k: int) -> float:
        # k < n here; the base class answers k >= n
        return incomplete_beta(self.n - k, k + 1.0, 1.0 - self.p)

    def _sf(self, k: int) -> float:
        return incomplete_beta(k + 1.0, self.n - k, self.p)

    def _quantile(self, p: float) -> int:
        guess = _normal_guess(self.mean(), self.std(), p)
        return invert_discrete_cdf(self.cdf, p, lower=0, upper=self.n, guess=guess)

    def mean(self) -> float:
        return self.n * self.p

    def variance(self) -> float:
        return self.n * self.p * (1.0 - self.p)

    def modes(self) -> List[int]:
        if self.p == 1.0:
            return [self.n]
        m = (self.n + 1) * self.p
        if self.p > 0.0 and m == math.floor(m) and m >= 1.0:
            return [int(m) - 1, int(m)]
        return [min(int(math.floor(m)), self.n)]

    def entropy(self) -> float:
        var = self.variance()
        if var == 0.0:
            return 0.0
        if self.n > 10000 and var > 80.0:
            # normal approximation; the exact sum is too long here
            return 0.5 * math.log(2.0 * math.pi * math.e * var)
        return -sum(_xlogx(self._mass(k)) for k in range(self.n + 1))

    def skewness(self) -> float:
        var = self.variance()
        if var == 0.0:
            raise UndefinedMomentError(f"Binomial skewness is undefined for {self!r}")
        return (1.0 - 2.0 * self.p) / math.sqrt(var)

    def kurtosis(self) -> float:
        var = self.variance()
        if var == 0.0:
            raise UndefinedMomentError(f"Binomial kurtosis is undefined for {self!r}")
        return (1.0 - 6.0 * self.p * (1.0 - self.p)) / var

    def _sample(self, source: Source) -> int:
        strategy = self._strategy
        if strategy == "degenerate":
            return self.n if self.p == 1.0 else 0
        if strategy == "inversion":
            if self.p > 0.5:
                return self.n - engine.binomial_inversion(self.n, 1.0 - self.p, source)
            return engine.binomial_inversion(self.n, self.p, source)
        if strategy == "trials":
            return engine.bernoulli_trials(self.n, self.p, source)
        return self._quantile(source.read_open_f64())

    def _parameters(self) -> dict:
        return {"n": self.n, "p": self.p}


class Poisson(Discrete):
    """Poisson distribution with mean ``lam``.

    CDF: ``Q(k + 1, lam)``. Samples by sequential inversion for ``lam < 10``
    and by Hormann's transformed rejection (PTRS) otherwise.
    """

    def __init__(self, lam: float):
        self.lam = _positive("Poisson", "lam", lam)
        self._use_ptrs = self.lam >= _POISSON_PTRS_MIN_MEAN
        log.debug(
            f"Poisson(lam={self.lam}): sampling by "
            f"{'transformed rejection' if self._use_ptrs else 'inversion'}"
        )

    @property
    def support(self) -> Tuple[float, float]:
        return 0, math.inf

    def _log_mass(self, k: int) -> float:
        return k * math.log(self.lam) - self.lam - log_gamma(k + 1.0)

    def _mass(self, k: int) -> float:
        return math.exp(self._log_mass(k))

    def _cdf(self, k: int) -> float:
        return incomplete_gamma_upper(k + 1.0, self.lam)

    def _sf(self, k: int) -> float:
        return incomplete_gamma(k + 1.0, self.lam)

    def _quantile(self, p: float) -> int:
        guess = _normal_guess(self.lam, math.sqrt(self.lam), p)
        return invert_discrete_cdf(self._cdf, p, lower=0, guess=guess)

    def mean(self) -> float:
        return self.lam

    def variance(self) -> float:
        return self.lam

    def modes(self) -> List[int]:
        if self.lam == math.floor(self.lam):
            return [int(self.lam) - 1, int(self.lam)]
        return [int(math.floor(self.lam))]

    def entropy(self) -> float:
        lam = self.lam
        if lam > 1000.0:
            return (
                0.5 * math.log(2.0 * math.pi * math.e * lam)
                - 1.0 / (12.0 * lam)
                - 1.0 / (24.0 * lam ** 2)
                - 19.0 / (360.0 * lam ** 3)
            )
        total = 0.0
        k = 0
        cutoff = lam + 40.0 * math.sqrt(lam) + 40.0
        while k <= cutoff:
            total -= _xlogx(self._mass(k))
            k += 1
        return total

    def skewness(self) -> float:
        return 1.0 / math.sqrt(self.lam)

    def kurtosis(self) -> float:
        return 1.0 / self.lam

    def _sample(self, source: Source) -> int:
        if self._use_ptrs:
            return engine.poisson_ptrs(self.lam, source)
        return engine.poisson_inversion(self.lam, source)

    def _parameters(self) -> dict:
        return {"lam": self.lam}


class Geometric(Discrete):
    """Number of Bernoulli(p) trials up to and including the first success.

    Support is {1, 2, ...}; ``P(X = k) = (1 - p)**(k - 1) * p``.
    """

    def __init__(self, p: float):
        p = _probability("Geometric", "p", p)
        if p == 0.0:
            raise ConstructionError("Geometric: p must be > 0, got 0.0")
        self.p = p
        self._log_q = math.log1p(-p) if p < 1.0 else -math.inf

    @property
    def support(self) -> Tuple[float, float]:
        return 1, math.inf

    def _mass(self, k: int) -> float:
        if self.p == 1.0:
            return 1.0 if k == 1 else 0.0
        return self.p * math.exp((k - 1) * self._log_q)

    def _cdf(self, k: int) -> float:
        if self.p == 1.0:
            return 1.0
        return -math.expm1(k * self._log_q)

    def _sf(self, k: int) -> float:
        if self.p == 1.0:
            return 0.0
        return math.exp(k * self._log_q)

    def _quantile(self, p: float) -> int:
        if self.p == 1.0:
            return 1
        guess = max(1, int(math.ceil(math.log1p(-p) / self._log_q)))
        # the closed form can land off by many steps once rounded, so search from it
        return invert_discrete_cdf(self._cdf, p, lower=1, guess=guess)

    def mean(self) -> float:
        return 1.0 / self.p

    def variance(self) -> float:
        return (1.0 - self.p) / self.p ** 2

    def modes(self) -> List[int]:
        return [1]

    def entropy(self) -> float:
        return -(_xlogx(1.0 - self.p) + _xlogx(self.p)) / self.p

    def skewness(self) -> float:
        if self.p == 1.0:
            raise UndefinedMomentError("Geometric skewness is undefined for p=1")
        return (2.0 - self.p) / math.sqrt(1.0 - self.p)

    def kurtosis(self) -> float:
        if self.p == 1.0:
            raise UndefinedMomentError("Geometric kurtosis is undefined for p=1")
        return 6.0 + self.p ** 2 / (1.0 - self.p)

    def _sample(self, source: Source) -> int:
        return engine.geometric(self.p, source)

    def _parameters(self) -> dict:
        return {"p": self.p}


class Categorical(Discrete):
    """Distribution over {0, ..., K-1} given by a probability vector.

    Args:
        probabilities: Non-negative weights summing to 1 (within 1e-9).
    """

    _SUM_TOLERANCE = 1e-9

    def __init__(self, probabilities):
        try:
            probs = _ensure_vector(probabilities)
        except (TypeError, ValueError) as e:
            raise ConstructionError(f"Categorical: probabilities must be a vector: {e}") from e
        if probs.size == 0:
            raise ConstructionError("Categorical: probabilities must not be empty")
        if not np.all(np.isfinite(probs)) or np.any(probs < 0.0) or np.any(probs > 1.0):
            raise ConstructionError(
                f"Categorical: every probability must lie in [0, 1], got {probs.tolist()!r}"
            )
        total = float(np.sum(probs))
        if abs(total - 1.0) > self._SUM_TOLERANCE:
            raise ConstructionError(f"Categorical: probabilities must sum to 1, got {total!r}")
        probs.setflags(write=False)
        self.probabilities = probs
        cumulative = np.cumsum(probs)
        cumulative[-1] = 1.0
        self._cumulative = cumulative.tolist()

    @property
    def support(self) -> Tuple[int, int]:
        return 0, len(self._cumulative) - 1

    def _mass(self, k: int) -> float:
        return float(self.probabilities[k])

    def _cdf(self, k: int) -> float:
        return self._cumulative[k]

    def _quantile(self, p: float) -> int:
        return bisect.bisect_left(self._cumulative, p)

    def mean(self) -> float:
        return float(np.dot(np.arange(self.probabilities.size), self.probabilities))

    def variance(self) -> float:
        k = np.arange(self.probabilities.size)
        return float(np.dot((k - self.mean()) ** 2, self.probabilities))

    def modes(self) -> List[int]:
        top = self.probabilities.max()
        return [int(k) for k in np.flatnonzero(self.probabilities == top)]

    def entropy(self) -> float:
        return -sum(_xlogx(float(p)) for p in self.probabilities)

    def skewness(self) -> float:
        var = self.variance()
        if var == 0.0:
            raise UndefinedMomentError("Categorical skewness is undefined for a point mass")
        k = np.arange(self.probabilities.size)
        return float(np.dot((k - self.mean()) ** 3, self.probabilities)) / var ** 1.5

    def kurtosis(self) -> float:
        var = self.variance()
        if var == 0.0:
            raise UndefinedMomentError("Categorical kurtosis is undefined for a point mass")
        k = np.arange(self.probabilities.size)
        return float(np.dot((k - self.mean()) ** 4, self.probabilities)) / var ** 2 - 3.0

    def _sample(self, source: Source) -> int:
        return self._quantile(source.read_open_f64())

    def _parameters(self) -> dict:
        return {"probabilities": tuple(self.probabilities.tolist())}
