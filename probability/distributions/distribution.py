# distributions/distribution.py
from __future__ import annotations

import math
from abc import ABCMeta, abstractmethod
from typing import Callable, Generic, List, Tuple

import numpy as np

from ..array_backend.utils import elementwise
from ..custom_types import Array, ArrayLike, T
from ..errors import DomainError
from ..source import Source
from ._utils import _check_unit_interval

__all__ = [
    "Distribution",
    "Continuous",
    "Discrete",
]

# -------------------------- Abstract Classes ----------------------------


class _FrozenMeta(ABCMeta):
    """Freezes instances once the outermost ``__init__`` has returned."""

    def __call__(cls, *args, **kwargs):
        instance = super().__call__(*args, **kwargs)
        object.__setattr__(instance, "_frozen", True)
        return instance


class Distribution(Generic[T], metaclass=_FrozenMeta):
    """
    Abstract base class for univariate distributions.

    Instances are immutable: parameters are validated in ``__init__`` and
    cannot be reassigned afterwards, so one instance can be shared by any
    number of threads for evaluation. Sampling draws its randomness from a
    caller-owned :class:`~probability.source.Source`.

    Evaluation methods (``cdf``, ``quantile``, ``density``/``mass``) accept a
    scalar and return a Python scalar, or accept an array-like and return a
    numpy array of the same shape.

    Subclasses implement the private hooks ``_cdf``, ``_quantile``,
    ``_sample`` and the moments; the public methods handle support bounds,
    argument validation and array inputs.
    """

    _frozen = False

    def __setattr__(self, name, value):
        if self._frozen:
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        if self._frozen:
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__delattr__(name)

    # ---- Support ----
    @property
    @abstractmethod
    def support(self) -> Tuple[float, float]:
        """(infimum, supremum) of the support; either end may be infinite."""
        raise NotImplementedError

    # ---- Distribution function ----
    @elementwise
    def cdf(self, x: ArrayLike) -> float | Array:
        """P(X <= x). 0 below the support, 1 at or above its supremum."""
        if math.isnan(x):
            return math.nan
        lower, upper = self.support
        if x < lower:
            return 0.0
        if x >= upper:
            return 1.0
        return self._cdf(x)

    @elementwise
    def sf(self, x: ArrayLike) -> float | Array:
        """Survival function P(X > x)."""
        if math.isnan(x):
            return math.nan
        lower, upper = self.support
        if x < lower:
            return 1.0
        if x >= upper:
            return 0.0
        return self._sf(x)

    @elementwise(dtype="_quantile_dtype")
    def quantile(self, p: ArrayLike) -> float | int | Array:
        """Smallest x with cdf(x) >= p.

        ``quantile(0)`` is the support infimum and ``quantile(1)`` the
        supremum (possibly infinite).

        Raises:
            DomainError: If p lies outside [0, 1] or is NaN.
        """
        p = _check_unit_interval(p)
        lower, upper = self.support
        if p == 0.0:
            return lower
        if p == 1.0:
            return upper
        return self._quantile(p)

    inv_cdf = quantile

    @abstractmethod
    def _cdf(self, x):
        raise NotImplementedError

    def _sf(self, x) -> float:
        return 1.0 - self._cdf(x)

    @abstractmethod
    def _quantile(self, p: float):
        raise NotImplementedError

    # ---- Summary statistics ----
    @abstractmethod
    def mean(self) -> float:
        """Expected value.

        Raises:
            UndefinedMomentError: If the mean is not finite.
        """
        raise NotImplementedError

    @abstractmethod
    def variance(self) -> float:
        """Variance.

        Raises:
            UndefinedMomentError: If the variance is not finite.
        """
        raise NotImplementedError

    def std(self) -> float:
        """Standard deviation."""
        return math.sqrt(self.variance())

    def median(self) -> float:
        """Median; defaults to ``quantile(0.5)``."""
        return self.quantile(0.5)

    def modes(self) -> List:
        """Values at which the density/mass attains its maximum."""
        raise NotImplementedError(f"modes not implemented for {type(self).__name__}")

    def entropy(self) -> float:
        """Differential entropy (continuous) or Shannon entropy (discrete), in nats."""
        raise NotImplementedError(f"entropy not implemented for {type(self).__name__}")

    def skewness(self) -> float:
        raise NotImplementedError(f"skewness not implemented for {type(self).__name__}")

    def kurtosis(self) -> float:
        """Excess kurtosis."""
        raise NotImplementedError(f"kurtosis not implemented for {type(self).__name__}")

    # ---- Sampling ----
    def sample(self, source: Source) -> T:
        """Draw one sample using the family's sampling algorithm."""
        return self._sample(source)

    def sampler(self) -> Callable[[Source], T]:
        """Return a draw function for one sampling session.

        Stateless families return their plain sampling routine. Families that
        produce values in pairs keep the spare value inside the returned
        callable, so it is never shared between sessions.
        """
        return self._sample

    def samples(self, source: Source, n_samples: int) -> Array:
        """Draw `n_samples` independent samples as a 1-D array."""
        from ..sampling.independent import Independent

        return Independent(self, source).take(n_samples)

    @abstractmethod
    def _sample(self, source: Source) -> T:
        raise NotImplementedError

    # ---- Misc ----
    def _parameters(self) -> dict:
        return {}

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self._parameters().items())
        return f"{type(self).__name__}({params})"

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._parameters() == other._parameters()

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self._parameters().items())))


class Continuous(Distribution[float]):
    """
    Abstract base for real-valued distributions with a density.

    The default sampler is inverse-transform sampling on an open-interval
    uniform draw; families with a better algorithm override ``_sample``.
    """

    _quantile_dtype = float
    _sample_dtype = float

    @elementwise
    def density(self, x: ArrayLike) -> float | Array:
        """Probability density at x; 0 outside the support."""
        if math.isnan(x):
            return math.nan
        lower, upper = self.support
        if x < lower or x > upper:
            return 0.0
        return self._density(x)

    pdf = density

    @elementwise
    def log_density(self, x: ArrayLike) -> float | Array:
        """Natural log of the density; ``-inf`` outside the support."""
        if math.isnan(x):
            return math.nan
        lower, upper = self.support
        if x < lower or x > upper:
            return -math.inf
        return self._log_density(x)

    @abstractmethod
    def _density(self, x: float) -> float:
        raise NotImplementedError

    def _log_density(self, x: float) -> float:
        d = self._density(x)
        return math.log(d) if d > 0.0 else -math.inf

    def _sample(self, source: Source) -> float:
        return self._quantile(source.read_open_f64())


class Discrete(Distribution[int]):
    """
    Abstract base for integer-valued distributions.

    ``cdf`` accepts any real x and evaluates at ``floor(x)``. ``mass`` is 0 at
    non-integers and outside the support. Array results of ``quantile`` are
    float arrays when the support is unbounded, since ``quantile(1)`` is
    infinite there.
    """

    _sample_dtype = np.int64

    @property
    def _quantile_dtype(self):
        return np.int64 if math.isfinite(self.support[1]) else float

    @elementwise
    def mass(self, k: ArrayLike) -> float | Array:
        """Probability mass P(X = k)."""
        if math.isnan(k):
            return math.nan
        lower, upper = self.support
        if k < lower or k > upper or k != math.floor(k):
            return 0.0
        return self._mass(int(k))

    pmf = mass

    @elementwise
    def log_mass(self, k: ArrayLike) -> float | Array:
        """Natural log of the mass; ``-inf`` where the mass is 0."""
        if math.isnan(k):
            return math.nan
        lower, upper = self.support
        if k < lower or k > upper or k != math.floor(k):
            return -math.inf
        return self._log_mass(int(k))

    @elementwise
    def cdf(self, x: ArrayLike) -> float | Array:
        """P(X <= x) for real x."""
        if math.isnan(x):
            return math.nan
        lower, upper = self.support
        if x < lower:
            return 0.0
        if x >= upper:
            return 1.0
        return self._cdf(int(math.floor(x)))

    @elementwise
    def sf(self, x: ArrayLike) -> float | Array:
        """P(X > x) for real x."""
        if math.isnan(x):
            return math.nan
        lower, upper = self.support
        if x < lower:
            return 1.0
        if x >= upper:
            return 0.0
        return self._sf(int(math.floor(x)))

    @abstractmethod
    def _mass(self, k: int) -> float:
        raise NotImplementedError

    def _log_mass(self, k: int) -> float:
        m = self._mass(k)
        return math.log(m) if m > 0.0 else -math.inf

    def median(self) -> float:
        return float(self.quantile(0.5))

    def _sample(self, source: Source) -> int:
        return self._quantile(source.read_open_f64())
