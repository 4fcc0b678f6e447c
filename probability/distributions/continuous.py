# distributions/continuous.py
"""
Continuous distributions.

Closed-form families (Uniform, Exponential, Cauchy, Laplace, Logistic,
Triangular) invert their CDF directly. The Normal family goes through
``erfc``/``erfc_inv``; Gamma, Beta and their relatives go through the
regularized incomplete functions and invert numerically with
:func:`probability.roots.invert_continuous_cdf`.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, List, Tuple

from ..errors import ConstructionError, UndefinedMomentError
from ..roots import invert_continuous_cdf
from ..sampling import engine
from ..source import Source
from ..special import (
    digamma,
    erfc,
    erfc_inv,
    incomplete_beta,
    incomplete_gamma,
    incomplete_gamma_upper,
    ln_beta,
    log_gamma,
)
from ._utils import _positive, _real
from .distribution import Continuous

log = logging.getLogger(__name__)

__all__ = [
    "Uniform",
    "Exponential",
    "Normal",
    "Gaussian",
    "LogNormal",
    "Cauchy",
    "Laplace",
    "Logistic",
    "Triangular",
    "Gamma",
    "ChiSquared",
    "Beta",
    "Pert",
    "StudentT",
    "FisherF",
]

_SQRT_2 = math.sqrt(2.0)
_LN_2PI_E = math.log(2.0 * math.pi * math.e)
_SMALLEST = math.ulp(0.0)
_BELOW_ONE = math.nextafter(1.0, 0.0)


def _standard_normal_quantile(p: float) -> float:
    return -_SQRT_2 * erfc_inv(2.0 * p)


# ------------------------------ Uniform ------------------------------


class Uniform(Continuous):
    """Continuous uniform distribution on [a, b].

    Args:
        a: Left end of the support.
        b: Right end of the support, b > a.

    Raises:
        ConstructionError: If ``a >= b`` or either bound is not finite.
    """

    def __init__(self, a: float = 0.0, b: float = 1.0):
        a = _real("Uniform", "a", a)
        b = _real("Uniform", "b", b)
        if not a < b:
            raise ConstructionError(f"Uniform: need a < b, got a={a!r}, b={b!r}")
        self.a = a
        self.b = b

    @property
    def support(self) -> Tuple[float, float]:
        return self.a, self.b

    def _density(self, x: float) -> float:
        return 1.0 / (self.b - self.a)

    def _cdf(self, x: float) -> float:
        return (x - self.a) / (self.b - self.a)

    def _sf(self, x: float) -> float:
        return (self.b - x) / (self.b - self.a)

    def _quantile(self, p: float) -> float:
        return self.a + (self.b - self.a) * p

    def mean(self) -> float:
        return 0.5 * (self.a + self.b)

    def variance(self) -> float:
        return (self.b - self.a) ** 2 / 12.0

    def median(self) -> float:
        return self.mean()

    def entropy(self) -> float:
        return math.log(self.b - self.a)

    def skewness(self) -> float:
        return 0.0

    def kurtosis(self) -> float:
        return -6.0 / 5.0

    def _sample(self, source: Source) -> float:
        # scale-and-shift of a single [0, 1) draw
        return self.a + (self.b - self.a) * engine.uniform(source)

    def _parameters(self) -> dict:
        return {"a": self.a, "b": self.b}


# ------------------------------ Exponential ------------------------------


class Exponential(Continuous):
    """Exponential distribution with rate ``rate`` (mean ``1 / rate``)."""

    def __init__(self, rate: float = 1.0):
        self.rate = _positive("Exponential", "rate", rate)

    @property
    def support(self) -> Tuple[float, float]:
        return 0.0, math.inf

    def _density(self, x: float) -> float:
        return self.rate * math.exp(-self.rate * x)

    def _log_density(self, x: float) -> float:
        return math.log(self.rate) - self.rate * x

    def _cdf(self, x: float) -> float:
        return -math.expm1(-self.rate * x)

    def _sf(self, x: float) -> float:
        return math.exp(-self.rate * x)

    def _quantile(self, p: float) -> float:
        return -math.log1p(-p) / self.rate

    def mean(self) -> float:
        return 1.0 / self.rate

    def variance(self) -> float:
        return 1.0 / self.rate ** 2

    def median(self) -> float:
        return math.log(2.0) / self.rate

    def modes(self) -> List[float]:
        return [0.0]

    def entropy(self) -> float:
        return 1.0 - math.log(self.rate)

    def skewness(self) -> float:
        return 2.0

    def kurtosis(self) -> float:
        return 6.0

    def _sample(self, source: Source) -> float:
        return engine.standard_exponential(source) / self.rate

    def _parameters(self) -> dict:
        return {"rate": self.rate}


# ------------------------------ Normal ------------------------------


class _BoxMullerSession:
    """Draw function that hands out both values of every Box-Muller pair.

    The spare value is only reused when the next call comes with the same
    source; a different source discards it.
    """

    def __init__(self, mu: float, sigma: float, transform: Callable[[float], float] | None = None):
        self._mu = mu
        self._sigma = sigma
        self._transform = transform
        self._spare = None
        self._source = None

    def __call__(self, source: Source) -> float:
        if self._spare is not None and source is self._source:
            z, self._spare = self._spare, None
        else:
            z, self._spare = engine.box_muller(source)
            self._source = source
        value = self._mu + self._sigma * z
        return self._transform(value) if self._transform is not None else value


class Normal(Continuous):
    """Normal (Gaussian) distribution N(mu, sigma^2).

    The CDF is ``erfc(-(x - mu) / (sigma sqrt 2)) / 2``, which keeps relative
    precision in the lower tail; the survival function mirrors it for the
    upper tail. Sampling uses the Box-Muller transform: a single ``sample``
    call consumes two draws and returns one value, while a session obtained
    from :meth:`sampler` (as used by ``Independent``) returns both values of
    each pair.

    Args:
        mu: Mean.
        sigma: Standard deviation, sigma > 0.
    """

    def __init__(self, mu: float = 0.0, sigma: float = 1.0):
        self.mu = _real("Normal", "mu", mu)
        self.sigma = _positive("Normal", "sigma", sigma)

    @property
    def support(self) -> Tuple[float, float]:
        return -math.inf, math.inf

    def _z(self, x: float) -> float:
        return (x - self.mu) / self.sigma

    def _density(self, x: float) -> float:
        return math.exp(self._log_density(x))

    def _log_density(self, x: float) -> float:
        z = self._z(x)
        return -0.5 * z * z - math.log(self.sigma) - 0.5 * math.log(2.0 * math.pi)

    def _cdf(self, x: float) -> float:
        return 0.5 * erfc(-self._z(x) / _SQRT_2)

    def _sf(self, x: float) -> float:
        return 0.5 * erfc(self._z(x) / _SQRT_2)

    def _quantile(self, p: float) -> float:
        return self.mu + self.sigma * _standard_normal_quantile(p)

    def mean(self) -> float:
        return self.mu

    def variance(self) -> float:
        return self.sigma ** 2

    def std(self) -> float:
        return self.sigma

    def median(self) -> float:
        return self.mu

    def modes(self) -> List[float]:
        return [self.mu]

    def entropy(self) -> float:
        return 0.5 * _LN_2PI_E + math.log(self.sigma)

    def skewness(self) -> float:
        return 0.0

    def kurtosis(self) -> float:
        return 0.0

    def _sample(self, source: Source) -> float:
        return self.mu + self.sigma * engine.standard_normal(source)

    def sampler(self) -> Callable[[Source], float]:
        return _BoxMullerSession(self.mu, self.sigma)

    def _parameters(self) -> dict:
        return {"mu": self.mu, "sigma": self.sigma}


Gaussian = Normal


class LogNormal(Continuous):
    """Distribution of ``exp(Y)`` for ``Y ~ N(mu, sigma^2)``."""

    def __init__(self, mu: float = 0.0, sigma: float = 1.0):
        self.mu = _real("LogNormal", "mu", mu)
        self.sigma = _positive("LogNormal", "sigma", sigma)
        self._normal = Normal(self.mu, self.sigma)

    @property
    def support(self) -> Tuple[float, float]:
        return 0.0, math.inf

    def _density(self, x: float) -> float:
        if x == 0.0:
            return 0.0
        return math.exp(self._log_density(x))

    def _log_density(self, x: float) -> float:
        if x == 0.0:
            return -math.inf
        return self._normal._log_density(math.log(x)) - math.log(x)

    def _cdf(self, x: float) -> float:
        if x == 0.0:
            return 0.0
        return self._normal._cdf(math.log(x))

    def _sf(self, x: float) -> float:
        if x == 0.0:
            return 1.0
        return self._normal._sf(math.log(x))

    def _quantile(self, p: float) -> float:
        return math.exp(self._normal._quantile(p))

    def mean(self) -> float:
        return math.exp(self.mu + 0.5 * self.sigma ** 2)

    def variance(self) -> float:
        s2 = self.sigma ** 2
        return math.expm1(s2) * math.exp(2.0 * self.mu + s2)

    def median(self) -> float:
        return math.exp(self.mu)

    def modes(self) -> List[float]:
        return [math.exp(self.mu - self.sigma ** 2)]

    def entropy(self) -> float:
        return self.mu + 0.5 * _LN_2PI_E + math.log(self.sigma)

    def skewness(self) -> float:
        s2 = self.sigma ** 2
        return (math.exp(s2) + 2.0) * math.sqrt(math.expm1(s2))

    def kurtosis(self) -> float:
        s2 = self.sigma ** 2
        return math.exp(4.0 * s2) + 2.0 * math.exp(3.0 * s2) + 3.0 * math.exp(2.0 * s2) - 6.0

    def _sample(self, source: Source) -> float:
        return math.exp(self._normal._sample(source))

    def sampler(self) -> Callable[[Source], float]:
        return _BoxMullerSession(self.mu, self.sigma, transform=math.exp)

    def _parameters(self) -> dict:
        return {"mu": self.mu, "sigma": self.sigma}


# ------------------------------ Cauchy ------------------------------


class Cauchy(Continuous):
    """Cauchy (Lorentz) distribution with location ``loc`` and scale ``scale``.

    Mean, variance and higher moments do not exist; asking for them raises
    :class:`~probability.errors.UndefinedMomentError`.
    """

    def __init__(self, loc: float = 0.0, scale: float = 1.0):
        self.loc = _real("Cauchy", "loc", loc)
        self.scale = _positive("Cauchy", "scale", scale)

    @property
    def support(self) -> Tuple[float, float]:
        return -math.inf, math.inf

    def _density(self, x: float) -> float:
        deviation = x - self.loc
        return self.scale / (math.pi * (self.scale * self.scale + deviation * deviation))

    def _cdf(self, x: float) -> float:
        # atan2 form keeps relative precision in the lower tail
        return math.atan2(1.0, -(x - self.loc) / self.scale) / math.pi

    def _sf(self, x: float) -> float:
        return math.atan2(1.0, (x - self.loc) / self.scale) / math.pi

    def _quantile(self, p: float) -> float:
        if p < 0.25:
            return self.loc - self.scale / math.tan(math.pi * p)
        if p > 0.75:
            return self.loc + self.scale / math.tan(math.pi * (1.0 - p))
        return self.loc + self.scale * math.tan(math.pi * (p - 0.5))

    def mean(self) -> float:
        raise UndefinedMomentError("Cauchy distribution has no mean")

    def variance(self) -> float:
        raise UndefinedMomentError("Cauchy distribution has no variance")

    def skewness(self) -> float:
        raise UndefinedMomentError("Cauchy distribution has no skewness")

    def kurtosis(self) -> float:
        raise UndefinedMomentError("Cauchy distribution has no kurtosis")

    def median(self) -> float:
        return self.loc

    def modes(self) -> List[float]:
        return [self.loc]

    def entropy(self) -> float:
        return math.log(4.0 * math.pi * self.scale)

    def _parameters(self) -> dict:
        return {"loc": self.loc, "scale": self.scale}


# ------------------------------ Laplace ------------------------------


class Laplace(Continuous):
    """Laplace (double exponential) distribution with location ``loc`` and scale ``scale``."""

    def __init__(self, loc: float = 0.0, scale: float = 1.0):
        self.loc = _real("Laplace", "loc", loc)
        self.scale = _positive("Laplace", "scale", scale)

    @property
    def support(self) -> Tuple[float, float]:
        return -math.inf, math.inf

    def _density(self, x: float) -> float:
        return 0.5 / self.scale * math.exp(-abs(x - self.loc) / self.scale)

    def _cdf(self, x: float) -> float:
        z = (x - self.loc) / self.scale
        if z <= 0.0:
            return 0.5 * math.exp(z)
        return 1.0 - 0.5 * math.exp(-z)

    def _sf(self, x: float) -> float:
        return self._cdf(2.0 * self.loc - x)

    def _quantile(self, p: float) -> float:
        if p <= 0.5:
            return self.loc + self.scale * math.log(2.0 * p)
        return self.loc - self.scale * math.log(2.0 * (1.0 - p))

    def mean(self) -> float:
        return self.loc

    def variance(self) -> float:
        return 2.0 * self.scale ** 2

    def median(self) -> float:
        return self.loc

    def modes(self) -> List[float]:
        return [self.loc]

    def entropy(self) -> float:
        return 1.0 + math.log(2.0 * self.scale)

    def skewness(self) -> float:
        return 0.0

    def kurtosis(self) -> float:
        return 3.0

    def _parameters(self) -> dict:
        return {"loc": self.loc, "scale": self.scale}


# ------------------------------ Logistic ------------------------------


class Logistic(Continuous):
    """Logistic distribution with location ``loc`` and scale ``scale``."""

    def __init__(self, loc: float = 0.0, scale: float = 1.0):
        self.loc = _real("Logistic", "loc", loc)
        self.scale = _positive("Logistic", "scale", scale)

    @property
    def support(self) -> Tuple[float, float]:
        return -math.inf, math.inf

    @staticmethod
    def _sigmoid(z: float) -> float:
        if z >= 0.0:
            return 1.0 / (1.0 + math.exp(-z))
        e = math.exp(z)
        return e / (1.0 + e)

    def _density(self, x: float) -> float:
        e = math.exp(-abs(x - self.loc) / self.scale)
        return e / (self.scale * (1.0 + e) ** 2)

    def _cdf(self, x: float) -> float:
        return self._sigmoid((x - self.loc) / self.scale)

    def _sf(self, x: float) -> float:
        return self._sigmoid(-(x - self.loc) / self.scale)

    def _quantile(self, p: float) -> float:
        return self.loc + self.scale * (math.log(p) - math.log1p(-p))

    def mean(self) -> float:
        return self.loc

    def variance(self) -> float:
        return (self.scale * math.pi) ** 2 / 3.0

    def median(self) -> float:
        return self.loc

    def modes(self) -> List[float]:
        return [self.loc]

    def entropy(self) -> float:
        return math.log(self.scale) + 2.0

    def skewness(self) -> float:
        return 0.0

    def kurtosis(self) -> float:
        return 6.0 / 5.0

    def _parameters(self) -> dict:
        return {"loc": self.loc, "scale": self.scale}


# ------------------------------ Triangular ------------------------------


class Triangular(Continuous):
    """Triangular distribution on [a, b] with mode c.

    Args:
        a: Left end of the support.
        b: Right end of the support, b > a.
        c: Mode, a <= c <= b.
    """

    def __init__(self, a: float, b: float, c: float):
        a = _real("Triangular", "a", a)
        b = _real("Triangular", "b", b)
        c = _real("Triangular", "c", c)
        if not (a < b and a <= c <= b):
            raise ConstructionError(
                f"Triangular: need a < b and a <= c <= b, got a={a!r}, b={b!r}, c={c!r}"
            )
        self.a = a
        self.b = b
        self.c = c

    @property
    def support(self) -> Tuple[float, float]:
        return self.a, self.b

    def _density(self, x: float) -> float:
        a, b, c = self.a, self.b, self.c
        if x < c:
            return 2.0 * (x - a) / ((b - a) * (c - a))
        if x == c:
            return 2.0 / (b - a)
        return 2.0 * (b - x) / ((b - a) * (b - c))

    def _cdf(self, x: float) -> float:
        a, b, c = self.a, self.b, self.c
        if x < c:
            return (x - a) ** 2 / ((b - a) * (c - a))
        return 1.0 - (b - x) ** 2 / ((b - a) * (b - c))

    def _quantile(self, p: float) -> float:
        a, b, c = self.a, self.b, self.c
        if p < (c - a) / (b - a):
            return a + math.sqrt((b - a) * (c - a) * p)
        return b - math.sqrt((b - a) * (b - c) * (1.0 - p))

    def mean(self) -> float:
        return (self.a + self.b + self.c) / 3.0

    def variance(self) -> float:
        a, b, c = self.a, self.b, self.c
        return (a * a + b * b + c * c - a * b - a * c - b * c) / 18.0

    def median(self) -> float:
        a, b, c = self.a, self.b, self.c
        if c >= 0.5 * (a + b):
            return a + math.sqrt((b - a) * (c - a) / 2.0)
        return b - math.sqrt((b - a) * (b - c) / 2.0)

    def modes(self) -> List[float]:
        return [self.c]

    def entropy(self) -> float:
        return 0.5 + math.log(0.5 * (self.b - self.a))

    def skewness(self) -> float:
        a, b, c = self.a, self.b, self.c
        numerator = (a + b - 2.0 * c) * (2.0 * a - b - c) * (a - 2.0 * b + c)
        denominator = a * a + b * b + c * c - a * b - a * c - b * c
        return _SQRT_2 * numerator / (5.0 * denominator ** 1.5)

    def kurtosis(self) -> float:
        return -3.0 / 5.0

    def _sample(self, source: Source) -> float:
        return self._quantile(source.read_f64())

    def _parameters(self) -> dict:
        return {"a": self.a, "b": self.b, "c": self.c}


# ------------------------------ Gamma family ------------------------------


class Gamma(Continuous):
    """Gamma distribution with shape ``shape`` (k) and scale ``scale`` (theta).

    CDF: ``P(k, x / theta)``. The quantile has no closed form and is found by
    Newton/bisection from a Wilson-Hilferty starting point. Samples come from
    the Marsaglia-Tsang method (boosted for k < 1).

    Args:
        shape: k > 0.
        scale: theta > 0.
    """

    def __init__(self, shape: float, scale: float = 1.0):
        self.shape = _positive(type(self).__name__, "shape", shape)
        self.scale = _positive(type(self).__name__, "scale", scale)

    @property
    def support(self) -> Tuple[float, float]:
        return 0.0, math.inf

    def _density(self, x: float) -> float:
        if x == 0.0:
            if self.shape < 1.0:
                return math.inf
            return 1.0 / self.scale if self.shape == 1.0 else 0.0
        return math.exp(self._log_density(x))

    def _log_density(self, x: float) -> float:
        k, theta = self.shape, self.scale
        if x == 0.0:
            return math.log(self._density(0.0)) if self.shape <= 1.0 else -math.inf
        return (k - 1.0) * math.log(x) - x / theta - log_gamma(k) - k * math.log(theta)

    def _cdf(self, x: float) -> float:
        return incomplete_gamma(self.shape, x / self.scale)

    def _sf(self, x: float) -> float:
        return incomplete_gamma_upper(self.shape, x / self.scale)

    def _initial_guess(self, p: float) -> float:
        k = self.shape
        z = _standard_normal_quantile(p)
        t = 1.0 - 1.0 / (9.0 * k) + z / (3.0 * math.sqrt(k))
        if t > 0.0 and (k >= 1.0 or p > 0.1):
            return k * t ** 3 * self.scale
        # lower tail: P(k, x) ~ x^k / Gamma(k + 1)
        return math.exp((math.log(p) + log_gamma(k + 1.0)) / k) * self.scale

    def _quantile(self, p: float) -> float:
        return invert_continuous_cdf(
            self._cdf, self._density, p,
            lower=0.0, upper=math.inf, guess=self._initial_guess(p),
        )

    def mean(self) -> float:
        return self.shape * self.scale

    def variance(self) -> float:
        return self.shape * self.scale ** 2

    def modes(self) -> List[float]:
        if self.shape < 1.0:
            return [0.0]
        return [(self.shape - 1.0) * self.scale]

    def entropy(self) -> float:
        k = self.shape
        return k + math.log(self.scale) + log_gamma(k) + (1.0 - k) * digamma(k)

    def skewness(self) -> float:
        return 2.0 / math.sqrt(self.shape)

    def kurtosis(self) -> float:
        return 6.0 / self.shape

    def _sample(self, source: Source) -> float:
        return self.scale * engine.standard_gamma(self.shape, source)

    def _parameters(self) -> dict:
        return {"shape": self.shape, "scale": self.scale}


class ChiSquared(Gamma):
    """Chi-squared distribution with ``dof`` degrees of freedom: Gamma(dof / 2, 2)."""

    def __init__(self, dof: float):
        dof = _positive("ChiSquared", "dof", dof)
        super().__init__(0.5 * dof, 2.0)
        self.dof = dof

    def _parameters(self) -> dict:
        return {"dof": self.dof}


class Beta(Continuous):
    """Beta distribution on [0, 1] with shapes ``alpha`` and ``beta``.

    Samples are ``X / (X + Y)`` for independent ``X ~ Gamma(alpha)`` and
    ``Y ~ Gamma(beta)``.
    """

    def __init__(self, alpha: float, beta: float):
        self.alpha = _positive("Beta", "alpha", alpha)
        self.beta = _positive("Beta", "beta", beta)
        self._ln_norm = ln_beta(self.alpha, self.beta)

    @property
    def support(self) -> Tuple[float, float]:
        return 0.0, 1.0

    def _endpoint_density(self, shape: float) -> float:
        # density at 0 (shape=alpha) or 1 (shape=beta)
        if shape < 1.0:
            return math.inf
        if shape == 1.0:
            return math.exp(-self._ln_norm)
        return 0.0

    def _density(self, x: float) -> float:
        if x == 0.0:
            return self._endpoint_density(self.alpha)
        if x == 1.0:
            return self._endpoint_density(self.beta)
        return math.exp(self._log_density(x))

    def _log_density(self, x: float) -> float:
        if x == 0.0 or x == 1.0:
            d = self._density(x)
            return math.log(d) if d > 0.0 else -math.inf
        return (
            (self.alpha - 1.0) * math.log(x)
            + (self.beta - 1.0) * math.log1p(-x)
            - self._ln_norm
        )

    def _cdf(self, x: float) -> float:
        return incomplete_beta(self.alpha, self.beta, x)

    def _sf(self, x: float) -> float:
        return incomplete_beta(self.beta, self.alpha, 1.0 - x)

    def _initial_guess(self, p: float) -> float:
        """Starting point for the quantile search (Numerical Recipes, 6.14).

        Both shapes >= 1: a normal approximation. Otherwise the tail
        asymptotics ``I_x(a, b) ~ x^a / (a B(a, b))`` near 0 and
        ``1 - I_x(a, b) ~ (1 - x)^b / (b B(a, b))`` near 1.
        """
        a, b = self.alpha, self.beta
        if a >= 1.0 and b >= 1.0:
            z = -_standard_normal_quantile(p)
            lam = (z * z - 3.0) / 6.0
            h = 2.0 / (1.0 / (2.0 * a - 1.0) + 1.0 / (2.0 * b - 1.0))
            w = z * math.sqrt(lam + h) / h - (1.0 / (2.0 * b - 1.0) - 1.0 / (2.0 * a - 1.0)) * (
                lam + 5.0 / 6.0 - 2.0 / (3.0 * h)
            )
            x = a / (a + b * math.exp(min(2.0 * w, 700.0)))
        else:
            t = math.exp(a * math.log(a / (a + b))) / a
            u = math.exp(b * math.log(b / (a + b))) / b
            if p < t / (t + u):
                e = (math.log(p) + math.log(a) + self._ln_norm) / a
                x = math.exp(e) if e < 0.0 else self.mean()
            else:
                e = (math.log1p(-p) + math.log(b) + self._ln_norm) / b
                x = -math.expm1(e) if e < 0.0 else self.mean()
        return min(max(x, _SMALLEST), _BELOW_ONE)

    def _quantile(self, p: float) -> float:
        return invert_continuous_cdf(
            self._cdf, self._density, p,
            lower=0.0, upper=1.0, guess=self._initial_guess(p),
        )

    def mean(self) -> float:
        return self.alpha / (self.alpha + self.beta)

    def variance(self) -> float:
        a, b = self.alpha, self.beta
        return a * b / ((a + b) ** 2 * (a + b + 1.0))

    def modes(self) -> List[float]:
        a, b = self.alpha, self.beta
        if a > 1.0 and b > 1.0:
            return [(a - 1.0) / (a + b - 2.0)]
        if a == 1.0 and b == 1.0:
            raise NotImplementedError("every point of [0, 1] is a mode of Beta(1, 1)")
        modes = []
        if a < 1.0 or (a == 1.0 and b > 1.0):
            modes.append(0.0)
        if b < 1.0 or (b == 1.0 and a > 1.0):
            modes.append(1.0)
        return modes

    def entropy(self) -> float:
        a, b = self.alpha, self.beta
        return (
            self._ln_norm
            - (a - 1.0) * digamma(a)
            - (b - 1.0) * digamma(b)
            + (a + b - 2.0) * digamma(a + b)
        )

    def skewness(self) -> float:
        a, b = self.alpha, self.beta
        return 2.0 * (b - a) * math.sqrt(a + b + 1.0) / ((a + b + 2.0) * math.sqrt(a * b))

    def kurtosis(self) -> float:
        a, b = self.alpha, self.beta
        numerator = (a - b) ** 2 * (a + b + 1.0) - a * b * (a + b + 2.0)
        return 6.0 * numerator / (a * b * (a + b + 2.0) * (a + b + 3.0))

    def _sample(self, source: Source) -> float:
        x = engine.standard_gamma(self.alpha, source)
        y = engine.standard_gamma(self.beta, source)
        total = x + y
        if total == 0.0:
            # both draws underflowed (tiny shapes); the mass sits at the ends
            return 1.0 if source.read_f64() < self.mean() else 0.0
        return x / total

    def _parameters(self) -> dict:
        return {"alpha": self.alpha, "beta": self.beta}


class Pert(Continuous):
    """PERT distribution: a Beta distribution rescaled to [a, c] with mode b.

    Args:
        a: Minimum.
        b: Most likely value, a < b < c.
        c: Maximum.
    """

    def __init__(self, a: float, b: float, c: float):
        a = _real("Pert", "a", a)
        b = _real("Pert", "b", b)
        c = _real("Pert", "c", c)
        if not a < b < c:
            raise ConstructionError(f"Pert: need a < b < c, got a={a!r}, b={b!r}, c={c!r}")
        self.a = a
        self.b = b
        self.c = c
        self._beta = Beta((4.0 * b + c - 5.0 * a) / (c - a), (5.0 * c - a - 4.0 * b) / (c - a))

    @property
    def alpha(self) -> float:
        return self._beta.alpha

    @property
    def beta(self) -> float:
        return self._beta.beta

    @property
    def support(self) -> Tuple[float, float]:
        return self.a, self.c

    def _to_unit(self, x: float) -> float:
        return min(1.0, max(0.0, (x - self.a) / (self.c - self.a)))

    def _density(self, x: float) -> float:
        return self._beta._density(self._to_unit(x)) / (self.c - self.a)

    def _cdf(self, x: float) -> float:
        return self._beta._cdf(self._to_unit(x))

    def _sf(self, x: float) -> float:
        return self._beta._sf(self._to_unit(x))

    def _quantile(self, p: float) -> float:
        return self.a + (self.c - self.a) * self._beta._quantile(p)

    def mean(self) -> float:
        return (self.a + 4.0 * self.b + self.c) / 6.0

    def variance(self) -> float:
        mu = self.mean()
        return (mu - self.a) * (self.c - mu) / 7.0

    def modes(self) -> List[float]:
        return [self.b]

    def entropy(self) -> float:
        return self._beta.entropy() + math.log(self.c - self.a)

    def skewness(self) -> float:
        return self._beta.skewness()

    def kurtosis(self) -> float:
        return self._beta.kurtosis()

    def _sample(self, source: Source) -> float:
        return self.a + (self.c - self.a) * self._beta._sample(source)

    def _parameters(self) -> dict:
        return {"a": self.a, "b": self.b, "c": self.c}


class StudentT(Continuous):
    """Student's t distribution with ``dof`` degrees of freedom.

    CDF through the incomplete beta function:
    ``I_{t^2 / (dof + t^2)}(1/2, dof/2)`` near the centre and
    ``I_{dof / (dof + t^2)}(dof/2, 1/2)`` in the tails, whichever argument is
    the smaller of the two. Samples are ``Z / sqrt(V / dof)`` with
    ``Z ~ N(0, 1)`` and ``V ~ ChiSquared(dof)``.
    """

    def __init__(self, dof: float):
        self.dof = _positive("StudentT", "dof", dof)
        nu = self.dof
        self._ln_norm = (
            log_gamma(0.5 * (nu + 1.0)) - log_gamma(0.5 * nu) - 0.5 * math.log(nu * math.pi)
        )

    @property
    def support(self) -> Tuple[float, float]:
        return -math.inf, math.inf

    def _density(self, x: float) -> float:
        return math.exp(self._log_density(x))

    def _log_density(self, x: float) -> float:
        nu = self.dof
        return self._ln_norm - 0.5 * (nu + 1.0) * math.log1p(x * x / nu)

    def _lower_tail(self, t: float) -> float:
        """P(T <= -|t|)."""
        nu = self.dof
        t2 = t * t
        if t2 < nu:
            return 0.5 - 0.5 * incomplete_beta(0.5, 0.5 * nu, t2 / (nu + t2))
        return 0.5 * incomplete_beta(0.5 * nu, 0.5, nu / (nu + t2))

    def _cdf(self, x: float) -> float:
        tail = self._lower_tail(x)
        return tail if x <= 0.0 else 1.0 - tail

    def _sf(self, x: float) -> float:
        return self._cdf(-x)

    def _quantile(self, p: float) -> float:
        return invert_continuous_cdf(
            self._cdf, self._density, p,
            lower=-math.inf, upper=math.inf, guess=_standard_normal_quantile(p),
        )

    def mean(self) -> float:
        if self.dof <= 1.0:
            raise UndefinedMomentError(f"StudentT mean is undefined for dof={self.dof}")
        return 0.0

    def variance(self) -> float:
        if self.dof <= 2.0:
            raise UndefinedMomentError(f"StudentT variance is not finite for dof={self.dof}")
        return self.dof / (self.dof - 2.0)

    def median(self) -> float:
        return 0.0

    def modes(self) -> List[float]:
        return [0.0]

    def entropy(self) -> float:
        nu = self.dof
        return (
            0.5 * (nu + 1.0) * (digamma(0.5 * (nu + 1.0)) - digamma(0.5 * nu))
            + 0.5 * math.log(nu)
            + ln_beta(0.5 * nu, 0.5)
        )

    def skewness(self) -> float:
        if self.dof <= 3.0:
            raise UndefinedMomentError(f"StudentT skewness is undefined for dof={self.dof}")
        return 0.0

    def kurtosis(self) -> float:
        if self.dof <= 4.0:
            raise UndefinedMomentError(f"StudentT kurtosis is not finite for dof={self.dof}")
        return 6.0 / (self.dof - 4.0)

    def _sample(self, source: Source) -> float:
        z = engine.standard_normal(source)
        v = 0.0
        while v == 0.0:
            v = 2.0 * engine.standard_gamma(0.5 * self.dof, source)
        return z / math.sqrt(v / self.dof)

    def _parameters(self) -> dict:
        return {"dof": self.dof}


class FisherF(Continuous):
    """Fisher-Snedecor F distribution with ``d1`` and ``d2`` degrees of freedom.

    If ``X ~ F(d1, d2)`` then ``d1 X / (d1 X + d2) ~ Beta(d1/2, d2/2)`` and
    ``d2 / (d1 X + d2) ~ Beta(d2/2, d1/2)``. The CDF evaluates whichever of the
    two lies below the symmetry point of the incomplete beta function, so
    neither tail is computed from an argument that rounds to 1. The quantile
    inverts that CDF directly, starting from the Beta tail approximations.
    """

    def __init__(self, d1: float, d2: float):
        self.d1 = _positive("FisherF", "d1", d1)
        self.d2 = _positive("FisherF", "d2", d2)
        self._beta = Beta(0.5 * self.d1, 0.5 * self.d2)
        self._complement = Beta(0.5 * self.d2, 0.5 * self.d1)
        self._symmetry = (0.5 * self.d1 + 1.0) / (0.5 * (self.d1 + self.d2) + 2.0)

    @property
    def support(self) -> Tuple[float, float]:
        return 0.0, math.inf

    def _density(self, x: float) -> float:
        if x == 0.0:
            if self.d1 < 2.0:
                return math.inf
            return 1.0 if self.d1 == 2.0 else 0.0
        return math.exp(self._log_density(x))

    def _log_density(self, x: float) -> float:
        if x == 0.0:
            d = self._density(x)
            return math.log(d) if d > 0.0 else -math.inf
        d1, d2 = self.d1, self.d2
        return (
            0.5 * (d1 * math.log(d1 * x) + d2 * math.log(d2) - (d1 + d2) * math.log(d1 * x + d2))
            - math.log(x)
            - self._beta._ln_norm
        )

    def _cdf(self, x: float) -> float:
        d1x = self.d1 * x
        if math.isinf(d1x):
            return 1.0
        y = d1x / (d1x + self.d2)
        if y > self._symmetry:
            return 1.0 - self._sf(x)
        return incomplete_beta(0.5 * self.d1, 0.5 * self.d2, y)

    def _sf(self, x: float) -> float:
        d1x = self.d1 * x
        return incomplete_beta(0.5 * self.d2, 0.5 * self.d1, self.d2 / (d1x + self.d2))

    def _initial_guess(self, p: float) -> float:
        if p <= 0.5:
            y = self._beta._initial_guess(p)
            return self.d2 * y / (self.d1 * (1.0 - y))
        # upper tail through the complement, whose guess stays far from 1
        w = self._complement._initial_guess(1.0 - p)
        return self.d2 * (1.0 - w) / (self.d1 * w)

    def _quantile(self, p: float) -> float:
        return invert_continuous_cdf(
            self._cdf, self._density, p,
            lower=0.0, upper=math.inf, guess=self._initial_guess(p),
        )

    def mean(self) -> float:
        if self.d2 <= 2.0:
            raise UndefinedMomentError(f"FisherF mean is not finite for d2={self.d2}")
        return self.d2 / (self.d2 - 2.0)

    def variance(self) -> float:
        d1, d2 = self.d1, self.d2
        if d2 <= 4.0:
            raise UndefinedMomentError(f"FisherF variance is not finite for d2={d2}")
        return 2.0 * d2 * d2 * (d1 + d2 - 2.0) / (d1 * (d2 - 2.0) ** 2 * (d2 - 4.0))

    def modes(self) -> List[float]:
        d1, d2 = self.d1, self.d2
        if d1 > 2.0:
            return [(d1 - 2.0) / d1 * d2 / (d2 + 2.0)]
        return [0.0]

    def skewness(self) -> float:
        d1, d2 = self.d1, self.d2
        if d2 <= 6.0:
            raise UndefinedMomentError(f"FisherF skewness is not finite for d2={d2}")
        return (2.0 * d1 + d2 - 2.0) * math.sqrt(8.0 * (d2 - 4.0)) / (
            (d2 - 6.0) * math.sqrt(d1 * (d1 + d2 - 2.0))
        )

    def kurtosis(self) -> float:
        d1, d2 = self.d1, self.d2
        if d2 <= 8.0:
            raise UndefinedMomentError(f"FisherF kurtosis is not finite for d2={d2}")
        numerator = d1 * (5.0 * d2 - 22.0) * (d1 + d2 - 2.0) + (d2 - 4.0) * (d2 - 2.0) ** 2
        return 12.0 * numerator / (d1 * (d2 - 6.0) * (d2 - 8.0) * (d1 + d2 - 2.0))

    def _sample(self, source: Source) -> float:
        numerator = 2.0 * engine.standard_gamma(0.5 * self.d1, source) / self.d1
        denominator = 0.0
        while denominator == 0.0:
            denominator = 2.0 * engine.standard_gamma(0.5 * self.d2, source) / self.d2
        return numerator / denominator

    def _parameters(self) -> dict:
        return {"d1": self.d1, "d2": self.d2}
