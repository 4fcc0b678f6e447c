"""
Quantile inversion for distributions whose CDF has no closed-form inverse.

Continuous inversion runs Newton's method with the density as the derivative
of the CDF inside a bracket that always encloses the answer. A Newton step
that would leave the bracket, or that did not halve the residual, is replaced
by a bisection. The bracket shrinks on every evaluation. If the iteration
budget runs out the upper bracket end, whose CDF is at least p, is returned
and a warning is logged.

Discrete inversion is an integer search: gallop from a guess until the
target is enclosed, then bisect to the smallest k with cdf(k) >= p.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

from . import config

log = logging.getLogger(__name__)

__all__ = ["invert_continuous_cdf", "invert_discrete_cdf"]

_MAX_EXPANSIONS = 2100
_SMALLEST = math.ulp(0.0)


@dataclass
class _Bracket:
    """Invariant: cdf(lower) - p < 0 <= cdf(upper) - p (ends may be support bounds)."""

    lower: float
    upper: float

    def midpoint(self) -> float:
        lo, hi = self.lower, self.upper
        if math.isinf(hi):
            return max(2.0 * lo, 1.0)
        if math.isinf(lo):
            return min(2.0 * hi, -1.0)
        # a bracket ending at zero is split in the exponent, so tail quantiles
        # far below 1e-16 stay reachable
        if lo == 0.0 and hi > 0.0:
            return min(math.sqrt(_SMALLEST) * math.sqrt(hi), 0.5 * hi)
        if hi == 0.0 and lo < 0.0:
            return max(-math.sqrt(_SMALLEST) * math.sqrt(-lo), 0.5 * lo)
        if lo > 0.0 and hi > 4.0 * lo:
            return math.sqrt(lo) * math.sqrt(hi)
        if hi < 0.0 and lo < 4.0 * hi:
            return -math.sqrt(-lo) * math.sqrt(-hi)
        return lo + 0.5 * (hi - lo)

    def collapsed(self) -> bool:
        """True once no float lies strictly between the ends."""
        if math.isinf(self.lower) or math.isinf(self.upper):
            return False
        return math.nextafter(self.lower, math.inf) >= self.upper

    def contains(self, x: float) -> bool:
        return self.lower < x < self.upper


def _expand(cdf: Callable[[float], float], p: float, start: float, direction: float,
            limit: float) -> tuple[float, float]:
    """Walk from `start` in `direction` with doubling steps until cdf crosses p.

    Returns (last point on the near side, first point on the far side).
    """
    step = max(1.0, abs(start))
    near = start
    far = start
    for _ in range(_MAX_EXPANSIONS):
        far = near + direction * step
        if (direction > 0 and far >= limit) or (direction < 0 and far <= limit):
            return near, limit
        below = cdf(far) < p
        if (direction > 0 and not below) or (direction < 0 and below):
            return near, far
        near = far
        step *= 2.0
    return near, limit


def invert_continuous_cdf(
    cdf: Callable[[float], float],
    density: Callable[[float], float],
    p: float,
    *,
    lower: float,
    upper: float,
    guess: float,
) -> float:
    """Solve ``cdf(x) = p`` for x in the support ``[lower, upper]``.

    Args:
        cdf: Non-decreasing CDF of the distribution.
        density: Its derivative, used for Newton steps.
        p: Target probability, strictly inside (0, 1).
        lower: Support infimum (may be ``-inf``).
        upper: Support supremum (may be ``inf``).
        guess: Starting point, ideally close to the answer.

    Returns:
        An x with ``|cdf(x) - p| <= root_tolerance * min(p, 1 - p)``, the
        upper end of the bracket once no float lies between its ends, or that
        same end if the iteration budget is exhausted.
    """
    settings = config.NUMERIC
    tolerance = settings.root_tolerance * min(p, 1.0 - p)
    if not math.isfinite(guess) or not lower < guess < upper:
        finite_lo = lower if math.isfinite(lower) else -1.0
        finite_hi = upper if math.isfinite(upper) else finite_lo + 2.0
        guess = 0.5 * (finite_lo + finite_hi)

    # Establish the bracket.
    if cdf(guess) < p:
        near, far = _expand(cdf, p, guess, 1.0, upper)
        bracket = _Bracket(near, far)
    else:
        near, far = _expand(cdf, p, guess, -1.0, lower)
        bracket = _Bracket(far, near)

    x = guess if bracket.contains(guess) else bracket.midpoint()
    previous_residual = math.inf
    use_newton = True

    for _ in range(settings.root_max_iterations):
        residual = cdf(x) - p
        if abs(residual) <= tolerance:
            return x

        if residual < 0.0:
            bracket.lower = x
        else:
            bracket.upper = x
        if bracket.collapsed():
            return bracket.upper

        candidate = math.nan
        if use_newton:
            slope = density(x)
            if slope > 0.0 and math.isfinite(slope):
                candidate = x - residual / slope
        if bracket.contains(candidate):
            x = candidate
        else:
            x = bracket.midpoint()
        # Newton must at least halve the residual to keep its turn
        use_newton = abs(residual) <= 0.5 * previous_residual or previous_residual == math.inf
        previous_residual = abs(residual)

    log.warning(
        f"quantile inversion did not converge for p={p} within "
        f"{settings.root_max_iterations} iterations; returning upper bracket end"
    )
    if math.isfinite(bracket.upper):
        return bracket.upper
    return bracket.lower


def invert_discrete_cdf(
    cdf: Callable[[int], float],
    p: float,
    *,
    lower: int,
    upper: int | None = None,
    guess: int | None = None,
) -> int:
    """Return the smallest integer k in ``[lower, upper]`` with ``cdf(k) >= p``.

    Args:
        cdf: Non-decreasing CDF evaluated at integers.
        p: Target probability in (0, 1].
        lower: Smallest value of the support.
        upper: Largest value of the support, or None if unbounded.
        guess: Starting point for the search (defaults to `lower`).
    """
    k = lower if guess is None else int(guess)
    k = max(lower, k if upper is None else min(k, upper))

    # hi: cdf(hi) >= p; lo: cdf(lo) < p or lo == lower - 1
    if cdf(k) >= p:
        hi = k
        step = 1
        lo = k - step
        while lo >= lower and cdf(lo) >= p:
            hi = lo
            step *= 2
            lo = hi - step
        lo = max(lo, lower - 1)
    else:
        lo = k
        step = 1
        hi = k + step
        while (upper is None or hi < upper) and cdf(hi) < p:
            lo = hi
            step *= 2
            hi = lo + step
        if upper is not None:
            hi = min(hi, upper)

    while hi - lo > 1:
        mid = lo + (hi - lo) // 2
        if cdf(mid) >= p:
            hi = mid
        else:
            lo = mid
    return hi
