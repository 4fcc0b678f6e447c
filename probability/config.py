"""
Numerical settings for special functions and quantile root-finding.

Values are read from the environment once, at import time, so tests and
applications can override them without touching code:

- PROBABILITY_MAX_ITERATIONS: budget for series / continued fractions
- PROBABILITY_ROOT_MAX_ITERATIONS: budget for quantile inversion
- PROBABILITY_ROOT_TOLERANCE: relative residual accepted by quantile inversion
"""

import os
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class NumericConfig:
    """Tolerances and iteration budgets.

    Attributes:
        epsilon: Relative accuracy targeted by series and continued fractions.
        tiny: Floor used by the modified Lentz algorithm to avoid division by zero.
        max_iterations: Maximum terms for series and continued fractions.
        root_max_iterations: Maximum Newton/bisection steps per quantile.
        root_tolerance: Residual |cdf(x) - p|, relative to the smaller of p and
            1 - p, accepted as converged.
    """

    epsilon: float = sys.float_info.epsilon
    tiny: float = 1e-300
    max_iterations: int = 1000
    root_max_iterations: int = 200
    root_tolerance: float = 1e-12


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    value = int(raw)
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    value = float(raw)
    if not value > 0.0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def load_config() -> NumericConfig:
    """Build a NumericConfig from the PROBABILITY_* environment variables."""
    defaults = NumericConfig()
    return NumericConfig(
        max_iterations=_env_int("PROBABILITY_MAX_ITERATIONS", defaults.max_iterations),
        root_max_iterations=_env_int(
            "PROBABILITY_ROOT_MAX_ITERATIONS", defaults.root_max_iterations
        ),
        root_tolerance=_env_float("PROBABILITY_ROOT_TOLERANCE", defaults.root_tolerance),
    )


# Module-level config; read from env at import time.
NUMERIC = load_config()
