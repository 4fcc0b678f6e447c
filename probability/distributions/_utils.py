# distributions/_utils.py
"""Parameter and argument validation shared by the distribution catalog."""

from __future__ import annotations

import math
from typing import Any

from ..array_backend.utils import _ensure_integer, _ensure_real_scalar
from ..errors import ConstructionError, DomainError


def _real(owner: str, name: str, value: Any) -> float:
    """Coerce a parameter to a finite float."""
    try:
        value = float(_ensure_real_scalar(value))
    except (TypeError, ValueError) as e:
        raise ConstructionError(f"{owner}: {name} must be a real number, got {value!r}") from e
    if not math.isfinite(value):
        raise ConstructionError(f"{owner}: {name} must be finite, got {value!r}")
    return value


def _positive(owner: str, name: str, value: Any) -> float:
    value = _real(owner, name, value)
    if value <= 0.0:
        raise ConstructionError(f"{owner}: {name} must be > 0, got {value!r}")
    return value


def _probability(owner: str, name: str, value: Any) -> float:
    value = _real(owner, name, value)
    if not 0.0 <= value <= 1.0:
        raise ConstructionError(f"{owner}: {name} must lie in [0, 1], got {value!r}")
    return value


def _count(owner: str, name: str, value: Any) -> int:
    """Coerce a parameter to a non-negative integer."""
    try:
        value = _ensure_integer(value)
    except (TypeError, ValueError) as e:
        raise ConstructionError(f"{owner}: {name} must be an integer, got {value!r}") from e
    if value < 0:
        raise ConstructionError(f"{owner}: {name} must be >= 0, got {value!r}")
    return value


def _check_unit_interval(p: float) -> float:
    """Validate a quantile argument; outside [0, 1] is an error, never clamped."""
    if math.isnan(p) or not 0.0 <= p <= 1.0:
        raise DomainError(f"quantile: p must lie in [0, 1], got {p!r}")
    return float(p)
