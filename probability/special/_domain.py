# special/_domain.py
"""Argument checks shared by the special functions."""

from __future__ import annotations

import math

from ..array_backend.utils import _ensure_real_scalar
from ..errors import DomainError


def _as_float(func: str, name: str, value) -> float:
    try:
        value = float(_ensure_real_scalar(value))
    except (TypeError, ValueError) as e:
        raise DomainError(f"{func}: {name} must be a real number, got {value!r}") from e
    if math.isnan(value):
        raise DomainError(f"{func}: {name} is NaN")
    return value


def _check_positive(func: str, name: str, value) -> float:
    value = _as_float(func, name, value)
    if value <= 0.0:
        raise DomainError(f"{func}: {name} must be > 0, got {value!r}")
    return value


def _check_nonnegative(func: str, name: str, value) -> float:
    value = _as_float(func, name, value)
    if value < 0.0:
        raise DomainError(f"{func}: {name} must be >= 0, got {value!r}")
    return value


def _check_interval(func: str, name: str, value, lower: float, upper: float) -> float:
    value = _as_float(func, name, value)
    if not lower <= value <= upper:
        raise DomainError(f"{func}: {name} must lie in [{lower}, {upper}], got {value!r}")
    return value
