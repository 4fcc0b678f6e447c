# array_backend/utils.py
"""
Utility functions for scalar and array canonicalization.

Distribution methods are written against a single real value. The
`elementwise` decorator lifts such a method to array-like inputs: a scalar
argument returns a Python scalar, anything else returns a numpy array of the
same shape. This keeps the numerical code free of shape handling while the
public API still accepts whole grids of points.
"""

from __future__ import annotations

import functools
from typing import Any, Callable

import numpy as np

from ..custom_types import Array


def _as_array(x: Any) -> Array:
    try:
        return np.asarray(x)
    except Exception as e:
        raise TypeError(
            f"Could not convert input to array.\n"
            f"Input type: {type(x).__name__}\n"
            f"Input value: {repr(x)}\n"
            f"Original error: {e}"
        ) from e


def _is_numpy_scalar(x: Any) -> bool:
    """Return true if object is a numpy generic or Python scalar"""
    return np.isscalar(x) or isinstance(x, np.generic)


def _ensure_real_scalar(x: Any) -> float | int:
    """
    Return a Python scalar for inputs that contain a single real value.

    Accepts:
      - Python scalars (int, float)
      - numpy scalar types (np.float64(...), np.int32(...))
      - 0-D numpy arrays (shape == ())

    Raises:
      ValueError if input contains more than one element, is complex, or is
      not numeric (e.g. a string).
    """
    if _is_numpy_scalar(x):
        if isinstance(x, (str, bytes)):
            raise ValueError(f"_ensure_real_scalar: input is not numeric: {x!r}")
        if np.iscomplexobj(x):
            raise ValueError(f"_ensure_real_scalar: input is complex-valued: {x!r}")
        if isinstance(x, np.generic):
            return x.item()
        return x

    arr = _as_array(x)
    if arr.size != 1 or arr.ndim != 0:
        raise ValueError(
            f"_ensure_real_scalar: input must be a single value; got size={arr.size}, shape={arr.shape}"
        )
    if np.iscomplexobj(arr) or not np.issubdtype(arr.dtype, np.number):
        raise ValueError(f"_ensure_real_scalar: input is not a real number (dtype={arr.dtype}).")
    return arr.item()


def _ensure_integer(x: Any) -> int:
    """
    Return a Python int for integral inputs.

    Accepts Python/numpy integers and floats with an integral value (10.0).
    Booleans are rejected.

    Raises:
      ValueError if the input is not an integral real value.
    """
    if isinstance(x, (bool, np.bool_)):
        raise ValueError(f"_ensure_integer: boolean is not an integer: {x!r}")
    value = _ensure_real_scalar(x)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"_ensure_integer: input is not integral: {x!r}")


def _ensure_vector(x: Any, *, copy: bool = True) -> Array:
    """
    Ensure input is returned as a 1-D float vector of shape (n,).

    Accepts:
      - 1D arrays -> (n,)
      - 2D arrays shaped (n,1) or (1,n)
      - 0D scalar -> (1,)

    Raises:
      ValueError for incompatible shapes (ndim > 2 or 2D with both dims > 1)
    """
    arr = _as_array(x)

    if arr.ndim == 0:
        out = arr.reshape((1,))
    elif arr.ndim == 1:
        out = arr
    elif arr.ndim == 2 and 1 in arr.shape:
        out = np.ravel(arr)
    else:
        raise ValueError(f"_ensure_vector: input with shape {arr.shape} is not a vector.")

    out = out.astype(float)
    return out.copy() if copy else out


def elementwise(method: Callable | None = None, *, dtype: Any = float) -> Callable:
    """
    Lift a method of one real argument to scalars and array-likes.

    The wrapped method is called once per element. Scalar input returns the
    scalar result unchanged; array-like input returns an array of `dtype` with
    the input's shape.

    Usable bare (``@elementwise``) or configured (``@elementwise(dtype=int)``).
    A string `dtype` names an attribute of the instance holding the dtype.
    """
    def decorate(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(self, x: Any, *args, **kwargs):
            if _is_numpy_scalar(x) or (isinstance(x, np.ndarray) and x.ndim == 0):
                return func(self, _ensure_real_scalar(x), *args, **kwargs)
            arr = _as_array(x)
            out_dtype = getattr(self, dtype) if isinstance(dtype, str) else dtype
            out = np.empty(arr.shape, dtype=out_dtype)
            for idx, value in np.ndenumerate(arr):
                out[idx] = func(self, value.item() if isinstance(value, np.generic) else value,
                                *args, **kwargs)
            return out
        return wrapper

    if method is not None:
        return decorate(method)
    return decorate
