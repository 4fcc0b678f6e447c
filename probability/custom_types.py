# custom_types.py
"""
Type aliases shared across the package.

We generally follow the conventions:
- Annotate evaluation inputs with `ArrayLike` (scalars are accepted too)
- Annotate array outputs with `Array`
- Scalar inputs give Python scalars back, array inputs give arrays back
"""
from __future__ import annotations
from typing import TypeAlias, TypeVar
from numpy.random import BitGenerator as NumpyBitGenerator

from numpy.typing import (
    NDArray as NumpyArray,
    ArrayLike as NumpyArrayLike
)

Array = NumpyArray
ArrayLike: TypeAlias = NumpyArrayLike
BitGenerator: TypeAlias = NumpyBitGenerator

# value type of a distribution: float for continuous, int for discrete
T = TypeVar("T", float, int)
