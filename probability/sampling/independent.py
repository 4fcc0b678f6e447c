# sampling/independent.py
from __future__ import annotations

from itertools import islice
from typing import Generic, Iterator

import numpy as np

from ..custom_types import Array, T
from ..errors import ConstructionError
from ..source import Source

__all__ = ["Independent"]


class Independent(Generic[T]):
    """
    Endless stream of independent samples from one distribution.

    The iterator borrows both the distribution and the source; each ``next()``
    consumes draws from the source and yields one value. Nothing is drawn
    ahead of time. The only state of its own is the draw function returned by
    ``distribution.sampler()``, so two ``Independent`` instances never share
    values cached between draws (the Box-Muller spare of a Normal, say).

    Args:
        distribution: Any :class:`~probability.distributions.Distribution`.
        source: Entropy source, used exclusively by this stream while it runs.

    Example:
        >>> from probability import Uniform, Xorshift128Plus
        >>> stream = Independent(Uniform(0.0, 1.0), Xorshift128Plus())
        >>> first_ten = stream.take(10)
    """

    def __init__(self, distribution, source: Source):
        if not isinstance(source, Source):
            raise ConstructionError(
                f"Independent: source must be a Source, got {type(source).__name__}"
            )
        self.distribution = distribution
        self.source = source
        self._draw = distribution.sampler()

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return self._draw(self.source)

    def take(self, n: int) -> Array:
        """Draw the next `n` samples into a 1-D array.

        Continuous distributions give a float array, discrete ones an int64
        array.
        """
        if n < 0:
            raise ValueError(f"take: n must be >= 0, got {n}")
        dtype = getattr(self.distribution, "_sample_dtype", float)
        return np.fromiter(islice(self, n), dtype=dtype, count=n)

    def __repr__(self) -> str:
        return f"Independent({self.distribution!r}, {self.source!r})"
