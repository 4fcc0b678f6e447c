# source/numpy_source.py
from __future__ import annotations

import numpy as np

from ..custom_types import BitGenerator
from ..errors import ConstructionError
from .source import Source

__all__ = ["NumpySource"]


class NumpySource(Source):
    """Entropy source backed by a numpy bit generator.

    Draws raw 64-bit outputs through ``BitGenerator.random_raw``, so the
    numbers seen by the samplers are exactly the generator's stream.

    Args:
        bit_generator: A ``numpy.random.BitGenerator``, a ``numpy.random.Generator``
            (its bit generator is used), an integer seed for a fresh PCG64, or
            None for a PCG64 seeded from OS entropy.
    """

    def __init__(self, bit_generator: BitGenerator | np.random.Generator | int | None = None):
        if isinstance(bit_generator, np.random.Generator):
            bit_generator = bit_generator.bit_generator
        elif bit_generator is None or isinstance(bit_generator, (int, np.integer)):
            bit_generator = np.random.PCG64(bit_generator)
        if not isinstance(bit_generator, np.random.BitGenerator):
            raise ConstructionError(
                f"NumpySource needs a numpy BitGenerator, Generator or seed; "
                f"got {type(bit_generator).__name__}"
            )
        self._bit_generator = bit_generator

    @property
    def bit_generator(self) -> BitGenerator:
        return self._bit_generator

    def read_u64(self) -> int:
        return int(self._bit_generator.random_raw())
